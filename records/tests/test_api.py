"""
Integration tests for the records API.

These tests exercise the HTTP surface end to end with the local fallback
store, and with an in-memory remote store for the failure paths.  They
use Django REST Framework's APIClient within the APITestCase base class.
"""

import warnings
from unittest import mock

from rest_framework import status
from rest_framework.test import APITestCase

from records.entities import PATIENTS
from records.services.availability import StoreMode
from records.services.local_store import LocalStore
from records.services.sync import SyncService

from .fakes import FakeRemoteStore


class RecordsAPITests(APITestCase):
    def test_list_patients_offline_returns_fixtures(self):
        """An empty local store answers with the seeded example patients."""
        response = self.client.get("/api/patients")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["ok"])
        self.assertEqual(response.data["mode"], "local_only")
        self.assertEqual(response.data["source"], "local")
        self.assertIsNone(response.data["warning"])
        self.assertEqual(len(response.data["data"]), 5)
        self.assertEqual(response.data["data"][0]["id"], "P001")
        self.assertEqual(response.data["data"][0]["name"], "John Smith")

    def test_list_filters_by_search_term(self):
        response = self.client.get("/api/reports", {"q": "x-ray"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([r["id"] for r in response.data["data"]], ["R002"])

    def test_list_limit_caps_search_matches(self):
        """The search runs over the whole collection before the limit applies."""
        response = self.client.get("/api/patients", {"q": "Robert Taylor", "limit": 1})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([p["id"] for p in response.data["data"]], ["P005"])

    def test_list_rejects_bad_limit(self):
        response = self.client.get("/api/patients", {"limit": 0})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "validation_error")

    def test_unknown_entity_type_is_404(self):
        response = self.client.get("/api/wards")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(response.data["ok"])
        self.assertEqual(response.data["error"]["code"], "not_found")

    def test_create_patient(self):
        """A valid create gets the next identifier and shows up in the list."""
        response = self.client.post(
            "/api/patients/create",
            {"name": "Grace Hopper", "age": 85, "gender": "Female", "blood_group": "A-"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["data"]["id"], "P006")
        ids = [p["id"] for p in self.client.get("/api/patients").data["data"]]
        self.assertEqual(ids.count("P006"), 1)

    def test_create_with_missing_required_field_is_rejected(self):
        """Missing name is a validation error and nothing is stored."""
        response = self.client.post("/api/patients/create", {"age": 30, "gender": "Male"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "validation_error")
        self.assertIn("name", response.data["error"]["message"])
        self.assertIsNone(LocalStore().get_item(PATIENTS.storage_key))

    def test_create_doctor_from_form_post(self):
        response = self.client.post("/api/doctors/create", {"first_name": "Derek", "last_name": "Shepherd"})
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["data"]["id"], "D001")

    def test_update_appointment(self):
        response = self.client.post(
            "/api/appointments/update",
            {"id": "A001", "patient_name": "John Smith", "status": "Completed"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["status"], "Completed")
        self.assertEqual(response.data["data"]["doctor"], "Dr. Johnson")
        self.assertIn("updated_at", response.data["data"])

    def test_update_unknown_record_is_404(self):
        response = self.client.post(
            "/api/appointments/update", {"id": "A999", "patient_name": "Nobody"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_update_without_id_is_rejected(self):
        response = self.client.post("/api/appointments/update", {"patient_name": "John Smith"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_delete_requires_confirmation(self):
        """Without confirm=true the record survives."""
        response = self.client.post("/api/patients/delete", {"id": "P002"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("confirm", response.data["error"]["message"])
        ids = [p["id"] for p in self.client.get("/api/patients").data["data"]]
        self.assertIn("P002", ids)

    def test_delete_with_confirmation(self):
        response = self.client.post("/api/patients/delete", {"id": "P002", "confirm": True}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        ids = [p["id"] for p in self.client.get("/api/patients").data["data"]]
        self.assertNotIn("P002", ids)
        # deleting again is a no-op
        again = self.client.post("/api/patients/delete", {"id": "P002", "confirm": True}, format="json")
        self.assertEqual(again.status_code, status.HTTP_200_OK)

    def test_dashboard(self):
        response = self.client.get("/api/dashboard")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["stats"]["totalPatients"], 5)
        self.assertEqual(response.data["stats"]["criticalPatients"], 2)
        self.assertEqual(response.data["stats"]["pendingReports"], 1)
        self.assertEqual(len(response.data["recentAppointments"]), 4)
        self.assertEqual(response.data["warnings"], [])

    def test_schema_view_renders_without_compat_warning(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            response = self.client.get("/swagger/", {"format": "openapi"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["info"]["title"], "MediTrack Records API")
        self.assertFalse([w for w in caught if "COMPAT_RENDERERS" in str(w.message)])

    def test_healthz_reports_mode(self):
        response = self.client.get("/healthz")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"ok": True, "db": True, "mode": "local_only"})


class RemoteFailureAPITests(APITestCase):
    def setUp(self) -> None:
        self.remote = FakeRemoteStore({"patients": [{"id": "P001", "name": "Ada Lovelace"}]})
        self.service = SyncService(mode=StoreMode.REMOTE, local=LocalStore(), remote=self.remote)
        patcher = mock.patch("records.views.entities.get_sync_service", return_value=self.service)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_read_failure_degrades_to_local_copy(self):
        self.client.get("/api/patients")
        self.remote.fail = True
        response = self.client.get("/api/patients")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["source"], "cache")
        self.assertTrue(response.data["warning"])
        self.assertEqual([p["id"] for p in response.data["data"]], ["P001"])

    def test_write_failure_is_503_and_not_applied(self):
        self.client.get("/api/patients")
        self.remote.fail = True
        response = self.client.post(
            "/api/patients/create", {"name": "Grace Hopper", "age": 85, "gender": "Female"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.data["error"]["code"], "remote_error")
        self.assertEqual([p["id"] for p in LocalStore().get_entities(PATIENTS)], ["P001"])
