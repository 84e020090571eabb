"""
Entity schemas for the records backend.

Each of the four record kinds (patients, doctors, appointments and test
reports) is described by an :class:`EntityType`.  The descriptor is
passive data: it names the remote table and local storage key of the
collection, how the collection is ordered, which fields a create or an
edit must carry, which fields the search box matches against and how the
synchronization layer treats writes for that kind.  Field level rules
live in :mod:`records.serializers`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from rest_framework.exceptions import NotFound

PATIENT_STATUSES = ['Critical', 'Normal', 'Stable']
APPOINTMENT_STATUSES = ['Scheduled', 'Completed', 'Cancelled', 'In Progress']
REPORT_STATUSES = ['Pending', 'Completed', 'In Review']
REPORT_PRIORITIES = ['Normal', 'Urgent', 'Critical']

# Fixed menus offered by the dashboard forms
GENDERS = ['Male', 'Female', 'Other']
BLOOD_GROUPS = ['A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-']
APPOINTMENT_TYPES = ['Consultation', 'Checkup', 'Treatment', 'Follow-up', 'Surgery']
APPOINTMENT_DURATIONS = ['15 minutes', '30 minutes', '45 minutes', '60 minutes', '90 minutes']
TEST_TYPES = ['Blood Test', 'X-Ray', 'CT Scan', 'MRI', 'Ultrasound', 'ECG', 'Blood Sugar Test']
DOCTOR_NAMES = ['Dr. Johnson', 'Dr. Wilson', 'Dr. Martinez', 'Dr. Smith']


@dataclass(frozen=True)
class EntityType:
    slug: str
    label: str
    prefix: str
    table: str
    storage_key: str
    order_column: str
    ascending: bool
    create_required: tuple[str, ...]
    update_required: tuple[str, ...]
    search_fields: tuple[str, ...]
    # Re-read the whole collection after a remote write instead of patching
    # the local mirror in place.
    refresh_after_write: bool = True

    def __str__(self) -> str:
        return self.slug


PATIENTS = EntityType(
    slug='patients',
    label='Patient',
    prefix='P',
    table='patients',
    storage_key='meditrack-patients',
    order_column='created_at',
    ascending=False,
    create_required=('name', 'age', 'gender'),
    update_required=('name',),
    search_fields=('name', 'id', 'condition'),
)

DOCTORS = EntityType(
    slug='doctors',
    label='Doctor',
    prefix='D',
    table='doctors',
    storage_key='meditrack:doctors',
    order_column='created_at',
    ascending=False,
    create_required=('first_name', 'last_name'),
    update_required=('first_name', 'last_name'),
    search_fields=('id', 'first_name', 'last_name', 'email', 'phone'),
    refresh_after_write=False,
)

APPOINTMENTS = EntityType(
    slug='appointments',
    label='Appointment',
    prefix='A',
    table='appointments',
    storage_key='meditrack-appointments',
    order_column='appointment_date',
    ascending=True,
    create_required=('patient_name', 'doctor', 'appointment_date', 'appointment_time'),
    update_required=('patient_name',),
    search_fields=('patient_name', 'patient_id', 'doctor', 'type'),
)

REPORTS = EntityType(
    slug='reports',
    label='Test report',
    prefix='R',
    table='test_reports',
    storage_key='meditrack-reports',
    order_column='test_date',
    ascending=False,
    create_required=('patient_name', 'test_type', 'test_date'),
    update_required=('patient_name',),
    search_fields=('patient_name', 'patient_id', 'test_type', 'doctor'),
)

ENTITY_TYPES: dict[str, EntityType] = {
    t.slug: t for t in (PATIENTS, DOCTORS, APPOINTMENTS, REPORTS)
}


def get_entity_type(entity_type: Union[str, EntityType]) -> EntityType:
    """Resolve a slug (or pass through a descriptor).

    Unknown slugs raise :class:`NotFound` so the API answers 404.
    """
    if isinstance(entity_type, EntityType):
        return entity_type
    try:
        return ENTITY_TYPES[str(entity_type)]
    except KeyError:
        raise NotFound(f'unknown entity type: {entity_type}')
