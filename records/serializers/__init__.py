from records.entities import APPOINTMENTS, DOCTORS, PATIENTS, REPORTS, EntityType

from .appointment import AppointmentSerializer
from .base import RecordSerializer
from .doctor import DoctorSerializer
from .patient import PatientSerializer
from .report import ReportSerializer

SERIALIZERS: dict[str, type[RecordSerializer]] = {
    PATIENTS.slug: PatientSerializer,
    DOCTORS.slug: DoctorSerializer,
    APPOINTMENTS.slug: AppointmentSerializer,
    REPORTS.slug: ReportSerializer,
}


def serializer_for(entity_type: EntityType) -> type[RecordSerializer]:
    return SERIALIZERS[entity_type.slug]
