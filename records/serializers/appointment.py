from rest_framework import serializers

from records.entities import APPOINTMENT_DURATIONS, APPOINTMENT_STATUSES, APPOINTMENT_TYPES
from .base import CleanCharField, RecordSerializer, text


class AppointmentSerializer(RecordSerializer):
    patient_name = CleanCharField(max_length=128)
    # Denormalized; not checked against the patients collection
    patient_id = text(max_length=20)
    doctor = CleanCharField(max_length=128)
    appointment_date = serializers.DateField()
    appointment_time = serializers.TimeField(input_formats=['%H:%M', '%H:%M:%S'])
    type = serializers.ChoiceField(choices=APPOINTMENT_TYPES, required=False, allow_blank=True, default='')
    status = serializers.ChoiceField(choices=APPOINTMENT_STATUSES, default='Scheduled')
    notes = text()
    duration = serializers.ChoiceField(choices=APPOINTMENT_DURATIONS, default='30 minutes')
