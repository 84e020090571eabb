from django.utils import timezone
from rest_framework import serializers

from records.entities import BLOOD_GROUPS, GENDERS, PATIENT_STATUSES
from .base import CleanCharField, RecordSerializer, text


class PatientSerializer(RecordSerializer):
    name = CleanCharField(max_length=128)
    age = serializers.IntegerField(min_value=0, max_value=150)
    gender = serializers.ChoiceField(choices=GENDERS)
    phone = text(max_length=32)
    email = serializers.EmailField(required=False, allow_blank=True, default='')
    address = text(max_length=255)
    status = serializers.ChoiceField(choices=PATIENT_STATUSES, default='Normal')
    condition = text(max_length=255)
    admission_date = serializers.DateField(default=timezone.localdate)
    doctor = text(max_length=128)
    blood_group = serializers.ChoiceField(choices=BLOOD_GROUPS, required=False, allow_blank=True, default='')
    emergency_contact = text(max_length=64)
