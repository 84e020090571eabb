from rest_framework import serializers

from .base import CleanCharField, RecordSerializer


class DoctorSerializer(RecordSerializer):
    first_name = CleanCharField(max_length=64)
    last_name = CleanCharField(max_length=64)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True, default=None)
    phone = CleanCharField(required=False, allow_blank=True, allow_null=True, max_length=32, default=None)

    # blank contact fields are stored as null
    def validate_email(self, v):
        return v or None

    def validate_phone(self, v):
        return (v or '').strip() or None
