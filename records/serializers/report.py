from rest_framework import serializers

from records.entities import REPORT_PRIORITIES, REPORT_STATUSES, TEST_TYPES
from .base import CleanCharField, RecordSerializer, text


class ReportSerializer(RecordSerializer):
    patient_name = CleanCharField(max_length=128)
    patient_id = text(max_length=20)
    test_type = serializers.ChoiceField(choices=TEST_TYPES)
    test_date = serializers.DateField()
    report_date = serializers.DateField(required=False, allow_null=True, default=None)
    status = serializers.ChoiceField(choices=REPORT_STATUSES, default='Pending')
    doctor = text(max_length=128)
    technician = text(max_length=128)
    results = text()
    notes = text()
    priority = serializers.ChoiceField(choices=REPORT_PRIORITIES, default='Normal')
