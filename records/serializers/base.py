import datetime

import bleach
from rest_framework import serializers


class CleanCharField(serializers.CharField):
    """CharField that strips markup from free text before storing it."""

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        return bleach.clean(value, tags=set(), strip=True)


def text(**kwargs) -> CleanCharField:
    """Optional free-text field defaulting to the empty string."""
    kwargs.setdefault('required', False)
    kwargs.setdefault('allow_blank', True)
    kwargs.setdefault('default', '')
    return CleanCharField(**kwargs)


class RecordSerializer(serializers.Serializer):
    """Validates the editable fields of one record.

    Identifiers and timestamps are owned by the synchronization layer, so
    subclasses never declare them and they are dropped from input.
    """

    def cleaned_fields(self) -> dict:
        """Validated data converted to JSON-ready values."""
        out = {}
        for key, value in self.validated_data.items():
            if isinstance(value, datetime.time):
                value = value.strftime('%H:%M')
            elif isinstance(value, datetime.date):
                value = value.isoformat()
            out[key] = value
        return out
