from rest_framework import serializers


class ListQuerySerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True, max_length=100)
    limit = serializers.IntegerField(required=False, min_value=1, max_value=500)


class DeleteRequestSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=50)
    # Deletes are irreversible; the caller must pass the user's explicit yes.
    confirm = serializers.BooleanField(default=False)

    def validate_confirm(self, v):
        if not v:
            raise serializers.ValidationError('Deletion must be confirmed.')
        return v
