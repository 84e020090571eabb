"""
Record management views.

One set of endpoints serves all four entity types; the ``entity`` path
segment selects patients, doctors, appointments or reports.  Reads never
fail because the remote store is down (the response carries a
``warning`` instead).  Writes answer 400 on validation errors and 503 when
the remote store rejects them, in which case nothing was saved.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status

from records.entities import get_entity_type
from records.serializers.query import DeleteRequestSerializer, ListQuerySerializer
from records.services.sync import get_sync_service


def _payload(request) -> dict:
    data = request.data
    return data.dict() if hasattr(data, 'dict') else dict(data)


@api_view(['GET'])
@permission_classes([AllowAny])
def list_records(request, entity):
    entity_type = get_entity_type(entity)
    q = ListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    service = get_sync_service()
    limit = q.validated_data.get('limit')
    # Search the full collection, then cap the matches.
    result = service.list_entities(entity_type)
    records = service.search_entities(entity_type, result.records, q.validated_data.get('q'))
    if limit:
        records = records[:limit]
    return Response({
        'ok': True,
        'mode': service.mode.value,
        'source': result.source,
        'warning': result.warning,
        'data': records,
    })


@api_view(['POST'])
@permission_classes([AllowAny])
def create_record(request, entity):
    entity_type = get_entity_type(entity)
    record = get_sync_service().create_entity(entity_type, _payload(request))
    return Response({'ok': True, 'data': record}, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([AllowAny])
def update_record(request, entity):
    """Overwrite the given fields of one record.

    Body: ``id`` plus any editable fields.  The record's ``updated_at`` is
    refreshed.
    """
    entity_type = get_entity_type(entity)
    fields = _payload(request)
    identifier = fields.pop('id', None)
    if identifier is not None:
        identifier = str(identifier).strip() or None
    record = get_sync_service().update_entity(entity_type, identifier, fields)
    return Response({'ok': True, 'data': record})


@api_view(['POST'])
@permission_classes([AllowAny])
def delete_record(request, entity):
    """Permanently remove one record.

    Body: ``id`` and ``confirm: true``.  There is no undo, so a request
    without the confirmation flag is rejected before anything is deleted.
    """
    entity_type = get_entity_type(entity)
    data = DeleteRequestSerializer(data=request.data)
    data.is_valid(raise_exception=True)
    get_sync_service().delete_entity(entity_type, data.validated_data['id'])
    return Response({'ok': True, 'success': True})
