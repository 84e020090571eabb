"""
Dashboard overview endpoint.

Returns the most recent patients and appointments, all test reports and
the four headline counters shown on the landing screen.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from records.services.sync import get_sync_service


@api_view(['GET'])
@permission_classes([AllowAny])
def dashboard(request):
    service = get_sync_service()
    summary = service.dashboard_summary()
    return Response({
        'ok': True,
        'mode': service.mode.value,
        'stats': summary.stats,
        'recentPatients': summary.patients,
        'recentAppointments': summary.appointments,
        'reports': summary.reports,
        'warnings': summary.warnings,
    })
