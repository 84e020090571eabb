"""
URL mappings for the records API.

Every entity type shares the same four endpoints; ``<entity>`` is one of
``patients``, ``doctors``, ``appointments`` or ``reports``.  Trailing
slashes are deliberately omitted to match the dashboard client.
"""
from django.urls import path, include

from .views import dashboard, entities, health

urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz),
    # Dashboard
    path('api/dashboard', dashboard.dashboard, name='dashboard'),
    # Records
    path('api/<slug:entity>', entities.list_records, name='records-list'),
    path('api/<slug:entity>/create', entities.create_record, name='records-create'),
    path('api/<slug:entity>/update', entities.update_record, name='records-update'),
    path('api/<slug:entity>/delete', entities.delete_record, name='records-delete'),
]
