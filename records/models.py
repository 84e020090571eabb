"""
Database models for the records backend.

The only table owned by this app is the local fallback store: a plain
string-keyed, string-valued area where each entity collection is kept as
one JSON document.  Rows are always rewritten whole; there is no row
level patching of individual records.
"""
from __future__ import annotations

from django.db import models


class StoredCollection(models.Model):
    """One named bucket of the local fallback store.

    ``key`` is the namespaced collection key (e.g. ``meditrack-patients``)
    and ``value`` the JSON-serialized full collection for that key.
    """
    key = models.CharField(max_length=100, primary_key=True)
    value = models.TextField(blank=True, default='')
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['key']

    def __str__(self) -> str:
        return self.key
