"""
Django admin registration for the local fallback store.

Superusers can inspect the stored collections via ``/admin/`` to verify
what an offline session will read, and fix a corrupted payload by hand.
"""

from django.contrib import admin

from .models import StoredCollection


@admin.register(StoredCollection)
class StoredCollectionAdmin(admin.ModelAdmin):
    list_display = ('key', 'payload_size', 'updated_at')
    search_fields = ('key',)
    readonly_fields = ('updated_at',)

    @admin.display(description='Size (chars)')
    def payload_size(self, obj: StoredCollection) -> int:
        return len(obj.value or '')
