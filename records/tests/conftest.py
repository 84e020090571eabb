import pytest
from django.test import override_settings

from records.services.sync import get_sync_service


@pytest.fixture(autouse=True)
def local_only_settings():
    """Run every test without remote configuration and a fresh default service."""
    get_sync_service.cache_clear()
    with override_settings(REMOTE_STORE_URL='', REMOTE_STORE_KEY='', RECORDS_REMOTE_ID_TYPES=[]):
        yield
    get_sync_service.cache_clear()
