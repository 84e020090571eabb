import logging
from enum import Enum
from typing import Optional

from django.conf import settings

logger = logging.getLogger(__name__)


class StoreMode(str, Enum):
    """Operating mode of the records service, fixed for the process."""
    REMOTE = 'remote'
    LOCAL_ONLY = 'local_only'


def resolve_mode(url: Optional[str], key: Optional[str]) -> StoreMode:
    # Both values must be present; either one alone is treated as unset.
    if (url or '').strip() and (key or '').strip():
        return StoreMode.REMOTE
    return StoreMode.LOCAL_ONLY


def remote_configured() -> bool:
    mode = resolve_mode(settings.REMOTE_STORE_URL, settings.REMOTE_STORE_KEY)
    logger.info('records store mode resolved: %s', mode.value)
    return mode is StoreMode.REMOTE
