"""
Local fallback store.

A string-keyed, string-valued area kept in the project database.  Each
entity type owns one key whose value is the JSON-serialized full
collection.  Collections are always read and written whole; callers that
modify a collection must hold the row lock between the read and the write
(see :meth:`LocalStore.locked`).
"""
from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from django.core.serializers.json import DjangoJSONEncoder
from django.db import transaction

from records.entities import EntityType
from records.exceptions import StoreParseError
from records.models import StoredCollection
from records.services.fixtures import default_records

logger = logging.getLogger(__name__)


def decode_collection(raw: str) -> list[dict]:
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise StoreParseError(f'malformed collection payload: {exc}') from exc
    if not isinstance(data, list):
        raise StoreParseError(f'expected a list, got {type(data).__name__}')
    for item in data:
        if not isinstance(item, dict):
            raise StoreParseError(f'expected a list of objects, found {type(item).__name__}')
    return data


def encode_collection(records: list[dict]) -> str:
    return json.dumps(list(records), cls=DjangoJSONEncoder, ensure_ascii=False)


class LocalStore:

    # -- key/value primitives -------------------------------------------------

    def get_item(self, key: str, *, lock: bool = False) -> Optional[str]:
        qs = StoredCollection.objects.filter(key=key)
        if lock:
            qs = qs.select_for_update()
        row = qs.only('value').first()
        return row.value if row else None

    def set_item(self, key: str, value: str) -> None:
        StoredCollection.objects.update_or_create(key=key, defaults={'value': value})

    def remove_item(self, key: str) -> None:
        StoredCollection.objects.filter(key=key).delete()

    # -- collections ----------------------------------------------------------

    def get_entities(self, entity_type: EntityType, *, lock: bool = False) -> list[dict]:
        """Current collection for ``entity_type``.

        A missing key seeds the fixture set.  A corrupted payload reads as
        an empty collection.
        """
        raw = self.get_item(entity_type.storage_key, lock=lock)
        if raw is None:
            records = default_records(entity_type)
            self.set_entities(entity_type, records)
            logger.info('seeded %s local store with %d fixture records', entity_type.slug, len(records))
            return records
        try:
            return decode_collection(raw)
        except StoreParseError as exc:
            logger.warning('ignoring %s local store payload: %s', entity_type.slug, exc)
            return []

    def set_entities(self, entity_type: EntityType, records: list[dict]) -> None:
        self.set_item(entity_type.storage_key, encode_collection(records))

    def has_entities(self, entity_type: EntityType) -> bool:
        return StoredCollection.objects.filter(key=entity_type.storage_key).exists()

    def seed(self, entity_type: EntityType, *, force: bool = False) -> bool:
        """Write the fixture set unless a collection already exists."""
        if self.has_entities(entity_type) and not force:
            return False
        self.set_entities(entity_type, default_records(entity_type))
        return True

    @contextmanager
    def locked(self, entity_type: EntityType) -> Iterator[list[dict]]:
        """Read-modify-write a collection under the row lock.

        Yields the current records; whatever the list holds when the block
        exits is written back as the new collection.  An exception inside
        the block leaves the stored collection untouched.
        """
        with transaction.atomic():
            records = self.get_entities(entity_type, lock=True)
            yield records
            self.set_entities(entity_type, records)
