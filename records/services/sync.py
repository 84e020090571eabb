"""
Synchronization layer between the records API, the hosted store and the
local fallback store.

The service runs in one of two modes decided at construction time:

``REMOTE``
    Reads go to the hosted store and the result is mirrored into the local
    store.  A failed read falls back to the mirror and carries a warning.
    Writes go to the hosted store only; a failed write raises
    :class:`RemoteStoreError` and nothing is applied locally.

``LOCAL_ONLY``
    Every read and write goes to the local store; no network call is made.

Validation always happens before either store is touched.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, Optional, Union

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from records.entities import APPOINTMENTS, PATIENTS, REPORTS, EntityType, get_entity_type
from records.exceptions import RemoteStoreError
from records.serializers import serializer_for
from records.services.availability import StoreMode, remote_configured
from records.services.identifiers import generate_identifier
from records.services.local_store import LocalStore
from records.services.remote import RemoteStoreClient

logger = logging.getLogger(__name__)

READ_FALLBACK_WARNING = 'Could not reach the remote store; showing locally saved data.'

EntityRef = Union[str, EntityType]


@dataclass
class ReadResult:
    records: list[dict]
    # 'remote', 'cache' (remote failed, mirror served) or 'local'
    source: str
    warning: Optional[str] = None


@dataclass
class DashboardSummary:
    patients: list[dict]
    appointments: list[dict]
    reports: list[dict]
    stats: dict
    warnings: list[str] = field(default_factory=list)


def _now() -> str:
    return timezone.now().isoformat()


def _sort_records(records: list[dict], column: str, ascending: bool) -> list[dict]:
    return sorted(records, key=lambda r: str(r.get(column) or ''), reverse=not ascending)


class SyncService:

    def __init__(self, *, mode: StoreMode, local: Optional[LocalStore] = None,
                 remote: Optional[RemoteStoreClient] = None, remote_id_types: Iterable[str] = ()):
        if mode is StoreMode.REMOTE and remote is None:
            raise ImproperlyConfigured('remote mode requires a remote store client')
        self.mode = mode
        self.local = local or LocalStore()
        self.remote = remote
        self.remote_id_types = frozenset(remote_id_types)

    @property
    def is_remote(self) -> bool:
        return self.mode is StoreMode.REMOTE

    def client_generates_id(self, entity_type: EntityType) -> bool:
        # Without a remote store nobody else can assign identifiers.
        return not (self.is_remote and entity_type.slug in self.remote_id_types)

    # -- reads ----------------------------------------------------------------

    def list_entities(self, entity_type: EntityRef, *, limit: Optional[int] = None,
                      order_column: Optional[str] = None, ascending: Optional[bool] = None) -> ReadResult:
        """Current collection for display.  Never raises.

        Only full (unlimited) remote reads overwrite the local mirror, so a
        capped dashboard query cannot truncate the offline copy.
        """
        entity_type = get_entity_type(entity_type)
        column = order_column or entity_type.order_column
        asc = entity_type.ascending if ascending is None else ascending

        if self.is_remote:
            try:
                rows = self.remote.select(entity_type.table, order=column, ascending=asc, limit=limit)
            except RemoteStoreError as exc:
                logger.warning('remote read of %s failed, serving local copy: %s', entity_type.slug, exc.detail)
            except Exception:
                logger.exception('unexpected error reading %s from remote store', entity_type.slug)
            else:
                if limit is None:
                    self._mirror(entity_type, rows)
                return ReadResult(records=rows, source='remote')
            records = self._read_local(entity_type, column, asc, limit)
            return ReadResult(records=records, source='cache', warning=READ_FALLBACK_WARNING)

        return ReadResult(records=self._read_local(entity_type, column, asc, limit), source='local')

    def _mirror(self, entity_type: EntityType, rows: list[dict]) -> None:
        try:
            self.local.set_entities(entity_type, rows)
        except Exception:
            logger.exception('could not mirror %s into the local store', entity_type.slug)

    def _read_local(self,entity_type: EntityType, column: str, ascending: bool, limit: Optional[int]) -> list[dict]:
        records = _sort_records(self.local.get_entities(entity_type), column, ascending)
        return records[:limit] if limit else records

    def search_entities(self, entity_type: EntityRef, records: Iterable[dict], q: Optional[str]) -> list[dict]:
        """Case-insensitive substring filter over the type's search fields."""
        entity_type = get_entity_type(entity_type)
        q = (q or '').strip().lower()
        if not q:
            return list(records)
        return [
            r for r in records
            if any(q in str(r.get(f) or '').lower() for f in entity_type.search_fields)
        ]

    # -- writes ---------------------------------------------------------------

    def validate(self, entity_type: EntityType, fields: dict, *, partial: bool = False) -> dict:
        serializer = serializer_for(entity_type)(data=fields, partial=partial)
        serializer.is_valid(raise_exception=True)
        data = serializer.cleaned_fields()
        if partial:
            missing = {
                f: ['This field is required.']
                for f in entity_type.update_required if data.get(f) in (None, '')
            }
            if missing:
                raise ValidationError(missing)
        return data

    def create_entity(self, entity_type: EntityRef, fields: dict) -> dict:
        entity_type = get_entity_type(entity_type)
        data = self.validate(entity_type, fields)
        now = _now()
        record = {**data, 'created_at': now, 'updated_at': now}

        if self.is_remote:
            try:
                if self.client_generates_id(entity_type):
                    existing = self.remote.select(entity_type.table, columns='id')
                    record = {'id': generate_identifier(existing, entity_type.prefix), **record}
                rows = self.remote.insert(entity_type.table, [record])
            except RemoteStoreError as exc:
                logger.error('remote create of %s failed: %s', entity_type.slug, exc.detail)
                raise
            created = rows[0] if rows else record
            self._after_remote_write(entity_type, lambda records: records.append(created))
            logger.info('created %s %s (remote)', entity_type.label, created.get('id'))
            return created

        with self.local.locked(entity_type) as records:
            record = {'id': generate_identifier(records, entity_type.prefix), **record}
            records.append(record)
        logger.info('created %s %s (local)', entity_type.label, record['id'])
        return record

    def update_entity(self, entity_type: EntityRef, identifier: Optional[str], fields: dict) -> dict:
        entity_type = get_entity_type(entity_type)
        if not identifier:
            raise ValidationError({'id': ['This field is required.']})
        changes = self.validate(entity_type, fields, partial=True)
        changes['updated_at'] = _now()

        if self.is_remote:
            try:
                rows = self.remote.update(entity_type.table, changes, column='id', value=identifier)
            except RemoteStoreError as exc:
                logger.error('remote update of %s %s failed: %s', entity_type.slug, identifier, exc.detail)
                raise
            if not rows:
                raise NotFound(f'{entity_type.label} {identifier} not found')
            updated = rows[0]

            def _replace(records):
                for i, r in enumerate(records):
                    if r.get('id') == identifier:
                        records[i] = {**r, **updated}

            self._after_remote_write(entity_type, _replace)
            return updated

        with self.local.locked(entity_type) as records:
            for i, r in enumerate(records):
                if r.get('id') == identifier:
                    records[i] = updated = {**r, **changes}
                    break
            else:
                raise NotFound(f'{entity_type.label} {identifier} not found')
        return updated

    def delete_entity(self, entity_type: EntityRef, identifier: Optional[str]) -> None:
        """Remove one record.  Unknown identifiers are a no-op."""
        entity_type = get_entity_type(entity_type)
        if not identifier:
            raise ValidationError({'id': ['This field is required.']})

        def _drop(records):
            records[:] = [r for r in records if r.get('id') != identifier]

        if self.is_remote:
            try:
                self.remote.delete(entity_type.table, column='id', value=identifier)
            except RemoteStoreError as exc:
                logger.error('remote delete of %s %s failed: %s', entity_type.slug, identifier, exc.detail)
                raise
            self._after_remote_write(entity_type, _drop)
        else:
            with self.local.locked(entity_type) as records:
                _drop(records)
        logger.info('deleted %s %s', entity_type.label, identifier)

    def _after_remote_write(self, entity_type: EntityType, apply) -> None:
        """Bring the local mirror in line with a write the remote accepted."""
        if entity_type.refresh_after_write:
            self.list_entities(entity_type)
            return
        with self.local.locked(entity_type) as records:
            apply(records)

    # -- dashboard ------------------------------------------------------------

    def dashboard_summary(self) -> DashboardSummary:
        patients = self.list_entities(PATIENTS, limit=5, order_column='created_at', ascending=False)
        appointments = self.list_entities(APPOINTMENTS, limit=4, order_column='created_at', ascending=False)
        reports = self.list_entities(REPORTS, order_column='created_at', ascending=False)
        today = timezone.localdate().isoformat()
        stats = {
            'totalPatients': len(patients.records),
            'criticalPatients': sum(1 for p in patients.records if p.get('status') == 'Critical'),
            'todayAppointments': sum(1 for a in appointments.records if a.get('appointment_date') == today),
            'pendingReports': sum(1 for r in reports.records if r.get('status') == 'Pending'),
        }
        warnings = [res.warning for res in (patients, appointments, reports) if res.warning]
        return DashboardSummary(
            patients=patients.records,
            appointments=appointments.records,
            reports=reports.records,
            stats=stats,
            warnings=list(dict.fromkeys(warnings)),
        )


@lru_cache(maxsize=1)
def get_sync_service() -> SyncService:
    """Process-wide service built from settings; the mode is fixed once here."""
    if remote_configured():
        remote = RemoteStoreClient(
            settings.REMOTE_STORE_URL, settings.REMOTE_STORE_KEY,
            timeout=settings.REMOTE_STORE_TIMEOUT,
        )
        return SyncService(mode=StoreMode.REMOTE, remote=remote,
                           remote_id_types=settings.RECORDS_REMOTE_ID_TYPES)
    return SyncService(mode=StoreMode.LOCAL_ONLY)
