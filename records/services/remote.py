"""
Client for the hosted table store.

Speaks the table-oriented REST dialect exposed under ``/rest/v1``: one
resource per table, filters and ordering in the query string, row
payloads as JSON.  Every failure is raised as :class:`RemoteStoreError`;
deciding whether a failure is fatal is up to the synchronization layer.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from records.exceptions import RemoteStoreError

logger = logging.getLogger(__name__)


class RemoteStoreClient:

    def __init__(self, url: str, key: str, *, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.base_url = url.rstrip('/') + '/rest/v1'
        self.key = key
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self, prefer: Optional[str] = None) -> dict:
        headers = {
            'apikey': self.key,
            'Authorization': f'Bearer {self.key}',
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        }
        if prefer:
            headers['Prefer'] = prefer
        return headers

    def _request(self, method: str, table: str, *, params=None, json=None, prefer=None) -> Any:
        url = f'{self.base_url}/{table}'
        try:
            r = self.session.request(
                method, url, params=params, json=json,
                headers=self._headers(prefer), timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise RemoteStoreError(f'{method} {table} failed: {exc}') from exc
        logger.debug('%s %s -> %s', method, table, r.status_code)
        if r.status_code >= 400:
            try:
                body = r.json()
                message = (body.get('message') or body.get('error')) if isinstance(body, dict) else None
            except ValueError:
                message = None
            message = message or r.text
            raise RemoteStoreError(
                f'{method} {table} returned {r.status_code}: {message}',
                upstream_status=r.status_code,
            )
        if not r.content:
            return []
        try:
            return r.json()
        except ValueError as exc:
            raise RemoteStoreError(f'{method} {table} returned invalid JSON') from exc

    @staticmethod
    def _eq(column: str, value) -> dict:
        return {column: f'eq.{value}'}

    def select(self, table: str, *, columns: str = '*', order: Optional[str] = None,
               ascending: bool = True, limit: Optional[int] = None) -> list[dict]:
        params = {'select': columns}
        if order:
            params['order'] = f"{order}.{'asc' if ascending else 'desc'}"
        if limit:
            params['limit'] = str(limit)
        rows = self._request('GET', table, params=params)
        if not isinstance(rows, list):
            raise RemoteStoreError(f'GET {table} returned {type(rows).__name__}, expected a list')
        return rows

    def insert(self, table: str, records: list[dict]) -> list[dict]:
        return self._request('POST', table, json=records, prefer='return=representation')

    def update(self, table: str, values: dict, *, column: str, value) -> list[dict]:
        return self._request('PATCH', table, params=self._eq(column, value), json=values,
                             prefer='return=representation')

    def delete(self, table: str, *, column: str, value) -> list[dict]:
        return self._request('DELETE', table, params=self._eq(column, value),
                             prefer='return=representation')
