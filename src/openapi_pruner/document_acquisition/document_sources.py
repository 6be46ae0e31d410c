"""API description acquisition service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

import requests

from openapi_pruner.configuration.runtime_settings import SourceSettings

logger = logging.getLogger(__name__)

OPENAPI_MEDIA_TYPE = "application/openapi+json"


class AcquisitionError(Exception):
    """Raised when the API description document cannot be obtained."""


class DocumentSource(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for collaborators that provide the full document."""

    def load_document(self) -> dict[str, Any]: ...


class HTTPSession(Protocol):  # pylint: disable=too-few-public-methods
    """Subset of `requests.Session` used by the remote source."""

    def get(self, url: str, **kwargs: Any) -> requests.Response: ...


class LocalDocumentSource:  # pylint: disable=too-few-public-methods
    """Reads the document from a JSON file on disk."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load_document(self) -> dict[str, Any]:
        if not self._path.exists():
            raise AcquisitionError(f"OpenAPI input file not found: {self._path}")
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise AcquisitionError(f"Failed to read OpenAPI input {self._path}: {exc}") from exc
        logger.info("Loaded OpenAPI document from %s", self._path)
        return _parse_document(text, origin=str(self._path))


class RemoteDocumentSource:  # pylint: disable=too-few-public-methods
    """Fetches the document from an authenticated REST endpoint."""

    def __init__(
        self,
        url: str,
        api_key: str | None,
        *,
        schema: str | None = None,
        timeout_seconds: int = 30,
        session: HTTPSession | None = None,
    ) -> None:
        self._url = url
        self._api_key = api_key
        self._schema = schema
        self._timeout_seconds = timeout_seconds
        self._session = session

    def build_headers(self) -> dict[str, str]:
        if not self._api_key:
            raise AcquisitionError(
                "Missing SERVICE_ROLE_KEY (or SUPABASE_SERVICE_ROLE_KEY) for remote OpenAPI fetch."
            )
        headers = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Accept": OPENAPI_MEDIA_TYPE,
        }
        if self._schema:
            headers["Accept-Profile"] = self._schema
            headers["Content-Profile"] = self._schema
        return headers

    def load_document(self) -> dict[str, Any]:
        headers = self.build_headers()
        if self._session is not None:
            return self._fetch(self._session, headers)
        with requests.Session() as session:
            return self._fetch(session, headers)

    def _fetch(self, session: HTTPSession, headers: dict[str, str]) -> dict[str, Any]:
        try:
            response = session.get(self._url, headers=headers, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            raise AcquisitionError(f"OpenAPI fetch failed: {exc}") from exc
        if not response.ok:
            raise AcquisitionError(
                f"OpenAPI fetch failed: {response.status_code} {response.reason} :: {response.text}"
            )
        logger.info("Fetched OpenAPI document from %s", self._url)
        return _parse_document(response.text, origin=self._url)


def build_document_source(
    settings: SourceSettings,
    *,
    schema: str | None = None,
    session: HTTPSession | None = None,
) -> DocumentSource:
    """Return the remote source when an endpoint is configured, else the local file."""
    if settings.url:
        return RemoteDocumentSource(
            settings.url,
            settings.api_key,
            schema=schema,
            timeout_seconds=settings.timeout_seconds,
            session=session,
        )
    return LocalDocumentSource(settings.input_path)


def _parse_document(text: str, *, origin: str) -> dict[str, Any]:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise AcquisitionError(f"Invalid OpenAPI document from {origin}: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise AcquisitionError(f"OpenAPI document from {origin} must be a JSON object.")
    return dict(parsed)
