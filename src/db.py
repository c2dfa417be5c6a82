from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError
from supabase import AuthError, Client, PostgrestAPIError, StorageException, create_client
from tenacity import retry, stop_after_attempt, wait_exponential

from src.config import settings
from src.models import Property, User

logger = logging.getLogger(__name__)

# Failures the backend client can surface for a single request
BACKEND_FAILURES = (PostgrestAPIError, StorageException, AuthError, httpx.HTTPError)


class BackendError(Exception):
    """Raised when a request to the managed backend fails."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        self.message = message
        super().__init__(f"{operation} failed: {message}")


def get_client() -> Client:
    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        raise RuntimeError("SUPABASE_URL and SUPABASE_KEY must be set in .env")
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


def _message(exc: Exception) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or exc.__class__.__name__


def _to_user(raw: Any) -> User | None:
    if raw is None:
        return None
    return User(id=str(raw.id), email=getattr(raw, "email", None))


class Backend:
    """Request/response wrapper over the Supabase tables, storage and auth APIs.

    Each method is a single blocking request. Every failure is re-raised as
    BackendError carrying the backend's message; nothing is retried here.
    """

    def __init__(self, client: Client | None = None) -> None:
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_client()
        return self._client

    def _call(self, operation: str, fn, *args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except BACKEND_FAILURES as e:
            logger.error("%s failed: %s", operation, _message(e))
            raise BackendError(operation, _message(e)) from e

    # ── tables ──────────────────────────────────────────────────────────

    def list(self, table: str, order_by: str = "created_at", descending: bool = True) -> list[dict]:
        logger.debug("Listing %s ordered by %s (desc=%s)", table, order_by, descending)
        result = self._call(
            f"list {table}",
            lambda: self.client.table(table).select("*").order(order_by, desc=descending).execute(),
        )
        return result.data or []

    def insert(self, table: str, row: dict) -> list[dict]:
        result = self._call(f"insert {table}", lambda: self.client.table(table).insert(row).execute())
        return result.data or []

    def upsert(self, table: str, rows: list[dict], on_conflict: str = "id") -> list[dict]:
        result = self._call(
            f"upsert {table}",
            lambda: self.client.table(table).upsert(rows, on_conflict=on_conflict).execute(),
        )
        return result.data or []

    # ── storage ─────────────────────────────────────────────────────────

    def upload_file(self, bucket: str, name: str, content: bytes, content_type: str = "") -> str:
        """Store ``content`` under ``name`` and return its object path."""
        options = {"content-type": content_type} if content_type else {}
        result = self._call(
            f"upload to {bucket}",
            lambda: self.client.storage.from_(bucket).upload(path=name, file=content, file_options=options),
        )
        logger.info("Uploaded %s to bucket %s", result.path, bucket)
        return result.path

    def public_url(self, bucket: str, path: str) -> str:
        return self.client.storage.from_(bucket).get_public_url(path)

    # ── auth ────────────────────────────────────────────────────────────

    def sign_in_with_password(self, email: str, password: str) -> User | None:
        response = self._call(
            "sign in",
            self.client.auth.sign_in_with_password,
            {"email": email, "password": password},
        )
        return _to_user(response.user)

    def sign_up(self, email: str, password: str) -> User | None:
        response = self._call(
            "sign up",
            self.client.auth.sign_up,
            {"email": email, "password": password},
        )
        return _to_user(response.user)

    def sign_out(self) -> None:
        self._call("sign out", self.client.auth.sign_out)

    def get_current_user(self) -> User | None:
        try:
            response = self.client.auth.get_user()
        except BACKEND_FAILURES as e:
            logger.debug("No current user: %s", _message(e))
            return None
        if response is None:
            return None
        return _to_user(response.user)


# ── listings ───────────────────────────────────────────────────────────


def fetch_properties(backend: Backend) -> list[Property]:
    """Load every listing, newest first."""
    rows = backend.list(settings.PROPERTIES_TABLE, order_by="created_at", descending=True)
    properties: list[Property] = []
    for row in rows:
        try:
            properties.append(Property.model_validate(row))
        except ValidationError as e:
            logger.warning("Skipping malformed row %r: %s", row.get("id"), e)
    logger.info("Fetched %d properties", len(properties))
    return properties


def insert_property(backend: Backend, row: dict) -> list[dict]:
    return backend.insert(settings.PROPERTIES_TABLE, row)


@retry(
    stop=stop_after_attempt(settings.MAX_RETRIES),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    reraise=True,
)
def upsert_properties(properties: list[Property], backend: Backend | None = None) -> int:
    """Upsert properties to Supabase. Returns count of upserted rows."""
    if not properties:
        return 0

    backend = backend or Backend()

    # Unset columns fall back to DB defaults
    rows = [p.model_dump(mode="json", exclude_none=True) for p in properties]

    BATCH_SIZE = 50
    total = 0
    for i in range(0, len(rows), BATCH_SIZE):
        batch = rows[i : i + BATCH_SIZE]
        total += len(backend.upsert(settings.PROPERTIES_TABLE, batch, on_conflict="id"))

    return total
