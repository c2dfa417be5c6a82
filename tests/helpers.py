"""Sample listings and an in-memory backend shared by the tests."""

from __future__ import annotations

from src.db import BackendError
from src.models import Property, User


class FakeBackend:
    """In-memory stand-in for src.db.Backend.

    ``fail`` maps a method name to the error message it should raise.
    """

    def __init__(self, rows: list[dict] | None = None, user: User | None = None) -> None:
        self.rows = list(rows or [])
        self.user = user
        self.fail: dict[str, str] = {}
        self.calls: list[tuple] = []
        self.inserted: list[dict] = []
        self.uploaded: list[tuple[str, str, bytes, str]] = []

    def _maybe_fail(self, op: str) -> None:
        if op in self.fail:
            raise BackendError(op, self.fail[op])

    def list(self, table, order_by="created_at", descending=True):
        self.calls.append(("list", table, order_by, descending))
        self._maybe_fail("list")
        return list(self.rows)

    def insert(self, table, row):
        self.calls.append(("insert", table))
        self._maybe_fail("insert")
        self.inserted.append(row)
        return [row]

    def upsert(self, table, rows, on_conflict="id"):
        self.calls.append(("upsert", table, len(rows), on_conflict))
        self._maybe_fail("upsert")
        return list(rows)

    def upload_file(self, bucket, name, content, content_type=""):
        self.calls.append(("upload_file", bucket, name))
        self._maybe_fail("upload_file")
        self.uploaded.append((bucket, name, content, content_type))
        return name

    def public_url(self, bucket, path):
        return f"https://cdn.example.com/{bucket}/{path}"

    def sign_in_with_password(self, email, password):
        self.calls.append(("sign_in", email))
        self._maybe_fail("sign_in")
        self.user = User(id="u1", email=email)
        return self.user

    def sign_up(self, email, password):
        self.calls.append(("sign_up", email))
        self._maybe_fail("sign_up")
        return User(id="u2", email=email)

    def sign_out(self):
        self.calls.append(("sign_out",))
        self._maybe_fail("sign_out")
        self.user = None

    def get_current_user(self):
        return self.user


SAMPLE_ROWS = [
    {"id": 1, "title": "Sunny flat", "location": "Pune", "price": 5000000, "beds": 2, "created_at": "2024-01-01"},
    {"id": 2, "title": "Family home", "location": "Pune", "price": 8000000, "beds": 3, "created_at": "2024-06-01"},
    {"id": 3, "title": "Sea view studio", "location": "Mumbai", "price": 3000000, "beds": 1, "created_at": "2024-03-01"},
]

RICH_ROWS = [
    {
        "id": "a", "title": "Garden villa", "name": "Green Acres", "location": "Pune",
        "finance_type": "Loan", "price": 9_500_000, "beds": 4, "baths": 3, "sqft": 2400,
        "new_listing": True, "trending": True, "created_at": "2024-05-10T08:00:00+00:00",
    },
    {
        "id": "b", "title": "City studio", "location": "Mumbai", "finance_type": "Cash",
        "price": 2_500_000, "beds": 1, "baths": 1, "sqft": 450,
        "new_listing": False, "trending": False, "created_at": "2024-02-01T12:30:00Z",
    },
    {
        "id": "c", "title": "Lake house", "name": "Blue Water", "location": "Nashik",
        "finance_type": "EMI", "price": None, "beds": 3, "baths": 2, "sqft": None,
        "new_listing": True, "created_at": None,
    },
    {
        "id": "d", "title": "Penthouse", "location": "Mumbai", "finance_type": "Loan",
        "price": 15_000_000, "beds": 4, "baths": 4, "sqft": 3200,
        "trending": True, "created_at": "2024-07-20",
    },
    {"id": "e", "title": "Plot", "location": "", "finance_type": None, "price": 1_000_000, "beds": 0},
]


def ids(records: list[Property]) -> list[str]:
    return [p.id for p in records]
