"""Pytest fixtures for the Santa Gemita backend tests."""

import itertools
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from google.cloud.firestore_v1 import SERVER_TIMESTAMP
from httpx import ASGITransport, AsyncClient

from santagemita.config import get_db
from santagemita.core.auth import get_principal
from santagemita.main import app
from santagemita.schemas.principal import Principal


# ---------------------------------------------------------------------------
# In-memory Firestore double: just the client surface the services use
# ---------------------------------------------------------------------------

_OPS = {
    "==": lambda a, b: a == b,
    "!=": lambda a, b: a != b,
    "<": lambda a, b: a is not None and a < b,
    "<=": lambda a, b: a is not None and a <= b,
    ">": lambda a, b: a is not None and a > b,
    ">=": lambda a, b: a is not None and a >= b,
}


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data
        self.exists = data is not None

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeDocument:
    def __init__(self, store, collection, doc_id):
        self._store = store
        self._collection = collection
        self.id = doc_id

    def _docs(self):
        return self._store.setdefault(self._collection, {})

    @staticmethod
    def _resolve(data):
        now = datetime.now(timezone.utc)
        return {k: (now if v is SERVER_TIMESTAMP else v) for k, v in data.items()}

    def get(self):
        return FakeSnapshot(self.id, self._docs().get(self.id))

    def set(self, data, merge=False):
        docs = self._docs()
        if merge and self.id in docs:
            docs[self.id] = {**docs[self.id], **self._resolve(data)}
        else:
            docs[self.id] = self._resolve(data)

    def update(self, data):
        docs = self._docs()
        if self.id not in docs:
            raise KeyError(f"No document to update: {self._collection}/{self.id}")
        docs[self.id] = {**docs[self.id], **self._resolve(data)}

    def delete(self):
        self._docs().pop(self.id, None)


class FakeQuery:
    def __init__(self, store, collection, filters=(), limit=None):
        self._store = store
        self._collection = collection
        self._filters = list(filters)
        self._limit = limit

    def where(self, field_path=None, op_string=None, value=None, *, filter=None):
        if filter is not None:
            field_path, op_string, value = filter.field_path, filter.op_string, filter.value
        return FakeQuery(self._store, self._collection, self._filters + [(field_path, op_string, value)], self._limit)

    def limit(self, n):
        return FakeQuery(self._store, self._collection, self._filters, n)

    def stream(self):
        docs = self._store.get(self._collection, {})
        out = []
        for doc_id, data in docs.items():
            if all(_OPS[op](data.get(field), value) for field, op, value in self._filters):
                out.append(FakeSnapshot(doc_id, data))
        return iter(out[: self._limit] if self._limit is not None else out)


class FakeCollection(FakeQuery):
    _ids = itertools.count(1)

    def document(self, doc_id=None):
        if doc_id is None:
            doc_id = f"{self._collection}-{next(self._ids)}"
        return FakeDocument(self._store, self._collection, doc_id)


class FakeFirestore:
    def __init__(self):
        self.store = {}

    def collection(self, name):
        return FakeCollection(self.store, name)

    def seed(self, collection, doc_id, data):
        self.store.setdefault(collection, {})[doc_id] = dict(data)

    def docs(self, collection):
        return self.store.get(collection, {})


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_db():
    db = FakeFirestore()
    app.dependency_overrides[get_db] = lambda: db
    yield db
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def login_as():
    """Makes every request run as a principal with the given role."""
    def _login(role, uid="staff-1", email="staff@santagemita.cl"):
        principal = Principal(uid=uid, role=role, email=email)
        app.dependency_overrides[get_principal] = lambda: principal
        return principal
    yield _login
    app.dependency_overrides.pop(get_principal, None)


@pytest_asyncio.fixture
async def client(fake_db):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def catalog_data(fake_db):
    fake_db.seed("flowers", "f-rosas", {
        "name": "Ramo de 12 rosas", "category": "Rosas", "price": 10000,
        "imageUrl": "https://img/rosas.jpg", "description": "Rosas rojas",
    })
    fake_db.seed("flowers", "f-tulipan", {
        "name": "Tulipanes", "category": "Tulipanes", "price": 8000,
        "imageUrl": "https://img/tulipanes.jpg", "description": "",
    })
    fake_db.seed("jewelry", "j-anillo", {
        "name": "Anillo de plata", "category": "Rosas", "price": 20000,
        "imageUrl": "https://img/anillo.jpg", "description": "Plata 925",
    })
    fake_db.seed("flowerCategories", "c-rosas", {"name": "Rosas"})
    fake_db.seed("flowerCategories", "c-tulipanes", {"name": "Tulipanes"})
    fake_db.seed("jewelryCategories", "c-anillos", {"name": "Anillos"})
    return fake_db
