import copy
import os

# Settings are read when mflix_api is first imported
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("JWT_SECRET", "test-access-secret")
os.environ.setdefault("REFRESH_SECRET", "test-refresh-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DEMO_USERNAME", "admin")
os.environ.setdefault("DEMO_PASSWORD", "password")

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument
from pymongo.errors import ServerSelectionTimeoutError

from mflix_api.api.deps import get_db, get_user_store
from mflix_api.core.config import settings
from mflix_api.server import app
from mflix_api.services.auth_service import build_user_store


class InsertResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id

class DeleteResult:
    def __init__(self, deleted_count):
        self.deleted_count = deleted_count

class FakeCursor:
    def __init__(self, docs):
        self._docs = docs
        self._limit = 0

    def limit(self, n):
        self._limit = n
        return self

    async def to_list(self, length=None):
        docs = self._docs[:self._limit] if self._limit else list(self._docs)
        if length:
            docs = docs[:length]
        return copy.deepcopy(docs)

class FakeCollection:
    """Motor-like collection over a list, matching queries on top-level equality."""

    def __init__(self, name):
        self.name = name
        self.docs = []
        self.calls = []

    def _matching(self, query):
        return [d for d in self.docs if all(d.get(k) == v for k, v in query.items())]

    def find(self, query):
        self.calls.append("find")
        return FakeCursor(self._matching(query))

    async def find_one(self, query):
        self.calls.append("find_one")
        found = self._matching(query)
        return copy.deepcopy(found[0]) if found else None

    async def insert_one(self, document):
        self.calls.append("insert_one")
        document.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(document))
        return InsertResult(document["_id"])

    async def find_one_and_update(self, query, update, return_document=ReturnDocument.BEFORE):
        self.calls.append("find_one_and_update")
        found = self._matching(query)
        if not found:
            return None
        before = copy.deepcopy(found[0])
        found[0].update(update["$set"])
        return copy.deepcopy(found[0]) if return_document == ReturnDocument.AFTER else before

    async def delete_one(self, query):
        self.calls.append("delete_one")
        found = self._matching(query)
        if found:
            self.docs.remove(found[0])
        return DeleteResult(len(found[:1]))

    def seed(self, *documents):
        ids = []
        for document in documents:
            document = dict(document)
            document.setdefault("_id", ObjectId())
            self.docs.append(document)
            ids.append(document["_id"])
        return ids

class BrokenCollection(FakeCollection):
    """Every operation fails the way an unreachable server does."""

    def _fail(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("db-host-7.internal:27017: timed out")

    find = _fail

    async def find_one(self, *args, **kwargs):
        self._fail()

class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection(name))


@pytest.fixture
def fake_db():
    return FakeDatabase()

@pytest.fixture
def user_store():
    return build_user_store(settings)

@pytest.fixture
def client(fake_db, user_store):
    app.dependency_overrides[get_db] = lambda: fake_db
    app.dependency_overrides[get_user_store] = lambda: user_store
    # Not used as a context manager: the lifespan would try to reach MongoDB
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def broken_collection():
    return BrokenCollection
