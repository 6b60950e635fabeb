"""
In-memory stand-in for the store handle and its repositories.
Mirrors MongoRepository, including unique-index rejection on users.email.
"""

import copy
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

UNIQUE_FIELDS = {"users": ("email",)}


class InMemoryRepository:
    def __init__(self, name: str, unique_fields: Tuple[str, ...] = ()):
        self.name = name
        self.unique_fields = unique_fields
        self.documents: Dict[ObjectId, Dict[str, Any]] = {}

    def _check_unique(self, document: Dict[str, Any], exclude: Optional[ObjectId] = None):
        for field in self.unique_fields:
            if field not in document:
                continue
            for object_id, existing in self.documents.items():
                if object_id != exclude and existing.get(field) == document[field]:
                    raise DuplicateKeyError(
                        f"E11000 duplicate key error collection: {self.name} index: {field}_1"
                    )

    async def find_all(self) -> List[Dict[str, Any]]:
        return [copy.deepcopy(document) for document in self.documents.values()]

    async def find_by_id(self, object_id: ObjectId) -> Optional[Dict[str, Any]]:
        document = self.documents.get(object_id)
        return copy.deepcopy(document) if document is not None else None

    async def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        document = copy.deepcopy(document)
        document.setdefault("_id", ObjectId())
        self._check_unique(document)
        self.documents[document["_id"]] = document
        return copy.deepcopy(document)

    async def insert_many(self, documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [await self.insert(document) for document in documents]

    async def update_by_id(self, object_id: ObjectId, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        existing = self.documents.get(object_id)
        if existing is None:
            return None
        self._check_unique(fields, exclude=object_id)
        existing.update(copy.deepcopy(fields))
        return copy.deepcopy(existing)

    async def delete_by_id(self, object_id: ObjectId) -> Optional[Dict[str, Any]]:
        return self.documents.pop(object_id, None)


class InMemoryStore:
    def __init__(self):
        self.connected = False
        self.repositories: Dict[str, InMemoryRepository] = {}

    async def connect(self):
        self.connected = True

    async def close(self):
        self.connected = False

    async def ping(self) -> bool:
        return self.connected

    def repository(self, collection_name: str) -> InMemoryRepository:
        if collection_name not in self.repositories:
            self.repositories[collection_name] = InMemoryRepository(
                collection_name, UNIQUE_FIELDS.get(collection_name, ())
            )
        return self.repositories[collection_name]
