"""
Collection-level data access. Every method issues exactly one store operation.
"""

from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument


class MongoRepository:
    """Thin async wrapper over a single MongoDB collection"""

    def __init__(self, collection):
        self.collection = collection

    @property
    def name(self) -> str:
        return self.collection.name

    async def find_all(self) -> List[Dict[str, Any]]:
        cursor = self.collection.find({})
        return await cursor.to_list(length=None)

    async def find_by_id(self, object_id: ObjectId) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"_id": object_id})

    async def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a document and return it with its assigned ``_id``"""
        document = dict(document)
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    async def insert_many(self, documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if not documents:
            return []
        documents = [dict(document) for document in documents]
        result = await self.collection.insert_many(documents)
        for document, inserted_id in zip(documents, result.inserted_ids):
            document["_id"] = inserted_id
        return documents

    async def update_by_id(self, object_id: ObjectId, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Overwrite only the supplied fields and return the updated document"""
        if not fields:
            return await self.find_by_id(object_id)
        return await self.collection.find_one_and_update(
            {"_id": object_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )

    async def delete_by_id(self, object_id: ObjectId) -> Optional[Dict[str, Any]]:
        """Remove a document and return its prior contents"""
        return await self.collection.find_one_and_delete({"_id": object_id})
