"""Generic CRUD access to a MongoDB collection addressed by collection path.

Lookup misses and duplicates come back as ``StoreResult`` errors. Driver
failures (``pymongo.errors.PyMongoError``) are left to propagate.

The existence check and the write that follows it are two separate calls,
not a transaction: a concurrent request can create or delete the same
document in between.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.database import Database

from backend.utils.db import collection_name, get_db, serialize_doc
from backend.utils.errors import ErrorKind

logger = logging.getLogger(__name__)

T = TypeVar("T")

Document = Dict[str, str]


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "StoreResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind) -> "StoreResult[T]":
        return cls(error=error)


class DocumentRepository:
    def __init__(self, database_provider: Callable[[], Database] = get_db):
        self._database_provider = database_provider

    def _collection(self, collection_path: str) -> Collection:
        return self._database_provider()[collection_name(collection_path)]

    def find_all(self, collection_path: str) -> List[Document]:
        return [serialize_doc(doc) for doc in self._collection(collection_path).find()]

    def find_by_id(self, collection_path: str, document_id: str) -> Optional[Document]:
        return serialize_doc(self._collection(collection_path).find_one({"_id": document_id}))

    def create(self, collection_path: str, entity: Document) -> StoreResult[Document]:
        """Insert ``entity``; a client supplied id becomes the document key."""
        document = dict(entity)
        document_id = document.pop("id", None)
        if document_id:
            if self.find_by_id(collection_path, document_id) is not None:
                return StoreResult.failure(ErrorKind.ALREADY_EXISTS)
        else:
            document_id = str(ObjectId())

        collection = self._collection(collection_path)
        result = collection.insert_one({"_id": document_id, **document})
        created = collection.find_one({"_id": result.inserted_id})
        logger.debug("Created document %s in %s", document_id, collection_path)
        return StoreResult.success(serialize_doc(created))

    def update_by_id(
        self, collection_path: str, document_id: str, entity: Document
    ) -> StoreResult[Document]:
        """Replace the stored document with ``entity`` (its ``id`` is ignored)."""
        if self.find_by_id(collection_path, document_id) is None:
            return StoreResult.failure(ErrorKind.NOT_FOUND)

        document = {key: value for key, value in entity.items() if key != "id"}
        self._collection(collection_path).replace_one({"_id": document_id}, document)
        return StoreResult.success({"id": document_id, **document})

    def delete_by_id(self, collection_path: str, document_id: str) -> StoreResult[Document]:
        existing = self.find_by_id(collection_path, document_id)
        if existing is None:
            return StoreResult.failure(ErrorKind.NOT_FOUND)

        self._collection(collection_path).delete_one({"_id": document_id})
        return StoreResult.success(existing)
