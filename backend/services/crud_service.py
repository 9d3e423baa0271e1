import logging
from typing import List, Optional

from backend.auth.identity import AuthenticationError, Identity
from backend.models.schema import EntitySchema
from backend.repositories.document_repository import Document, DocumentRepository, StoreResult

logger = logging.getLogger(__name__)

# A uid holding any of these would alias another tenant once mapped to a collection name
_UNSAFE_UID_CHARS = frozenset("/.$\0")


class CrudService:
    """Business layer for one entity type.

    ``collection_path`` may contain ``{uid}``; it is filled in from the
    caller's identity so each user gets their own collection.
    """

    def __init__(self, repository: DocumentRepository, schema: EntitySchema, collection_path: str):
        self.repository = repository
        self.schema = schema
        self.collection_path = collection_path

    def collection_for(self, identity: Identity) -> str:
        if "{uid}" in self.collection_path:
            uid = identity.uid
            if not uid or _UNSAFE_UID_CHARS.intersection(uid):
                raise AuthenticationError(f"uid {uid!r} cannot name a collection")
        return self.collection_path.format(uid=identity.uid)

    def get_all(self, identity: Identity) -> List[Document]:
        return self.repository.find_all(self.collection_for(identity))

    def get_by_id(self, identity: Identity, entity_id: str) -> Optional[Document]:
        return self.repository.find_by_id(self.collection_for(identity), entity_id)

    def create(self, identity: Identity, entity: Document) -> StoreResult[Document]:
        return self.repository.create(self.collection_for(identity), self.schema.with_defaults(entity))

    def update(self, identity: Identity, entity_id: str, entity: Document) -> StoreResult[Document]:
        return self.repository.update_by_id(
            self.collection_for(identity), entity_id, {**entity, "id": entity_id}
        )

    def delete(self, identity: Identity, entity_id: str) -> StoreResult[Document]:
        result = self.repository.delete_by_id(self.collection_for(identity), entity_id)
        if result.ok:
            logger.info("Deleted %s %s", self.schema.name, entity_id)
        return result
