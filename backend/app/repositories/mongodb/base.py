import logging
from typing import Generic, List, Optional, Type, TypeVar

from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import BaseModel, ValidationError
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.exceptions import AppError, StoreError
from app.utils.helpers import format_document, parse_object_id

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class MongoCrudRepository(Generic[ModelT]):
    """
    Plain CRUD over one collection keyed by ObjectId.

    Malformed ids behave like missing documents. Driver failures are logged
    and re-raised as StoreError.
    """
    model: Type[ModelT]
    entity: str

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    def _duplicate_error(self, data: dict, error: DuplicateKeyError) -> AppError:
        """Error raised when a write violates a unique index."""
        return StoreError(f"write duplicate {self.entity}", error)

    def _to_model(self, document: dict) -> ModelT:
        try:
            return self.model.model_validate(format_document(document))
        except ValidationError as e:
            logger.error(f"Failed to decode {self.entity} {document.get('_id')}: {e}")
            raise StoreError(f"decode {self.entity}", e) from e

    async def get_all(self) -> List[ModelT]:
        try:
            documents = await self.collection.find({}).to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Failed to list {self.entity}s: {e}")
            raise StoreError(f"list {self.entity}s", e) from e
        return [self._to_model(document) for document in documents]

    async def get_by_id(self, entity_id: str) -> Optional[ModelT]:
        object_id = parse_object_id(entity_id)
        if object_id is None:
            logger.warning(f"Invalid {self.entity} ID format: {entity_id}")
            return None

        try:
            document = await self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"Failed to find {self.entity} {entity_id}: {e}")
            raise StoreError(f"find {self.entity} {entity_id}", e) from e

        if document is None:
            return None
        return self._to_model(document)

    async def create(self, data: dict) -> ModelT:
        document = dict(data)
        try:
            result = await self.collection.insert_one(document)
        except DuplicateKeyError as e:
            logger.warning(f"Duplicate {self.entity} rejected by unique index: {e}")
            raise self._duplicate_error(data, e) from e
        except PyMongoError as e:
            logger.error(f"Failed to create {self.entity}: {e}")
            raise StoreError(f"create {self.entity}", e) from e
        document["_id"] = result.inserted_id
        return self._to_model(document)

    async def update(self, entity_id: str, fields: dict) -> Optional[ModelT]:
        object_id = parse_object_id(entity_id)
        if object_id is None:
            logger.warning(f"Invalid {self.entity} ID format: {entity_id}")
            return None

        try:
            document = await self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": fields},
                return_document=ReturnDocument.AFTER
            )
        except DuplicateKeyError as e:
            logger.warning(f"Update of {self.entity} {entity_id} rejected by unique index: {e}")
            raise self._duplicate_error(fields, e) from e
        except PyMongoError as e:
            logger.error(f"Failed to update {self.entity} {entity_id}: {e}")
            raise StoreError(f"update {self.entity} {entity_id}", e) from e

        if document is None:
            return None
        return self._to_model(document)

    async def delete(self, entity_id: str) -> Optional[ModelT]:
        object_id = parse_object_id(entity_id)
        if object_id is None:
            logger.warning(f"Invalid {self.entity} ID format: {entity_id}")
            return None

        try:
            document = await self.collection.find_one_and_delete({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"Failed to delete {self.entity} {entity_id}: {e}")
            raise StoreError(f"delete {self.entity} {entity_id}", e) from e

        if document is None:
            return None
        return self._to_model(document)
