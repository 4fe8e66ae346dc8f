from typing import Optional
from bson import ObjectId
from bson.errors import InvalidId


def object_id_to_str(obj_id) -> str:
    """Convert ObjectId to string."""
    if isinstance(obj_id, ObjectId):
        return str(obj_id)
    return obj_id


def parse_object_id(value: str) -> Optional[ObjectId]:
    """Parse a hex string into an ObjectId, or None if it is not one."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def format_document(document: Optional[dict]) -> Optional[dict]:
    """Stringify the `_id` of a MongoDB document so models can validate it."""
    if document and "_id" in document:
        document["_id"] = object_id_to_str(document["_id"])
    return document


def non_empty_fields(data: dict) -> dict:
    """Keep only fields that carry a value (None and "" mean "unchanged")."""
    return {key: value for key, value in data.items() if value is not None and value != ""}
