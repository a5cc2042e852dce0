# mflix_api/utils/helpers.py

import logging
from typing import Any

from bson import ObjectId
from fastapi.encoders import jsonable_encoder

from mflix_api.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

# --- Identifiers ---

def parse_object_id(value: str, label: str) -> ObjectId:
    """
    Converts a path segment into a MongoDB ObjectId.

    Args:
        value: The raw identifier, expected to be 24 hexadecimal characters.
        label: Resource name used in the error message (e.g. "movie").

    Returns:
        The parsed ObjectId.

    Raises:
        InvalidArgumentError: If the value is not a well-formed ObjectId.
    """
    if isinstance(value, str) and len(value) == 24 and ObjectId.is_valid(value):
        return ObjectId(value)
    logger.warning(f"Invalid {label} ID format: {value}")
    raise InvalidArgumentError(f"Invalid {label} ID", "ID format is incorrect")


# --- Serialization ---

BSON_ENCODERS = {ObjectId: str}

def to_jsonable(value: Any) -> Any:
    """Converts documents returned by the driver into JSON-compatible values."""
    return jsonable_encoder(value, custom_encoder=BSON_ENCODERS)
