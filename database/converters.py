"""Conversion between the stored golf-data document and Pydantic domain models.

The document uses camelCase keys:
    {"courses": [...], "playerProfile": {"tendencies": [...]}}
"""

from typing import Any, Dict, Optional

from models import GolfData


def empty_document() -> Dict[str, Any]:
    """The document used when nothing has been stored yet."""
    return {"courses": [], "playerProfile": {"tendencies": []}}


def golf_data_from_document(document: Optional[Dict[str, Any]]) -> GolfData:
    """Stored document -> GolfData. A missing document yields empty data.

    Raises:
        pydantic.ValidationError: If the document does not describe valid data.
    """
    if document is None:
        document = empty_document()
    if document.get("playerProfile") is None:
        document = {**document, "playerProfile": {"tendencies": []}}
    return GolfData.model_validate(document)


def golf_data_to_document(data: GolfData) -> Dict[str, Any]:
    """GolfData -> JSON-ready document with camelCase keys."""
    return data.model_dump(mode="json", by_alias=True)
