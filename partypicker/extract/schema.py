"""
Track data schema.

Validates raw track records coming from JSON resources. A document is
either a bare list of records or an object with a "tracks" list.
"""
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from partypicker.exceptions import DataLoadFailure


class TrackRecord(BaseModel):
    """
    One pickable track.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(min_length=1)
    bonus: bool = Field(
        default=False,
        validation_alias=AliasChoices("bonus", "is_bonus", "dlc", "isDLC"),
        description="True for bonus (DLC) content, False for base game tracks",
    )
    cup: Optional[str] = None


def parse_track_document(document: Any, source: str = None) -> List[TrackRecord]:
    """
    Validate a decoded track document.

    Raises:
        DataLoadFailure if the document shape or any record is invalid,
        or if it holds no tracks
    """
    if isinstance(document, dict):
        document = document.get("tracks")
    if not isinstance(document, list):
        raise DataLoadFailure(source=source, reason="expected a list of track records")
    if not document:
        raise DataLoadFailure(source=source, reason="no tracks")

    try:
        return [TrackRecord.model_validate(record) for record in document]
    except ValidationError as e:
        raise DataLoadFailure(source=source, reason=f"{e.error_count()} invalid field(s)") from e
