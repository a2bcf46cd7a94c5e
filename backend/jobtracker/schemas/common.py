"""Shared schema helpers."""

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, BaseModel, ConfigDict


def assume_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC wall-clock time, keep the entered time as-is."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDateTime = Annotated[datetime, AfterValidator(assume_utc)]


class PartialUpdate(BaseModel):
    """Base for PATCH payloads: only fields the client sent are applied.

    Fields listed in ``required_fields`` map to NOT NULL columns, so an explicit
    null for them is ignored instead of being written.
    """

    model_config = ConfigDict(use_enum_values=True)

    required_fields: ClassVar[tuple[str, ...]] = ()

    def changes(self) -> dict[str, Any]:
        data = self.model_dump(exclude_unset=True)
        return {
            key: value
            for key, value in data.items()
            if not (value is None and key in self.required_fields)
        }


class DeleteResponse(BaseModel):
    success: bool = True
    message: str | None = None
