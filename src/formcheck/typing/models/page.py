"""Page models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from formcheck.typing.models.field import FieldDefinition


class Page(BaseModel):
    """Fields validated together as one form submission.

    Field order is the order of the error summary.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    title: str | None = None
    fields: dict[str, FieldDefinition]
