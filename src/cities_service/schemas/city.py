from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DocumentCity(BaseModel):
    """
    City document as stored in Mongo.

    Rendered as `{"_id", "city", "country"}`; routes serialize with
    `exclude_defaults` so absent or empty fields are omitted.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, alias="_id")
    city: str = ""
    country: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_object_id(cls, v: Any) -> Optional[str]:
        # ObjectId renders as its 24-char hex form
        return None if v is None else str(v)

    @field_validator("city", "country", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class RelationalCity(BaseModel):
    """Row of the `Cities` table, rendered as `{"ID", "Name", "Country"}`."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(alias="ID")
    name: str = Field(alias="Name")
    country: str = Field(alias="Country")
