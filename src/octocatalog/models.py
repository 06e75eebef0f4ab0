"""Pydantic models for the catalog file and the Slack wire format."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Catalog configuration
# ---------------------------------------------------------------------------


class Option(BaseModel):
    """A selectable option as authored in the catalog file."""

    model_config = ConfigDict(frozen=True)

    text: str
    value: str


class CatalogEntry(BaseModel):
    """Options served for one ``action_id``.

    The catalog file spells the identifier ``actionId``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    action_id: str = Field(alias="actionId")
    options: tuple[Option, ...] = ()


# ---------------------------------------------------------------------------
# Slack request / response
# ---------------------------------------------------------------------------


class IncomingRequest(BaseModel):
    """An options-load request from Slack (``block_suggestion`` payload)."""

    type: str = ""
    action_id: str = ""
    block_id: str = ""
    value: str = ""

    @field_validator("type", "action_id", "block_id", "value", mode="before")
    @classmethod
    def null_as_empty(cls, v: object) -> object:
        # JSON null reads as an absent field
        return "" if v is None else v


class PlainText(BaseModel):
    type: str = "plain_text"
    text: str


class ResolvedOption(BaseModel):
    text: PlainText
    value: str

    @classmethod
    def from_option(cls, option: Option) -> ResolvedOption:
        return cls(text=PlainText(text=option.text), value=option.value)


class OptionsResponse(BaseModel):
    options: list[ResolvedOption]


class HealthResponse(BaseModel):
    status: str
    catalog_entries: int
    version: str
