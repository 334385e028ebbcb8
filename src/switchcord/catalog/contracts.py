"""
Data contracts for game catalog API responses.

These Pydantic models define the expected structure of data
returned by the IGDB games endpoint, both on success and on error.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

# IGDB identifiers are plain integers
GameId = int


class GameRecord(BaseModel):
    """A game returned by a catalog search."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: GameId = Field(..., description="Unique catalog identifier")
    cover: int | None = Field(default=None, description="Cover asset identifier")
    platforms: tuple[int, ...] = Field(
        default=(), description="Platform identifiers, in the order returned"
    )
    name: str = Field(default="", description="Display name")
    slug: str = Field(default="", description="URL-safe short identifier")


class RemoteError(BaseModel):
    """
    Structured error body sent by the catalog service.

    The schema is owned by the remote service, so every field is
    optional. IGDB wraps the object in a JSON array; the first
    element of such an array is used.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    status: int | None = Field(default=None, description="Status code reported by the service")
    message: str | None = Field(default=None, description="Human readable error message")
    title: str | None = Field(default=None, description="Short error title")
    cause: str | None = Field(default=None, description="Detailed cause, e.g. the query fragment")

    @model_validator(mode="before")
    @classmethod
    def unwrap_error_list(cls, data: Any) -> Any:
        """Accept ``[{...}]`` as well as ``{...}``."""
        if isinstance(data, list) and len(data) == 1:
            return data[0]
        return data

    @property
    def description(self) -> str | None:
        """Best available human readable text."""
        return self.message or self.title or self.cause


# A JSON null body carries no games
game_records_adapter: TypeAdapter[list[GameRecord] | None] = TypeAdapter(list[GameRecord] | None)
