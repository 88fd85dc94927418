from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ThemeFile(BaseModel):
    """A theme document: an override tree plus the themes it builds on."""

    name: str
    description: str = ""
    extends: list[str] = Field(default_factory=list)
    tokens: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")
