# Area: Match Setup
"""Pydantic models for match metadata records."""

from __future__ import annotations

from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .types import MatchDataDict, PlayerRecordDict

SetupDataT = TypeVar("SetupDataT")

# Declared fields dropped from the wire form while unset
_OPTIONAL_PLAYER_KEYS = ("name", "credentials", "data", "isConnected")
_OPTIONAL_MATCH_KEYS = ("password", "nextMatchID")


class PlayerRecord(BaseModel):
    """One seat of a match. ``name is None`` means the seat is open."""

    id: int = Field(..., ge=0)
    name: Optional[str] = None
    credentials: Optional[str] = None
    data: Any = None
    is_connected: Optional[bool] = Field(default=None, alias="isConnected")

    # Keys written by other layers (join flow, storage) are kept as-is
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @property
    def is_open(self) -> bool:
        return self.name is None

    def to_dict(self) -> PlayerRecordDict:
        data = self.model_dump(by_alias=True)
        for key in _OPTIONAL_PLAYER_KEYS:
            if data.get(key) is None:
                data.pop(key, None)
        return data


class MatchData(BaseModel, Generic[SetupDataT]):
    """
    Persistent metadata of one match.

    ``setup_data`` is optional in a stronger sense than ``Optional``: a
    record built without it reports ``has_setup_data == False`` and its
    wire form carries no ``setupData`` key, while a record built with
    ``setup_data=None`` keeps the key with a null value.
    """

    game_name: str = Field(..., alias="gameName")
    unlisted: bool = False
    password: Optional[str] = None
    players: Dict[str, PlayerRecord] = Field(default_factory=dict)
    created_at: int = Field(..., alias="createdAt")
    updated_at: int = Field(..., alias="updatedAt")
    setup_data: Optional[SetupDataT] = Field(default=None, alias="setupData")
    next_match_id: Optional[str] = Field(default=None, alias="nextMatchID")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @property
    def has_setup_data(self) -> bool:
        return "setup_data" in self.model_fields_set

    def to_dict(self) -> MatchDataDict:
        """Render the camelCase wire form, leaving out absent fields."""
        data = self.model_dump(by_alias=True, exclude={"setup_data"})
        for key in _OPTIONAL_MATCH_KEYS:
            if data.get(key) is None:
                data.pop(key, None)
        data["players"] = {key: record.to_dict() for key, record in self.players.items()}
        if self.has_setup_data:
            data["setupData"] = self.model_dump(include={"setup_data"})["setup_data"]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchData[Any]":
        """Load a record previously produced by ``to_dict()``."""
        return cls.model_validate(data)
