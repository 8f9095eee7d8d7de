"""Data Transfer Objects for the booking API."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class AuthDTO(BaseModel):
    """DTO for login credentials."""

    username: str
    password: str


class TokenDTO(BaseModel):
    """DTO carrying a session token to the validate and logout endpoints."""

    token: str


class Room(BaseModel):
    """A bookable room.

    Field names are snake_case in Python and camelCase on the wire.
    ``roomid`` is assigned by the server.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "roomName": "Suite 101",
                "type": "Double",
                "accessible": True,
                "roomPrice": 100,
            }
        },
    )

    room_name: str = Field(..., alias="roomName")
    type: str
    accessible: bool
    room_price: Union[int, float] = Field(..., alias="roomPrice")
    description: Optional[str] = None
    roomid: Optional[int] = None


class RoomListDTO(BaseModel):
    """DTO for the room listing payload."""

    rooms: list[Room]
