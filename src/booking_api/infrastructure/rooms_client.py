"""RoomsApiClient wraps the /room/ endpoints of the booking API."""

from __future__ import annotations

from typing import Any, Optional

from booking_api.application.dtos import Room, RoomListDTO
from booking_api.infrastructure.http.http_client import (
    ApiResponse,
    HttpMethod,
    RequestOptions,
)
from booking_api.infrastructure.http.request_executor import (
    RequestExecutor,
    require_payload,
)
from booking_api.infrastructure.http.statuses import ApiStatus
from booking_api.testing.assertions import assert_status_code

ROOMS_BASE_PATH = "/room/"


class RoomsApiClient:
    """Client for the rooms resource.

    Every operation comes in two forms: ``*_raw`` returns the response
    envelope untouched, the plain form asserts the expected status code and
    returns the validated payload.
    """

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    @property
    def base_path(self) -> str:
        return self._executor.base_path

    def _room_path(self, room_id: int) -> str:
        return f"{self.base_path}{room_id}"

    async def list_rooms_raw(
        self,
        *,
        room_name: Optional[str] = None,
        type: Optional[str] = None,
        accessible: Optional[bool] = None,
    ) -> ApiResponse[Any]:
        return await self._executor.request(
            self.base_path,
            RequestOptions(
                method=HttpMethod.GET,
                params={
                    "roomName": room_name,
                    "type": type,
                    "accessible": accessible,
                },
            ),
        )

    async def list_rooms(
        self,
        *,
        room_name: Optional[str] = None,
        type: Optional[str] = None,
        accessible: Optional[bool] = None,
    ) -> list[Room]:
        """
        List rooms, optionally filtered.

        Args:
            room_name: Only rooms with this name
            type: Only rooms of this type (Single, Double, ...)
            accessible: Only rooms with (or without) accessibility

        Returns:
            The rooms from the ``rooms`` field of the payload
        """
        response = await self.list_rooms_raw(
            room_name=room_name, type=type, accessible=accessible
        )
        assert_status_code(response, ApiStatus.SUCCESSFUL_200)
        return RoomListDTO.model_validate(require_payload(response)).rooms

    async def get_room_raw(self, room_id: int) -> ApiResponse[Any]:
        return await self._executor.request(
            self._room_path(room_id), RequestOptions(method=HttpMethod.GET)
        )

    async def get_room(self, room_id: int) -> Room:
        """Fetch one room by id."""
        response = await self.get_room_raw(room_id)
        assert_status_code(response, ApiStatus.SUCCESSFUL_200)
        return Room.model_validate(require_payload(response))

    async def create_room_raw(self, room: Room) -> ApiResponse[Any]:
        return await self._executor.request(
            self.base_path, RequestOptions(method=HttpMethod.POST, body=room)
        )

    async def create_room(self, room: Room) -> Room:
        """
        Create a room.

        Returns:
            The room as stored by the server, including its ``roomid``
        """
        response = await self.create_room_raw(room)
        assert_status_code(response, ApiStatus.CREATED_201)
        return Room.model_validate(require_payload(response))

    async def update_room_raw(self, room_id: int, room: Room) -> ApiResponse[Any]:
        return await self._executor.request(
            self._room_path(room_id), RequestOptions(method=HttpMethod.PUT, body=room)
        )

    async def update_room(self, room_id: int, room: Room) -> Room:
        response = await self.update_room_raw(room_id, room)
        assert_status_code(response, ApiStatus.SUCCESSFUL_200)
        return Room.model_validate(require_payload(response))

    async def delete_room_raw(self, room_id: int) -> ApiResponse[Any]:
        return await self._executor.request(
            self._room_path(room_id), RequestOptions(method=HttpMethod.DELETE)
        )

    async def delete_room(self, room_id: int) -> None:
        """Delete a room. Deleting an unknown id fails with a 404 mismatch."""
        response = await self.delete_room_raw(room_id)
        assert_status_code(response, ApiStatus.ACCEPTED_202)
