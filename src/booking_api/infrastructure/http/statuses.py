from __future__ import annotations

from enum import IntEnum


class ApiStatus(IntEnum):
    """HTTP status codes the booking API answers with."""

    SUCCESSFUL_200 = 200
    CREATED_201 = 201
    ACCEPTED_202 = 202
    NO_CONTENT_204 = 204
    UNAUTHORIZED_401 = 401
    ACCESS_DENIED_403 = 403
    NOT_FOUND_404 = 404
    UNPROCESSABLE_ENTITY_422 = 422
    # Returned by GET /room/{id} once the room has been deleted
    INTERNAL_SERVER_ERROR_500 = 500
