"""Test fixtures for in-memory implementations."""

from .fake_booking_api import FakeBookingApi

__all__ = [
    "FakeBookingApi",
]
