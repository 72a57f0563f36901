"""Central error types used across the package."""

from __future__ import annotations

from enum import Enum


class OpenLRProcessingError(RuntimeError):
    """Base error for OpenLR processing failures."""


class InvalidMapDataError(OpenLRProcessingError):
    """Raised when a line or coordinate lookup cannot resolve a valid point."""


class DecoderErrorCode(Enum):
    """Classification attached to decoder processing failures."""

    INVALID_MAP_DATA = "invalid_map_data"


class DecoderProcessingError(OpenLRProcessingError):
    """Raised by the decoder with a classified error code."""

    def __init__(self, error: DecoderErrorCode, message: str | None = None) -> None:
        self.error = error
        super().__init__(message or error.value)


__all__ = [
    "DecoderErrorCode",
    "DecoderProcessingError",
    "InvalidMapDataError",
    "OpenLRProcessingError",
]
