"""Pydantic schemas for the ZenReader API."""

from zenreader.schemas.reader import (
    DeltaRequest,
    KeyPressRequest,
    KeyPressResponse,
    LoadTextRequest,
    PlaybackStateResponse,
    StreamEvent,
    WordSplitResponse,
)

__all__ = [
    "LoadTextRequest",
    "DeltaRequest",
    "KeyPressRequest",
    "KeyPressResponse",
    "PlaybackStateResponse",
    "WordSplitResponse",
    "StreamEvent",
]
