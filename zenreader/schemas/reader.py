"""Pydantic schemas for reader API endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from zenreader.services.engine import PlaybackEngine
from zenreader.services.tokenizer import WordSplit, format_duration


class WordSplitResponse(BaseModel):
    left: str
    pivot: str
    right: str

    @classmethod
    def from_split(cls, split: WordSplit) -> "WordSplitResponse":
        return cls(left=split.left, pivot=split.pivot, right=split.right)


class PlaybackStateResponse(BaseModel):
    """Everything the reader view needs to render one frame."""

    current_index: int
    total_words: int
    current_token: str
    display: WordSplitResponse
    is_playing: bool
    is_finished: bool
    speed: int
    min_wpm: int
    max_wpm: int
    progress: float = Field(..., ge=0.0, le=100.0)
    current_delay_ms: float
    remaining_ms: float
    remaining_time: str

    @classmethod
    def from_engine(cls, engine: PlaybackEngine) -> "PlaybackStateResponse":
        remaining_ms = engine.remaining_ms
        return cls(
            current_index=engine.current_index,
            total_words=engine.total_words,
            current_token=engine.current_token,
            display=WordSplitResponse.from_split(engine.current_split),
            is_playing=engine.is_playing,
            is_finished=engine.is_finished,
            speed=engine.speed,
            min_wpm=engine.min_wpm,
            max_wpm=engine.max_wpm,
            progress=engine.progress,
            current_delay_ms=engine.current_delay_ms,
            remaining_ms=remaining_ms,
            remaining_time=format_duration(remaining_ms),
        )


class LoadTextRequest(BaseModel):
    text: str


class DeltaRequest(BaseModel):
    delta: int


class KeyPressRequest(BaseModel):
    code: str = Field(..., min_length=1, max_length=32)


class KeyPressResponse(BaseModel):
    handled: bool
    state: PlaybackStateResponse


class StreamEvent(BaseModel):
    """WebSocket stream event."""

    event_type: str
    data: dict = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=datetime.now)
