"""Reader routes: text input, transport controls and the state stream."""

import asyncio
import logging
from datetime import datetime
from typing import Any, Callable, Optional

from fastapi import APIRouter, File, Query, UploadFile, WebSocket, WebSocketDisconnect

from zenreader.api.dependencies import EngineDep, KeyBindingsDep, SettingsDep
from zenreader.api.errors import APIError
from zenreader.schemas import (
    DeltaRequest,
    KeyPressRequest,
    KeyPressResponse,
    LoadTextRequest,
    PlaybackStateResponse,
    StreamEvent,
    WordSplitResponse,
)
from zenreader.services.controls import KeyBindings, TransportCommand, apply_command
from zenreader.services.engine import PlaybackEngine, PlaybackState
from zenreader.services.text_source import UnsupportedFileError, read_text_upload
from zenreader.services.tokenizer import split_word

logger = logging.getLogger(__name__)

router = APIRouter()


def _state(engine: PlaybackEngine) -> PlaybackStateResponse:
    return PlaybackStateResponse.from_engine(engine)


# =============================================================================
# State
# =============================================================================


@router.get("/state", response_model=PlaybackStateResponse)
async def get_state(engine: EngineDep):
    """Return the current playback state and ORP display split."""
    return _state(engine)


@router.get("/split", response_model=WordSplitResponse)
async def get_split(word: str = Query(..., max_length=500)):
    """Split any word around its ORP character."""
    return WordSplitResponse.from_split(split_word(word))


# =============================================================================
# Text Input
# =============================================================================


@router.post("/text", response_model=PlaybackStateResponse)
async def load_text(request: LoadTextRequest, engine: EngineDep):
    """Load pasted text and rewind to the first word."""
    if not request.text.strip():
        raise APIError.bad_request("Text is empty")

    engine.load(request.text)
    return _state(engine)


@router.post("/upload", response_model=PlaybackStateResponse)
async def upload_text(
    engine: EngineDep,
    settings: SettingsDep,
    file: UploadFile = File(...),
):
    """Load a plain text file, decoding legacy encodings when needed."""
    data = await file.read()
    if len(data) > settings.max_upload_bytes:
        raise APIError.payload_too_large(
            f"File exceeds maximum size of {settings.max_upload_bytes} bytes"
        )

    try:
        text = read_text_upload(data, file.filename, file.content_type)
    except UnsupportedFileError as e:
        raise APIError.bad_request(str(e)) from e

    if not text.strip():
        raise APIError.bad_request("File contains no text")

    logger.info("Loading upload %r (%d bytes)", file.filename, len(data))
    engine.load(text)
    return _state(engine)


# =============================================================================
# Transport Controls
# =============================================================================


@router.post("/toggle", response_model=PlaybackStateResponse)
async def toggle_play(engine: EngineDep):
    engine.toggle_play()
    return _state(engine)


@router.post("/restart", response_model=PlaybackStateResponse)
async def restart(engine: EngineDep):
    engine.restart()
    return _state(engine)


@router.post("/seek", response_model=PlaybackStateResponse)
async def seek(request: DeltaRequest, engine: EngineDep):
    """Move forward or back by ``delta`` words (clamped)."""
    engine.seek(request.delta)
    return _state(engine)


@router.post("/speed", response_model=PlaybackStateResponse)
async def change_speed(request: DeltaRequest, engine: EngineDep):
    """Change speed by ``delta`` WPM (clamped)."""
    engine.change_speed(request.delta)
    return _state(engine)


@router.post("/keys", response_model=KeyPressResponse)
async def press_key(request: KeyPressRequest, engine: EngineDep, bindings: KeyBindingsDep):
    """Apply a keyboard shortcut; unbound keys are reported, not rejected."""
    handled = bindings.dispatch(engine, request.code)
    return KeyPressResponse(handled=handled, state=_state(engine))


# =============================================================================
# WebSocket Streaming
# =============================================================================


def _event(event_type: str, data: Optional[dict] = None) -> dict:
    event = StreamEvent(event_type=event_type, data=data or {}, timestamp=datetime.now())
    return event.model_dump(mode="json")


def _handle_stream_command(
    message: Any,
    engine: PlaybackEngine,
    bindings: KeyBindings,
) -> Optional[dict]:
    """
    Apply one stream command.

    Returns:
        A reply event, or None when the resulting state change (if any)
        is reported through the state listener.
    """
    if not isinstance(message, dict):
        return _event("error", {"message": "Message must be a JSON object"})

    command = message.get("command")

    if command == "ping":
        return _event("pong")

    if command == "key":
        code = message.get("code")
        if not isinstance(code, str) or not bindings.dispatch(engine, code):
            return _event("error", {"message": f"Unbound key: {code!r}"})
        return None

    try:
        transport = TransportCommand(command)
    except ValueError:
        return _event("error", {"message": f"Unknown command: {command!r}"})

    delta = message.get("delta", 0)
    if isinstance(delta, bool) or not isinstance(delta, int):
        return _event("error", {"message": "delta must be an integer"})

    apply_command(engine, transport, delta)
    return None


async def _pump(websocket: WebSocket, outbox: "asyncio.Queue[dict]") -> None:
    while True:
        payload = await outbox.get()
        await websocket.send_json(payload)


def _start_sender(
    websocket: WebSocket,
    outbox: "asyncio.Queue[dict]",
    engine: PlaybackEngine,
    listener: Callable[[PlaybackState], None],
) -> "asyncio.Task[None]":
    """
    Run the outbox pump as a task.

    If sending fails the listener is detached at once so the outbox stops
    growing while the receive loop waits to notice the disconnect.
    """

    def on_done(task: "asyncio.Task[None]") -> None:
        if task.cancelled():
            return
        engine.remove_listener(listener)
        error = task.exception()
        if error is not None:
            logger.warning("Reader stream send failed: %s", error)

    sender = asyncio.create_task(_pump(websocket, outbox))
    sender.add_done_callback(on_done)
    return sender


@router.websocket("/stream")
async def reader_stream(
    websocket: WebSocket,
    engine: EngineDep,
    bindings: KeyBindingsDep,
):
    """
    WebSocket endpoint for live playback state.

    Sends a ``state`` event on connect and after every engine change
    (including timed advances), and accepts transport commands:
    ``toggle``, ``restart``, ``seek`` and ``speed`` (with ``delta``),
    ``key`` (with ``code``) and ``ping``.
    """
    await websocket.accept()

    outbox: "asyncio.Queue[dict]" = asyncio.Queue()

    def on_change(_state_snapshot: PlaybackState) -> None:
        outbox.put_nowait(_event("state", _state(engine).model_dump(mode="json")))

    outbox.put_nowait(_event("state", _state(engine).model_dump(mode="json")))
    engine.add_listener(on_change)
    sender = _start_sender(websocket, outbox, engine, on_change)

    try:
        while True:
            try:
                message = await websocket.receive_json()
            except ValueError:
                outbox.put_nowait(_event("error", {"message": "Invalid JSON"}))
                continue

            reply = _handle_stream_command(message, engine, bindings)
            if reply is not None:
                outbox.put_nowait(reply)
    except WebSocketDisconnect:
        logger.debug("Reader stream client disconnected")
    finally:
        engine.remove_listener(on_change)
        sender.cancel()
        # Collects the pump's result whether it was cancelled or failed
        await asyncio.gather(sender, return_exceptions=True)
