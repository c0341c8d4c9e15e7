"""FastAPI dependencies for the reader API."""

from typing import Annotated

from fastapi import Depends
from fastapi.requests import HTTPConnection

from zenreader.api.errors import APIError
from zenreader.config import Settings, get_settings
from zenreader.services.controls import KeyBindings
from zenreader.services.engine import PlaybackEngine


def get_engine(connection: HTTPConnection) -> PlaybackEngine:
    """Return the engine created by the application lifespan."""
    engine = getattr(connection.app.state, "engine", None)
    if engine is None:
        raise APIError.service_unavailable("Reader engine is not running")
    return engine


def get_key_bindings(settings: Annotated[Settings, Depends(get_settings)]) -> KeyBindings:
    return KeyBindings(seek_step=settings.seek_step, wpm_step=settings.wpm_step)


SettingsDep = Annotated[Settings, Depends(get_settings)]
EngineDep = Annotated[PlaybackEngine, Depends(get_engine)]
KeyBindingsDep = Annotated[KeyBindings, Depends(get_key_bindings)]
