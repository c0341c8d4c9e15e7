"""Transport commands and keyboard shortcuts for the reader."""

import logging
from enum import Enum
from typing import Dict, Optional, Tuple

from zenreader.services.engine import PlaybackEngine
from zenreader.services.tokenizer import SEEK_STEP, WPM_STEP

logger = logging.getLogger(__name__)


class TransportCommand(str, Enum):
    """Commands the presentation layer can issue."""

    TOGGLE = "toggle"
    RESTART = "restart"
    SEEK = "seek"
    SPEED = "speed"


def apply_command(
    engine: PlaybackEngine,
    command: TransportCommand,
    delta: int = 0,
) -> None:
    """
    Run one transport command against the engine.

    Raises:
        ValueError: If ``command`` is not a known transport command.
    """
    command = TransportCommand(command)

    if command is TransportCommand.TOGGLE:
        engine.toggle_play()
    elif command is TransportCommand.RESTART:
        engine.restart()
    elif command is TransportCommand.SEEK:
        engine.seek(delta)
    else:
        engine.change_speed(delta)


class KeyBindings:
    """
    Map keyboard codes (as reported by ``KeyboardEvent.code``) to commands.

    Space toggles playback, left/right arrows seek by ``seek_step`` words
    and up/down arrows change speed by ``wpm_step``.
    """

    def __init__(self, seek_step: int = SEEK_STEP, wpm_step: int = WPM_STEP) -> None:
        self.bindings: Dict[str, Tuple[TransportCommand, int]] = {
            "Space": (TransportCommand.TOGGLE, 0),
            "ArrowLeft": (TransportCommand.SEEK, -seek_step),
            "ArrowRight": (TransportCommand.SEEK, seek_step),
            "ArrowUp": (TransportCommand.SPEED, wpm_step),
            "ArrowDown": (TransportCommand.SPEED, -wpm_step),
        }

    def resolve(self, code: str) -> Optional[Tuple[TransportCommand, int]]:
        return self.bindings.get(code)

    def dispatch(self, engine: PlaybackEngine, code: str) -> bool:
        """
        Apply the command bound to ``code``.

        Returns:
            True if the key is bound, False if it was ignored.
        """
        binding = self.resolve(code)
        if binding is None:
            logger.debug("Ignoring unbound key %r", code)
            return False

        command, delta = binding
        apply_command(engine, command, delta)
        return True
