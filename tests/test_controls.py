"""Tests for transport commands and keyboard shortcuts."""

import pytest

from zenreader.services.controls import KeyBindings, TransportCommand, apply_command


@pytest.fixture
def bindings():
    return KeyBindings()


@pytest.fixture
def loaded(reader_engine):
    reader_engine.load(" ".join(f"w{i}" for i in range(100)))
    return reader_engine


class TestApplyCommand:
    def test_toggle(self, loaded):
        apply_command(loaded, TransportCommand.TOGGLE)
        assert loaded.is_playing

    def test_seek_and_speed(self, loaded):
        apply_command(loaded, TransportCommand.SEEK, 50)
        apply_command(loaded, TransportCommand.SPEED, -25)
        assert loaded.current_index == 50
        assert loaded.speed == 325

    def test_restart(self, loaded):
        loaded.seek(10)
        apply_command(loaded, TransportCommand.RESTART)
        assert loaded.current_index == 0

    def test_accepts_string_value(self, loaded):
        apply_command(loaded, "seek", 3)
        assert loaded.current_index == 3

    def test_unknown_command(self, loaded):
        with pytest.raises(ValueError):
            apply_command(loaded, "rewind", 1)


class TestKeyBindings:
    def test_space_toggles(self, bindings, loaded):
        assert bindings.dispatch(loaded, "Space")
        assert loaded.is_playing
        assert bindings.dispatch(loaded, "Space")
        assert not loaded.is_playing

    def test_arrows(self, bindings, loaded):
        bindings.dispatch(loaded, "ArrowRight")
        bindings.dispatch(loaded, "ArrowRight")
        bindings.dispatch(loaded, "ArrowLeft")
        bindings.dispatch(loaded, "ArrowUp")
        bindings.dispatch(loaded, "ArrowUp")
        bindings.dispatch(loaded, "ArrowDown")
        assert loaded.current_index == 10
        assert loaded.speed == 375

    def test_unbound_key_ignored(self, bindings, loaded):
        before = loaded.state()
        assert bindings.dispatch(loaded, "KeyQ") is False
        assert loaded.state() == before

    def test_custom_steps(self, loaded):
        bindings = KeyBindings(seek_step=5, wpm_step=50)
        bindings.dispatch(loaded, "ArrowRight")
        bindings.dispatch(loaded, "ArrowDown")
        assert loaded.current_index == 5
        assert loaded.speed == 300

    def test_resolve(self, bindings):
        assert bindings.resolve("ArrowLeft") == (TransportCommand.SEEK, -10)
        assert bindings.resolve("Enter") is None
