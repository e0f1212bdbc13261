# controls.py
from __future__ import annotations

import logging
from typing import List, Optional

import pygame # type: ignore
import pygame.midi # type: ignore

logger = logging.getLogger(__name__)

KEY_TO_DIRECTION = {
    pygame.K_LEFT: "left",
    pygame.K_UP: "up",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "down",
}

START_KEYS = (pygame.K_SPACE, pygame.K_RETURN)
RESTART_KEYS = (pygame.K_r,)

# Pad buttons of an Akai MPD18, keyed by "<status byte><note>".
MPD18_BUTTONS = {
    "13756": "left",
    "13761": "up",
    "13758": "right",
    "13753": "down",
}


def direction_for_key(key: int) -> Optional[str]:
    return KEY_TO_DIRECTION.get(key)


def direction_for_midi(data: List[int]) -> Optional[str]:
    """Map a raw MIDI message (status, data1, ...) to a direction name."""
    if len(data) < 2:
        return None
    return MPD18_BUTTONS.get(f"{data[0]}{data[1]}")


class MidiPad:
    """
    Polls a MIDI controller for pad presses.
    If the device can't be opened the pad stays disabled and poll()
    returns nothing.
    """

    def __init__(self, device_name: str = "Akai MPD18"):
        self.device_name = device_name
        self.input = None

    @property
    def enabled(self) -> bool:
        return self.input is not None

    def open(self) -> bool:
        try:
            pygame.midi.init()
            device_id = self._find_device()
            if device_id is None:
                logger.warning("MIDI device %r not found", self.device_name)
                return False
            self.input = pygame.midi.Input(device_id)
        except pygame.midi.MidiException as e:
            logger.warning("Could not enable MIDI: %s", e)
            return False

        logger.info("Listening to MIDI device %r", self.device_name)
        return True

    def _find_device(self) -> Optional[int]:
        for device_id in range(pygame.midi.get_count()):
            _interf, name, is_input, _is_output, _opened = pygame.midi.get_device_info(device_id)
            if is_input and name.decode(errors="replace") == self.device_name:
                return device_id
        return None

    def poll(self) -> List[str]:
        """Direction names pressed since the last poll, oldest first."""
        if self.input is None or not self.input.poll():
            return []
        pressed = []
        for data, _timestamp in self.input.read(16):
            name = direction_for_midi(data)
            if name is not None:
                logger.debug("Pressed %s", name)
                pressed.append(name)
        return pressed

    def close(self) -> None:
        if self.input is not None:
            self.input.close()
            self.input = None
        pygame.midi.quit()
