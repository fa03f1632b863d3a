"""Mouse state and exclusive grab tracking."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Optional

from .common import Vec2


class MouseState(Enum):
    """What the mouse did most recently."""

    RELEASED = auto()
    PRESS_LEFT = auto()
    PRESS_RIGHT = auto()
    PRESS_MIDDLE = auto()
    MOVING = auto()


class Mouse:
    """Pointer position and state, plus a single exclusive grab with optional payload."""

    def __init__(self) -> None:
        self.position = Vec2(0, 0)
        self.state = MouseState.RELEASED
        self._grab_id: Optional[int] = None
        self._payload: Any = None

    def grab(self, grab_id: int, payload: Any = None) -> bool:
        """Take the grab for ``grab_id``; return False if something else holds it."""
        if self._grab_id is not None:
            return False
        self._grab_id = grab_id
        self._payload = payload
        return True

    def release(self, grab_id: Optional[int] = None) -> bool:
        """Release the grab held by ``grab_id`` (any grab when None); return whether released."""
        if grab_id is not None and self._grab_id != grab_id:
            return False
        self._grab_id = None
        self._payload = None
        return True

    def is_grabbing(self, grab_id: Optional[int] = None) -> bool:
        """Return whether ``grab_id`` holds the grab, or whether anything does when None."""
        if grab_id is None:
            return self._grab_id is not None
        return self._grab_id == grab_id

    def grab_id(self) -> Optional[int]:
        """The id holding the grab, or None."""
        return self._grab_id

    def payload(self, expected_type: Optional[type] = None) -> Any:
        """Return the grab payload, or None if absent or not of ``expected_type``."""
        if expected_type is not None and not isinstance(self._payload, expected_type):
            return None
        return self._payload