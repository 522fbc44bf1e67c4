"""
Prediction mode selection shared across request handlers.

The registry is an explicit object handed to the engine. Every read and
write of the current mode goes through the same lock, so a reader sees
either the value before a concurrent write or the value after it.
"""

import threading
from typing import Union

import structlog

from ..logging.config import log_mode_change
from ..models.prediction import PredictionMode

logger = structlog.get_logger(__name__)


class ModeRegistry:
    """Holds the currently selected prediction mode and the mode catalog."""

    def __init__(self, initial_mode: Union[PredictionMode, str] = PredictionMode.SMA_CROSSOVER):
        self.logger = logger
        self._lock = threading.Lock()
        self._current_mode = PredictionMode(initial_mode)

    def get_current_mode(self) -> PredictionMode:
        """Return the mode new predictions will use."""
        with self._lock:
            return self._current_mode

    def set_mode(self, mode: Union[PredictionMode, str]) -> None:
        """
        Replace the current mode unconditionally.

        Args:
            mode: PredictionMode member or its identifier

        Raises:
            ValueError: If mode is not a known identifier
        """
        new_mode = PredictionMode(mode)

        with self._lock:
            previous = self._current_mode
            self._current_mode = new_mode

        log_mode_change(self.logger, from_mode=previous.value, to_mode=new_mode.value)

    @staticmethod
    def list_available_modes() -> list[tuple[PredictionMode, str]]:
        """All modes with their display names, in declaration order."""
        return [(mode, mode.display_name) for mode in PredictionMode]
