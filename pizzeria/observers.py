"""Observers that are told about menu changes."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO


class Observer(ABC):
    """Receives notification messages."""

    @abstractmethod
    def update(self, message: str) -> None:
        """Handle a notification."""


class Website(Observer):
    """Announces menu changes on its output stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def update(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(
            f"Website has received {message} \n and will update their known menus",
            file=stream,
        )