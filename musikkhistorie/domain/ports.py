"""Ports (interfaces) for the hexagonal architecture."""

from abc import ABC, abstractmethod
from typing import Any


class AudioPort(ABC):
    """Out-of-core audio subsystem.

    Handles are opaque to the core. ``play`` is fire-and-forget: it returns
    nothing and completion is never reported back.
    """

    @abstractmethod
    def load(self, path: str) -> Any:
        ...

    @abstractmethod
    def play(self, handle: Any) -> None:
        ...

    @abstractmethod
    def stop(self, handle: Any) -> None:
        ...


class ConfigPort(ABC):
    @abstractmethod
    def load(self) -> dict:
        ...

    @abstractmethod
    def save(self, cfg: dict) -> None:
        ...
