"""Base class for behaviour attached to a game object."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .gameobject import GameObject


class Component(ABC):
    """Per-frame behaviour owned by a single game object."""

    def __init__(self) -> None:
        self.owner: GameObject | None = None

    @abstractmethod
    def late_update(self, dt: float) -> None:
        """Run after every object in the scene has been updated."""