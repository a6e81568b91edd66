"""Frame-based sprite animations and the component that plays them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .component import Component
from .vec2 import Vec2


@dataclass(frozen=True)
class AnimFrame:
    """One frame: where it sits in the texture, how long it shows, how it is shifted."""

    left_top: Vec2
    slice: Vec2
    duration: float
    offset: Vec2 = Vec2()


class Animation:
    """A named sequence of frames cut from one texture."""

    def __init__(self, name: str, animator: Animator) -> None:
        self.name = name
        self.animator = animator
        self.current_frame = 0
        self.acc_time = 0.0
        self.texture: Any = None
        self.is_rotate = False
        self._frames: list[AnimFrame] = []

    @property
    def frames(self) -> tuple[AnimFrame, ...]:
        return tuple(self._frames)

    @property
    def frame(self) -> AnimFrame:
        """The frame currently shown."""
        return self._frames[self.current_frame]

    def create(
        self,
        texture: Any,
        left_top: Vec2,
        slice_size: Vec2,
        step: Vec2,
        frame_count: int,
        duration: float,
        is_rotate: bool = False,
    ) -> None:
        """Append ``frame_count`` frames, each ``step`` further along the texture."""
        self.texture = texture
        self.is_rotate = is_rotate
        self._frames.extend(
            AnimFrame(left_top + step * i, slice_size, duration)
            for i in range(frame_count)
        )

    def update(self, dt: float) -> None:
        """Advance by ``dt`` seconds, honouring the animator's repeat settings."""
        if not self._frames:
            return
        if self.animator.repeat_count <= 0:
            self.current_frame = len(self._frames) - 1
            return
        self.acc_time += dt
        shown = self._frames[self.current_frame]
        if self.acc_time >= shown.duration:
            self.acc_time -= shown.duration
            self.current_frame += 1
            if self.current_frame >= len(self._frames):
                if not self.animator.is_repeat:
                    self.animator.repeat_count -= 1
                self.current_frame = 0
                self.acc_time = 0.0

    def set_frame_offset(self, index: int, offset: Vec2) -> None:
        self._frames[index] = replace(self._frames[index], offset=offset)

    def max_frame(self) -> int:
        return len(self._frames)


class Animator(Component):
    """Holds named animations and plays one at a time."""

    def __init__(self) -> None:
        super().__init__()
        self._animations: dict[str, Animation] = {}
        self.current: Animation | None = None
        self.is_repeat = False
        self.repeat_count = 1

    def late_update(self, dt: float) -> None:
        if self.current is not None:
            self.current.update(dt)

    def create_animation(
        self,
        name: str,
        texture: Any,
        left_top: Vec2,
        slice_size: Vec2,
        step: Vec2,
        frame_count: int,
        duration: float,
        is_rotate: bool = False,
    ) -> Animation:
        """Create an animation; an existing one of the same name is kept and returned."""
        existing = self.find_animation(name)
        if existing is not None:
            return existing
        animation = Animation(name, self)
        animation.create(
            texture, left_top, slice_size, step, frame_count, duration, is_rotate
        )
        self._animations[name] = animation
        return animation

    def find_animation(self, name: str) -> Animation | None:
        return self._animations.get(name)

    def play_animation(self, name: str, is_repeat: bool, repeat_count: int = 1) -> None:
        """Start the named animation from its first frame."""
        animation = self.find_animation(name)
        if animation is None:
            raise KeyError(f"no animation named {name!r}")
        self.current = animation
        animation.current_frame = 0
        self.is_repeat = is_repeat
        self.repeat_count = repeat_count

    def stop_animation(self) -> None:
        self.current = None