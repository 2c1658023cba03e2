"""Segment-based level pattern generator.

A pattern is a cyclic sequence of segments, each holding a level for a
number of ticks. A :class:`PatternGenerator` drives up to four units and
fires edge callbacks when a unit's level rises or falls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

MAX_UNITS = 4

EdgeCallback = Callable[["Unit"], None]
SegmentLike = Union["Segment", tuple]


@dataclass(frozen=True)
class Segment:
    """A level held for ``duration`` ticks."""

    duration: int
    level: int

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"segment duration must not be negative: {self.duration}")
        if self.level not in (0, 1):
            raise ValueError(f"segment level must be 0 or 1: {self.level}")


def _as_segments(segments: Iterable[SegmentLike]) -> tuple[Segment, ...]:
    result = tuple(seg if isinstance(seg, Segment) else Segment(*seg) for seg in segments)
    if not result:
        raise ValueError("a pattern needs at least one segment")
    return result


class Unit:
    """One output following a cyclic pattern of segments."""

    def __init__(
        self,
        segments: Iterable[SegmentLike],
        up: Optional[EdgeCallback] = None,
        down: Optional[EdgeCallback] = None,
    ) -> None:
        self.up = up
        self.down = down
        self.set_pattern(segments)

    def set_pattern(self, segments: Iterable[SegmentLike]) -> None:
        """Switch to a new pattern, restarting at its first segment."""
        self.segments = _as_segments(segments)
        self.seg_index = 0
        self.tick_count = 0
        self.level = self.segments[0].level
        self.level_pre = self.level

    def step(self) -> None:
        """Advance by one tick and fire an edge callback if the level changed."""
        self.level_pre = self.level
        if self.tick_count >= self.segments[self.seg_index].duration:
            self.tick_count = 0
            self.seg_index = (self.seg_index + 1) % len(self.segments)
            self.level = self.segments[self.seg_index].level

        if self.level_pre == 0 and self.level == 1 and self.up:
            self.up(self)
        elif self.level_pre == 1 and self.level == 0 and self.down:
            self.down(self)

        self.tick_count += 1

    def __repr__(self) -> str:
        return (
            f"Unit(level={self.level}, seg_index={self.seg_index}, "
            f"tick_count={self.tick_count}, segments={len(self.segments)})"
        )


class PatternGenerator:
    """Drives up to ``MAX_UNITS`` units, one tick per :meth:`loop` call."""

    def __init__(self, loop_time: int = 100) -> None:
        self.loop_time = loop_time
        self.units: list[Unit] = []
        self.total_ticks = 0

    def register(
        self,
        segments: Iterable[SegmentLike],
        up: Optional[EdgeCallback] = None,
        down: Optional[EdgeCallback] = None,
    ) -> int:
        """Add a unit and return its index."""
        if len(self.units) >= MAX_UNITS:
            raise RuntimeError(f"cannot register more than {MAX_UNITS} units")
        self.units.append(Unit(segments, up, down))
        return len(self.units) - 1

    def set_pattern(self, index: int, segments: Iterable[SegmentLike]) -> None:
        """Give the unit at ``index`` a new pattern."""
        if not 0 <= index < len(self.units):
            raise IndexError(f"no unit registered at index {index}")
        self.units[index].set_pattern(segments)

    def loop(self) -> None:
        """Advance every unit by one tick."""
        for unit in self.units:
            unit.step()
        self.total_ticks += 1