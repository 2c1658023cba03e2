"""Terminal simulation showing scrolling waveforms of three outputs."""

from __future__ import annotations

import argparse
import contextlib
import os
import sys
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from lpgen.core import PatternGenerator, Segment, Unit

DISPLAY_WIDTH = 60


def _pattern(*pairs: tuple[int, int]) -> tuple[Segment, ...]:
    return tuple(Segment(duration, level) for duration, level in pairs)


@dataclass(frozen=True)
class Mode:
    """A named pattern."""

    name: str
    segments: tuple[Segment, ...]


MODES1 = (
    Mode("Slow", _pattern((10, 1), (10, 0))),
    Mode("Fast", _pattern((2, 1), (2, 0))),
    Mode("PWM25%", _pattern((1, 1), (3, 0))),
)

MODES2 = (
    Mode("2-Blink", _pattern((2, 1), (2, 0), (2, 1), (10, 0))),
    Mode("3-Blink", _pattern((2, 1), (2, 0), (2, 1), (2, 0), (2, 1), (10, 0))),
    Mode(
        "Breath",
        _pattern(
            (5, 1), (1, 0), (4, 1), (2, 0), (3, 1),
            (3, 0), (2, 1), (4, 0), (1, 1), (5, 0),
        ),
    ),
)

MODES3 = (
    Mode("ON", _pattern((100, 1))),
    Mode("OFF", _pattern((100, 0))),
    Mode(
        "SOS",
        _pattern(
            (2, 1), (2, 0), (2, 1), (2, 0), (2, 1), (2, 0),
            (6, 1), (2, 0), (6, 1), (2, 0), (6, 1), (2, 0),
            (2, 1), (2, 0), (2, 1), (2, 0), (2, 1), (2, 0),
            (20, 0),
        ),
    ),
)


def _blank_history() -> deque:
    return deque([0] * DISPLAY_WIDTH, maxlen=DISPLAY_WIDTH)


@dataclass
class Track:
    """A unit on screen: its name, selectable modes and level history."""

    name: str
    modes: tuple[Mode, ...]
    unit: Unit
    mode_index: int = 0
    history: deque = field(default_factory=_blank_history)

    @property
    def mode(self) -> Mode:
        return self.modes[self.mode_index]

    def record(self) -> None:
        """Append the unit's current level, dropping the oldest entry."""
        self.history.append(self.unit.level)

    def next_mode(self) -> Mode:
        """Cycle to the next mode and apply its pattern."""
        self.mode_index = (self.mode_index + 1) % len(self.modes)
        self.unit.set_pattern(self.mode.segments)
        return self.mode


class Simulator:
    """Three outputs driven by a generator, switched by key presses."""

    def __init__(self, loop_time: int = 100) -> None:
        self.generator = PatternGenerator(loop_time)
        self.running = True
        self.tracks: list[Track] = []
        for name, modes in (("LED1", MODES1), ("LED2", MODES2), ("BUZZ", MODES3)):
            index = self.generator.register(modes[0].segments)
            self.tracks.append(Track(name, modes, self.generator.units[index]))

    def handle_key(self, key: str) -> bool:
        """React to a key press; return whether the simulation keeps running."""
        if key in ("1", "2", "3"):
            self.tracks[int(key) - 1].next_mode()
        elif key in ("q", "Q"):
            self.running = False
        return self.running

    def tick(self) -> None:
        """Advance the generator one tick and record every track's level."""
        self.generator.loop()
        for track in self.tracks:
            track.record()


_BORDER = "\033[1;36m+-----------------------------------------------------------------------+\033[0m\n"
_BAR = "\033[1;36m|\033[0m"


def render(simulator: Simulator) -> str:
    """Build one screen frame as a string of ANSI-coloured text."""
    lines = [
        "\033[H",
        _BORDER,
        f"{_BAR} \033[1;33mLPG Sim\033[0m (Segment Based) Tick: "
        f"\033[1;32m{simulator.generator.total_ticks:08d}\033[0m"
        f"                          {_BAR}\n",
        _BORDER,
    ]
    for track in simulator.tracks:
        level = track.unit.level
        colour = 31 if level else 32
        state = "H" if level else "L"
        wave = "".join(
            "\033[41m \033[0m" if sample else "\033[90m_\033[0m" for sample in track.history
        )
        lines.append(
            f"{_BAR} \033[1;37m{track.name:<4}\033[0m [\033[1;{colour}m{state}\033[0m] "
            f"\033[35m{track.mode.name:<8}\033[0m {wave} {_BAR}\n"
        )
    lines.append(_BORDER)
    lines.append(
        f"{_BAR} Controls: [1][2][3] Change Pattern   [Q] Quit"
        f"                          {_BAR}\n"
    )
    lines.append(_BORDER)
    return "".join(lines)


@contextlib.contextmanager
def _key_reader() -> Iterator[Callable[[], str]]:
    """Yield a function returning a pending key press, or '' if none."""
    try:
        fd = sys.stdin.fileno()
        interactive = os.isatty(fd)
    except (OSError, ValueError, AttributeError):
        interactive = False

    if not interactive:
        yield lambda: ""
        return

    if os.name == "nt":
        import msvcrt

        yield lambda: msvcrt.getwch() if msvcrt.kbhit() else ""
        return

    import termios

    original = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ECHO | termios.ICANON)
    raw[6][termios.VMIN] = 0
    raw[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSAFLUSH, raw)

    def read_key() -> str:
        data = os.read(fd, 1)
        return data.decode(errors="ignore") if data else ""

    try:
        yield read_key
    finally:
        termios.tcsetattr(fd, termios.TCSAFLUSH, original)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive waveform simulation."""
    parser = argparse.ArgumentParser(prog="lpgen", description="Level pattern generator simulation")
    parser.add_argument("--loop-time", type=int, default=100, help="tick period in milliseconds")
    parser.add_argument("--ticks", type=int, default=None, help="stop after this many ticks")
    args = parser.parse_args(argv)

    simulator = Simulator(args.loop_time)
    out = sys.stdout
    out.write("\033[2J\033[?25l")
    try:
        with _key_reader() as read_key:
            while simulator.running:
                key = read_key()
                if key:
                    simulator.handle_key(key)
                simulator.tick()
                out.write(render(simulator))
                out.flush()
                if args.ticks is not None and simulator.generator.total_ticks >= args.ticks:
                    break
                time.sleep(simulator.generator.loop_time / 1000)
    except KeyboardInterrupt:
        pass
    out.write("\033[?25h\033[0m\n")
    out.write("Simulation Finished.\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())