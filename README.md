# lpgen

A small level pattern generator for on/off outputs such as LEDs and buzzers.
A pattern is a cyclic list of segments. Each segment holds a level (0 or 1)
for a number of ticks. A generator drives up to four units and moves each one
on by one tick every time its loop runs. When a unit's level rises or falls,
the matching callback is called with that unit.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from lpgen.core import PatternGenerator, Segment

blink = [Segment(10, 1), Segment(10, 0)]

def on_rise(unit):
    print("on")

def on_fall(unit):
    print("off")

gen = PatternGenerator(loop_time=100)   # loop_time is the tick period in ms
index = gen.register(blink, on_rise, on_fall)

# call this once per tick, for example every 100 ms
gen.loop()
print(gen.total_ticks)                   # 1

# change to a new pattern; counting starts again from its first segment
gen.set_pattern(index, [(2, 1), (2, 0)])
```

Notes:

- Segments may be given as `Segment` objects or as `(duration, level)` tuples.
- `Segment` raises `ValueError` for a negative duration or a level other than
  0 or 1. An empty pattern also raises `ValueError`.
- `PatternGenerator.register` returns the new unit's index and raises
  `RuntimeError` once four units are registered (`lpgen.core.MAX_UNITS`).
- `PatternGenerator.set_pattern` raises `IndexError` for an index with no unit.
- The units are available as `PatternGenerator.units`.

You can also drive a single `Unit` yourself: build it with
`Unit(segments, up=None, down=None)`, advance it with `Unit.step()` and change
its pattern with `Unit.set_pattern(segments)`. Its `level`, `level_pre`,
`seg_index` and `tick_count` attributes show where it is in the pattern.

## Terminal simulator

```
lpgen-sim
```

This opens a live view with three outputs: LED1, LED2 and BUZZ. Each one
shows its current level, its pattern name and a scrolling waveform of the
last 60 ticks.

- LED1 has three patterns: Slow, Fast and PWM25%.
- LED2 has three patterns: 2-Blink, 3-Blink and Breath.
- BUZZ has three patterns: ON, OFF and SOS.

| Key   | Action                        |
|-------|-------------------------------|
| 1     | next pattern for LED1         |
| 2     | next pattern for LED2         |
| 3     | next pattern for BUZZ         |
| q / Q | quit                          |

Ctrl-C also ends the simulation. Keys are only read when standard input is a
terminal.

Options:

- `--loop-time MS` sets the tick period in milliseconds (default 100).
- `--ticks N` stops after N ticks.

The simulator is built from `Simulator`, `Track` and `Mode` in `lpgen.sim`.
`Simulator.handle_key(key)` applies a key press and `Simulator.tick()`
advances one tick. `render(simulator)` returns one screen frame as
ANSI-coloured text, so it can be used outside the interactive loop too.

## What it does not do

lpgen only computes levels and calls your callbacks. It does not switch any
real pin, LED or buzzer, and it does not keep time by itself: you call
`loop()` at your tick rate.