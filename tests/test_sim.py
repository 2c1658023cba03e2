from lpgen.sim import DISPLAY_WIDTH, MODES1, MODES3, Simulator, main, render


def test_initial_modes():
    sim = Simulator()
    assert [track.mode.name for track in sim.tracks] == ["Slow", "2-Blink", "ON"]
    assert [track.name for track in sim.tracks] == ["LED1", "LED2", "BUZZ"]


def test_key_cycles_mode_and_wraps():
    sim = Simulator()
    assert sim.handle_key("1") is True
    assert sim.tracks[0].mode.name == "Fast"
    assert sim.tracks[0].unit.segments == MODES1[1].segments
    sim.handle_key("1")
    sim.handle_key("1")
    assert sim.tracks[0].mode.name == "Slow"


def test_next_mode_applies_pattern():
    sim = Simulator()
    mode = sim.tracks[2].next_mode()
    assert mode is MODES3[1]
    assert sim.tracks[2].unit.level == 0


def test_quit_keys_stop_running():
    for key in ("q", "Q"):
        sim = Simulator()
        assert sim.handle_key(key) is False
        assert sim.running is False


def test_other_keys_change_nothing():
    sim = Simulator()
    sim.handle_key("x")
    assert sim.running is True
    assert [track.mode_index for track in sim.tracks] == [0, 0, 0]


def test_tick_records_history():
    sim = Simulator()
    for _ in range(DISPLAY_WIDTH + 5):
        sim.tick()
    for track in sim.tracks:
        assert len(track.history) == DISPLAY_WIDTH
        assert track.history[-1] == track.unit.level
    assert list(sim.tracks[2].history) == [1] * DISPLAY_WIDTH


def test_render_shows_tick_and_names():
    sim = Simulator()
    frame = render(sim)
    assert frame.startswith("\033[H")
    assert "Tick: \033[1;32m00000000" in frame
    for name in ("LED1", "LED2", "BUZZ", "Slow", "2-Blink", "ON"):
        assert name in frame


def test_render_wave_matches_history():
    sim = Simulator()
    for _ in range(25):
        sim.tick()
    frame = render(sim)
    highs = sum(sum(track.history) for track in sim.tracks)
    assert frame.count("\033[41m \033[0m") == highs
    lows = sum(DISPLAY_WIDTH - sum(track.history) for track in sim.tracks)
    assert frame.count("\033[90m_\033[0m") == lows


def test_main_runs_fixed_ticks(capsys):
    assert main(["--ticks", "3", "--loop-time", "0"]) == 0
    out = capsys.readouterr().out
    assert "Simulation Finished." in out
    assert "Tick: \033[1;32m00000003" in out