"""Tests for the auto-play driver used by the viewer and the API session."""

import pytest

from pagesim.playback import SPEED_MS, Player, normalize_speed
from replacement import TimelineCursor, simulate


@pytest.fixture
def player(classic_refs):
    return Player(TimelineCursor(simulate(classic_refs, 3, "FIFO")), "NORMAL")


def test_speeds() -> None:
    assert SPEED_MS == {"SLOW": 1000, "NORMAL": 500, "FAST": 200}
    assert normalize_speed("fast") == "FAST"
    assert normalize_speed("warp") == "NORMAL"
    assert normalize_speed(None, "SLOW") == "SLOW"


def test_tick_waits_for_interval(player) -> None:
    player.play(0)
    assert player.tick(100) is False
    assert player.cursor.index == 0
    assert player.tick(500) is True
    assert player.cursor.index == 1
    assert player.tick(900) is False
    assert player.tick(1000) is True
    assert player.cursor.index == 2


def test_speed_change_applies_to_next_tick(player) -> None:
    player.play(0)
    player.set_speed("FAST")
    assert player.interval_ms == 200
    assert player.tick(200) is True


def test_paused_player_does_not_move(player) -> None:
    assert player.tick(10_000) is False
    player.play(0)
    player.pause()
    assert player.tick(10_000) is False
    assert player.cursor.index == 0


def test_stops_at_last_step(player) -> None:
    player.play(0)
    now = 0
    while player.playing:
        now += 500
        player.tick(now)
    assert player.cursor.at_end
    assert player.tick(now + 500) is False


def test_play_at_end_restarts(player) -> None:
    player.cursor.jump_to_end()
    player.play(0)
    assert player.playing
    assert player.cursor.index == 0


def test_toggle(player) -> None:
    player.toggle(0)
    assert player.playing
    player.toggle(0)
    assert not player.playing


def test_single_step_timeline_never_plays() -> None:
    player = Player(TimelineCursor(simulate(["a"], 1, "LRU")))
    player.play(0)
    assert not player.playing


def test_advance_ignores_clock(player) -> None:
    player.play(0)
    assert player.advance() is True
    assert player.cursor.index == 1
