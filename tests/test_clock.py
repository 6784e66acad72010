import pytest

from blockworld.clock import Clock


def fake_timer(*values):
    return iter(values).__next__


def test_restart_returns_seconds():
    clock = Clock(fake_timer(0, 1_500_000_000))
    assert clock.restart() == 1.5


def test_restart_truncates_to_milliseconds():
    clock = Clock(fake_timer(0, 1_234_567_890))
    assert clock.restart() == pytest.approx(1.234)


def test_restart_resets_origin():
    clock = Clock(fake_timer(0, 2_000_000_000, 2_000_000_000))
    assert clock.restart() == 2.0
    assert clock.elapsed() == 0.0


def test_elapsed_does_not_reset():
    clock = Clock(fake_timer(0, 1_000_000, 3_000_000, 3_000_000))
    first = clock.elapsed()
    second = clock.elapsed()
    assert second > first
    assert clock.restart() == pytest.approx(second)


def test_real_clock_is_non_negative():
    clock = Clock()
    assert clock.elapsed() >= 0.0
    assert clock.restart() >= 0.0