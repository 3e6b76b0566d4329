import time

from voxelkit.timeutil import ScopeLogTimer, Timer, from_value, time_value


def test_timer_measures_elapsed_microseconds():
    timer = Timer()
    time.sleep(0.01)
    elapsed = timer.stop()
    assert elapsed >= 10_000
    assert timer.stop() >= elapsed


def test_scope_log_timer_prints_on_exit(capsys):
    with ScopeLogTimer(7) as scope:
        assert scope.scope_id == 7
    out = capsys.readouterr().out
    assert out.startswith("Scope 7 finished in ")
    assert out.endswith(" micros. \n")
    micros = out[len("Scope 7 finished in "):-len(" micros. \n")]
    assert micros.isdigit()


def test_time_value_noon():
    assert time_value(12, 0, 0) == 0.5


def test_time_value_bounds_and_order():
    assert time_value(0, 0, 0) == 0.0
    assert time_value(24, 0, 0) == 1.0
    assert time_value(10, 0, 0) < time_value(10, 0, 1) < time_value(10, 1, 0)


def test_from_value_noon():
    assert from_value(0.5) == (12, 0, 0)


def test_from_value_round_trip_on_whole_hours():
    for hour in (0, 6, 12, 18):
        assert from_value(time_value(hour, 0, 0)) == (hour, 0, 0)


def test_from_value_ranges():
    for step in range(100):
        hour, minute, second = from_value(step / 100)
        assert 0 <= hour < 24
        assert 0 <= minute < 60
        assert 0 <= second < 60