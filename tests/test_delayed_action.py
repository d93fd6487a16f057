import datetime
from unittest import mock

import pytest

from polypanda.delayed_action import DelayedAction


def test_runs_after_zero_delay():
    calls = []
    with DelayedAction(lambda: calls.append("ran"), 0):
        pass
    assert calls == ["ran"]


def test_does_not_run_before_delay():
    calls = []
    with DelayedAction(lambda: calls.append("ran"), 3600):
        pass
    assert calls == []


def test_dismissed_action_does_not_run():
    calls = []
    with DelayedAction(lambda: calls.append("ran"), 0) as action:
        action.dismiss()
    assert calls == []


def test_runs_when_block_raises():
    calls = []
    with pytest.raises(RuntimeError):
        with DelayedAction(lambda: calls.append("ran"), 0):
            raise RuntimeError("boom")
    assert calls == ["ran"]


def test_runs_when_elapsed_equals_delay():
    calls = []
    with mock.patch("time.monotonic", side_effect=[10.0, 12.0]):
        with DelayedAction(lambda: calls.append("ran"), 2):
            pass
    assert calls == ["ran"]


def test_not_run_just_below_delay():
    calls = []
    with mock.patch("time.monotonic", side_effect=[10.0, 11.5]):
        with DelayedAction(lambda: calls.append("ran"), 2):
            pass
    assert calls == []


def test_accepts_timedelta():
    calls = []
    with mock.patch("time.monotonic", side_effect=[0.0, 2.0]):
        with DelayedAction(lambda: calls.append("ran"), datetime.timedelta(seconds=2)):
            pass
    assert calls == ["ran"]


def test_enter_returns_self():
    action = DelayedAction(lambda: None, 3600)
    with action as entered:
        assert entered is action