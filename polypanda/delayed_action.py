"""An action run at the end of a block, but only once enough time has passed."""

import datetime
import time


class DelayedAction:
    """Context manager that calls ``action`` on exit if ``delay`` has elapsed.

    The clock starts when the object is created. The action runs however the
    block is left, unless it was dismissed. ``delay`` is a number of seconds
    or a ``datetime.timedelta``.
    """

    def __init__(self, action, delay):
        if isinstance(delay, datetime.timedelta):
            delay = delay.total_seconds()
        self._action = action
        self._delay = float(delay)
        self._dismissed = False
        self._start = time.monotonic()

    def dismiss(self):
        """Prevent the action from running."""
        self._dismissed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, traceback):
        if not self._dismissed and time.monotonic() - self._start >= self._delay:
            self._action()
        return False