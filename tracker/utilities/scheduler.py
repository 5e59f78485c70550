"""Deferred callbacks.

The store only needs ``schedule(delay, action) -> handle``. The default
implementation runs each action on a daemon ``threading.Timer`` so the caller
never blocks and the action still fires when nobody is looking at the list.
Nothing cancels a scheduled action.
"""
from __future__ import annotations
import logging
from threading import Timer
from typing import Callable, List, Tuple

logger = logging.getLogger(__name__)


class TimerScheduler:
    def schedule(self, delay: float, action: Callable[[], None]) -> Timer:
        timer = Timer(delay, self._run, args=(action,))
        timer.daemon = True
        timer.start()
        logger.debug("Scheduled %s in %.2fs", getattr(action, '__name__', action), delay)
        return timer

    @staticmethod
    def _run(action: Callable[[], None]):
        try:
            action()
        except Exception:
            logger.exception("Deferred action %s failed", getattr(action, '__name__', action))


class ManualScheduler:
    """Collects scheduled actions and runs them on demand (tests, scripted shells)."""

    def __init__(self):
        self.pending: List[Tuple[float, Callable[[], None]]] = []

    def schedule(self, delay: float, action: Callable[[], None]):
        self.pending.append((delay, action))
        return len(self.pending) - 1

    def run_pending(self) -> int:
        '''Runs every queued action in scheduling order. Returns how many ran.'''
        ran = 0
        while self.pending:
            _, action = self.pending.pop(0)
            action()
            ran += 1
        return ran


__all__ = ['TimerScheduler', 'ManualScheduler']
