"""Shared test scaffolding: a temporary store with a controllable clock."""
import tempfile
import unittest
from datetime import datetime, timedelta
from pathlib import Path

from tracker.domain.EntryStore import EntryStore
from tracker.events.Event_Bus import EventBus
from tracker.infra.Record_Repository import Repositories
from tracker.utilities.scheduler import ManualScheduler

START = datetime(2026, 1, 15, 12, 0, 0)


class FakeClock:
    def __init__(self, start: datetime = START):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs):
        self.current += timedelta(**kwargs)
        return self.current


class StoreTestCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.data_dir = Path(self._tmp.name)
        self.clock = FakeClock()
        self.scheduler = ManualScheduler()
        self.bus = EventBus()
        self.events = []
        self.store = EntryStore(Repositories(self.data_dir), clock=self.clock, scheduler=self.scheduler)
        self.store.set_event_bus(self.bus)

    def tearDown(self):
        self._tmp.cleanup()

    def record(self, *event_names):
        for name in event_names:
            self.bus.subscribe(name, lambda n, p: self.events.append((n, p)))
