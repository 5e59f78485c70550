"""DineInEntry domain entity: a restaurant visited in person, tracked for the expiration window."""
from tracker.domain.TimedEntry import TimedEntry


class DineInEntry(TimedEntry):
    pass
