import unittest
from datetime import datetime, timedelta

from tracker.domain.ChecklistItem import ChecklistItem
from tracker.domain.DeliveryEntry import DeliveryEntry
from tracker.domain.DineInEntry import DineInEntry
from tracker.logic.reporting.summary import (
    compute_expiring_soon, days_left_label, format_amount, partition_checklist, total_amount
)
from tracker.utilities.constants import STATUS_USED

CREATED = datetime(2026, 3, 1, 9, 30)


class TestTimedEntry(unittest.TestCase):

    def test_expiration_date(self):
        entry = DineInEntry("Nando's", CREATED)
        self.assertEqual(entry.expiration_date, CREATED + timedelta(days=30))

    def test_days_remaining_rounds_up(self):
        entry = DineInEntry("Nando's", CREATED)
        self.assertEqual(entry.days_remaining(CREATED), 30)
        self.assertEqual(entry.days_remaining(CREATED + timedelta(hours=1)), 30)
        self.assertEqual(entry.days_remaining(CREATED + timedelta(days=29, hours=23)), 1)
        self.assertEqual(entry.days_remaining(CREATED + timedelta(days=30)), 0)
        self.assertEqual(entry.days_remaining(CREATED + timedelta(days=45)), 0)

    def test_expired_at_exactly_thirty_days(self):
        entry = DeliveryEntry("KFC", 10, CREATED)
        self.assertFalse(entry.is_expired(CREATED + timedelta(days=30) - timedelta(seconds=1)))
        self.assertTrue(entry.is_expired(CREATED + timedelta(days=30)))

    def test_from_dict_tolerates_bad_values(self):
        entry = DeliveryEntry.from_dict({"name": "KFC", "amount": "oops", "created_at": "2026-03-01T09:30:00",
                                         "id": "abc", "extra": 1})
        self.assertEqual(entry.amount, 0.0)
        self.assertEqual(entry.created_at, CREATED)
        self.assertEqual(entry.id, "abc")
        self.assertIsInstance(DineInEntry.from_dict({"name": "X"}), DineInEntry)

    def test_unreadable_created_at_loads_expired(self):
        for raw in ({"name": "X"}, {"name": "X", "created_at": "yesterday"}, {"name": "X", "created_at": None}):
            with self.assertLogs('tracker.domain.TimedEntry', level='WARNING'):
                entry = DeliveryEntry.from_dict(raw)
            self.assertTrue(entry.is_expired(CREATED))
            self.assertEqual(entry.days_remaining(CREATED), 0)

    def test_unreadable_created_at_is_stable(self):
        first = DineInEntry.from_dict({"name": "X", "created_at": "bad"})
        second = DineInEntry.from_dict({"name": "X", "created_at": "bad"})
        self.assertEqual(first.created_at, second.created_at)
        self.assertEqual(first.expiration_date, second.expiration_date)

    def test_to_dict(self):
        entry = DeliveryEntry("KFC", 10.5, CREATED, id="abc")
        self.assertEqual(entry.to_dict(), {
            "id": "abc", "name": "KFC", "created_at": "2026-03-01T09:30:00", "amount": 10.5
        })


class TestSummaryHelpers(unittest.TestCase):

    def test_total_amount_skips_expired(self):
        now = CREATED + timedelta(days=31)
        entries = [
            DeliveryEntry("Old", 100, CREATED),
            DeliveryEntry("A", 5.0, now),
            DeliveryEntry("B", 10.5, now),
            DeliveryEntry("C", 0, now),
        ]
        self.assertEqual(total_amount(entries, now), 15.5)
        self.assertEqual(total_amount([], now), 0.0)

    def test_partition_checklist(self):
        milk = ChecklistItem("Milk")
        bread = ChecklistItem("Bread", STATUS_USED)
        eggs = ChecklistItem("Eggs")
        available, used = partition_checklist([milk, bread, eggs])
        self.assertEqual(available, [milk, eggs])
        self.assertEqual(used, [bread])

    def test_expiring_soon(self):
        now = CREATED + timedelta(days=28)
        entries = [
            DineInEntry("Later", CREATED + timedelta(days=10)),
            DineInEntry("Soon", CREATED),
            DineInEntry("Gone", CREATED - timedelta(days=5)),
        ]
        result = compute_expiring_soon(entries, now, window=3)
        self.assertEqual([(r['name'], r['days_left']) for r in result], [("Soon", 2)])

    def test_days_left_label(self):
        self.assertEqual(days_left_label(1), "1 day left")
        self.assertEqual(days_left_label(0), "0 days left")
        self.assertEqual(days_left_label(12), "12 days left")

    def test_format_amount(self):
        self.assertEqual(format_amount(5), "5")
        self.assertEqual(format_amount(10.5), "10.5")
        self.assertEqual(format_amount(3.256), "3.26")
        self.assertEqual(format_amount(0), "0")
