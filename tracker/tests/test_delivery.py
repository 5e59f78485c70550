from datetime import timedelta

from tracker.events.Event_Bus import DELIVERY_PRUNED
from tracker.tests.helpers import StoreTestCase
from tracker.utilities.constants import ERR_NAME_REQUIRED, ERR_AMOUNT_NOT_POSITIVE, ERR_DELIVERY_DUPLICATE
from tracker.utilities.errors import ValidationError


class TestDeliveryEntries(StoreTestCase):

    def assertRejected(self, message, name, amount):
        with self.assertRaises(ValidationError) as ctx:
            self.store.add_delivery_entry(name, amount)
        self.assertEqual(ctx.exception.message, message)

    def test_add_then_read(self):
        entry = self.store.add_delivery_entry(" Pizza Hut ", 12.5)
        entries = self.store.list_delivery()
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].id, entry.id)
        self.assertEqual(entries[0].name, "Pizza Hut")
        self.assertEqual(entries[0].amount, 12.5)
        saved = self.store.list_saved_names()
        self.assertEqual([n.value for n in saved], ["Pizza Hut"])
        self.assertEqual(saved[0].last_used, entry.created_at)

    def test_validation_messages(self):
        self.assertRejected(ERR_NAME_REQUIRED, "   ", 10)
        self.assertRejected(ERR_AMOUNT_NOT_POSITIVE, "KFC", 0)
        self.assertRejected(ERR_AMOUNT_NOT_POSITIVE, "KFC", -3)
        self.assertRejected(ERR_AMOUNT_NOT_POSITIVE, "KFC", "abc")
        self.assertRejected(ERR_AMOUNT_NOT_POSITIVE, "KFC", float("nan"))
        self.assertEqual(self.store.list_delivery(), [])
        self.assertEqual(self.store.list_saved_names(), [])

    def test_name_checked_before_amount(self):
        self.assertRejected(ERR_NAME_REQUIRED, "", 0)

    def test_duplicate_name_rejected(self):
        self.store.add_delivery_entry("KFC", 20)
        self.assertRejected(ERR_DELIVERY_DUPLICATE, "  kfc", 5)
        self.assertEqual(len(self.store.list_delivery()), 1)

    def test_talabat_mart_may_repeat(self):
        self.store.add_delivery_entry("Talabat Mart", 20)
        self.store.add_delivery_entry("talabat mart", 7.5)
        self.store.add_delivery_entry(" TALABAT MART ", 1)
        self.assertEqual(len(self.store.list_delivery()), 3)
        self.assertEqual(len(self.store.list_saved_names()), 1)

    def test_expired_entry_does_not_block_name(self):
        self.store.add_delivery_entry("KFC", 20)
        self.clock.advance(days=30)
        entry = self.store.add_delivery_entry("KFC", 15)
        self.assertEqual([e.id for e in self.store.list_delivery()], [entry.id])

    def test_total_amount_over_active_entries(self):
        self.store.add_delivery_entry("Old", 100)
        self.clock.advance(days=10)
        self.store.add_delivery_entry("A", 5.0)
        self.store.add_delivery_entry("B", 10.5)
        self.store.add_dine_in_entry("C")
        self.clock.advance(days=20)
        # "Old" is expired now but not pruned yet
        self.assertEqual(self.store.total_amount(), 15.5)

    def test_list_newest_first(self):
        self.store.add_delivery_entry("A", 1)
        self.clock.advance(hours=1)
        self.store.add_delivery_entry("B", 2)
        self.assertEqual([e.name for e in self.store.list_delivery()], ["B", "A"])

    def test_prune_boundary_and_idempotence(self):
        self.record(DELIVERY_PRUNED)
        self.store.add_delivery_entry("Exactly", 1)
        self.clock.advance(seconds=1)
        self.store.add_delivery_entry("Younger", 2)
        self.clock.current = self.store.list_delivery()[-1].created_at + timedelta(days=30)

        self.assertEqual(self.store.prune_expired_delivery(), 1)
        self.assertEqual([e.name for e in self.store.list_delivery()], ["Younger"])
        self.assertEqual(self.store.prune_expired_delivery(), 0)
        self.assertEqual(len(self.events), 1)
        self.assertEqual(self.events[0][1], {'removed': 1, 'names': ["Exactly"]})

    def test_list_prunes_expired(self):
        self.store.add_delivery_entry("A", 1)
        self.clock.advance(days=31)
        self.assertEqual(self.store.list_delivery(), [])
        self.assertEqual(len(self.store.repos.delivery), 0)
