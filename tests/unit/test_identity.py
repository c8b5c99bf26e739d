from unittest import TestCase
from tokenledger.db.driver import LedgerDriver
from tokenledger.ledger.identity import IdentitySet
from tokenledger.ledger.events import EventLog, AssetCreated, MetadataAssigned
from tokenledger.exceptions import NonexistentAsset, InvalidAmount, ZeroRecipient
from tokenledger import config


class TestIdentitySet(TestCase):
    def setUp(self):
        self.events = EventLog()
        self.i = IdentitySet(LedgerDriver(), self.events)

    def test_ids_start_at_one_and_advance_by_one(self):
        self.assertEqual(self.i.last_id(), 0)
        self.assertEqual(self.i.create('stu', 100), 1)
        self.assertEqual(self.i.create('stu', 100), 2)
        self.assertEqual(self.i.last_id(), 2)

    def test_unseeded_id(self):
        self.assertFalse(self.i.exists(7))
        self.assertEqual(self.i.creator_of(7), config.ZERO_ADDRESS)
        self.assertEqual(self.i.supply_of(7), 0)

    def test_record(self):
        asset = self.i.create('stu', 500)

        self.assertTrue(self.i.exists(asset))
        self.assertEqual(self.i.record(asset), {'creator': 'stu', 'total_supply': 500})

    def test_record_of_unknown_asset(self):
        with self.assertRaises(NonexistentAsset):
            self.i.record(3)

    def test_create_announces(self):
        asset = self.i.create('stu', 10)
        self.assertEqual(self.events.pending, [AssetCreated(asset=asset, creator='stu', supply=10)])

    def test_label_announces_metadata(self):
        asset = self.i.create('stu', 10, label='gold')
        self.assertEqual(self.events.pending[-1], MetadataAssigned(asset=asset, label='gold'))

    def test_bad_supply(self):
        with self.assertRaises(InvalidAmount):
            self.i.create('stu', -1)
        self.assertEqual(self.i.last_id(), 0)

    def test_zero_creator_does_not_advance_sequence(self):
        with self.assertRaises(ZeroRecipient):
            self.i.create(config.ZERO_ADDRESS, 10)

        with self.assertRaises(ZeroRecipient):
            self.i.create(None, 10)

        self.assertEqual(self.i.last_id(), 0)
        self.assertEqual(self.events.pending, [])
