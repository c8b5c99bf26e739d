from unittest import TestCase
from tokenledger.db.driver import InMemDriver, LedgerDriver


class TestInMemDriver(TestCase):
    def setUp(self):
        self.d = InMemDriver()

    def test_set_get(self):
        self.d.set('a.b', 2 ** 255)
        self.assertEqual(self.d.get('a.b'), 2 ** 255)

    def test_set_none_deletes(self):
        self.d.set('a.b', 1)
        self.d.set('a.b', None)
        self.assertIsNone(self.d.get('a.b'))

    def test_getitem_missing_raises(self):
        with self.assertRaises(KeyError):
            self.d['missing']

    def test_iter_prefix_sorted(self):
        self.d['x.b'] = 1
        self.d['x.a'] = 2
        self.d['y.a'] = 3
        self.assertEqual(self.d.iter('x.'), ['x.a', 'x.b'])

    def test_iter_length(self):
        for i in range(5):
            self.d['x.{}'.format(i)] = i
        self.assertEqual(len(self.d.iter('x.', length=2)), 2)

    def test_flush(self):
        self.d['x.a'] = 1
        self.d.flush()
        self.assertEqual(self.d.keys(), [])


class TestLedgerDriver(TestCase):
    def setUp(self):
        self.raw = InMemDriver()
        self.d = LedgerDriver(driver=self.raw)

    def test_pending_write_is_readable_before_commit(self):
        self.d.set('x.a', 5)
        self.assertEqual(self.d.get('x.a'), 5)
        self.assertIsNone(self.raw.get('x.a'))

    def test_commit_persists(self):
        self.d.set('x.a', 5)
        self.d.commit()
        self.assertEqual(self.raw.get('x.a'), 5)
        self.assertEqual(self.d.pending_writes, {})

    def test_rollback_discards_pending(self):
        self.d.set('x.a', 5)
        self.d.commit()

        self.d.set('x.a', 10)
        self.d.set('x.b', 1)
        self.d.rollback()

        self.assertEqual(self.d.get('x.a'), 5)
        self.assertIsNone(self.d.get('x.b'))

    def test_pending_delete_hides_committed_value(self):
        self.d.set('x.a', 5)
        self.d.commit()

        self.d.delete('x.a')
        self.assertIsNone(self.d.get('x.a'))
        self.assertEqual(self.d.items('x.'), {})

        self.d.commit()
        self.assertIsNone(self.raw.get('x.a'))

    def test_make_key(self):
        self.assertEqual(self.d.make_key('balances', 'balances'), 'balances.balances')
        self.assertEqual(self.d.make_key('balances', 'balances', [1, 'stu']), 'balances.balances:1:stu')

    def test_get_set_var(self):
        self.d.set_var('ledger', '__owner__', value='stu')
        self.assertEqual(self.d.get_var('ledger', '__owner__'), 'stu')
        self.assertEqual(self.d.get_owner(), 'stu')

    def test_items_merges_pending_and_committed(self):
        self.d.set('x.a', 1)
        self.d.commit()
        self.d.set('x.b', 2)

        self.assertEqual(self.d.items('x.'), {'x.a': 1, 'x.b': 2})
        self.assertEqual(self.d.keys('x.'), ['x.a', 'x.b'])
        self.assertEqual(sorted(self.d.values('x.')), [1, 2])

    def test_flush(self):
        self.d.set('x.a', 1)
        self.d.commit()
        self.d.set('x.b', 1)
        self.d.flush()

        self.assertIsNone(self.d.get('x.a'))
        self.assertIsNone(self.d.get('x.b'))
