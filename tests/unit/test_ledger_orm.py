from unittest import TestCase
from tokenledger.db.driver import LedgerDriver
from tokenledger.db.orm import Datum, Variable, Hash, escape_key_part

driver = LedgerDriver()


class TestDatum(TestCase):
    def test_init(self):
        d = Datum('identity', 'test', driver)
        self.assertEqual(d._key, driver.make_key('identity', 'test'))


class TestVariable(TestCase):
    def setUp(self):
        driver.flush()

    def tearDown(self):
        driver.flush()

    def test_set_get(self):
        v = Variable('identity', '__sequence__', driver=driver)
        v.set(1000)
        self.assertEqual(v.get(), 1000)
        self.assertEqual(driver.get('identity.__sequence__'), 1000)

    def test_default_value(self):
        v = Variable('identity', '__sequence__', driver=driver, default_value=0)
        self.assertEqual(v.get(), 0)

    def test_type_check(self):
        v = Variable('identity', 'label', driver=driver, t=str)
        with self.assertRaises(AssertionError):
            v.set(1)


class TestHash(TestCase):
    def setUp(self):
        driver.flush()

    def tearDown(self):
        driver.flush()

    def test_default_value_for_absent_keys(self):
        h = Hash('balances', 'balances', driver=driver, default_value=0)
        self.assertEqual(h[1, 'stu'], 0)

    def test_composite_keys(self):
        h = Hash('balances', 'balances', driver=driver, default_value=0)
        h[1, 'stu'] = 100
        h[2, 'stu'] = 5

        self.assertEqual(h[1, 'stu'], 100)
        self.assertEqual(driver.get('balances.balances:1:stu'), 100)
        self.assertEqual(sorted(h.all(1)), [100])

    def test_all_and_clear(self):
        h = Hash('approvals', 'operators', driver=driver, default_value=False)
        h['stu', 'colin'] = True
        h['stu', 'raghu'] = True
        h['colin', 'stu'] = True

        self.assertEqual(len(h.all('stu')), 2)

        h.clear('stu')
        self.assertEqual(h.all('stu'), [])
        self.assertTrue(h['colin', 'stu'])

    def test_delimiter_in_key_is_escaped(self):
        h = Hash('balances', 'balances', driver=driver, default_value=0)
        h[1, 'a:b'] = 1

        self.assertEqual(h[1, 'a:b'], 1)
        self.assertEqual(h[1, 'a', 'b'], 0)
        self.assertEqual(driver.get('balances.balances:1:a%3Ab'), 1)

    def test_separator_in_key_is_escaped(self):
        h = Hash('approvals', 'operators', driver=driver, default_value=False)
        h['vault.eth', 'bob'] = True

        self.assertTrue(h['vault.eth', 'bob'])
        self.assertEqual(driver.get('approvals.operators:vault%2Eeth:bob'), True)

    def test_escape_does_not_collide(self):
        h = Hash('balances', 'balances', driver=driver, default_value=0)
        h[1, 'a%3Ab'] = 5
        h[1, 'a:b'] = 7

        self.assertEqual(h[1, 'a%3Ab'], 5)
        self.assertEqual(h[1, 'a:b'], 7)
        self.assertEqual(escape_key_part('a%3Ab'), 'a%253Ab')

    def test_all_with_escaped_prefix(self):
        h = Hash('approvals', 'operators', driver=driver, default_value=False)
        h['a:b', 'bob'] = True
        h['a', 'b:bob'] = True

        self.assertEqual(h.all('a:b'), [True])

    def test_too_many_dimensions(self):
        h = Hash('balances', 'balances', driver=driver)
        with self.assertRaises(AssertionError):
            h[tuple(range(17))] = 1

    def test_key_too_long(self):
        h = Hash('balances', 'balances', driver=driver)
        with self.assertRaises(AssertionError):
            h['a' * 1025] = 1
