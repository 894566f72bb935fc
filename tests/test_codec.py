import json
import unittest

from bimap.bidict import BidirectionalMap
from bimap.codec import encode, decode, dumps, loads, DecodeError


class TestEncode(unittest.TestCase):

    def test_flat_alternating_sequence(self):
        bm = BidirectionalMap([('A', 1), ('B', 2), ('C', 3)])
        self.assertEqual(encode(bm), ['A', 1, 'B', 2, 'C', 3])

    def test_empty(self):
        self.assertEqual(encode(BidirectionalMap()), [])
        self.assertEqual(dumps(BidirectionalMap()), '[]')

    def test_dumps_is_a_json_array(self):
        bm = BidirectionalMap([('A', 1), ('B', 2)])
        self.assertEqual(dumps(bm), '["A",1,"B",2]')
        self.assertEqual(json.loads(dumps(bm, indent=2)), ['A', 1, 'B', 2])


class TestDecode(unittest.TestCase):

    def test_round_trip(self):
        bm = BidirectionalMap([('A', 1), ('B', 2), ('C', 3)])
        self.assertEqual(decode(encode(bm)), bm)
        self.assertEqual(loads(dumps(bm)), bm)

    def test_round_trip_after_modifications(self):
        bm = BidirectionalMap([('A', 1), ('B', 2), ('C', 3)])
        bm.associate('A', 3)
        bm.associate('D', 4)
        self.assertEqual(loads(dumps(bm)), bm)

    def test_round_trip_of_inverse(self):
        inv = BidirectionalMap([('A', 1), ('B', 2)]).inverse()
        self.assertEqual(decode(encode(inv), left_type=int, right_type=str), inv)

    def test_pairs_are_read_in_order(self):
        bm = decode(['A', 1, 'B', 2])
        self.assertEqual(list(bm), [('A', 1), ('B', 2)])

    def test_tuple_input(self):
        self.assertEqual(decode(('A', 1)), BidirectionalMap([('A', 1)]))

    def test_odd_number_of_elements(self):
        with self.assertRaises(DecodeError):
            decode(['A', 1, 'B'])

    def test_not_a_sequence(self):
        for bad in ({'A': 1}, 'A1', 42, None):
            with self.assertRaises(DecodeError):
                decode(bad)

    def test_duplicate_left(self):
        with self.assertRaises(DecodeError):
            loads('["A", 1, "A", 2]')

    def test_duplicate_right(self):
        with self.assertRaises(DecodeError):
            loads('["A", 1, "B", 1]')

    def test_unhashable_element(self):
        with self.assertRaises(DecodeError):
            loads('["A", [1, 2]]')

    def test_type_mismatch(self):
        with self.assertRaises(DecodeError):
            loads('["A", "1"]', left_type=str, right_type=int)
        with self.assertRaises(DecodeError):
            loads('[1, 1]', left_type=str)

    def test_bool_is_not_an_int(self):
        with self.assertRaises(DecodeError):
            loads('["A", true]', right_type=int)
        self.assertEqual(loads('["A", true]', right_type=bool), BidirectionalMap([('A', True)]))

    def test_several_accepted_types(self):
        bm = loads('["A", 1, "B", 2.5]', right_type=(int, float))
        self.assertEqual(bm.lookup_left('B'), 2.5)

    def test_malformed_json(self):
        with self.assertRaises(DecodeError):
            loads('["A", 1')

    def test_decode_error_is_value_error(self):
        self.assertTrue(issubclass(DecodeError, ValueError))


if __name__ == '__main__':
    unittest.main()
