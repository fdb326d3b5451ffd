"""
Tests for range condensing and the interval union structure
"""
import random
import unittest

from choice_string.core import (
    Individual,
    Range,
    RangeUnion,
    Selection,
    condense_elements,
    normalize,
)


class TestRangeUnion(unittest.TestCase):
    def test_empty(self):
        union = RangeUnion()
        self.assertEqual(union.ranges(), [])
        self.assertEqual(len(union), 0)

    def test_adjacent_ranges_merge(self):
        union = RangeUnion()
        union.insert(1, 3)
        union.insert(4, 6)
        self.assertEqual(union.ranges(), [(1, 6)])

    def test_gap_keeps_ranges_apart(self):
        union = RangeUnion()
        union.insert(5, 6)
        union.insert(1, 3)
        self.assertEqual(union.ranges(), [(1, 3), (5, 6)])

    def test_insert_bridging_several_ranges(self):
        union = RangeUnion()
        for lo, hi in [(1, 2), (5, 6), (9, 10), (20, 20)]:
            union.insert(lo, hi)
        union.insert(3, 8)
        self.assertEqual(union.ranges(), [(1, 10), (20, 20)])
        self.assertEqual(list(union), [(1, 10), (20, 20)])

    def test_contained_insert_is_absorbed(self):
        union = RangeUnion()
        union.insert(0, 100)
        union.insert(40, 50)
        self.assertEqual(union.ranges(), [(0, 100)])

    def test_rejects_empty_range(self):
        with self.assertRaises(ValueError):
            RangeUnion().insert(8, 2)


class TestCondenseElements(unittest.TestCase):
    def test_condense_ranges(self):
        result = condense_elements([
            Individual(1),
            Individual(3),
            Range(5, 9),
            Individual(8),
            Individual(10),
        ])
        self.assertEqual(result, (Individual(1), Individual(3), Range(5, 10)))

    def test_condense_ranges_more_complex(self):
        result = condense_elements([
            Individual(1),
            Individual(3),
            Range(5, 9),
            Range(11, 20),
            Individual(10),
        ])
        self.assertEqual(result, (Individual(1), Individual(3), Range(5, 20)))

    def test_single_integer_range_becomes_individual(self):
        self.assertEqual(condense_elements([Range(7, 7)]), (Individual(7),))

    def test_inverted_range_is_dropped(self):
        self.assertEqual(condense_elements([Range(8, 2)]), ())
        self.assertEqual(condense_elements([Range(8, 2), Individual(4)]), (Individual(4),))

    def test_duplicates_collapse(self):
        self.assertEqual(condense_elements([Individual(2)] * 5), (Individual(2),))

    def test_zero_is_in_domain(self):
        self.assertEqual(condense_elements([Individual(1), Individual(0)]), (Range(0, 1),))


class TestNormalize(unittest.TestCase):
    def test_all_and_none_pass_through(self):
        self.assertEqual(normalize(Selection.all()), Selection.all())
        self.assertEqual(normalize(Selection.none()), Selection.none())

    def test_sole_inverted_range_gives_empty_some(self):
        result = normalize(Selection.some([Range(9, 3)]))
        self.assertEqual(result, Selection.some([]))
        self.assertNotEqual(result, Selection.none())
        self.assertFalse(result.contains_item(5))

    def test_minimal_input_is_unchanged(self):
        minimal = Selection.some([Individual(1), Range(3, 5), Individual(7), Range(10, 12)])
        self.assertEqual(normalize(minimal), minimal)


class TestNormalizeProperties(unittest.TestCase):
    """Randomised checks of the canonical form invariants"""

    def _random_elements(self, rng):
        elements = []
        for _ in range(rng.randint(0, 12)):
            lo = rng.randint(0, 60)
            if rng.random() < 0.4:
                elements.append(Individual(lo))
            else:
                elements.append(Range(lo, lo + rng.randint(-3, 10)))
        return elements

    def test_properties(self):
        rng = random.Random(1234)
        for _ in range(200):
            elements = self._random_elements(rng)
            raw = Selection.some(elements)
            canonical = normalize(raw)

            with self.subTest(elements=elements):
                # Same members as the unreduced list
                for item in range(0, 80):
                    self.assertEqual(raw.contains_item(item), canonical.contains_item(item))

                # Ascending, disjoint and not adjacent
                bounds = [e.bounds() for e in canonical.elements]
                for (_, prev_hi), (lo, _) in zip(bounds, bounds[1:]):
                    self.assertGreater(lo, prev_hi + 1)
                for lo, hi in bounds:
                    self.assertLessEqual(lo, hi)

                # Idempotent and independent of input order
                self.assertEqual(normalize(canonical), canonical)
                shuffled = list(elements)
                rng.shuffle(shuffled)
                self.assertEqual(normalize(Selection.some(shuffled)), canonical)


if __name__ == "__main__":
    unittest.main()
