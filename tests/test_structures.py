"""Unit tests for the possibility records, code lists and combination tree."""

import unittest

from game.colors import Color
from game.possibility import ALL_SLOTS, Possibility, popcount
from game.secret_code import Code
from solver.candidates import flatten
from solver.code_list import NIL, CodeList
from solver.combination_tree import (
    CombinationTree,
    combinations_of,
    compute_combination,
)


def records(**known):
    """Eight eliminated records with the given colors set to (mask, count)."""
    possible = [Possibility(mask=0) for _ in range(8)]
    for name, (mask, count) in known.items():
        possible[Color[name.upper()]] = Possibility(mask=mask, count=count)
    return possible


class TestPossibility(unittest.TestCase):
    """Tests for the per-color record."""

    def test_initial_state(self) -> None:
        p = Possibility()
        self.assertEqual(p.mask, ALL_SLOTS)
        self.assertEqual(p.count, 0)
        self.assertFalse(p.eliminated)

    def test_eliminate(self) -> None:
        p = Possibility(count=2)
        p.eliminate()
        self.assertTrue(p.eliminated)
        self.assertEqual(p.packed(), 0)

    def test_add_count_overflow(self) -> None:
        p = Possibility()
        p.add_count(5)
        with self.assertRaises(ValueError):
            p.add_count(3)

    def test_exclude_and_pin(self) -> None:
        p = Possibility(count=1)
        p.exclude(0)
        p.exclude(0)
        self.assertEqual(p.mask, 0b11110)
        p.pin([0, 1])
        self.assertEqual(p.mask, 0b00011)
        self.assertEqual(p.count, 1)

    def test_packed_layout(self) -> None:
        p = Possibility(mask=0b10101, count=3)
        self.assertEqual(p.packed(), 0b011_10101)
        restored = Possibility.from_packed(p.packed())
        self.assertEqual((restored.mask, restored.count), (0b10101, 3))

    def test_popcount(self) -> None:
        self.assertEqual(popcount(0), 0)
        self.assertEqual(popcount(ALL_SLOTS), 5)


class TestCodeList(unittest.TestCase):
    """Tests for the arena backed linked list."""

    def setUp(self) -> None:
        self.codes = CodeList()
        for letters in ("eeeee", "ddddd", "ggggg", "ooooo"):
            self.codes.append(Code(letters))

    def test_order_and_length(self) -> None:
        self.assertEqual(len(self.codes), 4)
        self.assertEqual(
            [c.as_string() for c in self.codes.codes()],
            ["eeeee", "ddddd", "ggggg", "ooooo"],
        )

    def test_remove_middle_and_ends(self) -> None:
        self.codes.remove(1)
        self.codes.remove(0)
        self.codes.remove(3)
        self.assertEqual(self.codes.codes(), [Code("ggggg")])
        self.assertEqual(self.codes.head, 2)
        self.assertEqual(self.codes.tail, 2)
        self.codes.remove(2)
        self.assertFalse(self.codes)
        self.assertEqual(self.codes.head, NIL)
        self.assertEqual(self.codes.tail, NIL)

    def test_remove_while_iterating(self) -> None:
        for index in self.codes.indices():
            if index % 2 == 0:
                self.codes.remove(index)
        self.assertEqual(
            [c.as_string() for c in self.codes.codes()], ["ddddd", "ooooo"]
        )

    def test_append_keeps_red(self) -> None:
        index = self.codes.append(Code("rrrrr"), red=2)
        self.assertEqual(self.codes.entries[index].red, 2)
        self.assertEqual(self.codes.entries[self.codes.tail].code, Code("rrrrr"))

    def test_clear(self) -> None:
        self.codes.clear()
        self.assertEqual(len(self.codes), 0)
        self.assertEqual(list(self.codes), [])


class TestCombinations(unittest.TestCase):
    """Tests for the bit-subset enumeration."""

    def test_subsets_ascending(self) -> None:
        self.assertEqual(list(combinations_of(0b10110, 2)), [6, 18, 20])

    def test_single_bit(self) -> None:
        self.assertEqual(list(combinations_of(0b01010, 1)), [2, 8])

    def test_full_mask(self) -> None:
        self.assertEqual(list(combinations_of(ALL_SLOTS, 5)), [ALL_SLOTS])

    def test_too_few_bits(self) -> None:
        self.assertEqual(list(combinations_of(0b00011, 3)), [])

    def test_zero_count(self) -> None:
        self.assertEqual(list(combinations_of(ALL_SLOTS, 0)), [])

    def test_compute_combination_overrun(self) -> None:
        self.assertEqual(compute_combination(0b00110, 0b00110, 2), None)
        self.assertEqual(compute_combination(0, 0b00110, 1), 0b00010)

    def test_subset_counts(self) -> None:
        # C(5, k) placements in an open mask
        expected = {1: 5, 2: 10, 3: 10, 4: 5, 5: 1}
        for count, n in expected.items():
            self.assertEqual(len(list(combinations_of(ALL_SLOTS, count))), n)


class TestCombinationTree(unittest.TestCase):
    """Tests for building and flattening the placement tree."""

    def test_single_color(self) -> None:
        tree = CombinationTree(records(white=(ALL_SLOTS, 5)))
        candidates = flatten(tree, CodeList())
        self.assertEqual(candidates.codes(), [Code("wwwww")])

    def test_depth_first_order(self) -> None:
        tree = CombinationTree(records(beige=(0b00011, 1), darkblue=(ALL_SLOTS, 4)))
        candidates = flatten(tree, CodeList())
        self.assertEqual(
            [c.as_string() for c in candidates.codes()], ["edddd", "deddd"]
        )

    def test_every_placement_listed(self) -> None:
        tree = CombinationTree(records(beige=(ALL_SLOTS, 2), darkblue=(ALL_SLOTS, 3)))
        codes = flatten(tree, CodeList()).codes()
        self.assertEqual(len(codes), 10)
        self.assertEqual(len(set(codes)), 10)
        self.assertEqual(codes[0], Code("eeddd"))
        for code in codes:
            self.assertEqual(code.colors_used(), {Color.BEIGE, Color.DARKBLUE})

    def test_conflicting_masks_give_no_candidates(self) -> None:
        tree = CombinationTree(
            records(
                beige=(0b00001, 1),
                darkblue=(0b00001, 1),
                green=(ALL_SLOTS, 3),
            )
        )
        self.assertEqual(len(flatten(tree, CodeList())), 0)

    def test_masks_respected(self) -> None:
        tree = CombinationTree(
            records(red=(0b11100, 1), orange=(ALL_SLOTS, 2), green=(0b00011, 2))
        )
        codes = flatten(tree, CodeList()).codes()
        self.assertEqual(len(codes), 3)
        for code in codes:
            self.assertIn(code.sequence.index(Color.RED), (2, 3, 4))
            self.assertEqual(code[0], Color.GREEN)
            self.assertEqual(code[1], Color.GREEN)

    def test_clear(self) -> None:
        tree = CombinationTree(records(white=(ALL_SLOTS, 5)))
        tree.clear()
        self.assertEqual(len(tree), 0)
        self.assertEqual(len(flatten(tree, CodeList())), 0)


if __name__ == "__main__":
    unittest.main()
