"""Tests for the incremental constraint states."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queensearch import ArrayState, BitmaskState, ConstraintState, make_state


class ConstraintStateTests(unittest.TestCase):
    """Both representations obey the same place/remove contract."""

    KINDS = ("bitmask", "array")

    def test_place_blocks_column_and_diagonals(self):
        for kind in self.KINDS:
            with self.subTest(kind=kind):
                state = make_state(5, kind)
                self.assertTrue(state.can_place(2, 2))
                state.place(2, 2)
                self.assertFalse(state.can_place(0, 2))  # column
                self.assertFalse(state.can_place(3, 1))  # rising diagonal
                self.assertFalse(state.can_place(4, 4))  # falling diagonal
                self.assertFalse(state.can_place(0, 0))  # falling diagonal, corner
                self.assertTrue(state.can_place(3, 0))
                self.assertTrue(state.can_place(0, 1))

    def test_remove_is_exact_inverse(self):
        for kind in self.KINDS:
            with self.subTest(kind=kind):
                fresh = make_state(6, kind)
                state = make_state(6, kind)
                state.place(0, 1)
                state.place(1, 3)
                state.remove(1, 3)
                state.remove(0, 1)
                self.assertEqual(state, fresh)
                for row in range(6):
                    for col in range(6):
                        self.assertTrue(state.can_place(row, col))

    def test_copy_is_independent(self):
        for kind in self.KINDS:
            with self.subTest(kind=kind):
                state = make_state(4, kind)
                state.place(0, 1)
                clone = state.copy()
                clone.place(1, 3)
                self.assertTrue(state.can_place(1, 3))
                self.assertFalse(clone.can_place(1, 3))

    def test_from_prefix(self):
        bitmask = BitmaskState.from_prefix(8, (0, 4, 7))
        array = ArrayState.from_prefix(8, (0, 4, 7))
        for row, col in ((3, 5), (3, 1)):
            self.assertEqual(bitmask.can_place(row, col), array.can_place(row, col))
        self.assertTrue(bitmask.can_place(3, 5))
        self.assertFalse(bitmask.can_place(3, 4))

    def test_from_prefix_rejects_conflicts(self):
        with self.assertRaises(ValueError):
            BitmaskState.from_prefix(4, (0, 1))

    def test_bitmask_bits(self):
        state = BitmaskState(4)
        state.place(1, 2)
        self.assertEqual(state.columns, 0b100)
        self.assertEqual(state.diag_up, 1 << 3)
        self.assertEqual(state.diag_down, 1 << 2)

    def test_unknown_kind(self):
        with self.assertRaises(ValueError):
            make_state(4, "sparse")

    def test_base_class_is_abstract(self):
        with self.assertRaises(TypeError):
            ConstraintState()

        class Partial(ConstraintState):
            def can_place(self, row, col):
                return True

        with self.assertRaises(TypeError):
            Partial()


if __name__ == "__main__":
    unittest.main()
