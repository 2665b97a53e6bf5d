"""Tests for placements and the standalone validator."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queensearch import Board, conflicts, conflicts_on2, is_valid_solution


class BoardValidityTests(unittest.TestCase):
    """Hand-written boards, valid and invalid."""

    def test_valid_small_boards(self):
        for columns in [(1, 3, 0, 2), (2, 0, 3, 1), (2, 0, 3, 1, 4), (1, 4, 2, 0, 3)]:
            with self.subTest(columns=columns):
                self.assertTrue(Board(columns).is_valid())

    def test_valid_eight_queens(self):
        self.assertTrue(Board((3, 5, 7, 1, 6, 0, 2, 4)).is_valid())
        self.assertTrue(Board((7, 1, 4, 2, 0, 6, 3, 5)).is_valid())

    def test_shared_column_is_invalid(self):
        self.assertFalse(Board((0, 0)).is_valid())
        self.assertFalse(Board((0, 2, 0)).is_valid())

    def test_shared_diagonal_is_invalid(self):
        self.assertFalse(Board((0, 1)).is_valid())
        self.assertFalse(Board((1, 0)).is_valid())
        self.assertFalse(Board((0, 2, 1)).is_valid())
        self.assertFalse(Board((2, 0, 4, 1, 3)).is_valid())

    def test_partial_board_is_not_a_solution(self):
        board = Board((0, 2), size=3)
        self.assertFalse(board.is_complete)
        self.assertTrue(board.is_consistent())
        self.assertFalse(board.is_valid())

    def test_out_of_range_column_is_invalid(self):
        self.assertFalse(Board((1, 3, 0, 4)).is_valid())
        self.assertFalse(Board((-1, 1)).is_valid())

    def test_degenerate_sizes(self):
        self.assertTrue(Board(()).is_valid())
        self.assertTrue(Board((0,)).is_valid())
        self.assertFalse(Board.empty(1).is_valid())


class BoardBehaviourTests(unittest.TestCase):
    """Immutability and sequence behaviour."""

    def test_place_returns_new_board(self):
        empty = Board.empty(4)
        first = empty.place(1)
        second = first.place(3)
        self.assertEqual(len(empty), 0)
        self.assertEqual(first.columns, (1,))
        self.assertEqual(second.columns, (1, 3))
        self.assertEqual(second.size, 4)

    def test_place_on_full_board_raises(self):
        with self.assertRaises(ValueError):
            Board((0,)).place(0)

    def test_sequence_protocol_and_hashing(self):
        board = Board([1, 3, 0, 2])
        self.assertEqual(list(board), [1, 3, 0, 2])
        self.assertEqual(board[1], 3)
        self.assertEqual(board.size, 4)
        self.assertEqual(len({board, Board((1, 3, 0, 2))}), 1)

    def test_conflict_count(self):
        self.assertEqual(Board((0, 1, 2, 3)).conflicts(), 6)
        self.assertEqual(Board((1, 3, 0, 2)).conflicts(), 0)


class ConflictHelperTests(unittest.TestCase):
    """The O(N) and O(N^2) counters agree."""

    def test_counters_agree(self):
        samples = [(), (0,), (0, 0, 0), (0, 1, 2, 3), (3, 1, 2, 0), (1, 3, 0, 2), (0, 4, 7, 5, 2, 6, 1, 3)]
        for board in samples:
            with self.subTest(board=board):
                self.assertEqual(conflicts(board), conflicts_on2(board))

    def test_is_valid_solution_with_explicit_size(self):
        self.assertTrue(is_valid_solution((1, 3, 0, 2), 4))
        self.assertFalse(is_valid_solution((1, 3, 0), 4))
        self.assertFalse(is_valid_solution((True, False)))


if __name__ == "__main__":
    unittest.main()
