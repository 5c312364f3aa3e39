import unittest

from game import Board, InvalidBoardSize, BOARD_SIZE


def _grid(start=0):
    return list(range(start, start + 25))


class TestBoard(unittest.TestCase):
    def test_given_wrong_number_count_when_constructing_then_invalid_board_size(self):
        for count in (0, 24, 26):
            with self.assertRaises(InvalidBoardSize) as ctx:
                Board(range(count))
            self.assertEqual(ctx.exception.count, count)
        # Also usable as a plain ValueError by callers
        with self.assertRaises(ValueError):
            Board(range(10))

    def test_given_fresh_board_when_listing_unmarked_then_all_numbers_in_order(self):
        grid = [n * 3 for n in range(25)]
        b = Board(grid)
        self.assertEqual(b.unmarked_numbers(), grid)
        self.assertFalse(b.has_won)
        self.assertEqual(b.marked, set())

    def test_given_number_not_on_board_when_marking_then_nothing_changes(self):
        b = Board(_grid())
        b.mark(3)
        self.assertFalse(b.mark(99))
        self.assertEqual(b.marked, {3})
        self.assertFalse(b.has_won)

    def test_given_first_row_drawn_when_marking_then_wins_on_fifth_mark(self):
        b = Board(_grid(1))  # row 0 is 1..5
        results = [b.mark(n) for n in [1, 2, 3, 4, 5]]
        self.assertEqual(results, [False, False, False, False, True])
        self.assertTrue(b.has_won)
        self.assertEqual(b.unmarked_numbers(), list(range(6, 26)))

    def test_given_column_drawn_when_marking_then_wins(self):
        b = Board(_grid())
        col = [b.at(r, 2) for r in range(BOARD_SIZE)]
        self.assertEqual(col, [2, 7, 12, 17, 22])
        for n in col[:-1]:
            self.assertFalse(b.mark(n))
        self.assertTrue(b.mark(col[-1]))
        self.assertTrue(b.has_won)

    def test_given_diagonal_drawn_when_marking_then_no_win(self):
        b = Board(_grid())
        for i in range(BOARD_SIZE):
            b.mark(b.at(i, i))
        for i in range(BOARD_SIZE):
            b.mark(b.at(i, BOARD_SIZE - 1 - i))
        self.assertEqual(len(b.marked), 9)
        self.assertFalse(b.has_won)

    def test_given_won_board_when_marking_more_then_stays_won_and_reports_no_new_win(self):
        b = Board(_grid())
        for n in range(5):
            b.mark(n)
        self.assertTrue(b.has_won)
        self.assertFalse(b.mark(5))
        self.assertFalse(b.mark(10))
        self.assertTrue(b.has_won)
        self.assertIn(b.index_of[10], b.marked)

    def test_given_scattered_marks_when_no_line_full_then_no_win(self):
        b = Board(_grid())
        # four from every row and column, leaving the main diagonal open
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                if r != c:
                    b.mark(b.at(r, c))
        self.assertEqual(len(b.marked), 20)
        self.assertFalse(b.has_won)
        self.assertEqual(b.unmarked_numbers(), [0, 6, 12, 18, 24])

    def test_given_duplicate_number_when_marking_then_last_cell_is_marked(self):
        grid = _grid(1)
        grid[24] = 1
        b = Board(grid)
        self.assertEqual(b.index_of[1], 24)
        b.mark(1)
        self.assertEqual(b.marked, {24})
        self.assertFalse(b.is_marked(0, 0))
        self.assertTrue(b.is_marked(4, 4))

    def test_given_board_when_copied_then_marks_are_independent(self):
        b = Board(_grid())
        b.mark(0)
        c = b.copy()
        c.mark(1)
        self.assertEqual(b.marked, {0})
        self.assertEqual(c.marked, {0, 1})
        self.assertEqual(c.numbers, b.numbers)

    def test_given_marked_board_when_pretty_then_marks_bracketed(self):
        b = Board(_grid(10))
        b.mark(10)
        b.mark(11)
        txt = b.pretty(highlight=11)
        lines = txt.splitlines()
        self.assertEqual(len(lines), 5)
        self.assertIn('[10]', lines[0])
        self.assertIn('*11*', lines[0])
        self.assertNotIn('[12]', lines[0])
        self.assertEqual(b.rows()[1], (15, 16, 17, 18, 19))


if __name__ == '__main__':
    unittest.main(verbosity=2)
