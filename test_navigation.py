import curses
import random
import unittest

from grid_state import GridState
from navigation import NavigationController


SARA = [{"name": "Sara", "city": "Oslo", "age": 23}]


def _controller(records):
    state = GridState(records)
    focus_calls = []
    nav = NavigationController(state, lambda r, c: focus_calls.append((r, c)))
    return nav, state, focus_calls


class AdvanceTests(unittest.TestCase):
    def test_four_advances_on_two_by_three_grid(self):
        nav, state, focus = _controller([{"a": 1, "b": 2}])
        self.assertEqual((state.total_rows, state.total_cols), (2, 3))
        for _ in range(4):
            nav.advance()
        self.assertEqual(state.revealed_count, 5)
        self.assertEqual(state.cursor, (1, 1))
        self.assertEqual(focus, [(0, 1), (0, 2), (1, 0), (1, 1)])

    def test_advance_saturates_at_last_cell(self):
        nav, state, focus = _controller(SARA)
        for _ in range(7):
            nav.advance()
        self.assertEqual(state.cursor, (1, 3))
        self.assertEqual(state.revealed_count, 8)

        nav.advance()
        nav.advance()
        self.assertEqual(state.cursor, (1, 3))
        self.assertEqual(state.revealed_count, 8)
        # still a move, focus is requested again
        self.assertEqual(focus[-1], (1, 3))

    def test_advance_row_reveals_the_whole_next_row(self):
        nav, state, focus = _controller(SARA)
        self.assertTrue(nav.advance_row())
        self.assertEqual(state.revealed_count, 8)
        self.assertEqual(state.cursor, (1, 0))
        self.assertEqual(focus, [(1, 0)])

    def test_advance_row_saturates_at_last_row(self):
        nav, state, _ = _controller(SARA)
        nav.advance_row()
        nav.advance()
        nav.advance_row()
        self.assertEqual(state.cursor, (1, 0))
        self.assertEqual(state.revealed_count, 8)

    def test_advance_row_resets_column(self):
        nav, state, _ = _controller([{"a": 1}, {"a": 2}])
        nav.advance()
        self.assertEqual(state.cursor, (0, 1))
        nav.advance_row()
        self.assertEqual(state.cursor, (1, 0))
        self.assertEqual(state.revealed_count, 4)


class RetreatTests(unittest.TestCase):
    def test_retreat_moves_back_without_growing_frontier(self):
        nav, state, focus = _controller(SARA)
        nav.advance()
        nav.advance()
        self.assertTrue(nav.retreat())
        self.assertEqual(state.cursor, (0, 1))
        self.assertEqual(state.revealed_count, 3)
        self.assertEqual(focus[-1], (0, 1))

    def test_retreat_wraps_to_previous_row(self):
        nav, state, _ = _controller(SARA)
        nav.advance_row()
        nav.retreat()
        self.assertEqual(state.cursor, (0, 3))
        self.assertEqual(state.revealed_count, 8)

    def test_retreat_at_first_cell_stays_put(self):
        nav, state, _ = _controller(SARA)
        nav.retreat()
        self.assertEqual(state.cursor, (0, 0))
        self.assertEqual(state.revealed_count, 1)

    def test_retreat_row_preserves_column(self):
        nav, state, focus = _controller(SARA)
        nav.advance_row()
        nav.advance()
        nav.advance()
        self.assertTrue(nav.retreat_row())
        self.assertEqual(state.cursor, (0, 2))
        self.assertEqual(focus[-1], (0, 2))

    def test_retreat_row_blocked_by_unrevealed_target(self):
        nav, state, focus = _controller(SARA)
        state.cursor = (1, 2)
        self.assertFalse(nav.retreat_row())
        self.assertEqual(state.cursor, (1, 2))
        self.assertEqual(focus, [])


class KeyDispatchTests(unittest.TestCase):
    def test_arrow_keys_map_to_commands(self):
        nav, state, _ = _controller(SARA)
        self.assertTrue(nav.handle_key(curses.KEY_DOWN))
        self.assertEqual(state.cursor, (1, 0))
        self.assertTrue(nav.handle_key(curses.KEY_RIGHT))
        self.assertEqual(state.cursor, (1, 1))
        self.assertTrue(nav.handle_key(curses.KEY_LEFT))
        self.assertEqual(state.cursor, (1, 0))
        self.assertTrue(nav.handle_key(curses.KEY_UP))
        self.assertEqual(state.cursor, (0, 0))

    def test_other_keys_are_not_consumed(self):
        nav, state, focus = _controller(SARA)
        self.assertFalse(nav.handle_key(ord("l")))
        self.assertEqual(focus, [])

    def test_focus_initial_targets_first_cell(self):
        nav, _, focus = _controller(SARA)
        self.assertTrue(nav.focus_initial())
        self.assertEqual(focus, [(0, 0)])

    def test_empty_grid_ignores_navigation(self):
        nav, state, focus = _controller(SARA)
        state.reset_for_new_shape([], [])
        for key in (curses.KEY_RIGHT, curses.KEY_DOWN, curses.KEY_LEFT, curses.KEY_UP):
            nav.handle_key(key)
        self.assertFalse(nav.focus_initial())
        self.assertEqual(state.revealed_count, 0)
        self.assertEqual(focus, [])


class FrontierInvariantTests(unittest.TestCase):
    def test_random_walks_keep_frontier_monotonic_and_cursor_revealed(self):
        records = [{"a": i, "b": i * 2, "c": str(i)} for i in range(5)]
        keys = [curses.KEY_RIGHT, curses.KEY_DOWN, curses.KEY_LEFT, curses.KEY_UP]
        rng = random.Random(1337)
        for _ in range(20):
            nav, state, _ = _controller(records)
            previous = state.revealed_count
            for _ in range(60):
                key = rng.choice(keys)
                before = state.revealed_count
                nav.handle_key(key)
                self.assertGreaterEqual(state.revealed_count, previous)
                if key in (curses.KEY_LEFT, curses.KEY_UP):
                    self.assertEqual(state.revealed_count, before)
                self.assertTrue(state.is_revealed(*state.cursor))
                self.assertGreaterEqual(state.revealed_count, 1)
                previous = state.revealed_count


if __name__ == "__main__":
    unittest.main()
