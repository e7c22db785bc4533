import random

import pytest

from binoxxo.core.board import Board
from binoxxo.core.field import Field
from binoxxo.core.rules import is_board_full, is_board_valid
from binoxxo.generator.search import SearchLimitExceeded, count_solutions, iter_solutions, solve_first
from binoxxo.utils.board_format import parse_board


class TestIterSolutions:
    @pytest.mark.parametrize("size", [2, 4, 6, 8])
    def test_fills_empty_board(self, size):
        values = solve_first(Board(size).to_lists(), rng=random.Random(size))
        solution = Board.from_lists(values)
        assert is_board_full(solution)
        assert is_board_valid(solution)

    def test_recovers_removed_cells(self, valid_6):
        puzzle = valid_6.copy()
        for col, row in [(0, 0), (3, 2), (5, 5)]:
            puzzle.set(col, row, Field.EMPTY)
        solutions = list(iter_solutions(puzzle.to_lists()))
        assert solutions == [valid_6.to_lists()]

    def test_full_board_is_its_own_solution(self, valid_4):
        assert list(iter_solutions(valid_4.to_lists())) == [valid_4.to_lists()]

    def test_does_not_modify_input(self):
        values = Board(4).to_lists()
        solve_first(values)
        assert values == Board(4).to_lists()

    def test_all_solutions_are_distinct_and_valid(self):
        solutions = list(iter_solutions(Board(4).to_lists()))
        assert len(solutions) == len({str(s) for s in solutions})
        assert all(is_board_valid(Board.from_lists(s)) for s in solutions)

    def test_two_by_two(self):
        solutions = sorted(iter_solutions(Board(2).to_lists()))
        assert solutions == [[[1, 2], [2, 1]], [[2, 1], [1, 2]]]

    def test_same_seed_same_solution(self):
        empty = Board(8).to_lists()
        assert solve_first(empty, rng=random.Random(5)) == solve_first(empty, rng=random.Random(5))

    def test_step_limit(self):
        with pytest.raises(SearchLimitExceeded) as exc_info:
            solve_first(Board(6).to_lists(), max_steps=10)
        assert exc_info.value.steps == 10


class TestCountSolutions:
    def test_full_valid_board(self, valid_6):
        assert count_solutions(valid_6) == 1

    def test_invalid_board_has_none(self, duplicate_rows_4):
        assert count_solutions(duplicate_rows_4) == 0

    def test_empty_board_is_ambiguous(self):
        assert count_solutions(Board(6), limit=2) == 2

    def test_unsolvable_partial_board(self):
        # rows 1 and 2 both need an O, giving three Os in the last column
        board = parse_board("""
        X O X O
        O X X _
        X X O _
        _ _ _ _
        """)
        assert is_board_valid(board)
        assert count_solutions(board) == 0

    def test_step_budget_reports_limit(self):
        assert count_solutions(Board(8), limit=3, max_steps=5) == 3
