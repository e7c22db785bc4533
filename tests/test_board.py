import pytest

from binoxxo.core.board import Board
from binoxxo.core.editable_mask import EditableMask
from binoxxo.core.field import Field


class TestField:
    def test_toggle_cycle(self):
        assert Field.EMPTY.next() is Field.X
        assert Field.X.next() is Field.O
        assert Field.O.next() is Field.EMPTY

    def test_opposite(self):
        assert Field.X.opposite() is Field.O
        assert Field.O.opposite() is Field.X
        assert Field.EMPTY.opposite() is Field.EMPTY

    def test_symbols(self):
        assert [str(f) for f in Field] == ["_", "X", "O"]
        assert Field.from_symbol("x") is Field.X
        assert Field.from_symbol("O") is Field.O
        assert Field.from_symbol(".") is Field.EMPTY
        assert Field.from_symbol("_") is Field.EMPTY

    def test_unknown_symbol(self):
        with pytest.raises(ValueError):
            Field.from_symbol("1")


class TestBoardConstruction:
    @pytest.mark.parametrize("size", [2, 4, 6, 8, 10])
    def test_new_board_is_empty(self, size):
        board = Board(size)
        assert board.size() == size
        assert board.empty_count() == size * size
        assert all(board.get(col, row) is Field.EMPTY for col, row in board.coordinates())

    @pytest.mark.parametrize("size", [0, -2, 3, 7])
    def test_rejects_odd_or_non_positive_size(self, size):
        with pytest.raises(ValueError):
            Board(size)

    def test_rejects_non_integer_size(self):
        with pytest.raises(ValueError):
            Board("6")
        with pytest.raises(ValueError):
            Board(True)

    def test_from_rows_requires_square(self):
        with pytest.raises(ValueError):
            Board.from_rows([[Field.X, Field.O], [Field.O]])

    def test_from_lists_rejects_unknown_values(self):
        with pytest.raises(ValueError):
            Board.from_lists([[0, 3], [1, 2]])


class TestBoardAccess:
    def test_set_then_get(self):
        board = Board(4)
        board.set(3, 1, Field.O)
        assert board.get(3, 1) is Field.O
        # (col, row) addressing: the row list holds it at index 3
        assert board.row(1)[3] is Field.O
        assert board.column(3)[1] is Field.O
        assert board.empty_count() == 15

    def test_set_overwrites_unconditionally(self):
        board = Board(4)
        for field in (Field.X, Field.X, Field.O, Field.EMPTY):
            board.set(0, 0, field)
            assert board.get(0, 0) is field

    @pytest.mark.parametrize("col,row", [(-1, 0), (0, -1), (4, 0), (0, 4), (10, 10)])
    def test_out_of_range_fails(self, col, row):
        board = Board(4)
        with pytest.raises(IndexError):
            board.get(col, row)
        with pytest.raises(IndexError):
            board.set(col, row, Field.X)

    def test_set_requires_field(self):
        board = Board(4)
        with pytest.raises(TypeError):
            board.set(0, 0, 1)

    def test_copy_is_independent(self, valid_4):
        clone = valid_4.copy()
        assert clone == valid_4
        clone.set(0, 0, Field.EMPTY)
        assert clone != valid_4
        assert valid_4.get(0, 0) is Field.X

    def test_coordinates_are_row_major(self):
        assert list(Board(2).coordinates()) == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_repr(self, valid_4):
        assert repr(valid_4) == "Board(size=4, rows='XXOO/OOXX/XOOX/OXXO')"


class TestEditableMask:
    def test_is_editable(self):
        mask = EditableMask(4, [(1, 0), (3, 2)])
        assert mask.is_editable(1, 0)
        assert mask.is_editable(3, 2)
        assert not mask.is_editable(0, 1)
        assert len(mask) == 2
        assert (3, 2) in mask
        assert (2, 3) not in mask

    def test_iterates_row_major(self):
        mask = EditableMask(4, [(3, 2), (1, 0), (0, 2)])
        assert list(mask) == [(1, 0), (0, 2), (3, 2)]

    def test_out_of_range_query_fails(self):
        mask = EditableMask(4)
        with pytest.raises(IndexError):
            mask.is_editable(4, 0)
        with pytest.raises(IndexError):
            mask.is_editable(0, -1)
        with pytest.raises(IndexError):
            (9, 9) in mask
        with pytest.raises(IndexError):
            (0, -1) in mask

    def test_coordinates_must_lie_on_board(self):
        with pytest.raises(ValueError):
            EditableMask(4, [(4, 0)])

    def test_from_empty_cells(self, valid_4):
        valid_4.set(2, 1, Field.EMPTY)
        valid_4.set(0, 3, Field.EMPTY)
        mask = EditableMask.from_empty_cells(valid_4)
        assert list(mask) == [(2, 1), (0, 3)]

    def test_equality(self):
        assert EditableMask(4, [(0, 0)]) == EditableMask(4, [(0, 0)])
        assert EditableMask(4, [(0, 0)]) != EditableMask(4, [(1, 0)])
        assert hash(EditableMask(4, [(0, 0)])) == hash(EditableMask(4, [(0, 0)]))
