import pytest

from binoxxo.core.board import Board
from binoxxo.generator.binoxxo_generator import BinoxxoGenerator
from binoxxo.utils.board_format import parse_board

VALID_4 = """
X X O O
O O X X
X O O X
O X X O
"""

VALID_6 = """
X X O X O O
O O X O X X
X O X X O O
O X O O X X
X O X O O X
O X O X X O
"""

# Balanced and free of triples, but rows 0/2 and 1/3 (and the columns) repeat
DUPLICATE_ROWS_4 = """
X O X O
O X O X
X O X O
O X O X
"""


@pytest.fixture
def valid_4() -> Board:
    return parse_board(VALID_4)


@pytest.fixture
def valid_6() -> Board:
    return parse_board(VALID_6)


@pytest.fixture
def duplicate_rows_4() -> Board:
    return parse_board(DUPLICATE_ROWS_4)


@pytest.fixture
def generator() -> BinoxxoGenerator:
    return BinoxxoGenerator(seed=1234)
