from .board_format import format_board, format_puzzle, parse_board
from .load_difficulty_config import DEFAULT_CONFIG_PATH, load_difficulty_config
from .render import create_board_image, save_board_image

__all__ = [
    "format_board",
    "format_puzzle",
    "parse_board",
    "DEFAULT_CONFIG_PATH",
    "load_difficulty_config",
    "create_board_image",
    "save_board_image",
]
