from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from binoxxo.core.board import Board
from binoxxo.core.editable_mask import EditableMask
from binoxxo.core.field import Field
from binoxxo.core.models import ValidityResult

CELL_SIZE = 80
BORDER = 40
TITLE_HEIGHT = 70
CAPTION_HEIGHT = 60

BACKGROUND_COLOR = (248, 248, 252)    # Light grayish blue background
GRID_COLOR = (40, 40, 50)             # Dark gray grid lines
GIVEN_COLOR = (40, 40, 50)            # Givens drawn like the grid
GUESS_COLOR = (41, 128, 185)          # Player entries in blue
GUESS_FILL = (235, 242, 250)          # Editable cell background
SUCCESS_COLOR = (39, 174, 96)
FAILURE_COLOR = (192, 57, 43)

FONTS = ["Arial.ttf", "Helvetica.ttf", "DejaVuSans.ttf", "Verdana.ttf"]


def _load_font(size: int):
    for font in FONTS:
        try:
            return ImageFont.truetype(font, size)
        except IOError:
            continue
    return ImageFont.load_default()


def _text_width(draw: ImageDraw.ImageDraw, text: str, font) -> int:
    left, _, right, _ = draw.textbbox((0, 0), text, font=font)
    return right - left


def _draw_field(draw: ImageDraw.ImageDraw, field: Field, x: int, y: int, color):
    """Draw one symbol centred on (x, y)."""
    radius = CELL_SIZE // 2 - 16
    if field is Field.X:
        draw.line([(x - radius, y - radius), (x + radius, y + radius)], fill=color, width=6)
        draw.line([(x - radius, y + radius), (x + radius, y - radius)], fill=color, width=6)
    elif field is Field.O:
        draw.ellipse([(x - radius, y - radius), (x + radius, y + radius)], outline=color, width=6)
    else:
        dot = 3
        draw.ellipse([(x - dot, y - dot), (x + dot, y + dot)], fill=(200, 200, 210))


def create_board_image(board: Board,
                       editable: Optional[EditableMask] = None,
                       validity: Optional[ValidityResult] = None) -> Image.Image:
    """
    Render the board as a PIL image.

    Given cells are drawn dark, editable cells get a light background and
    blue symbols. When ``validity`` says the board is full, a caption shows
    whether the game is won.
    """
    size = board.size()
    grid_size = size * CELL_SIZE
    img_width = grid_size + 2 * BORDER
    img_height = grid_size + 2 * BORDER + TITLE_HEIGHT + CAPTION_HEIGHT

    img = Image.new('RGB', (img_width, img_height), color=BACKGROUND_COLOR)
    draw = ImageDraw.Draw(img)
    title_font = _load_font(36)
    caption_font = _load_font(24)

    title = f"Binoxxo ({size}×{size})"
    draw.text(((img_width - _text_width(draw, title, title_font)) // 2, BORDER // 2),
              title, fill=GRID_COLOR, font=title_font)

    top = BORDER + TITLE_HEIGHT
    for row in range(size):
        for col in range(size):
            left = BORDER + col * CELL_SIZE
            upper = top + row * CELL_SIZE
            is_guess = editable is not None and editable.is_editable(col, row)
            if is_guess:
                draw.rectangle([(left, upper), (left + CELL_SIZE, upper + CELL_SIZE)], fill=GUESS_FILL)
            _draw_field(draw, board.get(col, row),
                        left + CELL_SIZE // 2, upper + CELL_SIZE // 2,
                        GUESS_COLOR if is_guess else GIVEN_COLOR)

    for i in range(size + 1):
        line_width = 3 if i in (0, size) else 1
        draw.line([(BORDER, top + i * CELL_SIZE), (BORDER + grid_size, top + i * CELL_SIZE)],
                  fill=GRID_COLOR, width=line_width)
        draw.line([(BORDER + i * CELL_SIZE, top), (BORDER + i * CELL_SIZE, top + grid_size)],
                  fill=GRID_COLOR, width=line_width)

    if validity is not None and validity.is_full:
        caption = "Success!" if validity.is_valid else "Sorry. Try again."
        color = SUCCESS_COLOR if validity.is_valid else FAILURE_COLOR
        draw.text(((img_width - _text_width(draw, caption, caption_font)) // 2,
                   top + grid_size + CAPTION_HEIGHT // 3),
                  caption, fill=color, font=caption_font)

    return img


def save_board_image(board: Board, file_path: str,
                     editable: Optional[EditableMask] = None,
                     validity: Optional[ValidityResult] = None) -> str:
    """Render the board and save it to ``file_path``."""
    img = create_board_image(board, editable=editable, validity=validity)
    img.save(file_path, optimize=True)
    return file_path
