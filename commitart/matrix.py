"""Compose per-letter glyphs into one 7-row word matrix."""

from .errors import InvalidInput, WidthExceeded
from .font import LETTER_HEIGHT, LETTER_WIDTH, glyph

SEPARATOR_WIDTH = 1
# One year of the contribution graph is 52-53 week columns; keep a margin.
MAX_COLUMNS = 60


def matrix_width(length: int) -> int:
    if length <= 0:
        return 0
    return length * LETTER_WIDTH + (length - 1) * SEPARATOR_WIDTH


def check_width(width: int, word=None):
    if width > MAX_COLUMNS:
        raise WidthExceeded(width, MAX_COLUMNS, word)


def build_matrix(word: str):
    """
    Convert `word` into a tuple of LETTER_HEIGHT rows of 0/1 cells.

    The word is upper-cased first. Every character must exist in the font
    and the rendered width must fit in MAX_COLUMNS; otherwise nothing is
    built. Letters are separated by SEPARATOR_WIDTH blank columns.
    """
    if not isinstance(word, str):
        raise InvalidInput("Word must be a string")
    word = word.upper()
    if not word:
        raise InvalidInput("Word must not be empty")

    glyphs = [glyph(ch) for ch in word]
    check_width(matrix_width(len(word)), word)

    blank = (0,) * SEPARATOR_WIDTH
    rows = []
    for row in range(LETTER_HEIGHT):
        cells = []
        for i, g in enumerate(glyphs):
            if i:
                cells.extend(blank)
            cells.extend(g[row])
        rows.append(tuple(cells))
    return tuple(rows)


def count_active(matrix) -> int:
    return sum(sum(row) for row in matrix)
