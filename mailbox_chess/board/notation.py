"""
Long Algebraic Notation Conversion

Translates move text such as "e2e4" to and from the engine's internal
(row, col) coordinates. Files a-h map to columns 0-7; ranks 8-1 map to
rows 0-7 because the board is stored with Black on top.

Parsing is delegated to python-chess (chess.Move.from_uci), so the
accepted syntax is the UCI flavour of long algebraic notation. A fifth
promotion character is accepted but ignored: the engine does not promote.
"""

import chess

from mailbox_chess.board.position import Move, coordinates_to_square, square_to_coordinates


class NotationError(ValueError):
    """Raised when move text is not valid long algebraic notation."""


def to_coordinates(text: str) -> Move:
    """
    Parse long algebraic move text.

    Args:
        text: Move text, e.g. "e2e4" (case-insensitive, surrounding
            whitespace ignored)

    Returns:
        Move with origin/destination coordinates and no castling tag

    Raises:
        NotationError: If the text is not a from-square/to-square move
    """
    cleaned = text.strip().lower()
    try:
        parsed = chess.Move.from_uci(cleaned)
    except ValueError as e:
        raise NotationError(f"Invalid move notation: {text!r}") from e

    if not parsed or parsed.drop is not None or parsed.from_square == parsed.to_square:
        raise NotationError(f"Invalid move notation: {text!r}")

    from_row, from_col = square_to_coordinates(parsed.from_square)
    to_row, to_col = square_to_coordinates(parsed.to_square)
    return Move(from_row, from_col, to_row, to_col)


def to_algebraic(move: Move) -> str:
    """Format a move as four-character long algebraic text, e.g. "e7e5"."""
    return chess.square_name(
        coordinates_to_square(move.from_row, move.from_col)
    ) + chess.square_name(coordinates_to_square(move.to_row, move.to_col))
