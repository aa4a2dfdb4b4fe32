"""
Mailbox Board Representation

The engine stores the board as a plain 8x8 grid of one-character piece
tokens (a "mailbox" board) and mutates it in place with make/unmake.

Piece Tokens:
    P N B R Q K   White pawn, knight, bishop, rook, queen, king
    p n b r q k   Black pieces
    .             Empty square

    Case is the color discriminator: uppercase = White, lowercase = Black.

Board Orientation:
    - Row 0 = Rank 8 (Black's back rank)
    - Row 7 = Rank 1 (White's back rank)
    - Column 0 = A-file
    - Column 7 = H-file

Auxiliary State:
    Six "has moved" flags (both kings and the four corner rooks) and a
    game-global "has castled" flag. They live on the Position so that a
    snapshot of the position captures everything a search can change.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Tuple

import chess

EMPTY = "."

BACK_RANK = "rnbqkbnr"

# Castling tags carried by a Move
KINGSIDE = "K"
QUEENSIDE = "Q"

# Rook relocation for each castling tag: (rook origin column, rook destination column)
CASTLING_ROOK_COLUMNS = {
    KINGSIDE: (7, 5),
    QUEENSIDE: (0, 3),
}

FLAG_NAMES = (
    "white_king_moved",
    "black_king_moved",
    "white_rook_a_moved",
    "white_rook_h_moved",
    "black_rook_a_moved",
    "black_rook_h_moved",
    "has_castled",
)

# Corner square -> flag recording that its rook has left (or been captured)
_ROOK_CORNER_FLAGS = {
    (7, 0): "white_rook_a_moved",
    (7, 7): "white_rook_h_moved",
    (0, 0): "black_rook_a_moved",
    (0, 7): "black_rook_h_moved",
}


def in_bounds(row: int, col: int) -> bool:
    """Check if (row, col) lies on the board."""
    return 0 <= row < 8 and 0 <= col < 8


def is_white(token: str) -> bool:
    return token != EMPTY and token.isupper()


def is_black(token: str) -> bool:
    return token != EMPTY and token.islower()


def color_of(token: str) -> Optional[chess.Color]:
    """Return chess.WHITE / chess.BLACK for a piece token, None for an empty square."""
    if token == EMPTY:
        return None
    return chess.WHITE if token.isupper() else chess.BLACK


def square_to_coordinates(square: int) -> Tuple[int, int]:
    """
    Convert python-chess square index to (row, column) coordinates.

    Args:
        square: Square index (0-63) where 0=A1, 63=H8

    Returns:
        Tuple of (row, col) where row 0 = rank 8 and col 0 = A-file
    """
    return 7 - chess.square_rank(square), chess.square_file(square)


def coordinates_to_square(row: int, col: int) -> int:
    """
    Convert (row, column) coordinates to python-chess square index.

    Args:
        row: Row index (0-7) where 0 is rank 8
        col: Column index (0-7) where 0 is A-file

    Returns:
        Square index (0-63)
    """
    return chess.square(col, 7 - row)


class Move(NamedTuple):
    """
    A directed pair of squares plus an optional castling tag.

    Attributes:
        from_row, from_col: Origin square
        to_row, to_col: Destination square
        tag: None for ordinary moves, KINGSIDE or QUEENSIDE for castling
    """

    from_row: int
    from_col: int
    to_row: int
    to_col: int
    tag: Optional[str] = None

    @property
    def origin(self) -> Tuple[int, int]:
        return self.from_row, self.from_col

    @property
    def destination(self) -> Tuple[int, int]:
        return self.to_row, self.to_col

    @property
    def is_castling(self) -> bool:
        return self.tag is not None

    def same_squares(self, other: "Move") -> bool:
        """True if both moves connect the same origin and destination."""
        return self.origin == other.origin and self.destination == other.destination


class UndoInfo(NamedTuple):
    """Everything make_move() overwrote, so unmake_move() can put it back."""

    captured: str
    flags: Tuple[bool, ...]


def _empty_grid() -> List[List[str]]:
    return [[EMPTY] * 8 for _ in range(8)]


@dataclass
class Position:
    """
    Mutable chess position: the grid plus castling bookkeeping.

    A Position is mutated in place by make_move() and restored by
    unmake_move(). It is copied only for whole-board snapshots and for
    private per-task copies in a parallel root search.
    """

    grid: List[List[str]] = field(default_factory=_empty_grid)
    white_king_moved: bool = False
    black_king_moved: bool = False
    white_rook_a_moved: bool = False
    white_rook_h_moved: bool = False
    black_rook_a_moved: bool = False
    black_rook_h_moved: bool = False
    has_castled: bool = False

    def __post_init__(self):
        if len(self.grid) != 8 or any(len(row) != 8 for row in self.grid):
            raise ValueError("Board grid must be 8x8")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "Position":
        return cls()

    @classmethod
    def initial(cls) -> "Position":
        """Create the standard starting layout."""
        position = cls()
        for col in range(8):
            position.grid[0][col] = BACK_RANK[col]
            position.grid[1][col] = "p"
            position.grid[6][col] = "P"
            position.grid[7][col] = BACK_RANK[col].upper()
        return position

    @classmethod
    def from_board(cls, board: chess.Board) -> "Position":
        """
        Build a Position from a python-chess Board.

        Castling flags are derived from the board's castling rights: a
        missing right marks the corresponding rook as moved, and losing both
        rights marks the king as moved. Side to move, en passant and move
        counters are not represented.
        """
        position = cls()
        for square, piece in board.piece_map().items():
            row, col = square_to_coordinates(square)
            position.grid[row][col] = piece.symbol()

        position.white_rook_h_moved = not board.has_kingside_castling_rights(chess.WHITE)
        position.white_rook_a_moved = not board.has_queenside_castling_rights(chess.WHITE)
        position.black_rook_h_moved = not board.has_kingside_castling_rights(chess.BLACK)
        position.black_rook_a_moved = not board.has_queenside_castling_rights(chess.BLACK)
        position.white_king_moved = not board.has_castling_rights(chess.WHITE)
        position.black_king_moved = not board.has_castling_rights(chess.BLACK)
        return position

    @classmethod
    def from_fen(cls, fen: str) -> "Position":
        """Build a Position from a FEN string (parsed by python-chess)."""
        return cls.from_board(chess.Board(fen))

    def to_board(self, turn: chess.Color = chess.WHITE) -> chess.Board:
        """Convert to a python-chess Board (pieces and side to move only)."""
        board = chess.Board(fen=None)
        for row in range(8):
            for col in range(8):
                token = self.grid[row][col]
                if token != EMPTY:
                    board.set_piece_at(
                        coordinates_to_square(row, col), chess.Piece.from_symbol(token)
                    )
        board.turn = turn
        return board

    # ------------------------------------------------------------------
    # Square access
    # ------------------------------------------------------------------

    def piece_at(self, row: int, col: int) -> str:
        """
        Return the token on (row, col).

        Raises:
            IndexError: If the coordinates are off the board
        """
        if not in_bounds(row, col):
            raise IndexError(f"Square ({row}, {col}) is off the board")
        return self.grid[row][col]

    def set_piece(self, row: int, col: int, token: str) -> None:
        if not in_bounds(row, col):
            raise IndexError(f"Square ({row}, {col}) is off the board")
        if token != EMPTY and token not in "PNBRQKpnbrqk":
            raise ValueError(f"Invalid piece token: {token!r}")
        self.grid[row][col] = token

    def pieces(self, side: Optional[chess.Color] = None):
        """Yield (row, col, token) for occupied squares in row-major order."""
        for row in range(8):
            for col in range(8):
                token = self.grid[row][col]
                if token == EMPTY:
                    continue
                if side is None or color_of(token) == side:
                    yield row, col, token

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    @property
    def flags(self) -> Tuple[bool, ...]:
        return tuple(getattr(self, name) for name in FLAG_NAMES)

    def _set_flags(self, flags: Tuple[bool, ...]) -> None:
        for name, value in zip(FLAG_NAMES, flags):
            setattr(self, name, value)

    def copy(self) -> "Position":
        """Deep copy of the grid and every flag."""
        position = Position(grid=[list(row) for row in self.grid])
        position._set_flags(self.flags)
        return position

    def restore(self, snapshot: "Position") -> None:
        """Overwrite this position in place with the contents of a snapshot."""
        for row in range(8):
            self.grid[row][:] = snapshot.grid[row]
        self._set_flags(snapshot.flags)

    # ------------------------------------------------------------------
    # Make / unmake
    # ------------------------------------------------------------------

    def make_move(self, move: Move) -> UndoInfo:
        """
        Apply a move in place.

        The destination receives the moving token and the origin is cleared.
        A castling tag additionally relocates the corresponding rook and sets
        has_castled. Moved flags are updated for kings and corner rooks.

        Returns:
            UndoInfo to hand back to unmake_move()
        """
        grid = self.grid
        piece = grid[move.from_row][move.from_col]
        undo = UndoInfo(grid[move.to_row][move.to_col], self.flags)

        grid[move.to_row][move.to_col] = piece
        grid[move.from_row][move.from_col] = EMPTY

        if move.tag is not None:
            rook_from, rook_to = CASTLING_ROOK_COLUMNS[move.tag]
            row = move.from_row
            grid[row][rook_to] = grid[row][rook_from]
            grid[row][rook_from] = EMPTY
            setattr(self, _ROOK_CORNER_FLAGS[(row, rook_from)], True)
            self.has_castled = True

        if piece == "K":
            self.white_king_moved = True
        elif piece == "k":
            self.black_king_moved = True

        for square in (move.origin, move.destination):
            flag = _ROOK_CORNER_FLAGS.get(square)
            if flag is not None:
                setattr(self, flag, True)

        return undo

    def unmake_move(self, move: Move, undo: UndoInfo) -> None:
        """Exactly reverse make_move()."""
        grid = self.grid
        grid[move.from_row][move.from_col] = grid[move.to_row][move.to_col]
        grid[move.to_row][move.to_col] = undo.captured

        if move.tag is not None:
            rook_from, rook_to = CASTLING_ROOK_COLUMNS[move.tag]
            row = move.from_row
            grid[row][rook_from] = grid[row][rook_to]
            grid[row][rook_to] = EMPTY

        self._set_flags(undo.flags)

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.grid)
