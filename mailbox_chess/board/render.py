"""Console rendering of a Position."""

from mailbox_chess.board.position import Position

GREY = "\033[90m"
RESET = "\033[0m"


def render_board(position: Position, color: bool = True) -> str:
    """
    Render the board as text, rank 8 at the top.

    Args:
        position: Position to draw (read only)
        color: Wrap rank/file labels in ANSI grey

    Returns:
        Multi-line string ending with the file letters
    """
    start, end = (GREY, RESET) if color else ("", "")

    lines = []
    for row in range(8):
        squares = " ".join(position.grid[row])
        lines.append(f"{start}{8 - row} {end}{squares}")
    lines.append(f"{start}  a b c d e f g h{end}")
    return "\n".join(lines)
