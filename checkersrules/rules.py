"""Board representation and move rules for 8x8 checkers.

A board is a list of rows, indexed ``board[y][x]``. White men move toward
row 0, black men toward row ``SIZE - 1``. Men capture in all four diagonal
directions; kings move and capture along whole diagonals.
"""

from __future__ import annotations

from enum import Enum, IntEnum

SIZE = 8

_DIAGONALS = ((1, 1), (1, -1), (-1, -1), (-1, 1))

Board = list[list[int]]
Square = tuple[int, int]


class Piece(IntEnum):
    """Contents of a board square."""

    NONE = 0
    WHITE = 1
    BLACK = 2
    WHITE_KING = 3
    BLACK_KING = 4


class Side(Enum):
    """One of the two players."""

    WHITE = "white"
    BLACK = "black"


class Phase(IntEnum):
    """Stage of a turn: choosing a piece or choosing where it goes."""

    WHITE_CHOOSE = 0
    WHITE_MOVE = 1
    BLACK_CHOOSE = 2
    BLACK_MOVE = 3


def empty_board() -> Board:
    """Return a SIZE x SIZE board with every square empty."""
    return [[Piece.NONE] * SIZE for _ in range(SIZE)]


def pieces_of(side: Side) -> tuple[Piece, Piece]:
    """Return the ``(man, king)`` pieces belonging to ``side``."""
    if side is Side.WHITE:
        return Piece.WHITE, Piece.WHITE_KING
    return Piece.BLACK, Piece.BLACK_KING


def opponent(side: Side) -> Side:
    """Return the other side."""
    return Side.BLACK if side is Side.WHITE else Side.WHITE


def has_lost(board: Board, side: Side) -> bool:
    """True when ``side`` has no pieces left on the board."""
    own = pieces_of(side)
    return not any(piece in own for row in board for piece in row)


def _on_board(x: int, y: int) -> bool:
    return 0 <= x < SIZE and 0 <= y < SIZE


def _require_square(x: int, y: int) -> None:
    if not _on_board(x, y):
        raise ValueError(f"square ({x}, {y}) is off the board")


def _inside(value: int, step: int) -> bool:
    # A capture needs a square beyond the captured piece, so the scan
    # stops one short of the edge in the direction of travel.
    return value > 0 if step < 0 else value < SIZE - 1


def king_capture_targets(board: Board, x: int, y: int, side: Side) -> frozenset[Square]:
    """Squares a king of ``side`` at ``(x, y)`` may land on after a capture."""
    _require_square(x, y)
    own = pieces_of(side)
    enemy = pieces_of(opponent(side))
    targets: set[Square] = set()
    for dx, dy in _DIAGONALS:
        cx, cy = x + dx, y + dy
        while _inside(cx, dx) and _inside(cy, dy):
            piece = board[cy][cx]
            if piece in own:
                break
            if piece in enemy:
                cx, cy = cx + dx, cy + dy
                while _on_board(cx, cy) and board[cy][cx] == Piece.NONE:
                    targets.add((cx, cy))
                    cx, cy = cx + dx, cy + dy
                break
            cx, cy = cx + dx, cy + dy
    return frozenset(targets)


def man_capture_targets(board: Board, x: int, y: int, side: Side) -> frozenset[Square]:
    """Squares a man of ``side`` at ``(x, y)`` may jump to, in any direction."""
    _require_square(x, y)
    enemy = pieces_of(opponent(side))
    targets = set()
    for dx, dy in _DIAGONALS:
        lx, ly = x + 2 * dx, y + 2 * dy
        if not _on_board(lx, ly):
            continue
        if board[y + dy][x + dx] in enemy and board[ly][lx] == Piece.NONE:
            targets.add((lx, ly))
    return frozenset(targets)


def king_options(board: Board, x: int, y: int, side: Side) -> tuple[frozenset[Square], frozenset[Square]]:
    """Return ``(moves, captures)`` for a king; moves are empty when it can capture."""
    captures = king_capture_targets(board, x, y, side)
    if captures:
        return frozenset(), captures
    moves = set()
    for dx, dy in _DIAGONALS:
        cx, cy = x + dx, y + dy
        while _on_board(cx, cy) and board[cy][cx] == Piece.NONE:
            moves.add((cx, cy))
            cx, cy = cx + dx, cy + dy
    return frozenset(moves), captures


def man_options(board: Board, x: int, y: int, side: Side) -> tuple[frozenset[Square], frozenset[Square]]:
    """Return ``(moves, captures)`` for a man; moves are empty when it can capture."""
    captures = man_capture_targets(board, x, y, side)
    if captures:
        return frozenset(), captures
    forward = -1 if side is Side.WHITE else 1
    moves = {
        (x + dx, y + forward)
        for dx in (-1, 1)
        if _on_board(x + dx, y + forward) and board[y + forward][x + dx] == Piece.NONE
    }
    return frozenset(moves), captures


def has_capture_moves(board: Board, side: Side) -> bool:
    """True when any piece of ``side`` has a capture available."""
    man, king = pieces_of(side)
    for y, row in enumerate(board):
        for x, piece in enumerate(row):
            if piece == king and king_capture_targets(board, x, y, side):
                return True
            if piece == man and man_capture_targets(board, x, y, side):
                return True
    return False


def crown_kings(board: Board) -> None:
    """Promote, in place, white men on row 0 and black men on the last row."""
    top, bottom = board[0], board[SIZE - 1]
    for x in range(SIZE):
        if top[x] == Piece.WHITE:
            top[x] = Piece.WHITE_KING
        if bottom[x] == Piece.BLACK:
            bottom[x] = Piece.BLACK_KING