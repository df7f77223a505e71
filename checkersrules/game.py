"""Turn-by-turn state of a checkers game driven by square selections."""

from __future__ import annotations

from collections.abc import Iterable

from checkersrules.rules import (
    SIZE,
    Board,
    Phase,
    Piece,
    Side,
    Square,
    has_capture_moves,
    has_lost,
    king_capture_targets,
    king_options,
    man_capture_targets,
    man_options,
    opponent,
    pieces_of,
)

_SIDE_OF_PHASE = {
    Phase.WHITE_CHOOSE: Side.WHITE,
    Phase.WHITE_MOVE: Side.WHITE,
    Phase.BLACK_CHOOSE: Side.BLACK,
    Phase.BLACK_MOVE: Side.BLACK,
}
_CHOOSE_PHASE = {Side.WHITE: Phase.WHITE_CHOOSE, Side.BLACK: Phase.BLACK_CHOOSE}
_MOVE_PHASE = {Side.WHITE: Phase.WHITE_MOVE, Side.BLACK: Phase.BLACK_MOVE}
_CROWN_ROW = {Side.WHITE: 0, Side.BLACK: SIZE - 1}


class IllegalMove(Exception):
    """Raised when a selection or move is not allowed in the current state."""


def _copy(board: Board) -> Board:
    return [list(row) for row in board]


def _validated(board: Iterable[Iterable[int]]) -> Board:
    rows = [list(row) for row in board]
    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise ValueError(f"board must be {SIZE}x{SIZE}")
    try:
        return [[Piece(value) for value in row] for row in rows]
    except ValueError as exc:
        raise ValueError(f"board holds an unknown piece value: {exc}") from exc


def _on_board(x: int, y: int) -> bool:
    return 0 <= x < SIZE and 0 <= y < SIZE


class Game:
    """A game of checkers: selection, moves, capture chains, undo and reset."""

    def __init__(self, initial_board: Iterable[Iterable[int]]) -> None:
        self._initial = _validated(initial_board)
        self._board: Board = []
        self._history: list[Board] = []
        self._phase = Phase.WHITE_CHOOSE
        self._selected: Square | None = None
        self._moves: frozenset[Square] = frozenset()
        self._captures: frozenset[Square] = frozenset()
        self._chain = False
        self.reset()

    @property
    def board(self) -> Board:
        """A copy of the current board."""
        return _copy(self._board)

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def selected(self) -> Square | None:
        """The square of the selected piece, if any."""
        return self._selected

    @property
    def move_targets(self) -> frozenset[Square]:
        """Squares the selected piece may move to without capturing."""
        return self._moves

    @property
    def capture_targets(self) -> frozenset[Square]:
        """Squares the selected piece may land on by capturing."""
        return self._captures

    @property
    def in_capture_chain(self) -> bool:
        """True while a piece that has just captured must capture again."""
        return self._chain

    @property
    def history_length(self) -> int:
        """Number of recorded positions, the starting one included."""
        return len(self._history)

    @property
    def _side(self) -> Side:
        return _SIDE_OF_PHASE[self._phase]

    def _clear_selection(self) -> None:
        self._selected = None
        self._moves = frozenset()
        self._captures = frozenset()
        self._chain = False

    def select(self, x: int, y: int) -> None:
        """Pick the piece at ``(x, y)`` for the side to move."""
        if self._phase not in _CHOOSE_PHASE.values():
            raise IllegalMove("a piece is already selected")
        if not _on_board(x, y):
            raise IllegalMove(f"square ({x}, {y}) is off the board")
        side = self._side
        man, king = pieces_of(side)
        piece = self._board[y][x]
        if piece not in (man, king):
            raise IllegalMove(f"no {side.value} piece on ({x}, {y})")
        options = king_options if piece == king else man_options
        moves, captures = options(self._board, x, y, side)
        if has_capture_moves(self._board, side):
            moves = frozenset()
        self._selected = (x, y)
        self._moves = moves
        self._captures = captures
        self._phase = _MOVE_PHASE[side]

    def move_to(self, x: int, y: int) -> None:
        """Move the selected piece to ``(x, y)``, capturing if it jumps."""
        if self._phase not in _MOVE_PHASE.values() or self._selected is None:
            raise IllegalMove("no piece is selected")
        target = (x, y)
        if target in self._captures:
            capturing = True
        elif target in self._moves:
            capturing = False
        else:
            raise IllegalMove(f"cannot move to ({x}, {y})")
        side = self._side
        self._step(side, self._selected, target, capturing)
        if capturing:
            further = self._continuations(side, target)
            if further:
                self._selected = target
                self._moves = frozenset()
                self._captures = further
                self._chain = True
                return
        self._finish_turn(side)

    def _step(self, side: Side, source: Square, target: Square, capturing: bool) -> None:
        sx, sy = source
        tx, ty = target
        man, king = pieces_of(side)
        piece = self._board[sy][sx]
        if piece == man:
            self._board[ty][tx] = king if ty == _CROWN_ROW[side] else man
        elif piece == king:
            self._board[ty][tx] = king
        self._board[sy][sx] = Piece.NONE
        if capturing:
            ux = 1 if tx > sx else -1
            uy = 1 if ty > sy else -1
            cx, cy = sx, sy
            while cx != tx and cy != ty:
                self._board[cy][cx] = Piece.NONE
                cx, cy = cx + ux, cy + uy

    def _continuations(self, side: Side, square: Square) -> frozenset[Square]:
        x, y = square
        _, king = pieces_of(side)
        if self._board[y][x] == king:
            return king_capture_targets(self._board, x, y, side)
        return man_capture_targets(self._board, x, y, side)

    def _finish_turn(self, side: Side) -> None:
        self._clear_selection()
        self._phase = _CHOOSE_PHASE[opponent(side)]
        self._history.append(_copy(self._board))

    def click(self, x: int, y: int) -> bool:
        """Act on a click at a square; return whether it changed anything."""
        if not _on_board(x, y):
            return False
        try:
            if self._phase in _CHOOSE_PHASE.values():
                self.select(x, y)
            else:
                self.move_to(x, y)
        except IllegalMove:
            return False
        return True

    def cancel(self) -> bool:
        """Drop the current selection; impossible during a capture chain."""
        if self._chain or self._phase not in _MOVE_PHASE.values():
            return False
        side = self._side
        self._clear_selection()
        self._phase = _CHOOSE_PHASE[side]
        return True

    def undo(self) -> bool:
        """Return to the previous position; return whether anything was undone."""
        if self._chain or len(self._history) <= 1:
            return False
        if self._phase in _MOVE_PHASE.values():
            self.cancel()
        self._history.pop()
        self._board = _copy(self._history[-1])
        self._phase = _CHOOSE_PHASE[opponent(self._side)]
        return True

    def reset(self) -> None:
        """Start over from the initial board with white to move."""
        self._board = _copy(self._initial)
        self._history = [_copy(self._initial)]
        self._phase = Phase.WHITE_CHOOSE
        self._clear_selection()

    def winner(self) -> Side | None:
        """The side whose opponent has no pieces left, or None."""
        if has_lost(self._board, Side.WHITE):
            return Side.BLACK
        if has_lost(self._board, Side.BLACK):
            return Side.WHITE
        return None