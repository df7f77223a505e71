# checkersrules

A small, dependency-free rules engine for 8x8 checkers. It knows how men
and flying kings move and capture, keeps track of whose turn it is, runs
multi-jump capture chains, crowns men that reach the far row, and keeps a
history of positions so moves can be undone.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Coordinates and pieces

Squares are addressed as `(x, y)`: `x` is the column and `y` is the row,
both counted from 0 to 7, and a board is a list of rows indexed
`board[y][x]`. White men move towards row 0 and are crowned there; black
men move towards row 7 and are crowned there. Men capture in all four
diagonal directions; kings move and capture along whole diagonals.

Square contents are members of `Piece` (`NONE`, `WHITE`, `BLACK`,
`WHITE_KING`, `BLACK_KING`). The two players are members of `Side`, and
the state of a turn is a member of `Phase`: a side is either choosing a
piece (`WHITE_CHOOSE`, `BLACK_CHOOSE`) or moving the piece it has chosen
(`WHITE_MOVE`, `BLACK_MOVE`). White moves first.

## Playing a game

`Game` is built from a starting board: any 8x8 grid of `Piece` values (or
the matching integers). A board of another size or with an unknown value
raises `ValueError`.

```python
from checkersrules.game import Game, IllegalMove
from checkersrules.rules import Piece, empty_board

board = empty_board()
board[5][2] = Piece.WHITE
board[2][5] = Piece.BLACK

game = Game(board)

game.select(2, 5)            # pick the white man
print(game.move_targets)     # frozenset({(1, 4), (3, 4)})
print(game.capture_targets)  # frozenset()

game.move_to(3, 4)           # make the move; now black chooses
print(game.phase)            # Phase.BLACK_CHOOSE

try:
    game.move_to(0, 0)       # nothing is selected yet
except IllegalMove:
    pass

game.undo()                  # back to the starting position, white to move
game.reset()                 # start over from the board given to Game
```

- `select(x, y)` and `move_to(x, y)` raise `IllegalMove` when the square
  is not a valid choice in the current phase.
- When any piece of the side to move can capture, the selected piece gets
  no quiet moves; only captures are offered.
- `click(x, y)` does whichever of selecting or moving fits the current
  phase and returns whether it changed anything, instead of raising.
- `cancel()` drops the current selection and returns `True`, or `False`
  when there is nothing to cancel or a capture chain is in progress.
- When a capture leaves the piece able to capture again,
  `in_capture_chain` is true and the same piece must continue with
  `move_to` on one of `capture_targets`; the turn passes only when the
  chain ends.
- `undo()` steps back one recorded position and returns whether it did;
  it does nothing during a capture chain or at the starting position.
- `board` returns a copy of the current board, `selected` the square of
  the selected piece (or `None`), and `history_length` the number of
  recorded positions, the starting one included.
- `winner()` returns the side whose opponent has no pieces left, or
  `None`.

## Working with boards directly

The functions in `checkersrules.rules` work on a plain board and can be
used without a `Game`:

- `empty_board()` builds an empty 8x8 board.
- `pieces_of(side)` returns the `(man, king)` pieces of a side, and
  `opponent(side)` the other side.
- `man_options(board, x, y, side)` and `king_options(board, x, y, side)`
  return `(moves, captures)` for a piece; moves are empty when it can
  capture.
- `man_capture_targets(board, x, y, side)` and
  `king_capture_targets(board, x, y, side)` return only the capture
  landings; an off-board square raises `ValueError`.
- `has_capture_moves(board, side)` tells whether a side has any capture
  anywhere on the board.
- `crown_kings(board)` crowns, in place, men standing on their last row.
- `has_lost(board, side)` is true when a side has no pieces left.

## What it does not do

The package has no board display, no mouse or keyboard handling and no
command to run. It also ships no standard opening position: every `Game`
starts from the board it is given.