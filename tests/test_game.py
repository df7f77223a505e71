import pytest

from checkersrules.game import Game, IllegalMove
from checkersrules.rules import (
    SIZE,
    Phase,
    Piece,
    Side,
    empty_board,
    king_capture_targets,
    king_options,
    man_capture_targets,
    man_options,
)


def _board(pieces):
    board = empty_board()
    for (x, y), piece in pieces.items():
        board[y][x] = piece
    return board


def _simple():
    return _board({(2, 5): Piece.WHITE, (5, 2): Piece.BLACK})


def test_initial_state():
    game = Game(_simple())
    assert game.phase == Phase.WHITE_CHOOSE
    assert game.selected is None
    assert game.history_length == 1
    assert game.board == _simple()
    assert game.winner() is None


def test_invalid_board_shape_rejected():
    with pytest.raises(ValueError):
        Game([[0] * SIZE])


def test_invalid_piece_value_rejected():
    board = empty_board()
    board[0][0] = 9
    with pytest.raises(ValueError):
        Game(board)


def test_board_property_is_a_copy():
    game = Game(_simple())
    snapshot = game.board
    snapshot[5][2] = Piece.NONE
    assert game.board[5][2] == Piece.WHITE


def test_select_man_matches_rules():
    board = _simple()
    game = Game(board)
    game.select(2, 5)
    assert game.phase == Phase.WHITE_MOVE
    assert game.selected == (2, 5)
    moves, captures = man_options(board, 2, 5, Side.WHITE)
    assert game.move_targets == moves
    assert game.capture_targets == captures
    assert len(game.move_targets) == 2


def test_select_wrong_piece_raises():
    game = Game(_simple())
    with pytest.raises(IllegalMove):
        game.select(5, 2)
    with pytest.raises(IllegalMove):
        game.select(0, 0)
    assert game.phase == Phase.WHITE_CHOOSE


def test_select_off_board_raises():
    game = Game(_simple())
    with pytest.raises(IllegalMove):
        game.select(SIZE, 0)


def test_select_twice_raises():
    game = Game(_simple())
    game.select(2, 5)
    with pytest.raises(IllegalMove):
        game.select(2, 5)


def test_move_without_selection_raises():
    game = Game(_simple())
    with pytest.raises(IllegalMove):
        game.move_to(1, 4)


def test_simple_move_passes_turn():
    game = Game(_simple())
    game.select(2, 5)
    target = sorted(game.move_targets)[0]
    game.move_to(*target)
    board = game.board
    assert board[5][2] == Piece.NONE
    assert board[target[1]][target[0]] == Piece.WHITE
    assert game.phase == Phase.BLACK_CHOOSE
    assert game.history_length == 2
    assert game.selected is None


def test_move_to_illegal_square_raises():
    game = Game(_simple())
    game.select(2, 5)
    with pytest.raises(IllegalMove):
        game.move_to(2, 3)
    assert game.phase == Phase.WHITE_MOVE


def test_black_moves_downward():
    board = _simple()
    game = Game(board)
    game.select(2, 5)
    game.move_to(*sorted(game.move_targets)[0])
    game.select(5, 2)
    moves, _ = man_options(game.board, 5, 2, Side.BLACK)
    assert game.move_targets == moves
    assert all(y == 3 for _, y in game.move_targets)
    game.move_to(*sorted(game.move_targets)[0])
    assert game.phase == Phase.WHITE_CHOOSE
    assert game.history_length == 3


def test_cancel_returns_to_choose():
    game = Game(_simple())
    game.select(2, 5)
    assert game.cancel() is True
    assert game.phase == Phase.WHITE_CHOOSE
    assert game.selected is None
    assert game.move_targets == frozenset()
    assert game.cancel() is False


def test_single_capture_removes_piece():
    board = _board({(2, 5): Piece.WHITE, (3, 4): Piece.BLACK, (7, 0): Piece.BLACK})
    game = Game(board)
    game.select(2, 5)
    assert game.move_targets == frozenset()
    assert game.capture_targets == man_capture_targets(board, 2, 5, Side.WHITE)
    (target,) = game.capture_targets
    game.move_to(*target)
    result = game.board
    assert result[4][3] == Piece.NONE
    assert result[5][2] == Piece.NONE
    assert result[target[1]][target[0]] == Piece.WHITE
    assert game.phase == Phase.BLACK_CHOOSE
    assert game.in_capture_chain is False


def test_capture_is_forced_for_other_pieces():
    board = _board(
        {(2, 5): Piece.WHITE, (3, 4): Piece.BLACK, (6, 7): Piece.WHITE}
    )
    game = Game(board)
    game.select(6, 7)
    assert game.move_targets == frozenset()
    assert game.capture_targets == frozenset()
    with pytest.raises(IllegalMove):
        game.move_to(5, 6)
    assert game.cancel() is True
    assert game.phase == Phase.WHITE_CHOOSE


def test_capture_chain():
    board = _board(
        {(1, 6): Piece.WHITE, (2, 5): Piece.BLACK, (4, 3): Piece.BLACK}
    )
    game = Game(board)
    game.select(1, 6)
    game.move_to(3, 4)
    assert game.in_capture_chain is True
    assert game.phase == Phase.WHITE_MOVE
    assert game.selected == (3, 4)
    assert game.capture_targets == man_capture_targets(game.board, 3, 4, Side.WHITE)
    assert game.history_length == 1
    assert game.cancel() is False
    assert game.undo() is False
    with pytest.raises(IllegalMove):
        game.move_to(2, 3)
    game.move_to(5, 2)
    assert game.in_capture_chain is False
    assert game.phase == Phase.BLACK_CHOOSE
    assert game.history_length == 2
    assert game.winner() is Side.WHITE


def test_white_promotion():
    game = Game(_board({(1, 1): Piece.WHITE, (7, 6): Piece.BLACK}))
    game.select(1, 1)
    game.move_to(0, 0)
    assert game.board[0][0] == Piece.WHITE_KING


def test_king_moves_and_long_capture():
    board = _board({(0, 7): Piece.WHITE_KING, (2, 5): Piece.BLACK})
    game = Game(board)
    game.select(0, 7)
    assert game.move_targets == frozenset()
    assert game.capture_targets == king_capture_targets(board, 0, 7, Side.WHITE)
    far = max(game.capture_targets)
    game.move_to(*far)
    result = game.board
    assert result[5][2] == Piece.NONE
    assert result[far[1]][far[0]] == Piece.WHITE_KING
    assert game.winner() is Side.WHITE


def test_king_free_moves_match_rules():
    board = _board({(3, 4): Piece.WHITE_KING, (0, 0): Piece.BLACK})
    game = Game(board)
    game.select(3, 4)
    moves, _ = king_options(board, 3, 4, Side.WHITE)
    assert game.move_targets == moves
    assert (3, 4) not in game.move_targets


def test_undo_restores_previous_position():
    game = Game(_simple())
    assert game.undo() is False
    game.select(2, 5)
    game.move_to(*sorted(game.move_targets)[0])
    assert game.undo() is True
    assert game.board == _simple()
    assert game.phase == Phase.WHITE_CHOOSE
    assert game.history_length == 1


def test_undo_with_selection_clears_it():
    game = Game(_simple())
    game.select(2, 5)
    game.move_to(*sorted(game.move_targets)[0])
    game.select(5, 2)
    assert game.undo() is True
    assert game.selected is None
    assert game.phase == Phase.WHITE_CHOOSE
    assert game.board == _simple()


def test_reset_restores_initial():
    game = Game(_simple())
    game.select(2, 5)
    game.move_to(*sorted(game.move_targets)[0])
    game.select(5, 2)
    game.reset()
    assert game.board == _simple()
    assert game.phase == Phase.WHITE_CHOOSE
    assert game.history_length == 1
    assert game.selected is None


def test_click_dispatches_and_ignores_invalid():
    game = Game(_simple())
    assert game.click(-1, 0) is False
    assert game.click(5, 2) is False
    assert game.phase == Phase.WHITE_CHOOSE
    assert game.click(2, 5) is True
    assert game.phase == Phase.WHITE_MOVE
    assert game.click(2, 3) is False
    target = sorted(game.move_targets)[0]
    assert game.click(*target) is True
    assert game.phase == Phase.BLACK_CHOOSE


def test_winner_black_when_white_gone():
    game = Game(_board({(4, 4): Piece.BLACK_KING}))
    assert game.winner() is Side.BLACK