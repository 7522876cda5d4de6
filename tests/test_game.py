"""Unit tests for XO game rules and turn orchestration."""

from xogame.game import EMPTY, WINNING_LINES, Outcome, XOGame, evaluate_board


def _board(text):
    return [EMPTY if ch == "_" else ch for ch in text]


def _reachable_boards():
    """Every position reachable by legal play from the empty board."""
    seen = set()
    stack = [(tuple([EMPTY] * 9), "X")]
    while stack:
        cells, player = stack.pop()
        if cells in seen:
            continue
        seen.add(cells)
        if evaluate_board(cells).finished:
            continue
        nxt = "O" if player == "X" else "X"
        for i, c in enumerate(cells):
            if c == EMPTY:
                child = list(cells)
                child[i] = player
                stack.append((tuple(child), nxt))
    return seen


def test_initial_state():
    game = XOGame()
    assert game.cells == [EMPTY] * 9
    assert game.current_player == "X"
    assert game.bot_mode is True
    assert game.outcome == Outcome()
    assert game.available_moves() == list(range(9))


def test_center_move_flips_turn():
    game = XOGame(bot_mode=False)
    assert game.play(4) is True
    assert game.cells == _board("____X____")
    assert game.current_player == "O"


def test_top_row_win_detected():
    game = XOGame(cells=_board("XX_OO____"), bot_mode=False)
    assert game.play(2) is True
    assert game.winner == "X"
    assert game.outcome.finished
    assert game.available_moves() == []


def test_full_board_without_line_is_draw():
    outcome = evaluate_board(_board("XOXOXOOXO"))
    assert outcome == Outcome(drawn=True)
    assert outcome.winner is None


def test_in_progress_board():
    assert evaluate_board(_board("X___O____")) == Outcome()
    assert not evaluate_board(_board("X___O____")).finished


def test_win_on_full_board_is_not_a_draw():
    outcome = evaluate_board(_board("XOXOXOOXX"))
    assert outcome.winner == "X"
    assert outcome.drawn is False


def test_detection_independent_of_line_order():
    for cells in _reachable_boards():
        winners = {
            cells[a]
            for a, b, c in WINNING_LINES
            if cells[a] != EMPTY and cells[a] == cells[b] == cells[c]
        }
        assert len(winners) <= 1
        expected = next(iter(winners)) if winners else None
        assert evaluate_board(cells).winner == expected


def test_every_empty_cell_placement_changes_one_cell():
    for cells in _reachable_boards():
        if evaluate_board(cells).finished:
            continue
        player = "X" if cells.count("X") == cells.count("O") else "O"
        for index, cell in enumerate(cells):
            if cell != EMPTY:
                continue
            game = XOGame(cells=list(cells), current_player=player, bot_mode=False)
            assert game.play(index)
            changed = [i for i in range(9) if game.cells[i] != cells[i]]
            assert changed == [index]
            assert game.cells[index] == player
            assert game.current_player != player


def test_occupied_cell_is_ignored():
    game = XOGame(bot_mode=False)
    game.play(0)
    before = (list(game.cells), game.current_player)
    assert game.play(0) is False
    assert (game.cells, game.current_player) == before


def test_out_of_range_is_ignored():
    game = XOGame(bot_mode=False)
    assert game.play(9) is False
    assert game.play(-1) is False
    assert game.cells == [EMPTY] * 9
    assert game.current_player == "X"


def test_moves_after_win_are_ignored():
    game = XOGame(cells=_board("XXXOO____"), current_player="O", bot_mode=False)
    assert game.play(5) is False
    assert game.cells == _board("XXXOO____")
    assert game.current_player == "O"


def test_human_input_during_computer_turn_is_ignored():
    game = XOGame(bot_mode=False)
    game.play(0)
    game.bot_mode = True  # switched without triggering the computer
    assert game.computer_to_move()
    assert game.play(1) is False
    assert game.cells == _board("X________")


def test_computer_answers_corner_with_center():
    game = XOGame()
    assert game.play(0) is True
    assert game.cells == _board("X___O____")
    assert game.current_player == "X"
    assert game.move_log == [("X", 0), ("O", 4)]


def test_computer_does_not_move_after_human_wins():
    game = XOGame(cells=_board("XX_OO____"))
    game.play(2)
    assert game.winner == "X"
    assert game.cells == _board("XXXOO____")


def test_hotseat_mode_lets_o_move():
    game = XOGame(bot_mode=False)
    game.play(0)
    assert game.play(8) is True
    assert game.cells == _board("X_______O")
    assert game.current_player == "X"


def test_reset_keeps_mode():
    game = XOGame(bot_mode=False)
    game.play(0)
    game.play(4)
    game.reset()
    assert game.cells == [EMPTY] * 9
    assert game.current_player == "X"
    assert game.move_log == []
    assert game.bot_mode is False

    game.toggle_mode()
    game.play(0)
    game.reset()
    assert game.cells == [EMPTY] * 9
    assert game.bot_mode is True


def test_toggle_mode_leaves_board_untouched():
    game = XOGame()
    game.play(0)
    cells = list(game.cells)
    game.toggle_mode()
    assert game.bot_mode is False
    assert game.cells == cells
    assert game.current_player == "X"


def test_toggle_to_bot_on_o_turn_triggers_computer():
    game = XOGame(bot_mode=False)
    game.play(0)
    assert game.current_player == "O"
    game.toggle_mode()
    assert game.cells == _board("X___O____")
    assert game.current_player == "X"


def test_clone_is_independent():
    game = XOGame(bot_mode=False)
    game.play(4)
    copy = game.clone()
    copy.play(0)
    assert game.cells == _board("____X____")
    assert copy.cells == _board("O___X____")
