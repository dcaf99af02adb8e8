"""
Tests for the game session flow and the console front end.
"""

import numpy as np

from logic.config import GameConfig
from logic.game_session import GameSession
from logic.game_state import GameMode, Difficulty, Mark
from main import ConsoleGame


def play_clicks(session, cells):
    for index in cells:
        assert session.handle_click(index), index


def test_new_session_waits_for_mode():
    session = GameSession()
    assert session.mode is None
    assert not session.is_playing
    assert not session.handle_click(0)


def test_multi_player_alternates_marks():
    session = GameSession()
    session.start_game(single_player=False)

    assert session.mode == GameMode.MULTI
    assert session.difficulty is None
    assert session.is_playing
    assert session.status_text() == "Next player: X"

    play_clicks(session, [4, 0])
    assert session.game_state.board[4] == Mark.X
    assert session.game_state.board[0] == Mark.O
    assert session.status_text() == "Next player: X"
    assert not session.is_ai_turn()

    # Occupied cell
    assert not session.handle_click(4)


def test_multi_player_win_stops_the_game():
    session = GameSession()
    session.start_game(single_player=False)
    play_clicks(session, [0, 3, 1, 4, 2])

    assert session.is_finished()
    assert session.game_state.winner == Mark.X
    assert session.status_text() == "Winner: X"
    assert not session.handle_click(8)
    assert session.make_ai_move() is None


def test_multi_player_draw():
    session = GameSession()
    session.start_game(single_player=False)
    # X O X / X O O / O X X
    play_clicks(session, [0, 1, 2, 4, 3, 5, 7, 6, 8])

    assert session.is_finished()
    assert session.game_state.is_draw
    assert session.status_text() == "It's a draw!"


def test_single_player_needs_difficulty():
    session = GameSession()
    session.start_game(single_player=True)

    assert session.mode == GameMode.SINGLE
    assert session.show_difficulty_selection
    assert not session.is_playing
    assert not session.handle_click(0)

    session.select_difficulty(Difficulty.HARD)
    assert not session.show_difficulty_selection
    assert session.is_playing


def test_single_player_turns():
    session = GameSession(rng=np.random.default_rng(3))
    session.start_game(single_player=True)
    session.select_difficulty(Difficulty.EASY)

    assert not session.is_ai_turn()
    assert session.handle_click(4)
    assert session.is_ai_turn()

    # Human can't move during the computer's turn
    assert not session.handle_click(0)

    index = session.make_ai_move()
    assert index is not None and index != 4
    assert session.game_state.board[index] == Mark.O
    assert not session.is_ai_turn()
    assert session.status_text() == "Next player: X"


def test_hard_computer_answers_corner_openings():
    session = GameSession()
    session.start_game(single_player=True)
    session.select_difficulty(Difficulty.HARD)

    # Only the center holds against a corner opening
    session.handle_click(0)
    assert session.make_ai_move() == 4

    # Against opposite corners an edge is needed, lowest index first
    session.handle_click(8)
    assert session.make_ai_move() == 1
    assert not session.is_finished()


def test_hard_computer_never_loses_in_session():
    session = GameSession()
    session.start_game(single_player=True)
    session.select_difficulty(Difficulty.HARD)

    while not session.is_finished():
        session.handle_click(session.game_state.get_empty_cells()[-1])
        if session.is_ai_turn():
            session.make_ai_move()

    assert session.game_state.winner != Mark.X


def test_play_again_returns_to_mode_selection():
    session = GameSession()
    session.start_game(single_player=False)
    play_clicks(session, [0, 3, 1, 4, 2])

    session.handle_continue(True)
    assert session.mode is None
    assert session.difficulty is None
    assert not session.game_over
    assert session.game_state.board == [None] * 9
    assert session.game_state.current_player == Mark.X


def test_declining_ends_session_until_next_game():
    session = GameSession()
    session.start_game(single_player=True)
    session.select_difficulty(Difficulty.MEDIUM)
    session.handle_continue(False)

    assert session.game_over
    assert session.mode is None
    assert not session.is_playing

    session.start_game(single_player=False)
    assert not session.game_over
    assert session.is_playing


# ==================== CONSOLE ====================

def scripted(answers):
    answers = iter(answers)
    return lambda prompt: next(answers)


def test_console_multi_player_game(capsys):
    session = GameSession()
    game = ConsoleGame(
        session,
        single_player=False,
        input_fn=scripted(["0", "3", "oops", "3", "1", "4", "2", "n"]),
        delay_s=0
    )
    game.start()

    out = capsys.readouterr().out
    assert "Winner: X" in out
    assert "Please type a number 0-8." in out
    assert "Illegal move. Try again." in out
    assert session.game_over


def test_console_quit():
    session = GameSession()
    game = ConsoleGame(session, single_player=False, input_fn=scripted(["q"]), delay_s=0)
    game.start()
    assert session.game_state.moves == []


def test_console_single_player_hard(capsys):
    session = GameSession()

    def first_empty(prompt):
        if prompt.startswith("Play again"):
            return "n"
        return str(session.game_state.get_empty_cells()[0])

    game = ConsoleGame(session, single_player=True, difficulty=Difficulty.HARD,
                       input_fn=first_empty, delay_s=0)
    game.start()

    out = capsys.readouterr().out
    assert "Computer plays cell" in out
    assert "Winner: X" not in out


def test_computer_does_not_move_on_human_turn():
    session = GameSession()
    session.start_game(single_player=True)
    session.select_difficulty(Difficulty.HARD)

    assert session.make_ai_move() is None
    assert session.game_state.board == [None] * 9
    assert session.game_state.current_player == Mark.X

    session.handle_click(4)
    index = session.make_ai_move()
    assert session.game_state.board[index] == Mark.O

    # Computer already answered, human is on turn again
    assert session.make_ai_move() is None
    assert session.game_state.board.count(Mark.O) == 1


def test_computer_does_not_move_in_multi_player():
    session = GameSession()
    session.start_game(single_player=False)

    assert session.make_ai_move() is None
    session.handle_click(0)
    assert session.make_ai_move() is None
    assert session.game_state.board.count(Mark.O) == 0
    assert session.game_state.current_player == Mark.O


def test_clicks_only_place_the_human_mark():
    class SwappedConfig(GameConfig):
        HUMAN_MARK = Mark.O
        AI_MARK = Mark.X

    session = GameSession(SwappedConfig())
    session.start_game(single_player=True)
    session.select_difficulty(Difficulty.HARD)

    # X is the computer here, so the opening click is refused
    assert not session.handle_click(4)
    assert session.is_ai_turn()
    assert session.game_state.board[session.make_ai_move()] == Mark.X
    assert session.handle_click(session.game_state.get_empty_cells()[0])
