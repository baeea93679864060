"""
Tests for the minimax search.
"""
import pytest

from src.game.board import Board
from src.game.game import ReversiGame
from src.arena.players import RandomPlayer
from src.config import SearchConfig
from src.search import MinimaxSearch, SearchResult

EMPTY_ROW = "........"

# Black to move with A1 and C8; after A1 white is stuck but black can still play C8
PASS_ROWS = [".OX....."] + [EMPTY_ROW] * 6 + ["XO......"]


def random_position(seed: int, plies: int) -> ReversiGame:
    """Play `plies` random moves from the opening."""
    game = ReversiGame()
    player = RandomPlayer(seed=seed)
    for _ in range(plies):
        if game.is_game_over():
            break
        game.make_move(*player.get_move(game))
    return game


def reference_minimax(board: Board, side: int, depth: int, computer: int, max_depth: int) -> int:
    """Plain full-width minimax, passing the turn when only the mover is stuck."""
    scores = []
    for row, col in board.get_valid_moves(side):
        child = board.copy()
        child.play(row, col, side)
        next_side = -side
        if depth + 1 >= max_depth:
            scores.append(child.material_score() * computer)
            continue
        if not child.has_any_legal_move(next_side):
            if not child.has_any_legal_move(side):
                scores.append(child.material_score() * computer)
                continue
            next_side = side
        scores.append(reference_minimax(child, next_side, depth + 1, computer, max_depth))
    return max(scores) if side == computer else min(scores)


def reference_best_move(board: Board, computer: int, max_depth: int):
    best_move, best_score = None, None
    for row, col in board.get_valid_moves(computer):
        child = board.copy()
        child.play(row, col, computer)
        if max_depth <= 1:
            score = child.material_score() * computer
        elif not child.has_any_legal_move(-computer):
            if child.has_any_legal_move(computer):
                score = reference_minimax(child, computer, 1, computer, max_depth)
            else:
                score = child.material_score() * computer
        else:
            score = reference_minimax(child, -computer, 1, computer, max_depth)
        if best_score is None or score > best_score:
            best_move, best_score = (row, col), score
    return best_move, best_score


def test_opening_reply_is_legal():
    game = ReversiGame()
    game.make_move(2, 3)
    result = MinimaxSearch(depth=3).search(game.board)

    assert isinstance(result, SearchResult)
    assert result.has_move
    assert result.move in game.board.get_valid_moves(Board.WHITE)
    assert -64 <= result.score <= 64
    assert result.nodes > 0
    assert result.depth == 3


def test_search_does_not_touch_board():
    game = random_position(seed=1, plies=12)
    before = game.board.copy()
    MinimaxSearch(depth=3, computer_side=game.current_player).search(game.board)
    assert game.board == before


def test_search_is_deterministic():
    game = random_position(seed=2, plies=9)
    search = MinimaxSearch(depth=3, computer_side=game.current_player)
    first = search.search(game.board)
    second = search.search(game.board)
    assert first.move == second.move
    assert first.score == second.score
    assert first.nodes == second.nodes


def test_depth_one_is_greedy():
    """At depth one the move with the best immediate material wins, first in scan order on ties."""
    for seed in range(3):
        game = random_position(seed=seed, plies=8 + seed)
        side = game.current_player
        best_move, best_score = None, None
        for row, col in game.board.get_valid_moves(side):
            child = game.board.copy()
            child.play(row, col, side)
            score = child.material_score() * side
            if best_score is None or score > best_score:
                best_move, best_score = (row, col), score

        result = MinimaxSearch(depth=1, computer_side=side).search(game.board)
        assert result.move == best_move
        assert result.score == best_score


def test_pruning_matches_exhaustive_search():
    """Alpha-beta never changes the chosen move or its score, only the work done."""
    for seed in range(5):
        game = random_position(seed=seed, plies=6 + 3 * seed)
        if game.is_game_over():
            continue
        side = game.current_player
        for depth in (1, 2, 3):
            pruned = MinimaxSearch(depth=depth, computer_side=side, pruning=True).search(game.board)
            full = MinimaxSearch(depth=depth, computer_side=side, pruning=False).search(game.board)
            assert pruned.move == full.move, f"seed {seed}, depth {depth}"
            assert pruned.score == full.score, f"seed {seed}, depth {depth}"
            assert pruned.nodes <= full.nodes


def test_exhaustive_search_matches_reference():
    for seed in range(3):
        game = random_position(seed=seed + 10, plies=10)
        side = game.current_player
        for depth in (2, 3):
            result = MinimaxSearch(depth=depth, computer_side=side, pruning=False).search(game.board)
            assert (result.move, result.score) == reference_best_move(game.board, side, depth)


def test_no_legal_move_is_explicit():
    """With no white tiles, white has nothing to play."""
    board = Board.from_strings(["X......."] + [EMPTY_ROW] * 7)
    search = MinimaxSearch(depth=3, computer_side=Board.WHITE)
    result = search.search(board)

    assert result.move is None
    assert result.score is None
    assert not result.has_move
    assert search.get_move(board) is None


def test_leaf_policy():
    """
    Black plays A1, after which white cannot move. The simplified leaf test
    scores that position at once (3); the pass-aware search lets black play C8
    too (6). C8 first scores 0 either way, so A1 is chosen in both cases.
    """
    board = Board.from_strings(PASS_ROWS)

    simple = MinimaxSearch(depth=2, computer_side=Board.BLACK, pass_aware=False).search(board)
    assert simple.move == (0, 0)
    assert simple.score == 3

    aware = MinimaxSearch(depth=2, computer_side=Board.BLACK, pass_aware=True).search(board)
    assert aware.move == (0, 0)
    assert aware.score == 6


def test_parallel_root_matches_sequential():
    game = random_position(seed=4, plies=10)
    side = game.current_player
    sequential = MinimaxSearch(depth=2, computer_side=side).search(game.board)
    parallel = MinimaxSearch(depth=2, computer_side=side, workers=2).search(game.board)
    assert parallel.move == sequential.move
    assert parallel.score == sequential.score


def test_from_config():
    config = SearchConfig(depth=2, pruning=False, pass_aware=False, workers=1)
    search = MinimaxSearch.from_config(config, computer_side=Board.BLACK)
    assert search.depth == 2
    assert search.computer_side == Board.BLACK
    assert not search.pruning
    assert not search.pass_aware


def test_invalid_parameters():
    with pytest.raises(ValueError):
        MinimaxSearch(depth=0)
    with pytest.raises(ValueError):
        MinimaxSearch(computer_side=0)
    with pytest.raises(ValueError):
        MinimaxSearch(workers=0)


if __name__ == "__main__":
    print("Running search tests...\n")

    test_opening_reply_is_legal()
    test_search_is_deterministic()
    test_depth_one_is_greedy()
    test_pruning_matches_exhaustive_search()
    test_leaf_policy()

    print("\nAll tests passed successfully!")
