"""
Depth-bounded minimax search with alpha-beta pruning.

Scores are the material balance from the computer's point of view, so the
computer maximizes and its opponent minimizes. Every child is explored on its
own copy of the board; nothing is shared between siblings or kept between
searches.
"""
import time
import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import DEPTH_MAX, SearchConfig
from ..game.board import Board
from ..game.coordinates import format_coordinate

logger = logging.getLogger(__name__)

# Window bounds just outside the reachable material range [-64, 64]
LOWER_BOUND = -Board.BOARD_SIZE - 1
UPPER_BOUND = Board.BOARD_SIZE + 1


@dataclass
class SearchResult:
    """Outcome of one search. `move` is None when the computer has no legal move."""
    move: Optional[Tuple[int, int]]
    score: Optional[int]
    nodes: int = 0
    depth: int = 0
    elapsed: float = 0.0

    @property
    def has_move(self) -> bool:
        return self.move is not None


class MinimaxSearch:
    """
    Chooses the move that maximizes the computer's projected material.
    """

    def __init__(self, depth: int = DEPTH_MAX, computer_side: int = Board.WHITE,
                 pruning: bool = True, pass_aware: bool = True, workers: int = 1):
        """
        Initialize the search.

        Args:
            depth: Plies to look ahead (the computer's own move is ply one)
            computer_side: Side the search plays for (Board.BLACK or Board.WHITE)
            pruning: Use alpha-beta cutoffs; False explores the full tree
            pass_aware: When the side to move is stuck but its opponent is not,
                pass the turn instead of scoring the position as a leaf
            workers: Number of processes used to explore the root moves
        """
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        if computer_side not in (Board.BLACK, Board.WHITE):
            raise ValueError(f"Unknown side: {computer_side}")
        if workers < 1:
            raise ValueError(f"Number of workers must be at least 1, got {workers}")

        self.depth = depth
        self.computer_side = computer_side
        self.pruning = pruning
        self.pass_aware = pass_aware
        self.workers = workers
        self.nodes = 0

    @classmethod
    def from_config(cls, config: SearchConfig, computer_side: int = Board.WHITE) -> 'MinimaxSearch':
        return cls(depth=config.depth, computer_side=computer_side, pruning=config.pruning,
                   pass_aware=config.pass_aware, workers=config.workers)

    def get_move(self, board: Board) -> Optional[Tuple[int, int]]:
        """Return the chosen (row, col), or None if there is no legal move."""
        return self.search(board).move

    def search(self, board: Board) -> SearchResult:
        """
        Search all legal moves of the computer on `board`.

        The board itself is never modified. Ties between equally scored moves
        go to the first one in row-major order.

        Returns:
            SearchResult with the chosen move and its score
        """
        start_time = time.time()
        self.nodes = 0
        root = board.copy()

        if self.workers > 1:
            best_move, best_score = self._search_root_parallel(root)
        else:
            best_move, best_score = self._search_root(root)

        result = SearchResult(move=best_move, score=best_score, nodes=self.nodes,
                              depth=self.depth, elapsed=time.time() - start_time)
        if result.has_move:
            logger.info("Depth %d search chose %s (score %+d) after %d nodes in %.2fs",
                        self.depth, format_coordinate(*best_move), best_score,
                        result.nodes, result.elapsed)
        else:
            logger.info("No legal move available for side %d", self.computer_side)
        return result

    def _search_root(self, root: Board) -> Tuple[Optional[Tuple[int, int]], Optional[int]]:
        best_move = None
        best_score = None
        alpha = LOWER_BOUND

        for row in range(Board.SIZE):
            for col in range(Board.SIZE):
                score = self._evaluate_move(root, row, col, self.computer_side, 0, alpha, UPPER_BOUND)
                if score is None:
                    continue
                logger.debug("Root move %s scored %+d", format_coordinate(row, col), score)

                # Strict comparison keeps the first of equally good moves
                if best_score is None or score > best_score:
                    best_score = score
                    best_move = (row, col)
                    if self.pruning:
                        alpha = max(alpha, best_score)

        return best_move, best_score

    def _search_root_parallel(self, root: Board) -> Tuple[Optional[Tuple[int, int]], Optional[int]]:
        moves = root.get_valid_moves(self.computer_side)
        if not moves:
            return None, None

        # Each worker gets its own board and a full window, so no bound is shared
        with ProcessPoolExecutor(max_workers=self.workers) as executor:
            futures = [executor.submit(_score_root_move, self, root, move) for move in moves]
            outcomes = [future.result() for future in futures]

        best_move = None
        best_score = None
        for move, (score, nodes) in zip(moves, outcomes):
            self.nodes += nodes
            if best_score is None or score > best_score:
                best_score = score
                best_move = move
        return best_move, best_score

    def _evaluate_move(self, board: Board, row: int, col: int, side: int, depth: int,
                       alpha: int, beta: int) -> Optional[int]:
        """
        Score the position reached by `side` playing (row, col) at `depth`.

        Returns:
            The minimax score, or None if the move is illegal
        """
        if not board.is_legal_move(row, col, side):
            return None
        child = board.copy()
        child.play(row, col, side)
        self.nodes += 1

        next_depth = depth + 1
        next_side = -side
        if next_depth >= self.depth:
            return self._score(child)

        if not child.has_any_legal_move(next_side):
            if self.pass_aware and child.has_any_legal_move(side):
                next_side = side
            else:
                return self._score(child)

        return self._search_node(child, next_side, next_depth, alpha, beta)

    def _search_node(self, board: Board, side: int, depth: int, alpha: int, beta: int) -> Optional[int]:
        """Minimax over every move of `side`; max for the computer, min for its opponent."""
        maximizing = side == self.computer_side
        best = None

        for row in range(Board.SIZE):
            for col in range(Board.SIZE):
                score = self._evaluate_move(board, row, col, side, depth, alpha, beta)
                if score is None:
                    continue

                if best is None or (score > best if maximizing else score < best):
                    best = score

                if not self.pruning:
                    continue
                if maximizing:
                    alpha = max(alpha, best)
                else:
                    beta = min(beta, best)
                if alpha >= beta:
                    return best

        return best

    def _score(self, board: Board) -> int:
        return board.material_score() * self.computer_side


def _score_root_move(search: MinimaxSearch, root: Board, move: Tuple[int, int]) -> Tuple[int, int]:
    """Evaluate one root move in a worker process. Returns (score, nodes)."""
    search.nodes = 0
    row, col = move
    score = search._evaluate_move(root, row, col, search.computer_side, 0, LOWER_BOUND, UPPER_BOUND)
    return score, search.nodes
