"""
Heuristic agent for k-in-a-row.
"""
from ...core.board import Mark
from ...core.errors import InvariantViolation
from ...core.lines import best_run, would_complete


class HeuristicAgent:
    """
    An agent that picks moves with a fixed priority chain of heuristics.

    Priority order:
    1. Immediate win - if we can win in one move, take it
    2. Immediate block - if opponent can win in one move, take that cell
    3. Threat - extend our longest run to at least win_streak - 1
    4. Center - the exact center of an odd-sized board
    5. Corners - (0, 0), (0, n-1), (n-1, 0), (n-1, n-1) in that order
    6. First empty cell in row-major order

    Every step scans empty cells in row-major order, so the agent is fully
    deterministic: the same position always yields the same move.
    """

    def select_action(self, game):
        """
        Select a move for the current player.

        Args:
            game: Game instance with current board state

        Returns:
            tuple: (row, col) coordinates of selected move, or None if no legal moves
        """
        board = game.board
        mark = Mark(game.current_player)
        win_streak = game.win_streak

        steps = (
            lambda: self.find_winning_move(board, mark, win_streak),
            lambda: self.find_winning_move(board, mark.opponent, win_streak),
            lambda: self.find_threat_move(board, mark, win_streak),
            lambda: self.find_center_move(board),
            lambda: self.find_corner_move(board),
            lambda: self.find_first_empty(board),
        )
        for step in steps:
            move = step()
            if move is not None:
                if board.get_mark(*move) != Mark.EMPTY:
                    raise InvariantViolation(f"Heuristic chose occupied cell {move}")
                return move

        return None

    def find_winning_move(self, board, mark, win_streak):
        """
        Find the first empty cell where ``mark`` would complete a winning run.

        Used with the opponent's mark to find the cell that must be blocked.

        Returns:
            tuple or None: (row, col) of winning move, or None if none exists
        """
        for row, col in board.get_legal_moves():
            if would_complete(board, (row, col), mark, win_streak):
                return (row, col)
        return None

    def find_threat_move(self, board, mark, win_streak):
        """
        Find the empty cell giving ``mark`` its longest run.

        Only runs of at least ``win_streak - 1`` count as threats; ties go to
        the first cell in row-major order.

        Returns:
            tuple or None: (row, col) of threat move, or None if none exists
        """
        best_move = None
        best_score = 0

        for row, col in board.get_legal_moves():
            score = best_run(board, (row, col), mark)
            if score > best_score:
                best_score = score
                best_move = (row, col)

        if best_move is None or best_score < win_streak - 1:
            return None
        return best_move

    def find_center_move(self, board):
        """Center cell of an odd-sized board, if empty."""
        if board.size % 2 == 0:
            return None
        center = board.size // 2
        if board.get_mark(center, center) == Mark.EMPTY:
            return (center, center)
        return None

    def find_corner_move(self, board):
        """First empty corner, or None."""
        last = board.size - 1
        for row, col in ((0, 0), (0, last), (last, 0), (last, last)):
            if board.get_mark(row, col) == Mark.EMPTY:
                return (row, col)
        return None

    def find_first_empty(self, board):
        """First empty cell in row-major order, or None on a full board."""
        legal_moves = board.get_legal_moves()
        return legal_moves[0] if legal_moves else None
