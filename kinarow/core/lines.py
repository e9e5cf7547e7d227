"""
Line scanning for k-in-a-row boards.

A scan walks one full line of the board through a pivot cell and measures
the longest contiguous run of a mark on it, treating the pivot as if the
mark had been placed there. Win detection and move heuristics are both
built on ``scan``.
"""

HORIZONTAL = (0, 1)
VERTICAL = (1, 0)
MAIN_DIAGONAL = (1, 1)    # ↘
ANTI_DIAGONAL = (1, -1)   # ↙

DIRECTIONS = [HORIZONTAL, VERTICAL, MAIN_DIAGONAL, ANTI_DIAGONAL]


def line_cells(board, pivot, direction):
    """
    All cells of the line through ``pivot`` along ``direction``, ordered from
    the boundary in the negative direction to the boundary in the positive
    direction.

    Args:
        board: Board instance
        pivot (tuple): (row, col) on the line
        direction (tuple): (dr, dc) step

    Returns:
        list: (row, col) tuples; empty if the pivot is off the board
    """
    dr, dc = direction
    r, c = pivot
    if not board.in_bounds(r, c):
        return []

    while board.in_bounds(r - dr, c - dc):
        r, c = r - dr, c - dc

    cells = []
    while board.in_bounds(r, c):
        cells.append((r, c))
        r, c = r + dr, c + dc
    return cells


def scan(board, pivot, mark, direction):
    """
    Longest run of ``mark`` on the line through ``pivot`` along ``direction``,
    assuming ``mark`` occupies the pivot. The board is not modified.

    Args:
        board: Board instance
        pivot (tuple): (row, col) of the hypothetical placement
        mark (Mark): Mark to measure
        direction (tuple): (dr, dc) step, e.g. HORIZONTAL

    Returns:
        int: Maximum run length on the line (at least 1 for an on-board pivot)
    """
    pivot = tuple(pivot)
    max_run = 0
    run = 0
    for cell in line_cells(board, pivot, direction):
        # The pivot counts as ``mark`` whatever the board holds there
        if cell == pivot or board.get_mark(*cell) == mark:
            run += 1
            max_run = max(max_run, run)
        else:
            run = 0
    return max_run


def applicable_directions(size, pivot):
    """
    Directions worth scanning through ``pivot`` for a hypothetical placement.

    Rows and columns always apply; the diagonals only when the pivot lies on
    the board's main diagonal (row == col) or anti-diagonal
    (row + col == size - 1).
    """
    row, col = pivot
    directions = [HORIZONTAL, VERTICAL]
    if row == col:
        directions.append(MAIN_DIAGONAL)
    if row + col == size - 1:
        directions.append(ANTI_DIAGONAL)
    return directions


def best_run(board, pivot, mark):
    """
    Threat score of a placement: the longest run ``mark`` would have through
    ``pivot`` across its applicable directions.
    """
    return max(scan(board, pivot, mark, direction)
               for direction in applicable_directions(board.size, pivot))


def would_complete(board, pivot, mark, target_length):
    """
    Check whether placing ``mark`` at ``pivot`` makes a run of at least
    ``target_length`` along any applicable direction.

    Returns:
        bool: True if the placement reaches the target length
    """
    for direction in applicable_directions(board.size, pivot):
        if scan(board, pivot, mark, direction) >= target_length:
            return True
    return False
