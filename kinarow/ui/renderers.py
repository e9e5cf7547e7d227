"""
Board renderers.

A renderer is shown the board after every accepted move. It only reads the
board.
"""


def format_board(board):
    """
    Render the board as ASCII text with row and column headers.

    Returns:
        str: Multi-line board picture
    """
    size = board.size
    lines = ["   " + "".join(f"{col:2d} " for col in range(size))]
    lines.append("   " + "---" * size)
    for row in range(size):
        cells = "".join(f" {board.get_mark(row, col).symbol} " for col in range(size))
        lines.append(f"{row:2d}|{cells}|{row:2d}")
    lines.append("   " + "---" * size)
    return "\n".join(lines)


class Renderer:
    """Prints the board to the console after each move."""

    def __init__(self, output_fn=print):
        self.output_fn = output_fn

    def render_board(self, board):
        self.output_fn(format_board(board))


class VoidRenderer:
    """A renderer that shows nothing, for headless games and tournaments."""

    def render_board(self, board):
        pass


RENDERER_TYPES = {
    'console': Renderer,
    'void': VoidRenderer,
    'none': VoidRenderer,
}


def build_renderer(name):
    """Create a renderer from its type name ('console' or 'void')."""
    key = name.strip().lower()
    if key not in RENDERER_TYPES:
        raise ValueError(f"Unknown renderer type: {name!r} (choose from {', '.join(sorted(RENDERER_TYPES))})")
    return RENDERER_TYPES[key]()
