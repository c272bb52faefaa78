import typing
from colorama import Fore, Style
from .state import Color, Face, CubeState

SEPARATOR = "   "
PADDING = 9 #column of the front face in the middle row

MIDDLE_FACES = [(Face.L, "LEFT"), (Face.F, "FRONT"), (Face.R, "RIGHT"), (Face.B, "BACK")]

#Terminals have no orange, dark yellow is the closest
COLOR_CODES = {
    Color.WHITE: Fore.LIGHTWHITE_EX,
    Color.YELLOW: Fore.LIGHTYELLOW_EX,
    Color.GREEN: Fore.LIGHTGREEN_EX,
    Color.BLUE: Fore.LIGHTBLUE_EX,
    Color.RED: Fore.LIGHTRED_EX,
    Color.ORANGE: Fore.YELLOW
}

def _sticker(c: Color, color: bool) -> str: return f"{COLOR_CODES[c]}{c.value}{Style.RESET_ALL} " if color else f"{c.value} "

def _tile_row(grid: typing.List[typing.List[Color]], row: int, color: bool) -> str: return "".join(_sticker(c, color) for c in grid[row])

def _centered_face(state: CubeState, face: Face, label: str, color: bool) -> typing.List[str]:
    grid = state.get_face(face)
    return [" "*PADDING + label] + [" "*PADDING + _tile_row(grid, r, color) for r in range(3)]

def render(state: CubeState, title: typing.Optional[str] = None, color: bool = False) -> str:
    """Renders the cube as an exploded net, with the up face above and the down face below the middle row::

                 UP
                 W W W
                 ...
        LEFT     FRONT    RIGHT    BACK
        O O O    G G G    R R R    B B B
        ...

    With ``color`` set, every sticker letter is wrapped in the ANSI color code of its color.
    """
    lines = []
    if title and not title.isspace(): lines += ["", title, "="*len(title)]
    lines.append("")

    lines += _centered_face(state, Face.U, "UP", color)
    lines.append("")

    lines.append(SEPARATOR.join(f"{label:<6}" for _, label in MIDDLE_FACES))
    grids = [state.get_face(f) for f, _ in MIDDLE_FACES]
    for r in range(3): lines.append(SEPARATOR.join(_tile_row(g, r, color) for g in grids))
    lines.append("")

    lines += _centered_face(state, Face.D, "DOWN", color)

    return "\n".join(l.rstrip() for l in lines)
