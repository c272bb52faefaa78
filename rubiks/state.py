import typing, enum, collections

class Color(enum.Enum):
    WHITE = 'W'
    YELLOW = 'Y'
    GREEN = 'G'
    BLUE = 'B'
    RED = 'R'
    ORANGE = 'O'

class Face(enum.Enum):
    U = enum.auto()
    D = enum.auto()
    F = enum.auto()
    B = enum.auto()
    L = enum.auto()
    R = enum.auto()

    @property
    def label(self) -> str: return {
        Face.U: "Up",
        Face.D: "Down",
        Face.F: "Front",
        Face.B: "Back",
        Face.L: "Left",
        Face.R: "Right"
    }[self]

    @property
    def direction(self) -> typing.Tuple[int, int, int]: return {
        Face.L: (-1,  0,  0),
        Face.R: (+1,  0,  0),
        Face.U: ( 0, +1,  0),
        Face.D: ( 0, -1,  0),
        Face.F: ( 0,  0, +1),
        Face.B: ( 0,  0, -1)
    }[self]

    @property
    def color(self) -> Color: return {
        Face.U: Color.WHITE,
        Face.D: Color.YELLOW,
        Face.F: Color.GREEN,
        Face.B: Color.BLUE,
        Face.L: Color.ORANGE,
        Face.R: Color.RED
    }[self]

    @property
    def opposite(self) -> "Face": return {
        Face.L: Face.R,
        Face.R: Face.L,
        Face.U: Face.D,
        Face.D: Face.U,
        Face.F: Face.B,
        Face.B: Face.F
    }[self]

    def cubelet_at(self, row: int, col: int) -> typing.Tuple[int, int, int]:
        """Returns the grid position (each coordinate in [0;2]) of the cubelet carrying the given sticker.

        Rows and columns are laid out as seen when looking straight at the face, with the up face's
        row 0 bordering the back face, the down face's row 0 bordering the front face, and the
        left/right faces' column 0 bordering the back/front face respectively.
        """
        return {
            Face.F: lambda: (col, 2-row, 2),
            Face.B: lambda: (2-col, 2-row, 0),
            Face.U: lambda: (col, 2, row),
            Face.D: lambda: (col, 0, 2-row),
            Face.L: lambda: (0, 2-row, col),
            Face.R: lambda: (2, 2-row, 2-col)
        }[self]()

    def is_on_face(self, x: int, y: int, z: int) -> bool:
        dx, dy, dz = self.direction
        return (
            (dx == 0 or x == dx+1) and
            (dy == 0 or y == dy+1) and
            (dz == 0 or z == dz+1)
        )

Strip = typing.Tuple[Color, Color, Color]

def _check_index(idx: int):
    if isinstance(idx, bool) or not (isinstance(idx, int) and 0 <= idx < 3): raise IndexError(f"strip index {idx!r} is outside of [0;2]")

def _check_strip(colors: typing.Sequence[Color]):
    if len(colors) != 3: raise ValueError(f"a strip needs exactly 3 colors, got {len(colors)}")

class CubeState:
    """The sticker grid of a 3x3x3 cube: for every face, a 3x3 grid of colors indexed by [row][column].

    The state is only ever changed a whole move at a time through :meth:`apply_move`. The row/column
    accessors exist for the rotation engine, which moves complete strips of three stickers around.
    """

    faces: typing.Dict[Face, typing.List[typing.List[Color]]]

    def __init__(self): self.faces = { f: [[f.color for c in range(3)] for r in range(3)] for f in Face }

    @staticmethod
    def create_solved() -> "CubeState": return CubeState()

    def get_face(self, face: Face) -> typing.List[typing.List[Color]]:
        return [list(row) for row in self.faces[face]]

    def get_row(self, face: Face, row: int) -> Strip:
        _check_index(row)
        return tuple(self.faces[face][row])

    def set_row(self, face: Face, row: int, colors: typing.Sequence[Color]):
        _check_index(row)
        _check_strip(colors)
        self.faces[face][row] = list(colors)

    def get_column(self, face: Face, col: int) -> Strip:
        _check_index(col)
        return tuple(self.faces[face][r][col] for r in range(3))

    def set_column(self, face: Face, col: int, colors: typing.Sequence[Color]):
        _check_index(col)
        _check_strip(colors)
        for r in range(3): self.faces[face][r][col] = colors[r]

    def apply_move(self, move: "Move"): rotation.apply_move(self, move)

    def copy(self) -> "CubeState":
        state = CubeState()
        state.faces = { f: self.get_face(f) for f in Face }
        return state

    def color_counts(self) -> typing.Dict[Color, int]:
        return dict(collections.Counter(c for _, _, _, c in self))

    @property
    def is_solved(self) -> bool:
        return all(all(c == self.faces[f][1][1] for row in self.faces[f] for c in row) for f in Face)

    def __eq__(self, other):
        if not isinstance(other, CubeState): return NotImplemented
        return self.faces == other.faces

    def __iter__(self) -> typing.Iterator[typing.Tuple[Face, int, int, Color]]:
        for f in Face:
            for r in range(3):
                for c in range(3):
                    yield f, r, c, self.faces[f][r][c]

    def __str__(self):
        return " ".join("".join(c.value for row in self.faces[f] for c in row) for f in Face)

#The rotation engine works on this module's types, so it can only be loaded once they exist
from . import rotation
