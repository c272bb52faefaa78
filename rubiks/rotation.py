"""Quarter-turn rotation engine.

A quarter turn of a face rotates the face's own 9 stickers and cycles the four strips of 3 stickers on
the neighbouring faces which border it. The strip cycles are kept as literal tables, one per face and
direction; each transfer copies a source strip onto a destination strip, optionally reversing it so that
corner stickers keep their correct orientation.
"""

import typing, enum, logging
from . import log
from .state import Color, Face, CubeState
from .move import Direction, Move

class Axis(enum.Enum):
    ROW = enum.auto()
    COL = enum.auto()

class StripRef(typing.NamedTuple):
    face: Face
    axis: Axis
    index: int

    def read(self, state: CubeState) -> typing.Tuple[Color, ...]:
        if self.axis == Axis.ROW: return state.get_row(self.face, self.index)
        return state.get_column(self.face, self.index)

    def write(self, state: CubeState, colors: typing.Sequence[Color]):
        if self.axis == Axis.ROW: state.set_row(self.face, self.index, colors)
        else: state.set_column(self.face, self.index, colors)

    def __str__(self): return f"{self.face.name}.{self.axis.name.lower()}{self.index}"

class Transfer(typing.NamedTuple):
    src: StripRef
    dst: StripRef
    reversed: bool

def row(face: Face, idx: int) -> StripRef: return StripRef(face, Axis.ROW, idx)
def col(face: Face, idx: int) -> StripRef: return StripRef(face, Axis.COL, idx)

U, D, F, B, L, R = Face.U, Face.D, Face.F, Face.B, Face.L, Face.R
CW, CCW = Direction.CLOCKWISE, Direction.ANTICLOCKWISE

STRIP_CYCLES: typing.Dict[typing.Tuple[Face, Direction], typing.Tuple[Transfer, ...]] = {
    (F, CW): (
        Transfer(row(U, 2), col(R, 0), False),
        Transfer(col(R, 0), row(D, 0), True),
        Transfer(row(D, 0), col(L, 2), False),
        Transfer(col(L, 2), row(U, 2), True)
    ),
    (F, CCW): (
        Transfer(row(U, 2), col(L, 2), True),
        Transfer(col(L, 2), row(D, 0), False),
        Transfer(row(D, 0), col(R, 0), True),
        Transfer(col(R, 0), row(U, 2), False)
    ),
    (B, CW): (
        Transfer(row(U, 0), col(L, 0), True),
        Transfer(col(L, 0), row(D, 2), False),
        Transfer(row(D, 2), col(R, 2), True),
        Transfer(col(R, 2), row(U, 0), False)
    ),
    (B, CCW): (
        Transfer(row(U, 0), col(R, 2), False),
        Transfer(col(R, 2), row(D, 2), True),
        Transfer(row(D, 2), col(L, 0), False),
        Transfer(col(L, 0), row(U, 0), True)
    ),
    (L, CW): (
        Transfer(col(F, 0), col(D, 0), False),
        Transfer(col(D, 0), col(B, 2), True),
        Transfer(col(B, 2), col(U, 0), True),
        Transfer(col(U, 0), col(F, 0), False)
    ),
    (L, CCW): (
        Transfer(col(F, 0), col(U, 0), False),
        Transfer(col(U, 0), col(B, 2), True),
        Transfer(col(B, 2), col(D, 0), True),
        Transfer(col(D, 0), col(F, 0), False)
    ),
    (R, CW): (
        Transfer(col(F, 2), col(U, 2), False),
        Transfer(col(U, 2), col(B, 0), True),
        Transfer(col(B, 0), col(D, 2), True),
        Transfer(col(D, 2), col(F, 2), False)
    ),
    (R, CCW): (
        Transfer(col(F, 2), col(D, 2), False),
        Transfer(col(D, 2), col(B, 0), True),
        Transfer(col(B, 0), col(U, 2), True),
        Transfer(col(U, 2), col(F, 2), False)
    ),
    (U, CW): (
        Transfer(row(F, 0), row(L, 0), False),
        Transfer(row(L, 0), row(B, 0), False),
        Transfer(row(B, 0), row(R, 0), False),
        Transfer(row(R, 0), row(F, 0), False)
    ),
    (U, CCW): (
        Transfer(row(F, 0), row(R, 0), False),
        Transfer(row(R, 0), row(B, 0), False),
        Transfer(row(B, 0), row(L, 0), False),
        Transfer(row(L, 0), row(F, 0), False)
    ),
    (D, CW): (
        Transfer(row(F, 2), row(R, 2), False),
        Transfer(row(R, 2), row(B, 2), False),
        Transfer(row(B, 2), row(L, 2), False),
        Transfer(row(L, 2), row(F, 2), False)
    ),
    (D, CCW): (
        Transfer(row(F, 2), row(L, 2), False),
        Transfer(row(L, 2), row(B, 2), False),
        Transfer(row(B, 2), row(R, 2), False),
        Transfer(row(R, 2), row(F, 2), False)
    )
}

def rotate_face_stickers(state: CubeState, face: Face, direction: Direction):
    grid = state.faces[face]
    tmp: typing.List[typing.List[Color]] = [[None]*3 for _ in range(3)]

    for r in range(3):
        for c in range(3):
            if direction == Direction.CLOCKWISE: tmp[c][2-r] = grid[r][c]
            else: tmp[2-c][r] = grid[r][c]

    for r in range(3): grid[r][:] = tmp[r]

def cycle_strips(state: CubeState, face: Face, direction: Direction):
    transfers = STRIP_CYCLES[face, direction]

    #Read all sources before writing anything, the cycle overwrites each of them
    strips = [t.src.read(state) for t in transfers]
    for t, strip in zip(transfers, strips):
        t.dst.write(state, strip[::-1] if t.reversed else strip)

def apply_move(state: CubeState, move: Move):
    """Turns ``move.face`` of ``state`` a quarter turn in ``move.direction``, in place."""
    if not isinstance(move, Move): raise TypeError(f"expected a Move, got {move!r}")

    rotate_face_stickers(state, move.face, move.direction)
    cycle_strips(state, move.face, move.direction)

    log.LOGGER.log(logging.DEBUG, f"apply {move!s:2s} -> {state}")
