import typing, enum, dataclasses, math
from .state import Face

class Direction(enum.Enum):
    CLOCKWISE = enum.auto()
    ANTICLOCKWISE = enum.auto()

    @property
    def inverse(self) -> "Direction": return Direction.ANTICLOCKWISE if self == Direction.CLOCKWISE else Direction.CLOCKWISE

class InvalidMoveNotationError(ValueError):
    notation: str

    def __init__(self, notation: str):
        super().__init__(f"Invalid move notation: '{notation}'. Valid format: F, F', R, R', U, U', B, B', L, L', D, D'")
        self.notation = notation

@dataclasses.dataclass(frozen=True)
class Move:
    face: Face
    direction: Direction

    def __post_init__(self):
        if not isinstance(self.face, Face): raise ValueError(f"Invalid face: {self.face!r}")
        if not isinstance(self.direction, Direction): raise ValueError(f"Invalid rotation direction: {self.direction!r}")

    @staticmethod
    def clockwise(face: Face) -> "Move": return Move(face, Direction.CLOCKWISE)
    @staticmethod
    def anticlockwise(face: Face) -> "Move": return Move(face, Direction.ANTICLOCKWISE)

    @staticmethod
    def from_notation(notation: str) -> "Move":
        """Parses a single move in standard notation, e.g. ``F`` or ``R'``."""
        if notation is None: raise TypeError("move notation must be a string, not None")

        tok = notation.strip()
        if len(tok) == 0 or len(tok) > 2 or tok[0] not in Face.__members__: raise InvalidMoveNotationError(tok)
        if len(tok) == 2 and tok[1] != '\'': raise InvalidMoveNotationError(tok)

        return Move(Face[tok[0]], Direction.ANTICLOCKWISE if len(tok) == 2 else Direction.CLOCKWISE)

    def inverse(self) -> "Move": return Move(self.face, self.direction.inverse)

    @property
    def is_ccw(self) -> bool: return self.direction == Direction.ANTICLOCKWISE

    @property
    def angle(self) -> float: return (-1 if self.is_ccw else +1) * math.pi / 2

    @property
    def description(self) -> str: return f"{self.face.label} face {'anti-clockwise' if self.is_ccw else 'clockwise'} 90°"

    def __str__(self): return self.face.name + ('\'' if self.is_ccw else '')

class MoveSequence:
    moves: typing.Tuple[Move, ...]

    def __init__(self, moves: typing.Iterable[Move]):
        if moves is None: raise TypeError("moves must be an iterable of moves, not None")
        self.moves = tuple(moves)
        for m in self.moves:
            if not isinstance(m, Move): raise TypeError(f"expected a Move, got {m!r}")

    @staticmethod
    def from_notation(notation: str) -> "MoveSequence":
        """Parses a whitespace separated list of moves, e.g. ``F R' U B' L D'``."""
        if notation is None: raise TypeError("move notation must be a string, not None")
        return MoveSequence(Move.from_notation(tok) for tok in notation.split())

    @staticmethod
    def challenge() -> "MoveSequence":
        return MoveSequence([
            Move.clockwise(Face.F),
            Move.anticlockwise(Face.R),
            Move.clockwise(Face.U),
            Move.anticlockwise(Face.B),
            Move.clockwise(Face.L),
            Move.anticlockwise(Face.D)
        ])

    def inverse(self) -> "MoveSequence": return MoveSequence(m.inverse() for m in reversed(self.moves))

    @property
    def detailed_description(self) -> str: return "\n".join(f"{i+1}. {m.description}" for i, m in enumerate(self.moves))

    def __len__(self): return len(self.moves)
    def __getitem__(self, idx): return self.moves[idx]
    def __iter__(self) -> typing.Iterator[Move]: return iter(self.moves)

    def __eq__(self, other):
        if not isinstance(other, MoveSequence): return NotImplemented
        return self.moves == other.moves

    def __hash__(self): return hash(self.moves)

    def __str__(self): return " ".join(str(m) for m in self.moves)
    def __repr__(self): return f"MoveSequence({str(self)!r})"
