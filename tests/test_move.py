import pytest, math
from rubiks import Face, Direction, Move, MoveSequence, InvalidMoveNotationError

ALL_NOTATIONS = [
    ("F", Face.F, Direction.CLOCKWISE),
    ("F'", Face.F, Direction.ANTICLOCKWISE),
    ("R", Face.R, Direction.CLOCKWISE),
    ("R'", Face.R, Direction.ANTICLOCKWISE),
    ("U", Face.U, Direction.CLOCKWISE),
    ("U'", Face.U, Direction.ANTICLOCKWISE),
    ("B", Face.B, Direction.CLOCKWISE),
    ("B'", Face.B, Direction.ANTICLOCKWISE),
    ("L", Face.L, Direction.CLOCKWISE),
    ("L'", Face.L, Direction.ANTICLOCKWISE),
    ("D", Face.D, Direction.CLOCKWISE),
    ("D'", Face.D, Direction.ANTICLOCKWISE),
]

@pytest.mark.parametrize("notation, face, direction", ALL_NOTATIONS)
def test_from_notation(notation, face, direction):
    move = Move.from_notation(notation)
    assert move == Move(face, direction)
    assert str(move) == notation

def test_from_notation_strips_whitespace():
    assert Move.from_notation("  R' ") == Move.anticlockwise(Face.R)

@pytest.mark.parametrize("notation", ["X", "Z", "", "   ", "FF", "F2", "f", "F''", "R '"])
def test_from_notation_invalid(notation):
    with pytest.raises(InvalidMoveNotationError) as exc:
        Move.from_notation(notation)
    assert exc.value.notation == notation.strip()
    assert isinstance(exc.value, ValueError)

def test_from_notation_none():
    with pytest.raises(TypeError): Move.from_notation(None)

@pytest.mark.parametrize("face, direction", [("F", Direction.CLOCKWISE), (Face.F, "cw"), (None, Direction.CLOCKWISE), (Face.U, 999)])
def test_invalid_construction(face, direction):
    with pytest.raises(ValueError): Move(face, direction)

def test_factories():
    assert Move.clockwise(Face.F) == Move(Face.F, Direction.CLOCKWISE)
    assert Move.anticlockwise(Face.R) == Move(Face.R, Direction.ANTICLOCKWISE)
    assert str(Move.anticlockwise(Face.R)) == "R'"

def test_structural_equality():
    a, b = Move.clockwise(Face.F), Move.clockwise(Face.F)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Move.anticlockwise(Face.F)
    assert a != Move.clockwise(Face.B)
    assert a != None
    assert len({ a, b, Move.clockwise(Face.B) }) == 2

def test_move_is_immutable():
    move = Move.clockwise(Face.F)
    with pytest.raises(AttributeError): move.face = Face.B

@pytest.mark.parametrize("face", list(Face))
def test_inverse(face):
    move = Move.clockwise(face)
    assert move.inverse() == Move.anticlockwise(face)
    assert move.inverse().inverse() == move

def test_description():
    assert Move.clockwise(Face.F).description == "Front face clockwise 90°"
    assert Move.anticlockwise(Face.R).description == "Right face anti-clockwise 90°"
    assert Move.clockwise(Face.U).description == "Up face clockwise 90°"

def test_angle():
    assert Move.clockwise(Face.L).angle == pytest.approx(math.pi / 2)
    assert Move.anticlockwise(Face.L).angle == pytest.approx(-math.pi / 2)

def test_sequence_from_notation():
    seq = MoveSequence.from_notation("F R' U B' L D'")
    assert len(seq) == 6
    assert str(seq) == "F R' U B' L D'"
    assert seq == MoveSequence.challenge()
    assert seq[1] == Move.anticlockwise(Face.R)

def test_sequence_from_notation_extra_whitespace():
    assert str(MoveSequence.from_notation("  F   R'\tU ")) == "F R' U"
    assert len(MoveSequence.from_notation("")) == 0
    assert len(MoveSequence.from_notation("   ")) == 0

def test_sequence_from_notation_invalid():
    with pytest.raises(InvalidMoveNotationError) as exc:
        MoveSequence.from_notation("F X U")
    assert exc.value.notation == "X"

    with pytest.raises(TypeError): MoveSequence.from_notation(None)

def test_sequence_is_restartable():
    seq = MoveSequence([Move.clockwise(Face.F), Move.anticlockwise(Face.R), Move.clockwise(Face.U)])
    assert [str(m) for m in seq] == ["F", "R'", "U"]
    assert [str(m) for m in seq] == ["F", "R'", "U"]

def test_sequence_is_immutable():
    moves = [Move.clockwise(Face.F), Move.anticlockwise(Face.R)]
    seq = MoveSequence(moves)
    moves.append(Move.clockwise(Face.U))

    assert len(seq) == 2
    assert str(seq) == "F R'"

def test_sequence_rejects_non_moves():
    with pytest.raises(TypeError): MoveSequence(None)
    with pytest.raises(TypeError): MoveSequence(["F"])

def test_sequence_inverse():
    assert str(MoveSequence.challenge().inverse()) == "D L' B U' R F'"

def test_sequence_detailed_description():
    seq = MoveSequence([Move.clockwise(Face.F), Move.anticlockwise(Face.R)])
    assert seq.detailed_description == "1. Front face clockwise 90°\n2. Right face anti-clockwise 90°"

def test_sequence_equality():
    assert MoveSequence.challenge() == MoveSequence.challenge()
    assert hash(MoveSequence.challenge()) == hash(MoveSequence.challenge())
    assert MoveSequence.challenge() != MoveSequence.challenge().inverse()
