from .log import LOGGER
from .state import Color, Face, CubeState
from .move import Direction, Move, MoveSequence, InvalidMoveNotationError
from .rotation import apply_move
from .move_handler import MoveHandler
from .render import render
