import logging, typing
from . import log
from .state import CubeState
from .move import Move, MoveSequence

class MoveHandler:
    """Owns a cube state, applies moves to it and notifies registered handlers after every move.

    Not thread-safe: callers sharing a handler across threads have to serialize access themselves.
    """

    cur_state: CubeState

    _handlers: typing.List[typing.Callable[[CubeState, Move], None]]

    def __init__(self, state: typing.Optional[CubeState] = None):
        self.cur_state = state if state is not None else CubeState.create_solved()
        self._handlers = []

    def register_handler(self, cb: typing.Callable[[CubeState, Move], None]): self._handlers.append(cb)
    def unregister_handler(self, cb: typing.Callable[[CubeState, Move], None]): self._handlers.remove(cb)

    def apply_move(self, move: Move):
        self.cur_state.apply_move(move)
        for h in list(self._handlers): h(self.cur_state, move)

    def execute_sequence(self, seq: MoveSequence):
        log.LOGGER.log(logging.DEBUG, f"executing sequence {seq}")
        for move in seq: self.apply_move(move)

    def steps(self, seq: MoveSequence) -> typing.Iterator[typing.Tuple[Move, int]]:
        """Applies the moves of ``seq`` lazily, one per iteration, yielding each applied move with its 1-based step number."""
        log.LOGGER.log(logging.DEBUG, f"executing sequence {seq} step by step")
        for step, move in enumerate(seq, start=1):
            self.apply_move(move)
            yield move, step

    def execute_step_by_step(self, seq: MoveSequence, on_step: typing.Callable[[Move, int], None]):
        for move, step in self.steps(seq): on_step(move, step)

    def execute_challenge(self): self.execute_sequence(MoveSequence.challenge())
    def execute_challenge_step_by_step(self, on_step: typing.Callable[[Move, int], None]): self.execute_step_by_step(MoveSequence.challenge(), on_step)

    def reset(self):
        self.cur_state = CubeState.create_solved()
        log.LOGGER.log(logging.DEBUG, "reset cube to the solved state")
