# game_controller.py
import threading
from collections import deque, namedtuple
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from komi.config import DEFAULT_BOARD_SIZE, GameConfig, load_config
from komi.game_state import DEFAULT_WIN_THRESHOLD, GameState
from komi.goban_model import COLOR_NAMES, WHITE, Grid, IllegalMove
from komi.move_processor import MoveProcessor, MoveResult

# enable debug here
DEBUG = False


class Phase(Enum):
    AWAITING_MOVE = "awaiting move"
    PROCESSING_MOVE = "processing move"
    GAME_OVER = "game over"
    TERMINATED = "terminated"


BoardUpdate = namedtuple('BoardUpdate', ['seq', 'reason', 'changed', 'black_captures', 'white_captures', 'to_move'])

BoardSnapshot = namedtuple('BoardSnapshot', [
    'board', 'black_captures', 'white_captures', 'to_move', 'restricted', 'phase',
])


@dataclass(frozen=True)
class GameOver:
    winner: str
    black_captures: int
    white_captures: int

    @property
    def winner_name(self) -> str:
        return COLOR_NAMES[self.winner]


class GameController:
    """
    Single owner of the Grid and GameState.

    Every move and reset runs under one lock, so the board is never seen
    half-updated. Requests that arrive while another one is in flight wait
    for the lock; they are not dropped. Observers are called after the lock
    is released with an immutable copy of what changed, strictly in the
    order the changes happened (BoardUpdate.seq counts up from 1):
      - on_board_updated(BoardUpdate)
      - on_game_over(GameOver) -> optional bool ("play again?")
      - on_move_rejected(row, col, IllegalMove)
      - on_terminate()
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE, win_threshold: int = DEFAULT_WIN_THRESHOLD,
                 first_to_move: str = WHITE):
        self.grid = Grid(size)
        self.state = GameState(first_to_move=first_to_move, win_threshold=win_threshold)
        self.processor = MoveProcessor(self.grid, self.state)
        self._lock = threading.Lock()
        self._phase = Phase.AWAITING_MOVE
        # notifications waiting for delivery, in the order they happened
        self._pending = deque()
        self._delivering = False
        self._seq = 0

        # callbacks
        self.on_board_updated: Optional[Callable[[BoardUpdate], None]] = None
        self.on_game_over: Optional[Callable[[GameOver], Optional[bool]]] = None
        self.on_move_rejected: Optional[Callable[[int, int, IllegalMove], None]] = None
        self.on_terminate: Optional[Callable[[], None]] = None

    @classmethod
    def from_config(cls, cfg: Optional[GameConfig] = None) -> "GameController":
        if cfg is None:
            cfg = load_config()
        return cls(size=cfg.board_size, win_threshold=cfg.win_threshold, first_to_move=cfg.first_to_move)

    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def phase(self) -> Phase:
        return self._phase

    def _notify(self, name, callback, *args):
        if callback is None:
            return None
        try:
            return callback(*args)
        except Exception as e:
            print(f"[GameController] {name} callback error:", e)
            return None

    def _enqueue(self, name, *args):
        # caller holds self._lock, so queue order is the order state changed
        self._pending.append((name, args))

    def _drain(self):
        """
        Deliver queued notifications, oldest first, outside the lock.
        Only one thread delivers at a time; anything queued meanwhile
        (including from inside a callback) is picked up by that thread.
        """
        with self._lock:
            if self._delivering:
                return
            self._delivering = True
        while True:
            with self._lock:
                if not self._pending:
                    self._delivering = False
                    return
                name, args = self._pending.popleft()
            answer = self._notify(name, getattr(self, name), *args)
            if name == "on_game_over" and answer is not None:
                self.resolve_game_over(bool(answer))

    # -------------------------
    # requests
    # -------------------------
    def submit_move(self, row: int, col: int, color: Optional[str] = None) -> Optional[MoveResult]:
        """
        Play (row, col) for `color`, or for whoever is to move once the lock is held.
        Returns the MoveResult, or None when the move was rejected.
        """
        result = None
        rejection = None
        update = None
        with self._lock:
            if self._phase is not Phase.AWAITING_MOVE:
                rejection = IllegalMove(f"Game is in phase '{self._phase.value}'")
            else:
                self._phase = Phase.PROCESSING_MOVE
                try:
                    result = self.processor.apply_move(row, col, color or self.state.to_move)
                except IllegalMove as e:
                    rejection = e
                finally:
                    self._phase = Phase.AWAITING_MOVE
            if rejection is not None:
                self._enqueue("on_move_rejected", row, col, rejection)
            else:
                self.state.flip_turn()
                changed = {point: None for point in result.captured}
                changed[result.point] = result.color
                update = self._board_update("move", changed)
                self._enqueue("on_board_updated", update)
                winner = self.state.winner()
                if winner is not None:
                    self._phase = Phase.GAME_OVER
                    self._enqueue("on_game_over", GameOver(winner, result.black_captures, result.white_captures))

        if DEBUG:
            if rejection is not None:
                print("[GameController] rejected", (row, col), "-", rejection)
            else:
                print("[GameController] played", result.color, "at", result.point,
                      "captured:", len(result.captured), "next:", update.to_move)
                if self._phase is Phase.GAME_OVER:
                    print("[GameController] game over")
        self._drain()
        return result

    def dispatch_move(self, row: int, col: int) -> threading.Thread:
        """Submit a move from its own thread, one per input event. Returns the started thread."""
        thread = threading.Thread(target=self.submit_move, args=(row, col), daemon=True)
        thread.start()
        return thread

    def reset(self) -> BoardUpdate:
        with self._lock:
            changed = {cell.point: None for cell in self.grid.occupied()}
            self.grid.clear()
            self.state.reset()
            self._phase = Phase.AWAITING_MOVE
            update = self._board_update("reset", changed)
            self._enqueue("on_board_updated", update)
        if DEBUG:
            print("[GameController] reset, cleared", len(changed), "stones")
        self._drain()
        return update

    def resolve_game_over(self, play_again: bool):
        """Answer to GameOver: True starts a new game, False ends the session."""
        with self._lock:
            if self._phase is not Phase.GAME_OVER:
                if DEBUG:
                    print("[GameController] resolve_game_over ignored in phase", self._phase.value)
                return
            if not play_again:
                self._phase = Phase.TERMINATED
                self._enqueue("on_terminate")
        if play_again:
            self.reset()
        else:
            self._drain()

    def _board_update(self, reason, changed) -> BoardUpdate:
        # caller holds self._lock
        self._seq += 1
        return BoardUpdate(
            seq=self._seq,
            reason=reason,
            changed=changed,
            black_captures=self.state.black_captures,
            white_captures=self.state.white_captures,
            to_move=self.state.to_move,
        )

    # -------------------------
    # queries
    # -------------------------
    def snapshot(self) -> BoardSnapshot:
        with self._lock:
            return BoardSnapshot(
                board=tuple(tuple(row) for row in self.grid.get_board()),
                black_captures=self.state.black_captures,
                white_captures=self.state.white_captures,
                to_move=self.state.to_move,
                restricted=frozenset(self.state.restricted),
                phase=self._phase,
            )

    def current_player(self) -> str:
        """Return color to move as 'B' or 'W'."""
        return self.state.to_move
