"""Game state machine — board, turn move table, selection and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import GameResult, Player
from checkie.core.executor import CommitResult, execute
from checkie.core.move_table import TurnMoveTable
from checkie.core.types import Position
from checkie.game.interfaces import GamePhase
from checkie.game.settings import GameSettings


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    player: Player
    origin: Position
    destination: Position
    path: tuple[Position, ...]
    captured: tuple[Position, ...] = ()
    promoted: bool = False

    @property
    def was_capture(self) -> bool:
        return bool(self.captured)

    def __str__(self) -> str:
        sep = "x" if self.captured else "-"
        squares = [self.origin, *self.path]
        return sep.join(f"({p.row},{p.col})" for p in squares)


@dataclass
class GameState:
    """Manages game lifecycle: phase, result, move history, selection.

    Pure data and logic, no UI.
    """

    settings: GameSettings = field(default_factory=GameSettings, init=False)
    board: Board = field(default_factory=Board.initial, init=False)
    move_table: TurnMoveTable = field(default_factory=TurnMoveTable, init=False)
    selected: Position | None = field(default=None, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, settings: GameSettings | None = None, board: Board | None = None) -> None:
        """Initialise (or reset) the game, optionally from a custom *board*."""
        self.settings = settings or GameSettings()
        self.settings.validate()
        if board is None:
            board = Board.initial(self.settings.board_size, self.settings.first_player)
        self.board = board
        self.move_table = TurnMoveTable.recompute(self.board, self.settings.rules)
        self.selected = None
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, selected: tuple[int, int], destination: tuple[int, int]) -> MoveRecord:
        """Commit a move and start the next turn.

        Raises the engine errors unchanged; the state is untouched when it does.
        """
        outcome: CommitResult = execute(self.board, self.move_table, selected, destination)
        self.move_table.refresh(self.board)
        self.selected = None

        record = MoveRecord(
            player=outcome.player,
            origin=outcome.origin,
            destination=outcome.destination,
            path=outcome.path,
            captured=outcome.captured,
            promoted=outcome.promoted,
        )
        self.move_history.append(record)
        self._check_game_over()
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def player_on_turn(self) -> Player:
        return self.board.player_on_turn

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Player | None:
        if self.result == GameResult.PLAYER_A_WINS:
            return Player.PLAYER_A
        if self.result == GameResult.PLAYER_B_WINS:
            return Player.PLAYER_B
        return None

    @property
    def ply_count(self) -> int:
        """Number of moves played."""
        return len(self.move_history)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        if len(self.move_table) == 0:
            self.result = GameResult.win_for(self.board.player_on_turn.opposite)
            self.phase = GamePhase.GAME_OVER
