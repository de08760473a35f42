"""
Game state for the TicTacToe minigame.
Tracks the board, whose turn it is, the game status and the move history.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


BOARD_CELLS = 9


class Cell(Enum):
    """The three values a board cell can hold."""
    EMPTY = ""
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value or "."


class Player(Enum):
    """The two sides. The human always plays X and moves first."""
    HUMAN = "human"
    AI = "ai"

    @property
    def mark(self) -> Cell:
        """The mark this player puts on the board."""
        return Cell.X if self == Player.HUMAN else Cell.O

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.AI if self == Player.HUMAN else Player.HUMAN


class GameStatus(Enum):
    """Where the game stands. Everything but IN_PROGRESS is terminal."""
    IN_PROGRESS = "in_progress"
    WON_BY_X = "won_by_x"
    WON_BY_O = "won_by_o"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.IN_PROGRESS

    @classmethod
    def won_by(cls, mark: Cell) -> "GameStatus":
        """Status for a game won by `mark`."""
        if mark == Cell.X:
            return cls.WON_BY_X
        if mark == Cell.O:
            return cls.WON_BY_O
        raise ValueError(f"Nobody wins with {mark!r}")


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    cell: int               # Cell index (0-8)
    mark: Cell              # X or O
    move_number: int        # Which move this is (0-8)


@dataclass
class Score:
    """Win counters for the current session. Draws are not counted."""
    wins_x: int = 0
    wins_o: int = 0

    def record(self, status: GameStatus):
        """Count a finished game once."""
        if status == GameStatus.WON_BY_X:
            self.wins_x += 1
        elif status == GameStatus.WON_BY_O:
            self.wins_o += 1


def _empty_board() -> List[Cell]:
    return [Cell.EMPTY] * BOARD_CELLS


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 9 cells, row-major (0,1,2 top row; 3,4,5 middle; 6,7,8 bottom)
    - Whose turn it is
    - Game status (in progress, won, draw)
    - Move history and the winning line once there is one
    """

    board: List[Cell] = field(default_factory=_empty_board)

    # Human (X) always opens
    turn: Player = Player.HUMAN

    status: GameStatus = GameStatus.IN_PROGRESS

    moves: List[Move] = field(default_factory=list)

    winning_line: Optional[Tuple[int, int, int]] = None

    def __post_init__(self):
        if len(self.board) != BOARD_CELLS:
            raise ValueError(
                f"Board must have {BOARD_CELLS} cells, got {len(self.board)}"
            )
        for cell in self.board:
            if not isinstance(cell, Cell):
                raise ValueError(f"Invalid cell value: {cell!r}")
        # Keep our own copy so callers can't mutate the board behind our back
        self.board = list(self.board)

    @classmethod
    def from_string(cls, layout: str, turn: Player = Player.HUMAN) -> "GameState":
        """
        Build a state from a 9 character layout such as "XX.OO....".

        Args:
            layout: One character per cell: X, O, or '.'/'_'/' ' for empty.
            turn: Whose turn it is.

        Returns:
            A new GameState with status IN_PROGRESS.
        """
        symbols = {"X": Cell.X, "O": Cell.O, ".": Cell.EMPTY, "_": Cell.EMPTY, " ": Cell.EMPTY}
        try:
            board = [symbols[ch.upper()] for ch in layout]
        except KeyError as e:
            raise ValueError(f"Invalid board character {e.args[0]!r}") from None
        return cls(board=board, turn=turn)

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    def count(self, mark: Cell) -> int:
        """How many cells hold `mark`."""
        return sum(1 for cell in self.board if cell == mark)

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indices in ascending order.
        """
        return [i for i, cell in enumerate(self.board) if cell == Cell.EMPTY]

    def place(self, cell: int, player: Player):
        """
        Put `player`'s mark on `cell` and record the move.
        No rule checking here; that is MoveValidator's job.
        """
        mark = player.mark
        self.board[cell] = mark
        self.moves.append(Move(
            player=player,
            cell=cell,
            mark=mark,
            move_number=len(self.moves),
        ))

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            turn=self.turn,
            status=self.status,
            moves=list(self.moves),
            winning_line=self.winning_line,
        )

    def to_string(self) -> str:
        """Compact layout, the inverse of from_string()."""
        return "".join(str(cell) for cell in self.board)

    def print_board(self):
        """Print the board to console."""
        print()
        for row in range(3):
            cells = []
            for col in range(3):
                index = row * 3 + col
                cell = self.board[index]
                cells.append(f" {cell.value} " if cell != Cell.EMPTY else f"({index})")
            print("|".join(cells))
            if row < 2:
                print("---+---+---")

        if self.status == GameStatus.WON_BY_X:
            print("\nX WINS!")
        elif self.status == GameStatus.WON_BY_O:
            print("\nO WINS!")
        elif self.status == GameStatus.DRAW:
            print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.turn.value} ({self.turn.mark.value})")
