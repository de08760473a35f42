"""
TicTacToe UI
A graphical interface for the TicTacToe minigame using Tkinter.

Shows:
- The board (click a cell to play X)
- Game status ("Your turn (X)", "AI is thinking...", result)
- Score for X and O
- Which rule the AI used for its last move
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional

from board_view import BoardRenderer, DisplayConfig
from tictactoe import GameEngine
from tictactoe.config import GameConfig

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for the TicTacToe minigame.

    The window only reads the engine and forwards clicks to it; it redraws
    whenever the engine reports a change.
    """

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        ai_delay_ms: Optional[int] = None,
        display_config: Optional[DisplayConfig] = None
    ):
        """
        Initialize the UI.

        Args:
            engine: Game to show; a new one if omitted.
            ai_delay_ms: Pause before the AI answers (GameConfig.AI_DELAY_MS if omitted).
            display_config: Board drawing settings.
        """
        self.engine = engine or GameEngine()
        self.ai_delay_ms = GameConfig.AI_DELAY_MS if ai_delay_ms is None else ai_delay_ms
        self.renderer = BoardRenderer(display_config)

        # Pending root.after() id for the AI move
        self._ai_job: Optional[str] = None
        self._photo = None  # Keep a reference or Tk drops the image

        self._create_ui()
        self.engine.add_listener(self._on_engine_change)
        self._refresh()

        if self.engine.is_ai_pending:
            self._ai_job = self.root.after(self.ai_delay_ms, self._ai_move)

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('Move.TLabel', font=('Segoe UI', 11), foreground='#00ff88')

        ttk.Label(main_frame, text="🎮 Tic-Tac-Toe", style='Title.TLabel').pack(pady=(0, 10))

        # Board canvas
        size = self.renderer.config.BOARD_OUTPUT_SIZE
        self.board_canvas = tk.Canvas(main_frame, width=size, height=size, bg='#16213e',
                                      highlightthickness=0)
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_click)

        # Game status section
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(10, 5))

        score_frame = ttk.Frame(main_frame)
        score_frame.pack(pady=5)
        ttk.Label(score_frame, text="X (You): ", foreground='#00d4ff').pack(side=tk.LEFT)
        self.score_x_label = ttk.Label(score_frame, text="0")
        self.score_x_label.pack(side=tk.LEFT, padx=(0, 20))
        ttk.Label(score_frame, text="O (AI): ", foreground='#ff6b6b').pack(side=tk.LEFT)
        self.score_o_label = ttk.Label(score_frame, text="0")
        self.score_o_label.pack(side=tk.LEFT)

        self.ai_move_label = ttk.Label(main_frame, text="", style='Move.TLabel')
        self.ai_move_label.pack(pady=5)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 Restart",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._restart
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="📷 Snapshot",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=10,
            command=self._save_snapshot
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 11),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_click(self, event):
        """Play the clicked cell, then schedule the AI's answer."""
        if self.engine.is_ai_pending:
            return  # Still waiting for the AI

        cell = self.renderer.cell_at(
            self.board_canvas.canvasx(event.x),
            self.board_canvas.canvasy(event.y)
        )
        if cell is None:
            return

        result = self.engine.apply_move(cell)
        if not result.accepted:
            # The board already shows why; nothing to report
            return

        if self.engine.is_ai_pending:
            self._ai_job = self.root.after(self.ai_delay_ms, self._ai_move)

    def _ai_move(self):
        """Let the AI play (runs on the UI thread after the delay)."""
        self._ai_job = None
        result = self.engine.compute_and_apply_ai_move()
        if result.accepted:
            self.ai_move_label.configure(
                text=f"AI → cell {result.cell} ({self.engine.ai.last_reason})"
            )

    def _on_engine_change(self, engine: GameEngine):
        self._refresh()

    def _refresh(self):
        """Redraw the board and the labels from the engine."""
        image = self.renderer.render(self.engine.state)
        self._photo = self.renderer.to_photo(image)
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=self._photo)

        self.status_label.configure(text=self.engine.status_text())
        score = self.engine.score
        self.score_x_label.configure(text=str(score.wins_x))
        self.score_o_label.configure(text=str(score.wins_o))

    def _restart(self):
        """Start a new game; the score is kept."""
        if self._ai_job is not None:
            self.root.after_cancel(self._ai_job)
            self._ai_job = None
        self.ai_move_label.configure(text="")
        self.engine.restart()

    def _save_snapshot(self):
        """Save the board as a PNG."""
        try:
            path = self.renderer.save(self.engine.state)
        except OSError as e:
            logger.error("Snapshot failed: %s", e)
            self.ai_move_label.configure(text="Snapshot failed!")
            return
        self.ai_move_label.configure(text=f"Saved {path.name}")

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting...")
        self.engine.remove_listener(self._on_engine_change)
        if self._ai_job is not None:
            self.root.after_cancel(self._ai_job)
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
