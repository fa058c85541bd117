"""Tkinter GUI frontend for the duel."""

import logging
import tkinter as tk
from typing import Dict, Optional

from ..core.clock import TickClock
from ..core.config import MatchConfig, PlayerId
from ..core.match import Match, MatchState, Outcome
from ..core.player import Direction

logger = logging.getLogger(__name__)

DESIRED_FPS = 60
BLOCK_SIZE = 34
HP_BAR_WIDTH = 20
FAST_MOVE = 3

# X11 auto-repeat sends a release right before each repeated press
RELEASE_GRACE_MS = 30

# Health bar colors from full health to defeated
LIFE_COLORS = ["#69d44c", "#97d44c", "#cbd44c", "#dbbe4b", "#db9d4b", "#d95038"]

BACKGROUND = "#aaaaaa"
REGION_OUTLINE = "#696969"
SELECTION_OUTLINE = "#5ec7ff"
CURSOR_OUTLINE = "#ff5ecf"

# Tk event.state modifier masks
CONTROL_MASK = 0x0004
ALT_MASK = 0x0008

MOVE_KEYS: Dict[str, Direction] = {
    "w": Direction.UP,
    "d": Direction.RIGHT,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "Up": Direction.UP,
    "Right": Direction.RIGHT,
    "Down": Direction.DOWN,
    "Left": Direction.LEFT,
}

CONTROLS_TEXT = (
    "move selected tile :  W A S D - (Player1) , Arrows (Player2)\n"
    "select/deselect tile : C - (Player1) , Right Shift - (Player2)\n"
    "faster movement: hold Alt - (Player1) , hold Ctrl - (Player2)\n"
    "finalize selected tiles : Space - (Player1) , Enter - (Player2)"
)


def life_color(tier: int, tiers: int) -> str:
    """Pick the health bar color for a tier, spreading any tier count over the palette."""
    if tiers <= 1:
        return LIFE_COLORS[-1]
    index = round(tier * (len(LIFE_COLORS) - 1) / (tiers - 1))
    return LIFE_COLORS[min(index, len(LIFE_COLORS) - 1)]


class TkinterLifeDuelGUI:
    """Tkinter-based GUI for a two-player duel on one keyboard."""

    def __init__(self, master: tk.Tk, config: Optional[MatchConfig] = None, block_size: int = BLOCK_SIZE) -> None:
        """Initialize the GUI.

        Args:
            master: Root Tkinter window
            config: Match settings, defaults to the reference board
            block_size: Tile size in pixels
        """
        self.master = master
        self.master.title("Fight for your life!")
        self.master.configure(bg=BACKGROUND)

        self.match = Match(config)
        self.clock = TickClock(self.match.config.generation_delay)

        self.block_size = block_size
        self.canvas_width = self.match.config.width * block_size + 2 * HP_BAR_WIDTH
        self.canvas_height = self.match.config.height * block_size
        self.frame_interval = 1000 // DESIRED_FPS

        self.canvas = tk.Canvas(
            self.master,
            width=self.canvas_width,
            height=self.canvas_height,
            bg=BACKGROUND,
            highlightthickness=0,
        )
        self.canvas.pack()
        self.master.bind("<KeyPress>", self.on_key)
        self.master.bind("<KeyRelease>", self.on_key_release)

        self._dirty = True
        self._after_id: Optional[str] = None
        # Held keys mapped to their pending release callback, if any
        self._held: Dict[str, Optional[str]] = {}
        self.update_loop()

    def on_key(self, event: tk.Event) -> None:
        """Handle a key press, ignoring auto-repeat while the key is held."""
        if event.keysym in self._held:
            pending = self._held[event.keysym]
            if pending is not None:
                self.master.after_cancel(pending)
                self._held[event.keysym] = None
            return

        self._held[event.keysym] = None
        self.handle_key(event.keysym, event.state)

    def on_key_release(self, event: tk.Event) -> None:
        """Forget a held key once no repeated press follows its release."""
        if event.keysym not in self._held:
            return
        pending = self._held[event.keysym]
        if pending is not None:
            self.master.after_cancel(pending)
        self._held[event.keysym] = self.master.after(RELEASE_GRACE_MS, self._release, event.keysym)

    def _release(self, keysym: str) -> None:
        self._held.pop(keysym, None)

    def handle_key(self, keysym: str, state: int = 0) -> None:
        """Apply the command bound to a key.

        Args:
            keysym: Tk key symbol
            state: Tk modifier mask
        """
        key = keysym.lower() if len(keysym) == 1 else keysym
        match_state = self.match.state

        if key == "Escape":
            self.master.quit()
            return

        if key == "p":
            self.match.toggle_pause()
            self.clock.reset()
        elif key == "r":
            if match_state is MatchState.TERMINAL:
                self.match.reset()
                self.clock.reset()
        elif key == "b":
            self.match.toggle_review()
        elif key in ("w", "a", "s", "d"):
            amount = FAST_MOVE if state & ALT_MASK else 1
            self.match.players[PlayerId.ONE].move(MOVE_KEYS[key], amount)
        elif key in ("Up", "Down", "Left", "Right"):
            amount = FAST_MOVE if state & CONTROL_MASK else 1
            self.match.players[PlayerId.TWO].move(MOVE_KEYS[key], amount)
        elif key == "c":
            self.match.players[PlayerId.ONE].toggle_selection()
        elif key == "Shift_R":
            self.match.players[PlayerId.TWO].toggle_selection()
        elif key == "space":
            self.match.deploy(PlayerId.ONE)
        elif key == "Return":
            self.match.deploy(PlayerId.TWO)
        else:
            return

        self._dirty = True

    def step(self, seconds: float) -> bool:
        """Feed frame time to the clock and advance a generation when due.

        Returns:
            True if a generation was advanced
        """
        if self.match.state is not MatchState.PLAYING:
            return False
        if not self.clock.tick(seconds):
            return False

        result = self.match.advance()
        if result.left_defeated or result.right_defeated:
            logger.info("Winner screen: %s", self.match.outcome.value)
        self._dirty = True
        return True

    def update_loop(self) -> None:
        """Main update loop."""
        self.step(1.0 / DESIRED_FPS)
        if self._dirty:
            self.draw()
            self._dirty = False
        self._after_id = self.master.after(self.frame_interval, self.update_loop)

    def stop(self) -> None:
        """Cancel the scheduled update and pending key releases."""
        for pending in self._held.values():
            if pending is not None:
                self.master.after_cancel(pending)
        self._held.clear()
        if self._after_id is not None:
            self.master.after_cancel(self._after_id)
            self._after_id = None

    def draw(self) -> None:
        """Redraw the screen for the current match state."""
        self.canvas.delete("all")
        state = self.match.state
        if state is MatchState.PAUSED:
            self.draw_pause_menu()
        elif state is MatchState.TERMINAL:
            self.draw_winner_screen()
        else:
            self.draw_board()

    def _tile_rect(self, x: int, y: int):
        x1 = HP_BAR_WIDTH + x * self.block_size
        y1 = y * self.block_size
        return x1, y1, x1 + self.block_size, y1 + self.block_size

    def draw_board(self) -> None:
        """Draw health bars, cells, placement regions, selections and cursors."""
        config = self.match.config
        tiers = config.health_tiers

        self.canvas.create_rectangle(
            0,
            0,
            HP_BAR_WIDTH,
            self.canvas_height,
            fill=life_color(self.match.health(PlayerId.ONE), tiers),
            outline="",
        )
        self.canvas.create_rectangle(
            self.canvas_width - HP_BAR_WIDTH,
            0,
            self.canvas_width,
            self.canvas_height,
            fill=life_color(self.match.health(PlayerId.TWO), tiers),
            outline="",
        )

        grid = self.match.grid
        for y in range(grid.height):
            for x in range(grid.width):
                color = "white" if grid.cells[x, y] else "black"
                self.canvas.create_rectangle(*self._tile_rect(x, y), fill=color, outline="")

        for player_id, player in self.match.players.items():
            region = player.region
            x1, y1, _, _ = self._tile_rect(region.x_min, region.y_min)
            _, _, x2, y2 = self._tile_rect(region.x_max, region.y_max)
            self.canvas.create_rectangle(x1, y1, x2, y2, outline=REGION_OUTLINE, width=1)

            for x, y in player.selected:
                self.canvas.create_rectangle(*self._tile_rect(x, y), outline=SELECTION_OUTLINE, width=2)

            self.canvas.create_rectangle(*self._tile_rect(*player.cursor), outline=CURSOR_OUTLINE, width=1)

    def draw_pause_menu(self) -> None:
        menu_x, menu_y = self.canvas_width / 4, 100
        menu_width, menu_height = self.canvas_width / 2, 400

        self.canvas.create_rectangle(
            menu_x, menu_y, menu_x + menu_width, menu_y + menu_height, fill="#505050", outline=""
        )
        center = menu_x + menu_width / 2
        self.canvas.create_text(
            center, menu_y + 35, text="Fight for your life!", fill="white", font=("Arial", 30)
        )
        self.canvas.create_text(
            center,
            menu_y + 90,
            text=(
                "Try to create shapes that follow the rules of the 'game of life',\n"
                "and make them reach your opponent's health bar to damage it!"
            ),
            fill="#e08e28",
            font=("Arial", 13),
            justify=tk.CENTER,
        )
        self.canvas.create_text(
            center,
            menu_y + 145,
            text="pause/unpause (PRESS TO START) - P",
            fill="#db442e",
            font=("Arial", 16),
        )
        self.canvas.create_text(
            menu_x + 10,
            menu_y + 185,
            text=CONTROLS_TEXT,
            fill="white",
            font=("Arial", 13),
            anchor="nw",
        )

    def draw_winner_screen(self) -> None:
        self.canvas.create_rectangle(0, 0, self.canvas_width, self.canvas_height, fill="#6ab562", outline="")

        if self.match.outcome is Outcome.DRAW:
            title = "It's a draw!"
        else:
            title = f"Congratulations Player {self.match.winner.value}!"

        center = self.canvas_width / 2
        self.canvas.create_text(center, 130, text=title, fill="#edbf68", font=("Arial", 48))
        self.canvas.create_text(
            center, 290, text="Press R to replay! (B to view the board)", fill="white", font=("Arial", 22)
        )


def main() -> None:
    """Main entry point for the Tkinter GUI."""
    import sys

    root = tk.Tk()
    root.resizable(False, False)

    test_mode = "--test" in sys.argv

    app = TkinterLifeDuelGUI(root)

    if test_mode:
        print("Running in test mode...")
        app.match.toggle_pause()

        def auto_exit() -> None:
            print(f"Test completed. Ran {app.match.generation} generations.")
            root.quit()
            root.destroy()

        root.after(3000, auto_exit)

    root.mainloop()


if __name__ == "__main__":
    main()
