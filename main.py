"""
Console front end for Three Men's Morris.

Two players share the terminal and take turns typing cell coordinates.
All the rules live in morris.GameSession; this script only forwards
input and prints the board.

Commands:
    row,col  (or "row col")   click a cell, e.g. 1,1
    r                         reset the game
    q                         quit
"""

from typing import Optional, Tuple, Union

from morris.config import GameConfig
from morris.session import GameSession


Command = Union[str, Tuple[int, int]]


def parse_command(text: str) -> Optional[Command]:
    """
    Parse one line of console input.

    Returns:
        "reset", "quit", a (row, col) tuple, or None if the line is not understood.
    """
    text = text.strip().lower()
    if text in ("r", "reset"):
        return "reset"
    if text in ("q", "quit", "exit"):
        return "quit"

    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        return None

    size = GameConfig.BOARD_SIZE
    if not (0 <= row < size and 0 <= col < size):
        return None
    return (row, col)


class MorrisConsole:
    """
    Hot-seat console game.

    Reads commands until the user quits. A finished game stays on screen
    until the players reset or quit.
    """

    def __init__(self, session: Optional[GameSession] = None, input_func=input):
        self.session = session or GameSession()
        self.input_func = input_func
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print("\nThree Men's Morris")
        print("Enter row,col to play, 'r' to reset, 'q' to quit\n")
        self.is_running = True
        self._show()

        while self.is_running:
            try:
                line = self.input_func(self._prompt())
            except EOFError:
                break
            self.handle_line(line)

    def handle_line(self, line: str):
        """Apply one line of input to the session."""
        command = parse_command(line)

        if command is None:
            print("!! Invalid input. Use row,col with numbers 0-2 (e.g. 1,1).")
            return

        if command == "quit":
            print("\nGame quit by user.")
            self.is_running = False
            return

        if command == "reset":
            self.session.reset_game()
            print("\nGame reset!")
            self._show()
            return

        row, col = command
        result = self.session.handle_cell_selected(row, col)
        if result.accepted:
            self._show()
        elif not self.session.debug:
            # Debug sessions already print the reason
            print(f"!! {result.error_message}")

    def _prompt(self) -> str:
        if self.session.is_game_over:
            return "Game over. 'r' to play again, 'q' to quit: "
        player = self.session.current_player.value
        if self.session.selected_cell is not None:
            row, col = self.session.selected_cell
            return f"{player}, move ({row},{col}) to: "
        return f"{player} ({self.session.phase.value}): "

    def _show(self):
        print()
        print(self.session.render())
        if self.session.winning_line:
            cells = " ".join(f"({r},{c})" for r, c in self.session.winning_line)
            print(f"Winning line: {cells}")
        print()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Three Men's Morris")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print the reason whenever a click is ignored"
    )

    args = parser.parse_args()

    console = MorrisConsole(GameSession(debug=args.debug or GameConfig.DEBUG_MODE))

    try:
        console.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
