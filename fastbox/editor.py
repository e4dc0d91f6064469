"""A small full-screen line editor."""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Union

HEADER = (
    "FastBox Text Editor (Ctrl+S save, Ctrl+O open, ESC exit)\n"
    "-----------------------------------------------------------\n"
)
_HEADER_ROWS = 2
_CLEAR = "\x1b[2J\x1b[H"


class Key(Enum):
    """Non-printable keys the editor understands."""

    ESC = "esc"
    CTRL_S = "ctrl-s"
    CTRL_O = "ctrl-o"
    ENTER = "enter"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


KeyPress = Union[Key, str, None]

_CONTROL_KEYS = {
    "\x1b": Key.ESC,
    "\x13": Key.CTRL_S,
    "\x0f": Key.CTRL_O,
    "\r": Key.ENTER,
    "\x08": Key.BACKSPACE,
    "\x7f": Key.BACKSPACE,
}


def _key_for_char(ch: str) -> KeyPress:
    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]
    if " " <= ch <= "~":
        return ch
    return None


class Document:
    """Lines of text with a cursor given as line index and column."""

    def __init__(self, lines=None) -> None:
        self.lines: list[str] = list(lines) if lines else [""]
        self.line = 0
        self.pos = 0

    def reset(self) -> None:
        self.lines = [""]
        self.line = 0
        self.pos = 0

    @property
    def _current(self) -> str:
        return self.lines[self.line]

    def insert_char(self, ch: str) -> None:
        text = self._current
        self.lines[self.line] = text[:self.pos] + ch + text[self.pos:]
        self.pos += 1

    def split_line(self) -> None:
        text = self._current
        self.lines[self.line] = text[:self.pos]
        self.lines.insert(self.line + 1, text[self.pos:])
        self.line += 1
        self.pos = 0

    def backspace(self) -> None:
        if self.pos > 0:
            text = self._current
            self.lines[self.line] = text[:self.pos - 1] + text[self.pos:]
            self.pos -= 1
        elif self.line > 0:
            self.pos = len(self.lines[self.line - 1])
            self.lines[self.line - 1] += self.lines.pop(self.line)
            self.line -= 1

    def move_up(self) -> None:
        if self.line > 0:
            self.line -= 1
            self.pos = min(self.pos, len(self._current))

    def move_down(self) -> None:
        if self.line < len(self.lines) - 1:
            self.line += 1
            self.pos = min(self.pos, len(self._current))

    def move_left(self) -> None:
        if self.pos > 0:
            self.pos -= 1
        elif self.line > 0:
            self.line -= 1
            self.pos = len(self._current)

    def move_right(self) -> None:
        if self.pos < len(self._current):
            self.pos += 1
        elif self.line < len(self.lines) - 1:
            self.line += 1
            self.pos = 0

    def handle_key(self, key: KeyPress) -> bool:
        """Apply an editing key; return False if the key is not an edit."""
        actions = {
            Key.ENTER: self.split_line,
            Key.BACKSPACE: self.backspace,
            Key.UP: self.move_up,
            Key.DOWN: self.move_down,
            Key.LEFT: self.move_left,
            Key.RIGHT: self.move_right,
        }
        if isinstance(key, Key):
            action = actions.get(key)
            if action is None:
                return False
            action()
            return True
        if isinstance(key, str) and len(key) == 1 and " " <= key <= "~":
            self.insert_char(key)
            return True
        return False

    def render(self) -> tuple[str, tuple[int, int]]:
        """Screen text and the (column, row) of the cursor on it."""
        width = len(str(len(self.lines)))
        body = "".join(
            f"{number:>{width}}. {text}\n"
            for number, text in enumerate(self.lines, start=1)
        )
        cursor = (width + 2 + self.pos, _HEADER_ROWS + self.line)
        return HEADER + body, cursor

    def load(self, path) -> None:
        """Replace the contents with the lines of a file."""
        with open(path, encoding="utf-8", errors="surrogateescape") as handle:
            lines = handle.read().split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        self.lines = lines or [""]
        self.line = 0
        self.pos = 0

    def save(self, path) -> None:
        """Write every line, each ending in a newline."""
        with open(path, "w", encoding="utf-8", errors="surrogateescape") as handle:
            handle.writelines(text + "\n" for text in self.lines)


def _draw(document: Document, write: Callable[[str], None]) -> None:
    text, (x, y) = document.render()
    write(f"{_CLEAR}{text}\x1b[{y + 1};{x + 1}H")


def _save(document: Document, path: Optional[str]) -> str:
    if path is None:
        return "Saving stopped."
    try:
        document.save(path)
    except OSError:
        return "Error while opening file."
    return f"File has been saved: {path}"


def run_editor(document: Document, read_key: Callable[[], KeyPress],
               ask_path: Callable[[str], Optional[str]],
               write: Callable[[str], None]) -> None:
    """Edit ``document`` until ESC or end of input.

    ``ask_path`` is called with ``"save"`` or ``"open"`` and returns a path,
    or None when the user cancels.
    """
    _draw(document, write)
    while True:
        try:
            key = read_key()
        except EOFError:
            break
        if key is Key.ESC:
            break
        if key is Key.CTRL_S:
            message = _save(document, ask_path("save"))
            document.reset()
            _draw(document, write)
            write(message + "\n")
        elif key is Key.CTRL_O:
            path = ask_path("open")
            if path is None:
                write("Loading stopped.\n")
                continue
            try:
                document.load(path)
            except (OSError, UnicodeError):
                write("Loading failed. Cant open file.\n")
                continue
            _draw(document, write)
            write(f"File loaded: {path}\n")
        elif document.handle_key(key):
            _draw(document, write)


class _Terminal:
    """Raw keyboard input and screen output for the running editor."""

    _ARROWS_NT = {"H": Key.UP, "P": Key.DOWN, "K": Key.LEFT, "M": Key.RIGHT}
    _ARROWS_ANSI = {b"[A": Key.UP, b"[B": Key.DOWN, b"[D": Key.LEFT, b"[C": Key.RIGHT}

    def __init__(self) -> None:
        self._raw = os.name != "nt" and sys.stdin.isatty()
        self._fd = sys.stdin.fileno() if self._raw else -1
        self._saved = None

    def __enter__(self) -> "_Terminal":
        if self._raw:
            import termios

            self._saved = termios.tcgetattr(self._fd)
            self._enter_raw()
        return self

    def __exit__(self, *exc) -> None:
        self._restore()
        sys.stdout.write(_CLEAR)
        sys.stdout.flush()

    def _enter_raw(self) -> None:
        if self._raw:
            import tty

            tty.setraw(self._fd)

    def _restore(self) -> None:
        if self._raw and self._saved is not None:
            import termios

            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)

    def read_key(self) -> KeyPress:
        if os.name == "nt":
            import msvcrt

            ch = msvcrt.getwch()
            if ch in ("\x00", "\xe0"):
                return self._ARROWS_NT.get(msvcrt.getwch())
            return _key_for_char(ch)
        if not self._raw:
            ch = sys.stdin.read(1)
            if ch == "":
                raise EOFError
            return _key_for_char("\r" if ch == "\n" else ch)
        import select

        data = os.read(self._fd, 1)
        if not data:
            raise EOFError
        if data == b"\x1b":
            if select.select([self._fd], [], [], 0.05)[0]:
                return self._ARROWS_ANSI.get(os.read(self._fd, 2))
            return Key.ESC
        return _key_for_char(data.decode("latin-1"))

    def write(self, text: str) -> None:
        if self._raw:
            text = text.replace("\n", "\r\n")
        sys.stdout.write(text)
        sys.stdout.flush()

    def ask_path(self, kind: str) -> Optional[str]:
        self._restore()
        try:
            answer = input(f"\n{kind.capitalize()} file: ").strip()
        except EOFError:
            answer = ""
        finally:
            self._enter_raw()
        if not answer:
            return None
        if kind == "save" and not Path(answer).suffix:
            answer += ".txt"
        return answer


def main(argv=None) -> int:
    sys.stdout.write("\x1b]0;FastBox Text Editor\x07")
    with _Terminal() as terminal:
        run_editor(Document(), terminal.read_key, terminal.ask_path, terminal.write)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())