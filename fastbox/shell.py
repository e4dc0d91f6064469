"""Interactive FastBox command shell."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Callable, TextIO

CLEAR_COMMAND = "cls" if os.name == "nt" else "clear"
LIST_COMMAND = "dir" if os.name == "nt" else "ls"

HELP_TEXT = (
    "The commands are:\n"
    "print 'example' - Prints out text\n"
    "exec 'cmd'     - Executes a command\n"
    "cd DIR         - Changes directory\n"
    "dir / ls       - Lists current directory\n"
    "nano / mkfile  - Runs text editor\n"
    "cls / clear    - Clears the screen\n"
    "ssh            - Runs ssh client\n"
    "exit           - Quits the program\n"
)

Runner = Callable[[str], int]


def run_system(command: str) -> int:
    """Run a command through the system shell; return -1 if it cannot start."""
    try:
        return subprocess.call(command, shell=True)
    except OSError:
        return -1


def matching_directories(directory, prefix: str) -> list[str]:
    """Names of subdirectories of ``directory`` that start with ``prefix``."""
    with os.scandir(directory) as entries:
        return sorted(
            entry.name
            for entry in entries
            if entry.is_dir() and entry.name.startswith(prefix)
        )


def extract_quoted(command: str) -> str:
    """Text between the first and the last single quote of ``command``."""
    first = command.find("'")
    last = command.rfind("'")
    if first == -1 or first == last:
        raise ValueError("Missing quotes.")
    return command[first + 1:last]


def _module_command(module: str) -> str:
    return f'"{sys.executable}" -m {module}'


class Shell:
    """A small line-oriented shell with a working directory of its own."""

    def __init__(self, cwd=None, out: TextIO | None = None,
                 runner: Runner | None = None) -> None:
        self.cwd = Path(cwd if cwd is not None else Path.cwd()).resolve()
        self.out = out if out is not None else sys.stdout
        self.runner = runner if runner is not None else run_system

    def prompt(self) -> str:
        return f"{self.cwd}>> "

    def complete(self, buffer: str) -> str:
        """Complete a ``cd`` argument to the first matching directory."""
        if not buffer.startswith("cd "):
            return buffer
        matches = matching_directories(self.cwd, buffer[3:])
        if not matches:
            return buffer
        return "cd " + matches[0]

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _clear(self) -> None:
        self.runner(CLEAR_COMMAND)

    def _change_directory(self, path: str) -> None:
        target = self.cwd / path
        if target.is_dir():
            self.cwd = target.resolve()
            os.chdir(self.cwd)
        else:
            self._write(f"Directory not found: {path}\n")

    def execute(self, command: str) -> bool:
        """Run one command line; return False when the shell should stop."""
        if command == "help":
            self._write(HELP_TEXT)
        elif command == "exit":
            self._write("Exiting...\n")
            return False
        elif command in ("cls", "clear"):
            self._clear()
        elif command in ("dir", "ls"):
            self.runner(f'{LIST_COMMAND} "{self.cwd}"')
        elif command in ("nano", "mkfile"):
            result = self.runner(_module_command("fastbox.editor"))
            self._clear()
            if result == -1:
                self._write("Failed to start nano.\n")
        elif command == "ssh":
            result = self.runner(_module_command("fastbox.ssh"))
            if result == -1:
                self._write("Failed to start ssh client.\n")
            self._clear()
        elif command.startswith("cd "):
            self._change_directory(command[3:])
        elif command.startswith("print "):
            try:
                self._write(extract_quoted(command) + "\n")
            except ValueError:
                self._write("Error: Missing quotes.\n")
        elif command.startswith("exec "):
            try:
                inner = extract_quoted(command)
            except ValueError:
                self._write("Error: Missing quotes.\n")
            else:
                result = self.runner(inner)
                self._clear()
                if result == -1:
                    self._write("Failed to run.\n")
        else:
            self._write("Unknown command. Type 'help'.\n")
        return True

    def run(self, read_key: Callable[[], str]) -> None:
        """Read keys one at a time and execute lines until exit or end of input."""
        while True:
            self._write(self.prompt())
            buffer = ""
            while True:
                ch = read_key()
                if ch == "":
                    return
                if ch in ("\r", "\n"):
                    self._write("\n")
                    break
                if ch in ("\b", "\x7f"):
                    if buffer:
                        buffer = buffer[:-1]
                        self._write("\b \b")
                elif ch == "\t":
                    completed = self.complete(buffer)
                    if completed != buffer:
                        buffer = completed
                        self._write("\r" + self.prompt() + buffer + "    ")
                else:
                    buffer += ch
                    self._write(ch)
            if not self.execute(buffer):
                return


def _read_key() -> str:
    if os.name == "nt":
        import msvcrt

        return msvcrt.getwch()
    if not sys.stdin.isatty():
        return sys.stdin.read(1)
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def main(argv=None) -> int:
    shell = Shell()
    shell.runner(CLEAR_COMMAND)
    sys.stdout.write("\x1b]0;FastBox\x07")
    sys.stdout.write("Welcome to FastBox - Version 1.0\n\n")
    sys.stdout.flush()
    shell.run(_read_key)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())