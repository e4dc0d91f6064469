"""Prompt for SSH credentials and start an SSH client."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Callable, Sequence

CONFIG_PATH = "sshconfig.txt"
DEFAULT_CLIENT = str(Path("bin") / "sshpass.exe")
_PROMPTS = ("Username: ", "IP: ", "Password: ")


def read_non_empty_line(prompt: str, read: Callable[[], str],
                        write: Callable[[str], None]) -> str:
    """Ask until a non-empty line is given."""
    while True:
        write(prompt)
        line = read()
        if line:
            return line
        write("Input cannot be empty. Please try again.\n")


def build_command(username: str, ip: str, password: str,
                  client: str = DEFAULT_CLIENT) -> list[str]:
    """Argument list for a plink-style client."""
    return [client, "-ssh", "-pw", password, f"{username}@{ip}"]


def save_config(path, username: str, ip: str) -> None:
    """Append ``username@ip`` to the config file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{username}@{ip}\n")


def _run_client(args: Sequence[str]) -> int:
    try:
        return subprocess.call(list(args))
    except OSError:
        return -1


def ssh_session(read: Callable[[], str], write: Callable[[str], None],
                runner: Callable[[Sequence[str]], int] | None = None) -> int:
    """Collect credentials, optionally save them, and run the client."""
    runner = runner if runner is not None else _run_client
    username, ip, credential = (
        read_non_empty_line(prompt, read, write) for prompt in _PROMPTS
    )

    write("Save config? (y/n): ")
    if read() in ("y", "Y"):
        try:
            save_config(CONFIG_PATH, username, ip)
        except OSError:
            write("Failed to save config.\n")
        else:
            write(f"Config saved to {CONFIG_PATH}\n")

    write("Connecting...\n")
    result = runner(build_command(username, ip, credential))
    if result == -1:
        write("Failed to start ssh client.\n")
    return result


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv=None) -> int:
    _write("\x1b]0;FastBox SSH Client\x07")
    try:
        ssh_session(input, _write)
        _write("\nPress Enter to exit...")
        input()
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())