"""Interactive prompts for the file to search and the pattern to look for."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TextIO

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[0;33m"
BLUE = "\033[0;34m"
MAGENTA = "\033[1;35m"
CYAN = "\033[1;36m"
WHITE = "\033[1;37m"
RESET = "\033[0m"

EXIT_WORD = "exit"


def _read_token(stream: TextIO) -> str:
    """Read the next whitespace-delimited word from ``stream``.

    Raises EOFError when the stream ends before any word is found.
    """
    chars: list[str] = []
    while True:
        char = stream.read(1)
        if not char:
            break
        if char.isspace():
            if chars:
                break
            continue
        chars.append(char)
    if not chars:
        raise EOFError("no more input")
    return "".join(chars)


def _ask(stdin: TextIO, stdout: TextIO, prompt: str) -> str:
    stdout.write(f"{CYAN}{prompt}{RESET}")
    stdout.flush()
    word = _read_token(stdin)
    if word == EXIT_WORD:
        stdout.write(f"{WHITE}Saliendo del programa...\n{RESET}")
        stdout.flush()
        raise SystemExit(0)
    return word


def _home_dir() -> str | None:
    variable = "USERPROFILE" if sys.platform == "win32" else "HOME"
    return os.environ.get(variable)


def ask_pattern(stdin: TextIO | None = None, stdout: TextIO | None = None) -> str:
    """Ask for a non-empty search pattern.

    Entering ``exit`` raises SystemExit(0); running out of input raises EOFError.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    return _ask(stdin, stdout, "Ingrese el patron a buscar (o 'exit' para salir): ")


def ask_file(stdin: TextIO | None = None, stdout: TextIO | None = None) -> Path:
    """Ask for the name of an existing file until one is given.

    A leading ``~`` is replaced by the user's home directory. Returns the
    absolute path. Entering ``exit`` raises SystemExit(0).
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    while True:
        entry = _ask(stdin, stdout, "Ingrese el nombre del archivo (o 'exit' para salir): ")
        if entry.startswith("~"):
            home = _home_dir()
            if home:
                entry = home + entry[1:]
        path = Path(entry)
        if path.exists():
            return path.absolute()
        print(
            f"{RED}Error: El archivo no existe. Intente nuevamente.{RESET}",
            file=sys.stderr,
        )


def read_input(
    stdin: TextIO | None = None, stdout: TextIO | None = None
) -> tuple[str, str]:
    """Ask for a file and a pattern; return the file's contents and the pattern."""
    path = ask_file(stdin, stdout)
    text = path.read_text(encoding="utf-8", errors="replace")
    pattern = ask_pattern(stdin, stdout)
    return text, pattern