"""Interactive acquisition of test input in the terminal."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

DIRECT = ":direct"
FILE = ":file"

_CHOICES = [
    (DIRECT, "Write test case directly...", "Enter test input manually"),
    (FILE, "Load from file...", "Load test input from a file"),
]


def read_input_file(path: str | Path) -> str:
    """Return the file's full contents, untouched."""
    return Path(path).expanduser().read_text(encoding="utf-8")


def _ask(ask: Callable[[str], str], prompt: str) -> str | None:
    try:
        return ask(prompt)
    except (EOFError, KeyboardInterrupt):
        return None


def prompt_for_test_input(ask: Callable[[str], str] | None = None) -> str | None:
    """Ask how to provide test input, then collect it.

    Returns None when the user cancels at any step; the caller treats that
    as a silent abort.
    """
    ask = ask or input
    print("How would you like to provide test input?")
    for index, (_, label, detail) in enumerate(_CHOICES, start=1):
        print(f"  {index}) {label}  ({detail})")

    answer = _ask(ask, "> ")
    if not answer or not answer.strip():
        return None
    answer = answer.strip()
    choice = None
    for index, (value, label, _) in enumerate(_CHOICES, start=1):
        if answer in (str(index), value, label):
            choice = value
    if choice is None:
        return None

    if choice == DIRECT:
        text = _ask(ask, "Enter the test input (e.g., [1,2,3] or just simple values): ")
        return text or None

    path = _ask(ask, "Select test input file: ")
    if not path or not path.strip():
        return None
    return read_input_file(path.strip())
