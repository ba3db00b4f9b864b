"""Terminal input and output: colours, framing, prompts, ASCII art and sounds."""

from __future__ import annotations

import re
import shutil
import sys
import time
from enum import IntEnum
from pathlib import Path
from typing import TextIO

try:
    import winsound
except ImportError:
    winsound = None

DEFAULT_ART_PATH = Path("resources/ascii.txt")
KEY_PROMPT = "Zmacknete klavesu pro pokracovani...\n"

_INT_RE = re.compile(r"[+-]?\d+")


class Color(IntEnum):
    """Sixteen-colour console palette (blue, green and red bits, plus intensity)."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    YELLOW = 6
    WHITE = 7
    GREY = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    LIGHT_CYAN = 11
    LIGHT_RED = 12
    LIGHT_MAGENTA = 13
    LIGHT_YELLOW = 14
    BRIGHT_WHITE = 15

    @property
    def ansi(self) -> str:
        """The ANSI escape sequence selecting this colour as foreground."""
        base = self.value & 7
        # The palette stores bits as blue-green-red; ANSI orders them red-green-blue.
        index = ((base & 1) << 2) | (base & 2) | ((base & 4) >> 2)
        offset = 90 if self.value & 8 else 30
        return f"\033[{offset + index}m"


def load_ascii_art(name: str, path: str | Path = DEFAULT_ART_PATH) -> list[str]:
    """Return the lines of the section headed ``=== name ===`` in an art file.

    Raises ``OSError`` when the file cannot be read and ``KeyError`` when the
    section is missing.
    """
    header = f"=== {name} ==="
    found = False
    lines: list[str] = []
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if line == header:
                found = True
                continue
            if found:
                if line.startswith("==="):
                    break
                lines.append(line)
    if not found:
        raise KeyError(name)
    return lines


class Console:
    """Text console bound to an input and an output stream."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        width: int | None = None,
        delay: bool = True,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._width = width
        self.delay = delay
        self._pending = ""

    @property
    def width(self) -> int:
        """Number of columns available for a line."""
        if self._width is not None:
            return self._width
        return shutil.get_terminal_size().columns

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def set_color(self, color: int) -> None:
        self.write(Color(color).ansi)

    def clear_screen(self) -> None:
        self.write("\033[2J\033[H")

    def print_ascii_art(self, name: str, path: str | Path = DEFAULT_ART_PATH) -> None:
        """Print an art section; report a missing file or section on stderr."""
        try:
            lines = load_ascii_art(name, path)
        except OSError:
            sys.stderr.write(f"Nepodarilo se otevrit soubor: {path}\n")
            return
        except KeyError:
            sys.stderr.write(f"Obrazek '{name}' nebyl nalezen v souboru.\n")
            return
        for line in lines:
            self.write(line + "\n")

    def print_centered(self, text: str) -> None:
        padding = max(0, (self.width - len(text)) // 2)
        self.write(" " * padding + text + "\n")

    def draw_header_line(self) -> None:
        self.set_color(Color.GREY)
        self.write("-" * self.width + "\n")
        self.set_color(Color.WHITE)

    def wait_for_key_press(self) -> None:
        self.set_color(Color.GREY)
        self.write(KEY_PROMPT)
        self.set_color(Color.WHITE)
        self.stdin.readline()

    def _next_token_start(self) -> None:
        while True:
            self._pending = self._pending.lstrip()
            if self._pending:
                return
            line = self.stdin.readline()
            if not line:
                raise EOFError("input exhausted")
            self._pending = line

    def read_int(self, prompt: str = "") -> int:
        """Read the next integer; on bad input drop the rest of the line and raise ValueError."""
        if prompt:
            self.write(prompt)
        self._next_token_start()
        match = _INT_RE.match(self._pending)
        if match is None:
            self._pending = self._pending.partition("\n")[2]
            raise ValueError("expected a whole number")
        self._pending = self._pending[match.end():]
        return int(match.group())

    def read_char(self, prompt: str = "") -> str:
        """Read the next non-blank character."""
        if prompt:
            self.write(prompt)
        self._next_token_start()
        char, self._pending = self._pending[0], self._pending[1:]
        return char

    def sleep(self, seconds: float) -> None:
        if self.delay:
            time.sleep(seconds)

    def play_sound(self, path: str | Path, loop: bool = False) -> None:
        """Start playing a sound file in the background where the platform supports it."""
        if winsound is None:
            return
        flags = winsound.SND_FILENAME | winsound.SND_ASYNC
        if loop:
            flags |= winsound.SND_LOOP
        try:
            winsound.PlaySound(str(path), flags)
        except RuntimeError:
            pass

    def stop_sound(self) -> None:
        if winsound is None:
            return
        winsound.PlaySound(None, 0)