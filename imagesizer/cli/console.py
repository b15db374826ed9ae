"""Консольный вывод прогресса: «Reading image ... Done!» по каждому этапу файла."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO


class Console:
    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
        self._out = out
        self._err = err

    # streams are looked up lazily so pytest's capsys sees the output
    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def stage(self, text: str) -> None:
        """Начало этапа: `text` печатается как есть, без перевода строки; итог допишет `done`/`failed`."""
        self.out.write(text)
        self.out.flush()

    def done(self) -> None:
        self.out.write("Done!\n")

    def failed(self, message: str) -> None:
        self.out.write("Error!\n")
        self.err.write(f"{message}\n")

    def result(self, output_path: Path) -> None:
        self.out.write(f"Output file is: {output_path.absolute()}\n\n")

    def blank(self) -> None:
        self.out.write("\n")

    def parse_error(self, message: str, usage: str) -> None:
        self.out.write(f"Error parsing parameters: {message}\n")
        self.usage(usage)

    def usage(self, usage: str) -> None:
        self.out.write(usage)
        if not usage.endswith("\n"):
            self.out.write("\n")
