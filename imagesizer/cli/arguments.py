"""Разбор аргументов командной строки в проверенную конфигурацию запуска.

Флаги однодефисные и не зависят от регистра (`-width`, `-WIDTH`).
Любая ошибка разбора превращается в `ConfigurationError`.
"""
from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from imagesizer.config import Settings
from imagesizer.errors import ConfigurationError
from imagesizer.models.geometry import DisplayGeometry
from imagesizer.models.job_model import FileJob

PROG = "imagesizer"

_FLAGS = ("-width", "-monitorWidth", "-height", "-gap", "-outputFile")
_CANONICAL = {flag.lower(): flag for flag in _FLAGS + ("-h", "--help")}

DESCRIPTION = """\
A simple utility to resize/crop an image such that it can be shown on a
two-monitor display with equal monitor resolutions, taking into account the
gap between the two displays."""

EPILOG = """\
outputFile is always written as PNG; an existing file is overwritten.

Example:
  imagesizer -width 2720 -height 768 -gap 120 img1.jpg img2.jpg"""


@dataclass(frozen=True)
class ResolvedArgs:
    """Результат разбора: размеры рабочего стола и пары входных/выходных файлов."""
    width: int
    height: int
    gap_width: int
    jobs: List[FileJob] = field(default_factory=list)
    show_help: bool = False

    @property
    def input_files(self) -> List[Path]:
        return [job.input_path for job in self.jobs]

    @property
    def output_files(self) -> List[Path]:
        return [job.output_path for job in self.jobs]

    def geometry(self) -> DisplayGeometry:
        """Raises ConstructionError для неположительных размеров или отрицательного зазора."""
        return DisplayGeometry(self.width, self.height, self.gap_width)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise ConfigurationError(message)

    def _get_option_tuples(self, option_string):
        # only exact flag names; `allow_abbrev` does not cover single-dash prefixes
        return []


class _MonitorWidthAction(argparse.Action):
    """`-monitorWidth n` задаёт общую ширину 2n."""

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        setattr(namespace, self.dest, values * 2)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        usage=f"{PROG} [-width n | -monitorWidth n] [-height n] [-gap n] inputFiles [-outputFile f ...]",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        add_help=False,
    )
    parser.add_argument(
        "-h", "--help", dest="show_help", action="store_true",
        help="show this message and exit.",
    )
    parser.add_argument(
        "-width", dest="width", type=int, metavar="n", default=settings.default_width,
        help="total width of desktop, in displayed pixels (not counting gap). "
             f"Default: {settings.default_width}.",
    )
    parser.add_argument(
        "-monitorWidth", dest="width", type=int, metavar="n", action=_MonitorWidthAction,
        help="width of a single monitor, in pixels; sets width to twice this value.",
    )
    parser.add_argument(
        "-height", dest="height", type=int, metavar="n", default=settings.default_height,
        help=f"height of monitors, in pixels. Default: {settings.default_height}.",
    )
    parser.add_argument(
        "-gap", dest="gap_width", type=int, metavar="n", default=settings.default_gap,
        help=f"width of the gap between monitors, in pixels. Default: {settings.default_gap}.",
    )
    parser.add_argument(
        "-outputFile", dest="output_files", nargs="*", action="extend", metavar="f", default=None,
        help=f"png files to write, one per input. Default: input name with '{settings.output_suffix}' "
             "in place of its extension.",
    )
    parser.add_argument(
        "input_files", nargs="*", metavar="inputFiles",
        help="images to be resized/cropped (jpg, gif, bmp, png and anything else Pillow reads).",
    )
    return parser


def usage_text(settings: Settings) -> str:
    return build_parser(settings).format_help()


def default_output_path(input_path: Path, suffix: str = ".resized.png") -> Path:
    """Заменяет последнее расширение входного файла на `suffix` (или дописывает его)."""
    if not input_path.name:
        raise ConfigurationError(f"Not a file name: {str(input_path)!r}")
    return input_path.with_name(input_path.stem + suffix)


def _canonicalize(argv: Sequence[str]) -> List[str]:
    return [_CANONICAL.get(token.lower(), token) for token in argv]


def resolve_args(argv: Sequence[str], settings: Optional[Settings] = None) -> ResolvedArgs:
    """Разбирает аргументы и сопоставляет входные файлы выходным.

    Raises:
        ConfigurationError: неизвестный флаг (в том числе сокращённый или флаг без
            значения в конце строки), нет входных файлов, нецелое значение
            или число выходных файлов не совпадает с числом входных.
    """
    if settings is None:
        settings = Settings()
    parser = build_parser(settings)
    tokens = _canonicalize(argv)
    # a value flag in last position has nothing to read and counts as unknown
    dangling = None
    if tokens and tokens[-1] in _FLAGS:
        dangling = argv[-1]
        tokens = tokens[:-1]
    namespace, extras = parser.parse_known_intermixed_args(tokens)

    positional = namespace.input_files or []
    unknown = {token for token in extras + positional if token.startswith("-")}
    if unknown:
        first = next(token for token in tokens if token in unknown)
        raise ConfigurationError(f"Unknown argument: {first}")
    if namespace.show_help:
        return ResolvedArgs(
            width=namespace.width,
            height=namespace.height,
            gap_width=namespace.gap_width,
            show_help=True,
        )
    if dangling is not None:
        raise ConfigurationError(f"Unknown argument: {dangling}")

    inputs = [Path(token) for token in positional]
    if not inputs:
        raise ConfigurationError("No input file given")

    outputs = [Path(token) for token in namespace.output_files or []]
    if not outputs:
        outputs = [default_output_path(path, settings.output_suffix) for path in inputs]
    if len(inputs) != len(outputs):
        raise ConfigurationError("Input file list and output file lists are of different sizes!")

    return ResolvedArgs(
        width=namespace.width,
        height=namespace.height,
        gap_width=namespace.gap_width,
        jobs=[FileJob(src, dst) for src, dst in zip(inputs, outputs)],
    )
