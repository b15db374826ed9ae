from pathlib import Path

import pytest

from imagesizer.cli.arguments import default_output_path, resolve_args, usage_text
from imagesizer.config import Settings
from imagesizer.errors import ConfigurationError, ConstructionError
from imagesizer.models.job_model import FileJob


def test_defaults():
    args = resolve_args(["in.png"])
    assert (args.width, args.height, args.gap_width) == (2560, 1024, 120)
    assert args.jobs == [FileJob(Path("in.png"), Path("in.resized.png"))]


def test_monitor_width_doubles():
    args = resolve_args(["-monitorWidth", "1280", "-height", "768", "-gap", "100", "in.png"])
    assert (args.width, args.height, args.gap_width) == (2560, 768, 100)
    assert args.output_files == [Path("in.resized.png")]


def test_last_width_flag_wins():
    assert resolve_args(["-monitorWidth", "1000", "-width", "3000", "a.png"]).width == 3000
    assert resolve_args(["-width", "3000", "-monitorWidth", "1000", "a.png"]).width == 2000


def test_flags_are_case_insensitive():
    args = resolve_args(["i.jpg", "-WIDTH", "100", "-Height", "50", "-GAP", "0", "-outputfile", "o.png"])
    assert (args.width, args.height, args.gap_width) == (100, 50, 0)
    assert args.jobs == [FileJob(Path("i.jpg"), Path("o.png"))]


def test_inputs_may_appear_anywhere():
    args = resolve_args(["a.jpg", "-width", "100", "b.jpg", "-height", "50", "c.jpg"])
    assert args.input_files == [Path("a.jpg"), Path("b.jpg"), Path("c.jpg")]


def test_output_file_consumes_following_names():
    args = resolve_args(["a.jpg", "b.jpg", "-outputFile", "x.png", "y.png"])
    assert args.jobs == [
        FileJob(Path("a.jpg"), Path("x.png")),
        FileJob(Path("b.jpg"), Path("y.png")),
    ]


def test_output_file_stops_at_next_flag():
    args = resolve_args(["-outputFile", "x.png", "-gap", "10", "a.jpg"])
    assert args.jobs == [FileJob(Path("a.jpg"), Path("x.png"))]
    assert args.gap_width == 10


def test_repeated_output_file_flags_accumulate():
    args = resolve_args(["a.jpg", "b.jpg", "-outputFile", "x.png", "-outputFile", "y.png"])
    assert args.output_files == [Path("x.png"), Path("y.png")]


def test_no_input_files():
    with pytest.raises(ConfigurationError, match="No input file given"):
        resolve_args(["-width", "100"])


def test_output_count_mismatch():
    with pytest.raises(ConfigurationError, match="different sizes"):
        resolve_args(["a.jpg", "b.jpg", "-outputFile", "x.png"])


@pytest.mark.parametrize("argv, flag", [
    (["-foo", "a.jpg"], "-foo"),
    (["a.jpg", "-wdth", "10"], "-wdth"),
    (["a.jpg", "-"], "-"),
    (["a.jpg", "-bar", "-baz"], "-bar"),
    (["-w", "100", "a.jpg"], "-w"),
    (["-g", "5", "a.jpg"], "-g"),
    (["-mon", "640", "a.jpg"], "-mon"),
    (["-o", "x.png", "a.jpg"], "-o"),
    (["a.jpg", "-outputFile"], "-outputFile"),
    (["a.jpg", "-GAP"], "-GAP"),
    (["-foo", "a.jpg", "-gap"], "-foo"),
])
def test_unknown_argument(argv, flag):
    with pytest.raises(ConfigurationError) as excinfo:
        resolve_args(argv)
    assert str(excinfo.value) == f"Unknown argument: {flag}"


@pytest.mark.parametrize("argv", [
    ["-width", "wide", "a.jpg"],
    ["-height", "1.5", "a.jpg"],
    ["a.jpg", "-gap"],
])
def test_bad_numeric_values(argv):
    with pytest.raises(ConfigurationError):
        resolve_args(argv)


def test_negative_gap_fails_when_building_geometry():
    args = resolve_args(["-gap", "-5", "a.jpg"])
    assert args.gap_width == -5
    with pytest.raises(ConstructionError):
        args.geometry()


@pytest.mark.parametrize("argv", [["-h"], ["--help"], ["a.jpg", "-H"]])
def test_help_flag(argv):
    args = resolve_args(argv)
    assert args.show_help
    assert args.jobs == []


def test_geometry_from_args():
    geometry = resolve_args(["-width", "200", "-height", "100", "-gap", "8", "a.jpg"]).geometry()
    assert geometry.size == (200, 100)
    assert geometry.real_width == 208


def test_settings_provide_defaults():
    settings = Settings(default_width=1920, default_height=600, default_gap=40, output_suffix=".wall.png")
    args = resolve_args(["pic.jpeg"], settings)
    assert (args.width, args.height, args.gap_width) == (1920, 600, 40)
    assert args.output_files == [Path("pic.wall.png")]


@pytest.mark.parametrize("name, expected", [
    ("in.png", "in.resized.png"),
    ("photo.JPG", "photo.resized.png"),
    ("archive.tar.gz", "archive.tar.resized.png"),
    ("noext", "noext.resized.png"),
    ("dir.d/noext", "dir.d/noext.resized.png"),
])
def test_default_output_path(name, expected):
    assert default_output_path(Path(name)) == Path(expected)


def test_usage_mentions_every_flag():
    text = usage_text(Settings())
    for flag in ("-width", "-monitorWidth", "-height", "-gap", "-outputFile"):
        assert flag in text
    assert "2560" in text
