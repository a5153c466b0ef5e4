"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from mediameta.ui.cli.args import ArgumentParser, ArtworkArgs, ExtractArgs


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    extract_args: Namespace = parser.parse_args(["extract", "a.mp3", "b.jpg", "--verbose"])
    assert extract_args.command == "extract"
    assert extract_args.files == ["a.mp3", "b.jpg"]
    assert extract_args.verbose and not extract_args.quiet

    artwork_args: Namespace = parser.parse_args(["artwork", "a.mp3", "-o", "cover.png"])
    assert artwork_args.command == "artwork"
    assert artwork_args.output == "cover.png"


def test_artwork_requires_output() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args(["artwork", "a.mp3"])


def test_process_args_extract(tmp_path: Path, mocker: MockerFixture) -> None:
    mock_setup_logger = mocker.patch("mediameta.ui.cli.args.parser.setup_logger")
    song = tmp_path / "song.mp3"
    _ = song.write_bytes(b"x")

    args = ArgumentParser.process_args(["extract", str(song), "--quiet"])

    assert isinstance(args, ExtractArgs)
    assert args.files == [song]
    assert args.quiet
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR


def test_process_args_artwork_verbose(tmp_path: Path, mocker: MockerFixture) -> None:
    mock_setup_logger = mocker.patch("mediameta.ui.cli.args.parser.setup_logger")
    song = tmp_path / "song.flac"
    _ = song.write_bytes(b"x")

    args = ArgumentParser.process_args(["artwork", str(song), "-o", str(tmp_path / "out.jpg")])
    assert isinstance(args, ArtworkArgs)
    assert args.output == tmp_path / "out.jpg"
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO

    _ = ArgumentParser.process_args(
        ["artwork", str(song), "-o", str(tmp_path / "out.jpg"), "--verbose"]
    )
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG


def test_missing_file_exits(tmp_path: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch("mediameta.ui.cli.args.parser.setup_logger")
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["extract", str(tmp_path / "missing.mp3")])
    assert excinfo.value.code == 1
