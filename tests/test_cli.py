from pathlib import Path

import pytest

from voxelkit.cli import ArgsReader, CommandLineError, EnginePaths, parse_cmdline


def test_reader_sequence():
    reader = ArgsReader(["prog", "--res", "x"])
    reader.skip()
    assert reader.has_next() is True
    assert reader.next() == "--res"
    assert reader.is_keyword_arg() is True
    assert reader.next() == "x"
    assert reader.is_keyword_arg() is False
    assert reader.has_next() is False


def test_reader_before_any_read_is_not_keyword():
    assert ArgsReader(["-a"]).is_keyword_arg() is False


def test_reader_end_raises():
    reader = ArgsReader([])
    with pytest.raises(CommandLineError, match="unexpected end"):
        reader.next()


def test_no_arguments_starts_engine():
    paths = EnginePaths()
    assert parse_cmdline(["prog"], paths) is True
    assert paths == EnginePaths()


def test_res_sets_resources(tmp_path, capsys):
    paths = EnginePaths()
    assert parse_cmdline(["prog", "--res", str(tmp_path)], paths) is True
    assert paths.resources == tmp_path
    assert f"resources folder: {tmp_path}" in capsys.readouterr().out


def test_res_missing_directory_raises(tmp_path):
    missing = tmp_path / "nope"
    with pytest.raises(CommandLineError, match="is not a directory"):
        parse_cmdline(["prog", "--res", str(missing)], EnginePaths())


def test_dir_creates_directory(tmp_path):
    target = tmp_path / "a" / "b"
    paths = EnginePaths()
    assert parse_cmdline(["prog", "--dir", str(target)], paths) is True
    assert target.is_dir()
    assert paths.userfiles == Path(str(target))


def test_help_stops_engine(capsys):
    for flag in ("--help", "-h"):
        assert parse_cmdline(["prog", flag], EnginePaths()) is False
    assert "--res [path]" in capsys.readouterr().out


def test_unknown_argument_reported(capsys):
    assert parse_cmdline(["prog", "--bogus"], EnginePaths()) is True
    assert "unknown argument --bogus" in capsys.readouterr().err


def test_unexpected_token_reported(capsys):
    assert parse_cmdline(["prog", "plain"], EnginePaths()) is True
    assert "unexpected token" in capsys.readouterr().err


def test_missing_value_raises():
    with pytest.raises(CommandLineError, match="unexpected end"):
        parse_cmdline(["prog", "--dir"], EnginePaths())