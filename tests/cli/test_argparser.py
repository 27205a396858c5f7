"""Unit tests for the argument parser module in dir2clip CLI."""

import argparse
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from dir2clip.cli.argparser import create_exclusion_action, create_parser, validate_args
from dir2clip.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dir2clip.exclusion_rules.segment_rules import SegmentExclusionRules


@pytest.fixture
def segment_rules():
    return SegmentExclusionRules()


@pytest.fixture
def git_rules():
    return GitIgnoreExclusionRules()


def test_create_exclusion_action():
    """Test creating the exclusion action class."""
    ExclusionAction = create_exclusion_action(MagicMock(), MagicMock())
    assert issubclass(ExclusionAction, argparse.Action)

    action = ExclusionAction(option_strings=["-i", "--ignore"], dest="ignore", help="test help")
    assert action.option_strings == ["-i", "--ignore"]
    assert action.dest == "ignore"


def test_exclusion_action_dispatch():
    """Test that each option feeds the right rule object."""
    segment = MagicMock()
    git = MagicMock()
    ExclusionAction = create_exclusion_action(segment, git)
    namespace = argparse.Namespace()
    parser = MagicMock()

    ExclusionAction(option_strings=["-i", "--ignore"], dest="ignore")(parser, namespace, "coverage", "-i")
    ExclusionAction(option_strings=["-I", "--ignore-file"], dest="ignore_file")(
        parser, namespace, Path("names.txt"), "--ignore-file"
    )
    ExclusionAction(option_strings=["-e", "--exclude"], dest="exclude")(parser, namespace, Path(".gitignore"), "-e")

    segment.add_rule.assert_called_once_with("coverage")
    segment.load_rules.assert_called_once_with(Path("names.txt"))
    git.load_rules.assert_called_once_with(Path(".gitignore"))
    assert namespace.ignore == ["coverage"]
    assert namespace.ignore_file == [Path("names.txt")]
    assert namespace.exclude == [Path(".gitignore")]


def test_parser_defaults(segment_rules, git_rules):
    """Test parser defaults."""
    args = create_parser(segment_rules, git_rules).parse_args(["some/dir"])
    assert args.target == Path("some/dir")
    assert args.print is False
    assert args.output is None
    assert args.ignore is None


def test_parser_ignore_patterns(segment_rules, git_rules):
    """Test repeated -i options."""
    args = create_parser(segment_rules, git_rules).parse_args(["-i", "coverage", "--ignore", "docs/gen", "."])
    assert args.ignore == ["coverage", "docs/gen"]
    assert {"coverage", "docs/gen"} <= segment_rules.patterns


def test_parser_ignore_file(tmp_path, segment_rules, git_rules):
    """Test the -I option."""
    names = tmp_path / "names.txt"
    names.write_text("generated\n")
    create_parser(segment_rules, git_rules).parse_args(["-I", str(names), "."])
    assert "generated" in segment_rules.patterns


def test_parser_gitignore_file(tmp_path, segment_rules, git_rules):
    """Test the -e option."""
    gitignore = tmp_path / ".gitignore"
    gitignore.write_text("*.log\n")
    create_parser(segment_rules, git_rules).parse_args(["-e", str(gitignore), "."])
    assert git_rules.exclude("debug.log")


def test_parser_missing_rules_file(tmp_path, segment_rules, git_rules):
    """Test that a missing rules file raises during parsing."""
    with pytest.raises(FileNotFoundError):
        create_parser(segment_rules, git_rules).parse_args(["-e", str(tmp_path / "missing"), "."])


def test_parser_print_and_output_are_exclusive(segment_rules, git_rules, capsys):
    """Test that -p and -o are mutually exclusive."""
    with pytest.raises(SystemExit) as excinfo:
        create_parser(segment_rules, git_rules).parse_args(["-p", "-o", "out.md", "."])
    assert excinfo.value.code == 2
    assert "not allowed with" in capsys.readouterr().err


def test_parser_requires_target(segment_rules, git_rules):
    """Test that the target argument is required."""
    with pytest.raises(SystemExit) as excinfo:
        create_parser(segment_rules, git_rules).parse_args([])
    assert excinfo.value.code == 2


def test_parser_version(segment_rules, git_rules, capsys):
    """Test the version flag."""
    with pytest.raises(SystemExit) as excinfo:
        create_parser(segment_rules, git_rules).parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("dir2clip ")


def test_validate_args_output_directory(tmp_path):
    """Test that --output may not be a directory."""
    args = argparse.Namespace(output=tmp_path, print=False)
    with pytest.raises(ValueError, match="must be a file path"):
        validate_args(args)


def test_validate_args_ok(tmp_path):
    """Test validation of valid arguments."""
    validate_args(argparse.Namespace(output=tmp_path / "out.md", print=False))
    validate_args(argparse.Namespace(output=None, print=True))
