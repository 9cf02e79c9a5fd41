"""Tests for the command-line interface."""

import json

import pytest
from civicecho.cli import build_parser, main


def test_sample_command(capsys, tmp_path):
    out = tmp_path / "sample.json"
    main(["sample", "--seed", "1", "--out", str(out)])

    output = capsys.readouterr().out
    assert "Analysis of 10 comments" in output
    assert "Most common sentiment: Positive" in output
    assert json.loads(out.read_text(encoding="utf-8"))["summary"]["total_comments"] == 10


def test_analyze_command(capsys, tmp_path):
    csv_file = tmp_path / "comments.csv"
    csv_file.write_text("Comment_ID,Comment\n1,Very useful proposal\n2,Unclear wording\n", encoding="utf-8")
    main(["analyze", str(csv_file)])

    output = capsys.readouterr().out
    assert "Loaded 2 comments from comments.csv" in output
    assert "#1 [Positive 0.70]" in output
    assert "#2 [Negative 0.70]" in output


def test_analyze_invalid_file_exits(tmp_path):
    csv_file = tmp_path / "empty.csv"
    csv_file.write_text("header only\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["analyze", str(csv_file)])
    assert exc.value.code == 1


def test_analyze_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["analyze", str(tmp_path / "missing.csv")])
    assert exc.value.code == 1


def test_no_command_prints_help(capsys):
    main([])
    assert "usage" in capsys.readouterr().out.lower()


def test_parser_options():
    args = build_parser().parse_args(["analyze", "file.csv", "--seed", "5"])
    assert args.command == "analyze"
    assert args.file == "file.csv"
    assert args.seed == 5
    assert args.out is None
