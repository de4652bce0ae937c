"""
test/test_cli.py — Tests for tools/uuid7_cli.py

Run: pytest test/test_cli.py -v
"""

import os
import sys

# Ensure project root is on path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tools.uuid7_cli import main
from uuid7_core import is_valid


OLDER = "01923f4a-7b3d-7123-8456-426614174000"
NEWER = "01923f4a-7b3e-7000-8000-000000000000"


def test_new_default_prints_one(capsys):
    assert main(["new"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert is_valid(lines[0])


def test_new_count(capsys):
    assert main(["new", "-n", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert all(is_valid(line) for line in lines)


def test_new_negative_count(capsys):
    assert main(["new", "--count", "-2"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "-2" in captured.err


def test_validate(capsys):
    assert main(["validate", OLDER]) == 0
    assert f"{OLDER}  valid" in capsys.readouterr().out

    assert main(["validate", OLDER, "not-a-uuid"]) == 1
    out = capsys.readouterr().out
    assert f"{OLDER}  valid" in out
    assert "not-a-uuid  invalid" in out


def test_timestamp(capsys):
    assert main(["timestamp", OLDER]) == 0
    out = capsys.readouterr().out
    assert "2024-09-29T19:38:18.813+00:00" in out
    assert str(0x01923f4a7b3d) in out


def test_timestamp_invalid(capsys):
    assert main(["timestamp", "01923f4a-7b3d-4123-8456-426614174000"]) == 1
    assert "Invalid UUIDv7 format" in capsys.readouterr().err


def test_timestamp_beyond_datetime_range(capsys):
    assert main(["timestamp", "ffffffff-ffff-7fff-bfff-ffffffffffff"]) == 0
    assert "(beyond datetime range)" in capsys.readouterr().out


def test_sort(capsys):
    assert main(["sort", NEWER, OLDER]) == 0
    assert capsys.readouterr().out.splitlines() == [OLDER, NEWER]


def test_sort_refuses_invalid(capsys):
    assert main(["sort", NEWER, "bogus"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "bogus" in captured.err
