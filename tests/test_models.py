import os
from pathlib import Path

from aocutils.models import resource_dirs


def test_single_resource_dir():
    assert resource_dirs("resources") == [Path("resources")]


def test_multiple_resource_dirs_in_order():
    value = os.pathsep.join(["tests/resources", "resources"])
    assert resource_dirs(value) == [Path("tests/resources"), Path("resources")]


def test_empty_entries_are_dropped():
    value = os.pathsep.join(["", "a", "", "b", ""])
    assert resource_dirs(value) == [Path("a"), Path("b")]
    assert resource_dirs("") == []


def test_user_dir_is_expanded(monkeypatch):
    monkeypatch.setenv("HOME", "/home/santa")
    monkeypatch.setenv("USERPROFILE", "/home/santa")
    assert resource_dirs("~/aoc") == [Path("/home/santa/aoc")]
