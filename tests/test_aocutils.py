import functools

import pytest

import aocutils


def test_data_with_attribute_access(mocker):
    mocker.patch("aocutils.get_puzzle_date", return_value=aocutils.PuzzleDate(2016, 22))
    mock = mocker.patch("aocutils.get_data", return_value="test data 2016/22")
    data = aocutils.data
    mock.assert_called_once_with(day=22, year=2016)
    assert data == "test data 2016/22"


def test_data_with_from_import(resources):
    (resources / "year2017").mkdir()
    (resources / "year2017" / "day23").write_text("test data 2017/23")
    module_globals = {"__name__": "solutions.year2017.day23"}
    exec("from aocutils import data", module_globals)
    assert module_globals["data"] == "test data 2017/23"


def test_submit_autobinds_day_and_year():
    module_globals = {"__name__": "solutions.year2017.day23"}
    exec("from aocutils import submit", module_globals)
    submit = module_globals["submit"]
    assert isinstance(submit, functools.partial)
    assert submit.func is aocutils.post.submit
    # partially applied with day=23 and year=2017
    assert submit.keywords == {"day": 23, "year": 2017}


def test_submit_doesnt_bind_day_and_year_when_introspection_failed():
    # this test module's name has no day in it
    assert not isinstance(aocutils.submit, functools.partial)
    assert aocutils.submit is aocutils.post.submit


def test_attribute_errors_have_context():
    with pytest.raises(AttributeError("module 'aocutils' has no attribute 'nope'")):
        aocutils.nope
