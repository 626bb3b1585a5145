import datetime
import logging
import re
import sys
from pathlib import Path

import urllib3

from .cookies import default_session
from .exceptions import AocUtilsError
from .exceptions import MissingInputError
from .exceptions import PuzzleDateError
from .models import PATTERN_YEAR
from .models import PuzzleDate
from .models import RESOURCE_DIRS
from .utils import AOC_TZ
from .utils import atomic_write_file
from .utils import http
from .utils import level_number


log = logging.getLogger(__name__)
SCRIPT_PATH_DEPTH = 3


def get_data(day=None, year=None, part=None, session=None):
    """
    Get puzzle input for day (1-25) and year (2015+).

    Input is looked up, in order:
      - the part-specific resource file (``year2022/day07b``) if `part` was given
      - the shared resource file (``year2022/day07``) in the resource directories
      - the copy cached from a previous download
      - the adventofcode.com server, using the user's session cookie

    If `day` or `year` is omitted, it is introspected from the calling module's
    name (see `get_puzzle_date`). The user's session cookie (str) is only needed
    when the input has to be fetched from the server.
    """
    if day is None or year is None:
        date = get_puzzle_date()
        day = date.day if day is None else day
        year = date.year if year is None else year
    date = PuzzleDate(year=year, day=day)
    if part is not None:
        part = "ab"[level_number(part) - 1]
        data = read_local(date, part=part)
        if data is not None:
            return data
    data = read_local(date)
    if data is not None:
        return data
    data = read_cached(date)
    if data is not None:
        return data
    if session is None:
        session = default_session()
    data = fetch_remote(date, session=session)
    if data is None:
        raise MissingInputError(f"No input data available for {date}")
    log.info("saving the puzzle input for %s to %s", date, date.cache_path)
    atomic_write_file(date.cache_path, data)
    return data


def read_local(date, part=None):
    """
    Contents of the first resource file found for this date (and part), else None.
    """
    name = date.resource_name(part)
    for resource_dir in RESOURCE_DIRS:
        path = resource_dir / name
        try:
            data = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            log.debug("resource miss %s", path)
            continue
        log.debug("resource hit %s", path)
        return data
    return None


def read_cached(date):
    """Input data saved by an earlier download, else None."""
    path = date.cache_path
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log.debug("input_data cache miss %s", path)
        return None
    log.debug("input_data cache hit %s", path)
    return data


def fetch_remote(date, session):
    """
    Request the input data from adventofcode.com. Network failures and error
    responses are logged and give None.
    """
    sanitized = "..." + session[-4:]
    url = date.input_url
    log.info("getting data year=%s day=%s token=%s", date.year, date.day, sanitized)
    try:
        response = http.get(url, token=session)
    except urllib3.exceptions.HTTPError as err:
        log.error("request to %s failed: %s", url, err)
        return None
    if response.status >= 400:
        if response.status == 404:
            log.warning("%s not available yet", date)
        log.error("got %s status code token=%s", response.status, sanitized)
        log.error(response.data.decode(errors="replace"))
        return None
    return response.data.decode()


def most_recent_year():
    """
    This year, if it's December.
    The most recent year, otherwise.
    Note: Advent of Code started in 2015
    """
    aoc_now = datetime.datetime.now(tz=AOC_TZ)
    year = aoc_now.year
    if aoc_now.month < 12:
        year -= 1
    if year < 2015:
        raise AocUtilsError("Time travel not supported yet")
    return year


def current_day():
    """
    Most recent day, if it's during the Advent of Code. Happy Holidays!
    Day 1 is assumed, otherwise.
    """
    aoc_now = datetime.datetime.now(tz=AOC_TZ)
    if aoc_now.month != 12:
        log.warning("current_day is only available in December (EST)")
        return 1
    day = min(aoc_now.day, 25)
    return day


def _is_internal(name):
    # frames from this package or from the import system are never "the caller"
    top = name.partition(".")[0]
    return top in {"aocutils", "importlib", "_frozen_importlib", "_frozen_importlib_external"}


def _namespace(module_globals):
    name = module_globals.get("__name__", "")
    if name != "__main__":
        return name
    spec = module_globals.get("__spec__")
    if spec is not None and spec.name:
        # python -m package.year2022.day06
        return spec.name
    filename = module_globals.get("__file__")
    if filename is None or filename.startswith("<"):
        return None
    # python year2022/day06.py - only the path from the right-most year-like part
    # onwards is used, so that unrelated numbers in parent directories are ignored
    parts = Path(filename).absolute().with_suffix("").parts[1:]
    for i in reversed(range(len(parts))):
        if re.search(PATTERN_YEAR, parts[i]):
            return ".".join(parts[i:])
    return ".".join(parts[-SCRIPT_PATH_DEPTH:])


def get_puzzle_date():
    """
    Returns the `PuzzleDate` for the code calling into aocutils.

    Here be dragons!

    The date is determined with introspection of the call stack: the first frame
    not belonging to aocutils (or the import machinery) is the caller, and its
    module name is parsed by `PuzzleDate.from_namespace`. For a script run
    directly, the script's path is used instead of ``__main__``.

    This means your modules should be named something sensible, for example
    ``solutions.year2022.day06``. In an interactive session the current puzzle
    date is assumed.
    """
    frame = sys._getframe(1)
    visited = []
    while frame is not None:
        module_globals = frame.f_globals
        name = module_globals.get("__name__", "")
        visited.append(name)
        if not _is_internal(name):
            break
        frame = frame.f_back
    else:
        log.info("introspection failure, stack crawl visited %s", visited)
        raise PuzzleDateError("Failed introspection of caller")
    namespace = _namespace(module_globals)
    if namespace is None:
        log.debug("running within REPL")
        return PuzzleDate(year=most_recent_year(), day=current_day())
    log.debug("stack crawl found %s", namespace)
    return PuzzleDate.from_namespace(namespace, default_year=most_recent_year())
