import logging
import os
import re
import typing as t
from pathlib import Path

from .exceptions import PuzzleDateError
from .types import PuzzlePart


log = logging.getLogger(__name__)


AOCU_DATA_DIR = Path(os.environ.get("AOCU_DIR", Path("~", ".config", "aocutils")))
AOCU_DATA_DIR = AOCU_DATA_DIR.expanduser()
AOCU_CONFIG_DIR = Path(os.environ.get("AOCU_CONFIG_DIR", AOCU_DATA_DIR)).expanduser()


def resource_dirs(value):
    """Resource directories from an `os.pathsep` separated string, e.g. $AOCU_RESOURCES."""
    return [Path(p).expanduser() for p in value.split(os.pathsep) if p]


RESOURCE_DIRS = resource_dirs(os.environ.get("AOCU_RESOURCES", "resources"))
URL = "https://adventofcode.com/{year}/day/{day}"

PATTERN_YEAR = r"201[5-9]|20[2-9]\d"
PATTERN_DAY = r"(?:^|[^a-z])(?:day|d)_?(\d{1,2})$"
PATTERN_SUFFIX = r"(?<!\d)(\d{1,2})$"


def _find_day(tokens):
    # a token like "day06" or "d6" wins over any bare numeric suffix to its right,
    # so that "day06.part2" is day 6
    for pattern, flags in (PATTERN_DAY, re.IGNORECASE), (PATTERN_SUFFIX, 0):
        for i in reversed(range(len(tokens))):
            match = re.search(pattern, tokens[i], flags)
            if match is not None:
                return i, match
    return None, None


class PuzzleDate(t.NamedTuple):
    """The (year, day) pair identifying which puzzle is being solved."""

    year: int
    day: int

    @classmethod
    def from_namespace(cls, namespace: str, default_year: t.Optional[int] = None) -> "PuzzleDate":
        """
        Parse a dotted namespace such as ``solutions.year2022.day06``.

        The day is the numeric suffix of the right-most token named like ``day06`` or
        ``d6``. Without such a token, the right-most token ending in one or two digits
        is used, so ``06`` names day 6 too. ``day06.part2`` is day 6. The year is any AoC
        year (2015+) appearing elsewhere in the namespace. If none is found,
        `default_year` is used.
        """
        tokens = namespace.split(".")
        i, match = _find_day(tokens)
        if match is None:
            log.debug("no day suffix in %r", namespace)
            raise PuzzleDateError("Failed introspection of day")
        day = int(match.group(1))
        if not 1 <= day <= 25:
            log.debug("day %d out of range in %r", day, namespace)
            raise PuzzleDateError("Failed introspection of day")
        remainder = tokens[:i] + [tokens[i][: match.start(1)]] + tokens[i + 1 :]
        years = {int(y) for token in remainder for y in re.findall(PATTERN_YEAR, token)}
        if len(years) > 1:
            raise PuzzleDateError("Failed introspection of year")
        if years:
            year = years.pop()
        elif default_year is not None:
            year = default_year
        else:
            raise PuzzleDateError("Failed introspection of year")
        log.debug("year=%s day=%s namespace=%s", year, day, namespace)
        return cls(year=year, day=day)

    def __str__(self):
        return f"{self.year}/{self.day:02d}"

    @property
    def url(self) -> str:
        """A link to the puzzle's description page on adventofcode.com."""
        return URL.format(year=self.year, day=self.day)

    @property
    def input_url(self) -> str:
        return self.url + "/input"

    @property
    def answer_url(self) -> str:
        return self.url + "/answer"

    def resource_name(self, part: t.Optional[PuzzlePart] = None) -> str:
        """
        Relative path of a hand-placed input file inside a resource directory, e.g.
        ``year2022/day06`` or, for an input which differs between the two levels,
        ``year2022/day06b``.
        """
        return f"year{self.year}/day{self.day:02d}{part or ''}"

    @property
    def cache_path(self) -> Path:
        """Where input data downloaded from the server is kept."""
        return AOCU_DATA_DIR / f"{self.year}_{self.day:02d}_input.txt"
