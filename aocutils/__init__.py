import sys
import typing as t
from functools import partial

from . import cli
from . import cookies
from . import exceptions
from . import get
from . import models
from . import post
from . import timing
from . import types
from . import utils
from .exceptions import AocUtilsError
from .exceptions import PuzzleDateError
from .get import get_data
from .get import get_puzzle_date
from .models import PuzzleDate
from .post import submit as _impartial_submit
from .timing import log_durations
from .version import __version__

__all__ = [
    "AocUtilsError",
    "PuzzleDate",
    "__version__",
    "cli",
    "cookies",
    "data",
    "exceptions",
    "get",
    "get_data",
    "get_puzzle_date",
    "log_durations",
    "models",
    "post",
    "submit",
    "timing",
    "types",
    "utils",
]

if t.TYPE_CHECKING:
    data: str
    submit = _impartial_submit


def __getattr__(name: str) -> t.Any:
    if name == "data":
        date = get_puzzle_date()
        return get_data(day=date.day, year=date.year)
    if name == "submit":
        try:
            date = get_puzzle_date()
        except PuzzleDateError:
            return _impartial_submit
        else:
            return partial(_impartial_submit, day=date.day, year=date.year)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


# pretend we're not a package, now that relative imports have been resolved.
# hackish - this prevents the import statement `from aocutils import data` from going into
# importlib._bootstrap._handle_fromlist, which can cause __getattr__ to be called twice
del sys.modules[__name__].__path__
