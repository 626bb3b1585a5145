from __future__ import annotations

import logging
import os
import platform
import shutil
import typing as t
from decimal import Decimal
from fractions import Fraction
from functools import cache
from importlib.metadata import version
from pathlib import Path
from tempfile import NamedTemporaryFile
from zoneinfo import ZoneInfo

import bs4
import urllib3

from .exceptions import AocUtilsError
from .exceptions import CoercionError

log: logging.Logger = logging.getLogger(__name__)
AOC_TZ = ZoneInfo("America/New_York")
_v = version("advent-of-code-utils")
USER_AGENT = f"advent-of-code-utils v{_v}"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class HttpClient:
    # every request to adventofcode.com goes through this wrapper
    # so that the user agent and session cookie are always set.

    pool_manager: urllib3.PoolManager

    def __init__(self) -> None:
        proxy_url = os.environ.get("http_proxy") or os.environ.get("https_proxy")
        if proxy_url:
            self.pool_manager = urllib3.ProxyManager(proxy_url, headers={"User-Agent": USER_AGENT})
        else:
            self.pool_manager = urllib3.PoolManager(headers={"User-Agent": USER_AGENT})

    def _headers(self, token: str) -> dict[str, str]:
        return self.pool_manager.headers | {"Cookie": f"session={token}"}

    def get(self, url: str, token: str) -> urllib3.BaseHTTPResponse:
        # getting user inputs
        return self.pool_manager.request("GET", url, headers=self._headers(token))

    def post(self, url: str, token: str, body: str) -> urllib3.BaseHTTPResponse:
        # submitting answers. the body is already form-encoded
        headers = self._headers(token) | {"Content-Type": FORM_CONTENT_TYPE}
        return self.pool_manager.request("POST", url, body=body, headers=headers)


http: HttpClient = HttpClient()


def _ensure_intermediate_dirs(path: Path) -> None:
    path.expanduser().parent.mkdir(parents=True, exist_ok=True)


def atomic_write_file(path: Path, contents_str: str) -> None:
    """
    Atomically write a string to a file by writing it to a temporary file, and then
    renaming it to the final destination name. This solves a race condition where existence
    of a file doesn't necessarily mean the content is valid yet.
    """
    _ensure_intermediate_dirs(path)
    with NamedTemporaryFile("w", dir=path.parent, encoding="utf-8", delete=False) as f:
        log.debug("writing to tempfile @ %s", f.name)
        f.write(contents_str)
    log.debug("moving %s -> %s", f.name, path)
    shutil.move(f.name, path)


def level_number(level: t.Any) -> int:
    """
    Normalize a puzzle level. Accepts 1, 2, "1", "2", "a" or "b" and returns 1 or 2.
    """
    normalized = str(level).strip().lower().replace("a", "1").replace("b", "2")
    if normalized not in {"1", "2"}:
        raise AocUtilsError("level must be 1 or 2")
    return int(normalized)


def coerce(val: t.Any, warn: bool = False) -> str:
    """
    Convert answer `val` into a string suitable for HTTP submission.
    Technically adventofcode.com will only accept strings as answers, but it's
    convenient to be able to submit numbers. Integral floats, complex numbers,
    fractions and decimals are converted via int, anything else non-integral
    raises `CoercionError`.
    """
    orig_val = val
    orig_type = type(val)
    coerced = False
    if isinstance(val, str):
        return val
    if isinstance(val, bytes):
        coerced = True
        val = val.decode()
    elif isinstance(val, (float, complex)):
        if val.imag == 0.0 and float(val.real).is_integer():
            coerced = True
            val = str(int(val.real))
    elif isinstance(val, Fraction):
        if val.denominator == 1:
            coerced = True
            val = str(val.numerator)
    elif isinstance(val, Decimal):
        if val == val.to_integral_value():
            coerced = True
            val = str(int(val))
    elif isinstance(val, int):
        val = str(val)
    if not isinstance(val, str):
        msg = f"Failed to coerce {orig_type.__name__} value {orig_val!r} to str"
        raise CoercionError(msg)
    if coerced and warn:
        log.warning("coerced %s value %r to %r", orig_type.__name__, orig_val, val)
    return val


_ANSIColor = t.Literal[
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"
]
_ansi_colors = t.get_args(_ANSIColor)
if platform.system() == "Windows":
    os.system("color")  # hack - makes ANSI colors work in the windows cmd window


def colored(txt: str, color: _ANSIColor | None) -> str:
    if color is None:
        return txt
    code = _ansi_colors.index(color.casefold())
    reset = "\x1b[0m"
    return f"\x1b[{code + 30}m{txt}{reset}"


@cache
def _get_soup(html):
    return bs4.BeautifulSoup(html, "html.parser")
