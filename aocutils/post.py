import logging
import typing as t
from urllib.parse import urlencode

import urllib3

from .cookies import default_session
from .exceptions import AocUtilsError
from .get import get_puzzle_date
from .models import PuzzleDate
from .types import AnswerValue
from .utils import _get_soup
from .utils import coerce
from .utils import colored
from .utils import http
from .utils import level_number


log = logging.getLogger(__name__)


def encode_form(level: t.Any, answer: AnswerValue) -> str:
    """
    The form-encoded request body for submitting `answer` to `level` (1 or 2),
    e.g. ``level=1&answer=42``.
    """
    fields = {"level": level_number(level), "answer": coerce(answer, warn=True)}
    return urlencode(fields)


def submit(
    answer: AnswerValue,
    level: t.Any,
    day: t.Optional[int] = None,
    year: t.Optional[int] = None,
    session: t.Optional[str] = None,
    quiet: bool = False,
) -> t.Optional[str]:
    """
    Submit your answer to adventofcode.com, and print the response to the terminal.
    `level` is 1 for the first part of the puzzle and 2 for the second.
    `answer` can be a string or a number (numbers will be coerced into strings).
    If `day` or `year` is omitted, it is introspected from the calling module.

    The server's feedback - the first paragraph of the response page - is logged,
    printed (pass `quiet=True` to suppress the printout) and returned. If the
    request could not be sent at all, the failure is logged and None is returned.
    """
    if answer in {"", b"", None}:
        raise AocUtilsError(f"cowardly refusing to submit non-answer: {answer!r}")
    if day is None or year is None:
        date = get_puzzle_date()
        day = date.day if day is None else day
        year = date.year if year is None else year
    date = PuzzleDate(year=year, day=day)
    body = encode_form(level, answer)
    if session is None:
        session = default_session()
    url = date.answer_url
    sanitized = "..." + session[-4:]
    log.info("posting %s to %s token=%s", body, url, sanitized)
    try:
        response = http.post(url, token=session, body=body)
    except urllib3.exceptions.HTTPError as err:
        log.error("request to %s failed: %s", url, err)
        return None
    if response.status >= 400:
        log.error("got %s status code", response.status)
        log.error(response.data.decode(errors="replace"))
        raise AocUtilsError(f"HTTP {response.status} at {url}")
    message = feedback(response.data)
    log.info(message)
    if not quiet:
        print(colored(message, color=_feedback_color(message)))
    return message


def feedback(html):
    """Text of the first paragraph in the server's response."""
    soup = _get_soup(html)
    paragraph = soup.find("p")
    if paragraph is None:
        return soup.get_text().strip()
    return paragraph.get_text()


def _feedback_color(message):
    if "That's the right answer" in message:
        return "green"
    if "Did you already complete it" in message:
        return "yellow"
    if "That's not the right answer" in message or "You gave an answer too recently" in message:
        return "red"
    log.debug("unrecognised submit message %r", message)
    return None
