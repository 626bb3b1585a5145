import logging
import os
import sys
from functools import cache
from textwrap import dedent

import javaproperties

from .exceptions import MissingSessionError
from .models import AOCU_CONFIG_DIR
from .models import RESOURCE_DIRS
from .utils import colored


log = logging.getLogger(__name__)


PROPERTIES_FNAME = "security.properties"
SESSION_PROPERTY = "aoc.session"


def properties_paths():
    """Candidate locations of security.properties, highest priority first."""
    return [d / PROPERTIES_FNAME for d in RESOURCE_DIRS] + [AOCU_CONFIG_DIR / PROPERTIES_FNAME]


def read_properties(path):
    """
    Parse a java .properties file into a dict, following the rules of
    java.util.Properties.load (``=``, ``:`` or whitespace separators, ``#`` and ``!``
    comments, leading whitespace ignored, backslash escapes and continuations).
    """
    with path.open(encoding="utf-8") as f:
        return javaproperties.load(f)


@cache
def load_security_properties():
    """
    Merge the properties from every security.properties found. This happens once
    per process - the result is cached. Earlier paths win for duplicate keys.
    """
    result = {}
    for path in reversed(properties_paths()):
        try:
            properties = read_properties(path)
        except FileNotFoundError:
            log.debug("no properties at %s", path)
            continue
        log.debug("loaded properties from %s", path)
        result.update(properties)
    return result


def default_session():
    """
    Discover user's session token from the environment or a properties file, and
    exit with a diagnostic message if none can be found.
    """
    # export your session id as AOC_SESSION env var
    cookie = os.getenv("AOC_SESSION")
    if cookie:
        return cookie

    # or chuck it in a security.properties file as aoc.session=<token>
    cookie = (load_security_properties().get(SESSION_PROPERTY) or "").strip()
    if cookie:
        return cookie

    msg = dedent(
        f"""\
        ERROR: AoC session ID is needed to get your puzzle data!
        You can find it in your browser cookies after login.
            1) Save the cookie as {SESSION_PROPERTY}=<token> in {AOCU_CONFIG_DIR / PROPERTIES_FNAME}, or
            2) Export the cookie in environment variable AOC_SESSION
        """
    )
    print(colored(msg, color="red"), file=sys.stderr)
    raise MissingSessionError("Missing session ID")
