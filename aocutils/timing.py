import logging
from datetime import timedelta

from .types import Durations


log = logging.getLogger(__name__)


def _millis(earlier, later):
    delta = later - earlier
    if isinstance(delta, timedelta):
        return delta // timedelta(milliseconds=1)
    # float seconds like 0.3 - 0.1 fall just short of the exact millisecond
    return int(round(delta * 1000, 6))


def log_durations(start, parse_end, between_parts, end) -> Durations:
    """
    Log how long each phase of a solution took, in milliseconds.

    The four instants may be float seconds from `time.perf_counter()` (or
    `time.time()`) or `datetime` objects, as long as they're all the same kind::

        data = aocutils.data        # reading the input is not timed
        start = time.perf_counter()
        # parse input data
        parse_end = time.perf_counter()
        # solve part one
        between_parts = time.perf_counter()
        # solve part two
        end = time.perf_counter()
        # submit the answers
        log_durations(start, parse_end, between_parts, end)
    """
    durations: Durations = {
        "parsing": _millis(start, parse_end),
        "part_1": _millis(parse_end, between_parts),
        "part_2": _millis(between_parts, end),
        "total": _millis(start, end),
    }
    log.info("parsing: %dms", durations["parsing"])
    log.info("part 1: %dms", durations["part_1"])
    log.info("part 2: %dms", durations["part_2"])
    log.info("total: %dms", durations["total"])
    return durations
