import argparse
import datetime
import logging
from importlib.metadata import version

from .get import get_data
from .get import most_recent_year
from .post import submit
from .utils import AOC_TZ


def main():
    """Get your puzzle input data and print it on stdout, or submit an answer."""
    aoc_now = datetime.datetime.now(tz=AOC_TZ)
    days = range(1, 26)
    years = range(2015, aoc_now.year + int(aoc_now.month == 12))
    parser = argparse.ArgumentParser(
        description=f"Advent of Code utils v{version('advent-of-code-utils')}",
        usage=f"aocu [day 1-25] [year 2015-{years[-1]}] [-p PART] [-s ANSWER]",
    )
    parser.add_argument(
        "day",
        nargs="?",
        type=int,
        default=min(aoc_now.day, 25) if aoc_now.month == 12 else 1,
        help="1-25 (default: %(default)s)",
    )
    parser.add_argument(
        "year",
        nargs="?",
        type=int,
        default=most_recent_year(),
        help=f"2015-{years[-1]} (default: %(default)s)",
    )
    parser.add_argument(
        "-p",
        "--part",
        choices=["1", "2", "a", "b"],
        help="level of the puzzle - reads a part-specific input file, if any",
    )
    parser.add_argument(
        "-s",
        "--submit",
        metavar="ANSWER",
        help="submit ANSWER for the part (default: 1) instead of printing the input",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="do not print the feedback of a submission",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s v{version('advent-of-code-utils')}",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="enable debug logging",
    )
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)
    if args.day in years and args.year in days:
        # be forgiving
        args.day, args.year = args.year, args.day
    if args.day not in days or args.year not in years:
        parser.print_usage()
        parser.exit(1)
    if args.submit is not None:
        submit(args.submit, level=args.part or 1, day=args.day, year=args.year, quiet=args.quiet)
    else:
        data = get_data(day=args.day, year=args.year, part=args.part)
        print(data.rstrip("\r\n"))
