# input_parser.py
# reads a recorded timing file into the two backlogs
#
# format:
#   # comment lines start with '#', blank lines are ignored
#   <n>
#   x_1 x_2 ... x_n       reference group
#   y_1 y_2 ... y_n       candidate group
# values are whitespace separated and may be spread over any number of lines

import math
import logging

from .errors import ConfigurationError

logger = logging.getLogger("TimeBlind")


def content_lines(text):
    # yields (line number, stripped line) for every line that is not a comment or blank
    for number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or line.startswith("#"):
            continue
        yield number, stripped


def parse_count(line, number):
    try:
        count = int(line)
    except ValueError:
        raise ConfigurationError(
            f"line {number}: expected the number of observations per group, got {line!r}"
        ) from None
    if count < 0:
        raise ConfigurationError(f"line {number}: observation count cannot be negative ({count})")
    return count


def parse_observation(token, number):
    try:
        value = float(token)
    except ValueError:
        raise ConfigurationError(f"line {number}: {token!r} is not a number") from None
    if not math.isfinite(value) or value < 0:
        raise ConfigurationError(
            f"line {number}: {token!r} is not a valid response time (must be finite and >= 0)"
        )
    return value


def parse_input(text):
    """
    Parses the recorded timings.
    Returns (reference, candidate), two lists of n floats each.
    Raises ConfigurationError on a missing or malformed count, bad values or short input.
    """
    lines = content_lines(text)

    first = next(lines, None)
    if first is None:
        raise ConfigurationError("input has no observation count (only comments or blank lines)")
    count = parse_count(first[1], first[0])

    values = []
    for number, line in lines:
        values.extend(parse_observation(token, number) for token in line.split())

    if len(values) < 2 * count:
        raise ConfigurationError(
            f"expected {2 * count} observations ({count} per group), found {len(values)}"
        )
    if len(values) > 2 * count:
        logger.warning("Ignoring %d trailing value(s) after the candidate group", len(values) - 2 * count)

    reference = values[:count]
    candidate = values[count:2 * count]
    logger.debug("Parsed %d observations per group", count)
    return reference, candidate


def parse_stream(stream):
    # reads the whole stream once
    return parse_input(stream.read())
