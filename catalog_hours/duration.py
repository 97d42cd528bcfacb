import logging
import re

from catalog_hours.exceptions import DurationParseError

NON_DIGITS = re.compile(r"[^0-9]")


def parse_course_duration(metadata: str) -> int:
    """Return the number of minutes stated in a tutorial item's metadata.

    The duration is the parenthesized part of the text, either
    ``"(45 min)"`` or ``"(1 hr, 30 min)"``.
    """
    left_index = metadata.find("(")
    right_index = metadata.rfind(")")

    if left_index == -1 or right_index < left_index:
        logging.error(f"No duration found in metadata: {metadata!r}")
        raise DurationParseError(metadata)

    duration_text = metadata[left_index:right_index + 1]
    hours = 0

    if "hr" in duration_text:
        hours_text, separator, duration_text = duration_text.partition(",")
        if not separator:
            raise DurationParseError(metadata)
        hours = numbers_from_duration(hours_text, metadata)

    minutes = numbers_from_duration(duration_text, metadata)

    return hours * 60 + minutes


def numbers_from_duration(duration_text: str, metadata: str) -> int:
    digits = NON_DIGITS.sub("", duration_text)

    if not digits:
        raise DurationParseError(metadata)

    return int(digits)
