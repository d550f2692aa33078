"""Header detection on the first input line."""

import logging
from typing import NamedTuple, Optional, Sequence

from specscope.ingest.errors import HeaderOnlyError
from specscope.ingest.tokens import looks_like_data, tokenize

logger = logging.getLogger(__name__)


class HeaderSplit(NamedTuple):
    header: Optional[tuple[str, ...]]
    data_lines: list[str]


def detect_header(lines: Sequence[str]) -> HeaderSplit:
    """Decide whether the first line is a header row or data.

    The first line is data when all of its tokens are finite numbers and
    there is an even number (>= 2) of them. Anything else is a header,
    including a numeric line with an odd token count. A header whose labels
    happen to be an even count of numbers is read as data; the format cannot
    tell the two apart.

    Raises
    ------
    HeaderOnlyError
        If the first line is a header and nothing follows it.
    """
    first = tokenize(lines[0])
    if looks_like_data(first):
        return HeaderSplit(header=None, data_lines=list(lines))

    header = tuple(first)
    data_lines = list(lines[1:])
    if not data_lines:
        raise HeaderOnlyError(header)

    logger.debug("Header detected: %s", header)
    return HeaderSplit(header=header, data_lines=data_lines)
