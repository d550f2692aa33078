"""Text normalization: raw file content to ordered non-empty lines."""

import logging

from specscope.ingest.errors import EmptyInputError, NoDataRowsError

logger = logging.getLogger(__name__)


def normalize_text(text: str) -> list[str]:
    """Trim `text`, split it into lines and drop the blank ones.

    Parameters
    ----------
    text : str
        Whole file content.

    Returns
    -------
    list of str
        Stripped, non-empty lines in input order.

    Raises
    ------
    EmptyInputError
        If `text` is empty after trimming.
    NoDataRowsError
        If no non-empty line remains.
    """
    trimmed = text.strip()
    if not trimmed:
        raise EmptyInputError()

    lines = [line.strip() for line in trimmed.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise NoDataRowsError()

    logger.debug("Normalized input: %d non-empty lines", len(lines))
    return lines
