"""Versioned holder for the current Dataset.

Two file reads can be in flight at once; whichever finishes last would
overwrite the other. Each load takes a token from issue_token() and only
the holder of the latest token may replace the slot, so a slow, stale
completion is dropped instead of clobbering a newer dataset.
"""

import logging
import threading
from typing import Optional

from specscope.ingest.dataset import Dataset

__all__ = ['DatasetSlot']

logger = logging.getLogger(__name__)


class DatasetSlot:
    """Single current-Dataset slot guarded by monotonically increasing tokens.

    All methods are thread-safe via internal locking.

    Typical usage::

        slot = DatasetSlot()
        token = slot.issue_token()       # when the read starts
        ...
        slot.offer(token, dataset)       # when it completes
        current = slot.current
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._latest_token = 0
        self._current: Optional[Dataset] = None
        self._current_token: Optional[int] = None

    def issue_token(self) -> int:
        """Reserve the next token; it supersedes every earlier one."""
        with self._lock:
            self._latest_token += 1
            return self._latest_token

    @property
    def latest_token(self) -> int:
        with self._lock:
            return self._latest_token

    @property
    def current(self) -> Optional[Dataset]:
        with self._lock:
            return self._current

    @property
    def version(self) -> Optional[int]:
        """Token of the dataset in the slot, None while empty."""
        with self._lock:
            return self._current_token

    def is_current(self, token: int) -> bool:
        """True if `token` is still the latest issued one."""
        with self._lock:
            return token == self._latest_token

    def offer(self, token: int, dataset: Dataset) -> bool:
        """Store `dataset` if `token` is the latest issued token.

        Returns
        -------
        bool
            True if the slot was updated, False if the result was stale.
        """
        with self._lock:
            if token > self._latest_token or token < 1:
                raise ValueError(f"Token {token} was never issued")
            if token != self._latest_token:
                logger.debug(
                    "Dropping stale dataset (token %d, latest %d)", token, self._latest_token
                )
                return False
            self._current = dataset
            self._current_token = token
        logger.debug("Dataset slot updated to token %d", token)
        return True
