"""Application-facing session: load text, keep the current dataset, compute spectra.

A failed load never clears the slot: the caller reports the error and the
previously valid dataset stays in place.
"""

import logging
from typing import Optional

from specscope.ingest import Dataset, IngestError
from specscope.pipeline.parser import DatasetParser
from specscope.pipeline.slot import DatasetSlot
from specscope.schemas import InternalConfig, resolve_config
from specscope.spectral import Spectrum, Transform, compute_spectrum, numpy_transform

__all__ = ['SpectrumSession']

logger = logging.getLogger(__name__)


class SpectrumSession:
    """Holds the current Dataset and derives spectra from it.

    Loads are two-phase so that an asynchronous reader can start several
    reads and let only the newest one win::

        session = SpectrumSession(config)
        token = session.begin_load()            # read started
        ...
        session.complete_load(token, text)      # read finished

    For synchronous callers, ``load(text)`` does both.
    """

    def __init__(
        self,
        config: Optional[InternalConfig] = None,
        transform: Transform = numpy_transform,
        parser: Optional[DatasetParser] = None,
    ):
        self.config = config if config is not None else resolve_config()
        self.transform = transform
        self.parser = parser or DatasetParser()
        self.slot = DatasetSlot()

    @property
    def dataset(self) -> Optional[Dataset]:
        return self.slot.current

    def begin_load(self) -> int:
        """Issue a token for a load that is about to start."""
        return self.slot.issue_token()

    def complete_load(self, token: int, text: str) -> bool:
        """Parse `text` and publish it if `token` is still the newest load.

        Returns
        -------
        bool
            True if the dataset became current, False if a newer load
            superseded this one.

        Raises
        ------
        IngestError
            If `text` is rejected while `token` is still the newest load.
            The current dataset is left unchanged.
        """
        try:
            dataset = self.parser.parse(text)
        except IngestError as e:
            if not self.slot.is_current(token):
                logger.info("Load %d superseded; ignoring its parse error: %s", token, e)
                return False
            if self.dataset is not None:
                logger.info("Keeping previous dataset (version %s)", self.slot.version)
            raise

        updated = self.slot.offer(token, dataset)
        if not updated:
            logger.info("Load %d superseded by load %d; result dropped", token, self.slot.latest_token)
        return updated

    def load(self, text: str) -> Dataset:
        """Synchronous load: parse and make current."""
        token = self.begin_load()
        self.complete_load(token, text)
        return self.dataset

    def spectrum(
        self,
        pair_index: Optional[int] = None,
        sample_rate: Optional[float] = None,
    ) -> Spectrum:
        """Spectrum of the current dataset; unset arguments come from config.

        Raises
        ------
        LookupError
            If no dataset has been loaded.
        PairIndexError
            If `pair_index` is not a channel of the current dataset.
        """
        dataset = self.dataset
        if dataset is None:
            raise LookupError("No dataset loaded")

        cfg = self.config.spectrum
        return compute_spectrum(
            dataset,
            pair_index=cfg.pair_index if pair_index is None else pair_index,
            sample_rate=cfg.sample_rate if sample_rate is None else sample_rate,
            transform=self.transform,
            db_floor=cfg.db_floor,
            centered=cfg.centered,
        )
