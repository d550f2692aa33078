"""Pipeline modules.

- parser: Text-to-Dataset stage runner
- slot: Versioned current-dataset holder
- session: Load/spectrum facade used by the CLI and applications
"""

from specscope.pipeline.parser import DatasetParser, parse_dataset
from specscope.pipeline.slot import DatasetSlot
from specscope.pipeline.session import SpectrumSession

__all__ = [
    "DatasetParser",
    "parse_dataset",
    "DatasetSlot",
    "SpectrumSession",
]
