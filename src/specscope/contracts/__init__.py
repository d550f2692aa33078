"""Pipeline contracts: fail-fast enforcement of stage invariants.

Contracts fail immediately and loudly when a stage doesn't produce its
promised invariants.

Key principle:
- Ingest errors reject malformed input text
- Pydantic validates config correctness
- Contracts validate pipeline correctness
"""

from specscope.contracts.failure import ContractViolation
from specscope.contracts.base import require
from specscope.contracts.dataset import assert_dataset
from specscope.contracts.spectrum import assert_spectrum

__all__ = [
    "ContractViolation",
    "require",
    "assert_dataset",
    "assert_spectrum",
]
