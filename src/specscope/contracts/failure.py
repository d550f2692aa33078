"""Centralized failure type for contract violations.

Contracts fail fast, loud, and once. All violations raise the same
exception type, allowing caller to handle pipeline bugs uniformly.
"""


class ContractViolation(RuntimeError):
    """Raised when a pipeline contract is violated.

    This indicates a bug in pipeline logic, not bad user input. It means a
    stage did not produce the invariants it promised.

    Key distinction:
    - IngestError: Malformed input text (recoverable, shown to the user)
    - ValidationError: Config error (handled by Pydantic)
    - ContractViolation: Pipeline bug (programmer error)
    """
    pass
