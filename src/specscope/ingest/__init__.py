"""Text-to-dataset ingest stages.

- normalizer: Trim and split raw text into lines
- header: Detect an optional header row
- rows: Parse numeric rows, accumulating every error
- uniformity: Check all rows share one column count
- pairs: Split rows into (real, imaginary) pairs
- assembler: Build the immutable Dataset
"""

from specscope.ingest.dataset import Dataset, ReImPair, PairedRow, NumericRow
from specscope.ingest.errors import (
    IngestError,
    EmptyInputError,
    NoDataRowsError,
    HeaderOnlyError,
    RowIssue,
    RowParseError,
    NoValidRowsError,
    NonUniformRowsError,
    HeaderLengthMismatchError,
    OddColumnCountError,
)
from specscope.ingest.normalizer import normalize_text
from specscope.ingest.header import detect_header, HeaderSplit
from specscope.ingest.rows import parse_rows, parse_row, RowIssueCollector
from specscope.ingest.uniformity import check_uniform, UniformRows
from specscope.ingest.pairs import split_pairs, pair_row, flatten_row, PairedRows
from specscope.ingest.assembler import assemble_dataset

__all__ = [
    # data model
    "Dataset",
    "ReImPair",
    "PairedRow",
    "NumericRow",

    # errors
    "IngestError",
    "EmptyInputError",
    "NoDataRowsError",
    "HeaderOnlyError",
    "RowIssue",
    "RowParseError",
    "NoValidRowsError",
    "NonUniformRowsError",
    "HeaderLengthMismatchError",
    "OddColumnCountError",

    # stages
    "normalize_text",
    "detect_header",
    "HeaderSplit",
    "parse_rows",
    "parse_row",
    "RowIssueCollector",
    "check_uniform",
    "UniformRows",
    "split_pairs",
    "pair_row",
    "flatten_row",
    "PairedRows",
    "assemble_dataset",
]
