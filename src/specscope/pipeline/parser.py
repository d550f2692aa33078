"""Text-to-Dataset parse pipeline.

Runs the ingest stages in order on one in-memory string:

    normalize -> header -> rows -> uniformity -> pairs -> dataset

The run is synchronous and pure. Any stage failure aborts the whole parse;
a partial Dataset is never returned.
"""

import logging

from specscope.ingest import (
    Dataset,
    IngestError,
    assemble_dataset,
    check_uniform,
    detect_header,
    normalize_text,
    parse_rows,
    split_pairs,
)

__all__ = ['DatasetParser', 'parse_dataset']

logger = logging.getLogger(__name__)


class DatasetParser:
    """Parses whitespace-delimited (real, imag) sample text into a Dataset.

    **Processing Pipeline:**

    1. **Normalize**: Trim the text, split it into non-empty lines.

    2. **Header**: Treat the first line as a header unless it is itself a
       valid sample row (even count >= 2 of finite numbers).

    3. **Rows**: Parse every data line. All invalid lines are reported
       together in one RowParseError.

    4. **Uniformity**: Stop at the first row whose width differs from the
       first row.

    5. **Pairs**: Check header length and column parity, then split each
       row into consecutive (real, imag) pairs.

    6. **Dataset**: Freeze into an immutable Dataset, checked by the
       dataset contract.

    Example usage::

        parser = DatasetParser()
        dataset = parser.parse(path.read_text(encoding="utf-8"))
        print(dataset.num_rows, dataset.num_pairs)
    """

    def __init__(self, name: str = "DatasetParser"):
        self.name = name

    def parse(self, text: str) -> Dataset:
        """Parse the whole file content.

        Raises
        ------
        IngestError
            Any of the typed ingest errors; the input is rejected as a whole.
        ContractViolation
            If a stage broke its output promise (a bug, not bad input).
        """
        try:
            lines = normalize_text(text)
            split = detect_header(lines)
            rows = parse_rows(split.data_lines)
            uniform = check_uniform(rows)
            paired = split_pairs(split.header, uniform.rows, uniform.num_cols)
            dataset = assemble_dataset(
                paired.header, paired.rows, paired.num_pairs, paired.num_cols
            )
        except IngestError as e:
            logger.warning("%s: input rejected (%s): %s", self.name, type(e).__name__, e)
            raise

        logger.info(
            "%s: parsed %d rows, %d pair(s)%s",
            self.name,
            dataset.num_rows,
            dataset.num_pairs,
            ", with header" if dataset.header is not None else "",
        )
        return dataset


def parse_dataset(text: str) -> Dataset:
    """Parse `text` with a default DatasetParser."""
    return DatasetParser().parse(text)
