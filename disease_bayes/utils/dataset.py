"""
CSV reader and writer used around the classifier.
Rows are handed to the model as plain lists of string cells, in file order.
"""

import csv

import pandas as pd
from pandas.errors import EmptyDataError, ParserError

from disease_bayes.config import OUTPUT_HEADER
from disease_bayes.exceptions import DatasetIOError, MalformedRowError
from disease_bayes.utils.logger import get_logger

logger = get_logger(__name__)


def _table_width(path) -> int:
    """Number of cells in the widest row; rows may differ in length."""
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        try:
            return max((len(row) for row in reader), default=0)
        except csv.Error as e:
            raise MalformedRowError(None, f"line {reader.line_num}: {e}") from e


def read_rows(path, has_header: bool = True) -> list:
    """
    Loads a symptom table.

    Args:
        path: CSV file; column 0 is the disease label, the rest are symptoms
        has_header: skip the first line

    Returns:
        list of rows, each a list of string cells (missing trailing cells are "")
    """
    try:
        width = _table_width(path)
        if width == 0:
            logger.warning(f"{path} is empty")
            return []

        # Every row is padded out to the widest one
        df = pd.read_csv(
            path,
            header=None,
            names=list(range(width)),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except EmptyDataError:
        logger.warning(f"{path} is empty")
        return []
    except ParserError as e:
        raise MalformedRowError(None, str(e).strip()) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetIOError(path, e) from e

    rows = df.fillna("").values.tolist()
    if has_header:
        rows = rows[1:]

    logger.debug(f"Loaded {len(rows)} rows from {path}")
    return rows


def write_predictions(path, labels) -> int:
    """
    Writes the ID,Disease table, IDs being 1-based positions of the query rows.

    Returns:
        number of prediction rows written
    """
    labels = list(labels)
    id_col, disease_col = OUTPUT_HEADER
    frame = pd.DataFrame(
        {id_col: range(1, len(labels) + 1), disease_col: labels},
        columns=list(OUTPUT_HEADER),
    )

    try:
        frame.to_csv(path, index=False)
    except OSError as e:
        raise DatasetIOError(path, e) from e

    return len(frame)
