"""
Symptom normalization and vocabulary bookkeeping.
Training rows and query rows go through the same rules, so a symptom spelled
identically always lands on the same vocabulary entry.
"""

import math
from typing import Iterable, Iterator, Optional, Sequence, Tuple


def _clean_cell(cell) -> Optional[str]:
    # pandas hands over NaN for cells it could not fill
    if cell is None or (isinstance(cell, float) and math.isnan(cell)):
        return None
    token = str(cell).strip()
    return token or None


def normalize_symptoms(cells: Iterable) -> Tuple[str, ...]:
    """
    Turns raw symptom cells into a symptom set.

    1. Trim surrounding whitespace.
    2. Drop empty or missing cells.
    3. Deduplicate, keeping the first occurrence.

    The result is a tuple so iteration order follows the input.
    """
    seen = {}
    for cell in cells:
        token = _clean_cell(cell)
        if token is not None and token not in seen:
            seen[token] = None
    return tuple(seen)


def split_row(row: Sequence) -> Tuple[Optional[str], Tuple[str, ...]]:
    """
    Splits a tabular row into its label cell and its normalized symptoms.
    The label is returned untouched (None when the row has no cells at all).
    """
    if not row:
        return None, ()
    label = row[0] if isinstance(row[0], str) else _clean_cell(row[0])
    return label, normalize_symptoms(row[1:])


class Vocabulary:
    """Immutable ordered set of every symptom seen during training."""

    __slots__ = ("_index",)

    def __init__(self, symptoms: Iterable[str] = ()):
        index = {}
        for symptom in symptoms:
            if symptom not in index:
                index[symptom] = len(index)
        object.__setattr__(self, "_index", index)

    def __setattr__(self, name, value):
        raise AttributeError("Vocabulary is immutable")

    def __contains__(self, symptom) -> bool:
        return symptom in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __eq__(self, other):
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return list(self._index) == list(other._index)

    def __hash__(self):
        return hash(tuple(self._index))

    def __repr__(self):
        return f"Vocabulary({len(self)} symptoms)"

    def index(self, symptom: str) -> int:
        """Position of a symptom in first-seen order. Raises KeyError if unknown."""
        return self._index[symptom]

    def unknown(self, symptoms: Iterable[str]) -> Tuple[str, ...]:
        """Symptoms that are not part of the vocabulary, in the order given."""
        return tuple(s for s in symptoms if s not in self._index)

    def sorted(self) -> Tuple[str, ...]:
        return tuple(sorted(self._index))
