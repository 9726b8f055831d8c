"""Pair extraction helpers."""

from __future__ import annotations

from typing import Hashable, Iterable, List, Tuple

import pandas as pd


Pair = Tuple[int, int]


def normalize_pairs(dataframe: pd.DataFrame, left_column: str, right_column: str) -> List[Pair]:
    """Return the ``(p, q)`` integer pairs held in `left_column` and `right_column`.

    Rows with a blank cell on either side are skipped.
    """

    for column in (left_column, right_column):
        if column not in dataframe.columns:
            raise KeyError(f"Column '{column}' not found in dataframe")

    pairs: List[Pair] = []
    rows = zip(dataframe.index, dataframe[left_column], dataframe[right_column])
    for label, left, right in rows:
        if _is_blank(left) or _is_blank(right):
            continue
        pairs.append((_to_index(left, label), _to_index(right, label)))
    return pairs


def infer_size(pairs: Iterable[Pair]) -> int:
    """Return the smallest universe size that holds every index in `pairs`."""

    return max((max(p, q) + 1 for p, q in pairs), default=0)


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return bool(pd.isna(value))


def _to_index(value: object, label: Hashable) -> int:
    text = str(value).strip()
    try:
        index = int(text)
    except ValueError:
        try:
            number = float(text)
        except ValueError:
            raise ValueError(f"Row {label}: '{value}' is not an integer index") from None
        if not number.is_integer():
            raise ValueError(f"Row {label}: '{value}' is not an integer index")
        index = int(number)
    if index < 0:
        raise ValueError(f"Row {label}: index {index} is negative")
    return index
