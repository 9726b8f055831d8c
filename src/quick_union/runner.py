"""Convenience helpers for running a connectivity analysis end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional

import pandas as pd

from .pipeline import ConnectivityAnalyzer, ConnectivityConfig, ConnectivityResult


_READERS: Dict[str, Callable[..., pd.DataFrame]] = {
    ".csv": pd.read_csv,
    ".xls": pd.read_excel,
    ".xlsx": pd.read_excel,
}


def connect_file(
    input_path: str | Path,
    output_path: str | Path,
    config: Optional[ConnectivityConfig] = None,
) -> ConnectivityResult | None:
    """Union the pairs listed in `input_path` and write the component table.

    Problems with either file or with the pairs it holds are printed as an
    ``ERROR:`` line and reported by returning ``None``.
    """

    input_path = Path(input_path)
    output_path = Path(output_path)

    reader = _READERS.get(input_path.suffix.lower())
    if reader is None:
        print(f"ERROR: Unsupported file format for '{input_path}'. Please provide a CSV or Excel file.")
        return None

    try:
        dataframe = reader(input_path, dtype=str)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except pd.errors.EmptyDataError:
        print(f"ERROR: Input file '{input_path}' is empty.")
        return None
    except pd.errors.ParserError as exc:
        print(f"ERROR: Could not parse '{input_path}': {exc}")
        return None
    except OSError as exc:
        print(f"ERROR: Could not read '{input_path}': {exc.strerror or exc}")
        return None

    config = config or ConnectivityConfig()
    missing = [c for c in (config.left_column, config.right_column) if c not in dataframe.columns]
    if missing:
        print(f"ERROR: Column '{missing[0]}' not found in '{input_path}'. Please check the pair column names.")
        return None

    analyzer = ConnectivityAnalyzer(config)
    try:
        return analyzer.analyze(dataframe, output_path)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None
    except OSError as exc:
        print(f"ERROR: Could not write '{output_path}': {exc.strerror or exc}")
        return None
