"""Core pipeline for batch connectivity analysis."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List

import numpy as np
import pandas as pd

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .pairs import Pair, infer_size, normalize_pairs
from .structures import QuickUnion


@dataclass
class ConnectivityStats:
    """Summary metrics for a connectivity run."""

    total_elements: int
    pairs_processed: int
    merges: int
    redundant_pairs: int
    component_count: int
    largest_component: int
    singleton_count: int
    runtime_seconds: float


@dataclass
class ConnectivityResult:
    """Result bundle returned by :class:ConnectivityAnalyzer."""

    dataframe: pd.DataFrame
    component_map: Dict[int, List[int]]
    stats: ConnectivityStats
    structure: QuickUnion


@dataclass
class ConnectivityConfig:
    """Configuration parameters for :class:ConnectivityAnalyzer."""

    left_column: str = "p"
    right_column: str = "q"
    size: int | None = None
    use_tqdm: bool | None = None
    verbose: bool = True


class ConnectivityAnalyzer:
    """Union a table of index pairs and report the resulting components."""

    def __init__(self, config: ConnectivityConfig | None = None) -> None:
        self.config = config or ConnectivityConfig()

    def analyze(
        self,
        dataframe: pd.DataFrame,
        output_path: str | Path | None = None,
    ) -> ConnectivityResult:
        """Apply every pair in `dataframe`, optionally save, and return the components."""

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- Connectivity Analysis Started ---")
            print("\n1. Reading pairs...")

        t0 = time.time()
        pairs = normalize_pairs(dataframe, self.config.left_column, self.config.right_column)
        if verbose:
            print(f"   Read {len(pairs)} pairs from {len(dataframe)} rows. Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Sizing the universe...")
        size = self._resolve_size(pairs)
        if verbose:
            print(f"   Using {size} elements. Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("3. Merging components...")
        structure = QuickUnion(size)
        merges = self._apply_pairs(structure, pairs)
        if verbose:
            print(f"   {merges} merges, {len(pairs) - merges} redundant pairs.")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("4. Building component table...")
        component_map = structure.components()
        df = self._build_dataframe(structure)
        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

        component_sizes = df.drop_duplicates("component_id")["component_size"].to_numpy()
        largest = int(component_sizes.max()) if component_sizes.size else 0
        singletons = int(np.count_nonzero(component_sizes == 1))

        if verbose:
            print("\n--- Results Summary ---")
            print(f"   - Total elements: {size}")
            print(f"   - Connected components: {structure.component_count()}")
            print(f"   - Singletons: {singletons}")
            clusters_by_size = sorted(component_map.items(), key=lambda item: len(item[1]), reverse=True)
            print("\n   --- Largest Components ---")
            for idx, (root, members) in enumerate(clusters_by_size[:10]):
                if len(members) <= 1:
                    break
                print(f"   Component {idx + 1} (Root: {root}, Size: {len(members)})")
                preview = ", ".join(str(member) for member in members[:5])
                suffix = ", ..." if len(members) > 5 else ""
                print(f"     - {preview}{suffix}")

        if output_path is not None:
            output_str = str(output_path)
            self._save_dataframe(df, output_str)
            if verbose:
                print(f"\n   Processing complete. Results saved to '{output_str}'")

        elapsed = time.time() - overall_start_time
        summary = ConnectivityStats(
            total_elements=size,
            pairs_processed=len(pairs),
            merges=merges,
            redundant_pairs=len(pairs) - merges,
            component_count=structure.component_count(),
            largest_component=largest,
            singleton_count=singletons,
            runtime_seconds=elapsed,
        )

        if verbose:
            print(f"\n--- Connectivity Analysis Finished in {elapsed:.2f} seconds ---")

        return ConnectivityResult(dataframe=df, component_map=component_map, stats=summary, structure=structure)

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE

    def _resolve_size(self, pairs: List[Pair]) -> int:
        inferred = infer_size(pairs)
        if self.config.size is None:
            return inferred
        if self.config.size < inferred:
            raise ValueError(
                f"Declared size {self.config.size} is too small: pairs reference index {inferred - 1}"
            )
        return self.config.size

    def _apply_pairs(self, structure: QuickUnion, pairs: List[Pair]) -> int:
        iterator: Iterable[Pair] = pairs
        if pairs and self._use_tqdm:
            iterator = tqdm(pairs, desc="   Merging Pairs", unit="pair")

        merges = 0
        for left, right in iterator:
            before = structure.component_count()
            structure.union(left, right)
            if structure.component_count() < before:
                merges += 1
        return merges

    @staticmethod
    def _build_dataframe(structure: QuickUnion) -> pd.DataFrame:
        roots = np.fromiter((structure.find(index) for index in range(len(structure))), dtype=np.int64, count=len(structure))
        counts = np.bincount(roots, minlength=len(structure))
        return pd.DataFrame(
            {
                "element": np.arange(len(structure), dtype=np.int64),
                "component_id": roots,
                "component_size": counts[roots],
            }
        )

    @staticmethod
    def _save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
        path = Path(output_path)
        suffix = path.suffix.lower()
        if suffix == ".csv":
            dataframe.to_csv(path, index=False)
            return
        if suffix in {".xls", ".xlsx"}:
            dataframe.to_excel(path, index=False)
            return
        raise ValueError(f"Unsupported output file format: '{suffix}'")


__all__ = [
    "ConnectivityAnalyzer",
    "ConnectivityConfig",
    "ConnectivityResult",
    "ConnectivityStats",
]
