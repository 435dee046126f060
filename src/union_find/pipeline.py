"""Edge-list labeling pipeline for the union_find library."""

from __future__ import annotations

import time
from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

import numpy as np
import pandas as pd

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .graph import WeightedEdge, grow_to, spanning_forest
from .structures import DisjointSet


@dataclass
class ComponentLabelerStats:
    """Summary metrics for a labeling run."""

    node_count: int
    edge_count: int
    merges: int
    redundant_edges: int
    component_count: int
    runtime_seconds: float


@dataclass
class ComponentLabelerResult:
    """Result bundle returned by :class:ComponentLabeler."""

    dataframe: pd.DataFrame
    component_map: Dict[int, List[int]]
    stats: ComponentLabelerStats
    forest: List[WeightedEdge] = field(default_factory=list)


@dataclass
class ComponentLabelerConfig:
    """Configuration parameters for :class:ComponentLabeler."""

    source_column: str = "source"
    target_column: str = "target"
    weight_column: str | None = None
    node_count: int | None = None
    use_tqdm: bool | None = None
    verbose: bool = True


class ComponentLabeler:
    """Assign every node of an edge list to its connected component."""

    def __init__(self, config: ComponentLabelerConfig | None = None) -> None:
        self.config = config or ComponentLabelerConfig()

    def label(
        self,
        dataframe: pd.DataFrame,
        output_path: str | Path | None = None,
    ) -> ComponentLabelerResult:
        """Merge all edges, optionally save the node labels, and return them."""

        for column in self._required_columns:
            if column not in dataframe.columns:
                raise KeyError(f"Column '{column}' not found in dataframe")

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- Component Labeling Started ---")
            print("\n1. Loading edges...")

        t0 = time.time()
        edges = self._read_edges(dataframe)
        if verbose:
            print(f"   Loaded {len(edges)} edges. Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Merging edges into components...")
        clusters = DisjointSet(self.config.node_count or 0)
        counter: defaultdict[str, int] = defaultdict(int)

        iterator: Iterable[Tuple[int, int]] = edges
        if edges and self._use_tqdm:
            iterator = tqdm(edges, desc="   Merging Edges", unit="edge")

        for left, right in iterator:
            grow_to(clusters, max(left, right))
            if clusters.connected(left, right):
                counter["redundant"] += 1
                continue
            clusters.union(left, right)
            counter["merged"] += 1
        if verbose:
            print(f"   Merge Stats: {dict(counter)}")
            print(f"   Done in {time.time() - t0:.2f}s")

        forest: List[WeightedEdge] = []
        if self.config.weight_column is not None:
            t0 = time.time()
            if verbose:
                print("3. Building minimum spanning forest...")
            weights = self._read_weights(dataframe)
            weighted = [(left, right, float(weight)) for (left, right), weight in zip(edges, weights)]
            forest = spanning_forest(len(clusters), weighted)
            if verbose:
                total = sum(weight for _, _, weight in forest)
                print(f"   Kept {len(forest)} edges with total weight {total:g}.")
                print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("4. Assigning component ids...")
        component_map = self._build_component_map(clusters)
        nodes = np.arange(len(clusters), dtype=np.int64)
        roots = np.fromiter((clusters.find(node) for node in range(len(clusters))), dtype=np.int64, count=len(nodes))
        sizes = {root: len(members) for root, members in component_map.items()}
        df = pd.DataFrame({"node": nodes, "component_id": roots})
        df["component_size"] = df["component_id"].map(sizes)

        if verbose:
            print("\n--- Results Summary ---")
            print(f"   - Nodes: {len(clusters)}")
            print(f"   - Components found: {clusters.set_count}")
            largest = sorted(component_map.values(), key=len, reverse=True)
            for idx, members in enumerate(largest[:5]):
                if len(members) <= 1:
                    break
                preview = ", ".join(str(member) for member in members[:5])
                suffix = ", ..." if len(members) > 5 else ""
                print(f"   Component {idx + 1} (Size: {len(members)}): {preview}{suffix}")

        if output_path is not None:
            output_str = str(output_path)
            self._save_dataframe(df, output_str)
            if verbose:
                print(f"\n   Processing complete. Results saved to '{output_str}'")

        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

        elapsed = time.time() - overall_start_time
        summary = ComponentLabelerStats(
            node_count=len(clusters),
            edge_count=len(edges),
            merges=counter["merged"],
            redundant_edges=counter["redundant"],
            component_count=clusters.set_count,
            runtime_seconds=elapsed,
        )

        if verbose:
            print(f"\n--- Component Labeling Finished in {elapsed:.2f} seconds ---")

        return ComponentLabelerResult(dataframe=df, component_map=component_map, stats=summary, forest=forest)

    @property
    def _required_columns(self) -> List[str]:
        columns = [self.config.source_column, self.config.target_column]
        if self.config.weight_column is not None:
            columns.append(self.config.weight_column)
        return columns

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE

    def _read_edges(self, dataframe: pd.DataFrame) -> List[Tuple[int, int]]:
        endpoints: List[List[int]] = []
        for column in (self.config.source_column, self.config.target_column):
            try:
                numeric = pd.to_numeric(dataframe[column], errors="raise")
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Column '{column}' must contain integer node ids") from exc
            if numeric.isna().any() or (numeric % 1 != 0).any():
                raise ValueError(f"Column '{column}' must contain integer node ids")
            if (numeric < 0).any():
                raise ValueError(f"Column '{column}' contains negative node ids")
            endpoints.append(numeric.astype(np.int64).tolist())
        return list(zip(*endpoints))

    def _read_weights(self, dataframe: pd.DataFrame) -> List[float]:
        column = self.config.weight_column
        try:
            weights = pd.to_numeric(dataframe[column], errors="raise")
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Column '{column}' must contain numeric weights") from exc
        if weights.isna().any():
            raise ValueError(f"Column '{column}' must contain numeric weights")
        return weights.astype(float).tolist()

    @staticmethod
    def _build_component_map(clusters: DisjointSet) -> Dict[int, List[int]]:
        component_map: Dict[int, List[int]] = defaultdict(list)
        for node in range(len(clusters)):
            component_map[clusters.find(node)].append(node)
        return dict(component_map)

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
    "ComponentLabeler",
    "ComponentLabelerConfig",
    "ComponentLabelerResult",
    "ComponentLabelerStats",
]
