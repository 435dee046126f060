"""Convenience helpers for labeling an edge-list file end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from .pipeline import ComponentLabeler, ComponentLabelerConfig, ComponentLabelerResult


def label_file(
    input_path: str | Path,
    output_path: str | Path,
    config: Optional[ComponentLabelerConfig] = None,
) -> ComponentLabelerResult | None:
    """Label the edges in `input_path` and write one row per node to `output_path`."""

    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        dataframe = _load_dataframe(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except pd.errors.EmptyDataError:
        print(f"ERROR: Input file '{input_path}' is empty.")
        return None
    except ValueError:
        print(f"ERROR: Unsupported file format for '{input_path}'. Please provide a CSV or Excel file.")
        return None

    config = config or ComponentLabelerConfig()
    for column in (config.source_column, config.target_column, config.weight_column):
        if column is not None and column not in dataframe.columns:
            print(f"ERROR: Column '{column}' not found in '{input_path}'.")
            return None

    labeler = ComponentLabeler(config)
    try:
        return labeler.label(dataframe, output_path)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None


def _load_dataframe(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=str)
    if suffix in {".xls", ".xlsx"}:
        return pd.read_excel(path, dtype=str)
    raise ValueError("unsupported format")
