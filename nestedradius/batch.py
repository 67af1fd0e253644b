"""Batch calculation of inner radii from a CSV table."""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, Optional, Tuple

import pandas as pd

from .solver import format_radius, solve
from .state import clamp_values

RESULT_COLUMN = "InnerRadius"
DISPLAY_COLUMN = "InnerRadiusDisplay"

RADIUS_CANDIDATES = ("outerradius", "outer_radius", "radius")
DISTANCE_CANDIDATES = ("distance", "padding", "inset")
WIDTH_CANDIDATES = ("width", "outerwidth", "outer_width")
HEIGHT_CANDIDATES = ("height", "outerheight", "outer_height")


def _find_columns(columns) -> Dict[str, Optional[str]]:
    lcmap = {str(c).lower(): c for c in columns}

    def find_col(candidates):
        return next((lcmap[k] for k in candidates if k in lcmap), None)

    return {
        "radius": find_col(RADIUS_CANDIDATES),
        "distance": find_col(DISTANCE_CANDIDATES),
        "width": find_col(WIDTH_CANDIDATES),
        "height": find_col(HEIGHT_CANDIDATES),
    }


def _to_number(value) -> Optional[float]:
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _solve_row(row: pd.Series, cols: Dict[str, Optional[str]]) -> Tuple[Optional[float], Dict[str, float]]:
    radius = _to_number(row.get(cols["radius"]))
    distance = _to_number(row.get(cols["distance"]))
    if radius is None or distance is None or radius < 0 or distance < 0:
        return None, {}

    settled = {}
    if cols["width"] and cols["height"]:
        width = _to_number(row.get(cols["width"]))
        height = _to_number(row.get(cols["height"]))
        if width is None or height is None or width < 0 or height < 0:
            return None, {}
        width, height, radius, distance = clamp_values(width, height, radius, distance)
        settled = {cols["radius"]: radius, cols["distance"]: distance}

    return solve(radius, distance), settled


def calculate_table(df: pd.DataFrame, logger: Optional[logging.Logger] = None) -> pd.DataFrame:
    """Return a copy of df with inner radius columns appended.

    Radius and distance columns are located case-insensitively. When both
    width and height columns are present every row is clamped first, and
    the clamped radius/distance are written back. Rows with missing or
    invalid values get empty results.
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    cols = _find_columns(df.columns)
    if cols["radius"] is None or cols["distance"] is None:
        raise ValueError(
            "CSV needs an outer radius column (%s) and a distance column (%s)"
            % (", ".join(RADIUS_CANDIDATES), ", ".join(DISTANCE_CANDIDATES))
        )

    result = df.copy(deep=True)
    values = []
    displays = []
    skipped = []
    for idx, row in df.iterrows():
        inner, settled = _solve_row(row, cols)
        if inner is None:
            skipped.append(idx)
            logger.warning("Skipping row %s: missing or invalid radius/distance/size", idx)
            values.append(float("nan"))
            displays.append("")
            continue
        for col, val in settled.items():
            if val != _to_number(row.get(col)):
                logger.debug("Row %s: %s clamped to %s", idx, col, val)
                if pd.api.types.is_integer_dtype(result[col]):
                    result[col] = result[col].astype(float)
                elif not pd.api.types.is_float_dtype(result[col]):
                    # Text cells (invalid rows) stay as they are next to the clamped numbers
                    result[col] = result[col].astype(object)
                result.at[idx, col] = val
        values.append(inner)
        displays.append(format_radius(inner))

    result[RESULT_COLUMN] = values
    result[DISPLAY_COLUMN] = displays

    if skipped:
        logger.info("Skipped %d of %d row(s) with invalid values.", len(skipped), len(df))
    return result


def main(
    csv_file_path: str,
    output_csv_path: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> pd.DataFrame:
    if logger is None:
        logger = logging.getLogger(__name__)

    data = pd.read_csv(csv_file_path)
    # Remove leading/trailing whitespaces across the DataFrame
    try:
        data = data.map(lambda x: x.strip() if isinstance(x, str) else x)
    except AttributeError:
        data = data.applymap(lambda x: x.strip() if isinstance(x, str) else x)

    result = calculate_table(data, logger=logger)

    # Default output lives next to the repo under output/<csv stem>_radii.csv
    if not output_csv_path:
        repo_root = Path(__file__).resolve().parents[1]
        output_dir = repo_root / "output"
        output_dir.mkdir(parents=True, exist_ok=True)
        output_csv_path = output_dir / f"{Path(csv_file_path).stem}_radii.csv"

    result.to_csv(str(output_csv_path), index=False)

    solved = int(result[RESULT_COLUMN].notna().sum())
    logger.info(
        "Radius calculation complete!\n\n"
        "Input: %s\n"
        "Output: %s\n"
        "Rows: %d\n"
        "Solved: %d",
        csv_file_path,
        output_csv_path,
        len(result),
        solved,
    )
    return result
