"""
Write a result bundle to an Excel workbook, one sheet per table.
"""

import logging
from pathlib import Path

import pandas as pd

from tfdea_forecasting.modeling.results import LRResult, TFDEAResult

logger = logging.getLogger(__name__)

MAX_SHEET_NAME = 31


def write_workbook(result: TFDEAResult | LRResult, path: str | Path) -> Path:
    """
    Export every table of a result to its own sheet.

    Per-DMU tables keep their index (the DMU names); single-row tables are written
    without it.

    Returns:
        The path written to
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with pd.ExcelWriter(path, engine="xlsxwriter") as writer:
        for name, table in result.tables().items():
            sheet_name = name[:MAX_SHEET_NAME]
            keep_index = name not in ("model", "summary")
            table.to_excel(writer, sheet_name=sheet_name, index=keep_index)
            logger.info(f"Sheet '{sheet_name}' written ({len(table)} rows)")

    return path
