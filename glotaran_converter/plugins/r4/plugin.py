from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import numpy as np

from glotaran_converter.engine.errors import DataError
from glotaran_converter.engine.io_common import read_tab_table
from glotaran_converter.engine.plugin_api import ImporterPlugin, TraceTable

AXIS_LABEL = "t"
CORNER_CELL = "   "

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

logger = logging.getLogger(__name__)


def wavelength_sort_key(label: str) -> Tuple[int, int]:
    """Order the time axis first, then wavelength channels ascending."""

    if label == AXIS_LABEL:
        return (0, 0)
    if _INTEGER_RE.fullmatch(label) is None:
        raise DataError(f"Column label '{label}' is not an integer wavelength")
    return (1, int(label))


class R4Plugin(ImporterPlugin):
    """Transposed R4 exports: every output row is stored as an input column.

    Columns with an empty header are unused instrument channels and are
    dropped before the remaining ones are sorted by wavelength and turned
    back into row-major order.
    """

    id = "r4"
    label = "R4 (transposed)"
    suffixes = (".txt", ".tsv", ".dat")

    def load(self, path: Path, params: Dict[str, Any]) -> TraceTable:
        raw_headers, records = read_tab_table(path, encoding=params.get("encoding"))

        columns = np.array([raw_headers] + records, dtype=object).T
        kept = [column for column in columns if column[0] != ""]
        if len(kept) != len(columns):
            logger.debug("Dropped %d unlabelled columns from %s", len(columns) - len(kept), path)
        if not kept:
            return TraceTable(headers=[], body=[])

        keys = [wavelength_sort_key(column[0]) for column in kept]
        order = sorted(range(len(kept)), key=keys.__getitem__)
        rows = np.array([kept[idx] for idx in order], dtype=object).T

        headers = [str(cell) for cell in rows[0]]
        headers[0] = CORNER_CELL
        body = [[str(cell) for cell in row] for row in rows[1:]]
        return TraceTable(headers=headers, body=body)


def import_r4(source_path, params: Optional[Dict[str, Any]] = None) -> Tuple[Path, TraceTable]:
    output_path, table = R4Plugin().convert(source_path, params)
    logger.info("Converted R4 export %s -> %s (%d rows)", source_path, output_path, len(table.body))
    return output_path, table
