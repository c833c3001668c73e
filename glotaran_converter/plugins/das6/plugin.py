from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from glotaran_converter.engine.errors import ParseError
from glotaran_converter.engine.io_common import extract_numeric_label, read_tab_table
from glotaran_converter.engine.plugin_api import ImporterPlugin, TraceTable

MISSING_LABEL = "0"
PROMPT_COLUMN = 1

logger = logging.getLogger(__name__)


def time_axis(count: int, sync_delay: float, ns_per_chn: float) -> np.ndarray:
    """Channel times in ns, truncated toward zero, for ``count`` data rows."""

    channels = np.arange(count, dtype=float)
    return np.trunc((channels - float(sync_delay)) * float(ns_per_chn)).astype(np.int64)


class Das6Plugin(ImporterPlugin):
    """Horiba DataStation (DAS6) tab-separated decay exports."""

    id = "das6"
    label = "Horiba DataStation"
    suffixes = (".txt", ".tsv", ".dat")

    def load(self, path: Path, params: Dict[str, Any]) -> TraceTable:
        raw_headers, records = read_tab_table(path, encoding=params.get("encoding"))
        if records and len(raw_headers) <= PROMPT_COLUMN:
            raise ParseError(f"Cannot parse file {path}, because it has no prompt column")

        headers = [extract_numeric_label(cell) or MISSING_LABEL for cell in raw_headers]
        headers.append("")

        times = time_axis(len(records), params.get("sync_delay", 0.0), params.get("ns_per_chn", 1.0))
        body: List[List[str]] = []
        for stamp, record in zip(times, records):
            line = [str(int(stamp))] + list(record)
            # Offset by one for the prepended time cell.
            del line[PROMPT_COLUMN + 1]
            body.append(line)
        logger.debug("Dropped prompt column from %d DataStation records", len(body))
        return TraceTable(headers=headers, body=body)


def import_das6(
    source_path,
    sync_delay: float,
    ns_per_chn: float,
    output_path=None,
    params: Optional[Dict[str, Any]] = None,
) -> Tuple[Path, TraceTable]:
    merged = dict(params or {})
    merged["sync_delay"] = sync_delay
    merged["ns_per_chn"] = ns_per_chn
    if output_path is not None:
        merged["output_path"] = output_path
    target, table = Das6Plugin().convert(source_path, merged)
    logger.info("Converted DataStation export %s -> %s (%d rows)", source_path, target, len(table.body))
    return target, table
