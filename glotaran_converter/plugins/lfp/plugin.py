from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from glotaran_converter.engine.errors import ParseError
from glotaran_converter.engine.io_common import extract_numeric_label, read_delimited_records
from glotaran_converter.engine.plugin_api import ImporterPlugin, TraceTable

PREAMBLE_RECORDS = 8

logger = logging.getLogger(__name__)


class LfpPlugin(ImporterPlugin):
    """Edinburgh Instruments LFP comma-separated exports."""

    id = "lfp"
    label = "Edinburgh LFP"
    suffixes = (".csv",)

    def load(self, path: Path, params: Dict[str, Any]) -> TraceTable:
        records = read_delimited_records(path, delimiter=",", encoding=params.get("encoding"))
        if not records:
            raise ParseError(f"Cannot parse file {path}, because it has no header record")

        headers = [extract_numeric_label(cell) or "" for cell in records[0]]
        body = [list(record) for record in records[1 + PREAMBLE_RECORDS:]]
        if not body:
            logger.debug("%s holds no records after the instrument preamble", path)
        return TraceTable(headers=headers, body=body)

    def line_count(self, table: TraceTable) -> int:
        # The header row carries a blank placeholder over the time axis.
        return len(table.headers) - 1


def import_lfp(source_path, params: Optional[Dict[str, Any]] = None) -> Tuple[Path, TraceTable]:
    output_path, table = LfpPlugin().convert(source_path, params)
    logger.info("Converted LFP export %s -> %s (%d rows)", source_path, output_path, len(table.body))
    return output_path, table
