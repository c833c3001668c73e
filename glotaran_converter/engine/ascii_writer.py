from __future__ import annotations

import csv
import logging
import os
from pathlib import Path
from typing import Iterable, Optional, Sequence

from glotaran_converter.engine.errors import IoError

DEFAULT_AUTHOR = "Eduardo Gonik"
FORMAT_MARKER = "wavelength explicit"

logger = logging.getLogger(__name__)


def write(
    headers: Sequence[str],
    body: Iterable[Sequence[str]],
    line_count: int,
    output_path: Path | str,
    author: str = DEFAULT_AUTHOR,
    encoding: Optional[str] = None,
) -> Path | str:
    """Append a Glotaran wavelength-explicit trace to ``output_path``.

    The file is never truncated: converting twice into the same path leaves
    both traces in it.  The preamble and the tab-delimited table are written
    through two separate append handles.
    """

    filename = os.fspath(output_path)
    try:
        with open(filename, "a", encoding=encoding) as handle:
            handle.write(f"{filename}\n")
            handle.write(f"{author}\n")
            handle.write(f"{FORMAT_MARKER}\n")
            handle.write(f"intervalnr {line_count - 1}\n")
            handle.flush()

        rows = 0
        with open(filename, "a", encoding=encoding, newline="") as handle:
            writer = csv.writer(handle, delimiter="\t", lineterminator="\n")
            writer.writerow(headers)
            for row in body:
                writer.writerow(row)
                rows += 1
            handle.flush()
    except (OSError, UnicodeEncodeError) as exc:
        raise IoError(f"Cannot write trace file {filename}: {exc}") from exc

    logger.debug("Appended %d rows x %d columns to %s", rows, len(headers), filename)
    return output_path
