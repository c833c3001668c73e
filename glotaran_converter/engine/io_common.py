from __future__ import annotations

import csv
import io
import re
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

from glotaran_converter.engine.errors import ParseError

ASCII_SUFFIX = ".ascii"

_LABEL_RE = re.compile(r"\d{3}")


def extract_numeric_label(raw: str) -> Optional[str]:
    """Return the first three-digit run inside a raw column name.

    Instrument software encodes the wavelength channel inside longer column
    names (``"Ch1_550nm"`` -> ``"550"``).  Longer digit runs yield their
    leading three digits.  ``None`` signals that no run was found so each
    importer can apply its own placeholder.
    """

    match = _LABEL_RE.search(raw or "")
    if match is None:
        return None
    return match.group(0)


def derive_output_path(source: Path | str) -> Path:
    return Path(source).with_suffix(ASCII_SUFFIX)


def read_delimited_records(
    path: Path | str,
    delimiter: str = ",",
    encoding: Optional[str] = None,
) -> List[List[str]]:
    """Read every non-blank record of a delimited file, tolerating ragged rows."""

    path = Path(path)
    try:
        with path.open("r", encoding=encoding, newline="") as handle:
            return [row for row in csv.reader(handle, delimiter=delimiter) if row]
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise ParseError(f"Cannot parse file {path}, because {exc}") from exc


def read_tab_table(
    path: Path | str,
    encoding: Optional[str] = None,
) -> Tuple[List[str], List[List[str]]]:
    """Read a tab-delimited export with a header row as raw string cells.

    Every record must carry as many fields as the header row.
    """

    path = Path(path)
    try:
        with path.open("r", encoding=encoding, newline="") as handle:
            text = handle.read()
        widths = [len(row) for row in csv.reader(io.StringIO(text), delimiter="\t") if row]
        df = pd.read_csv(
            io.StringIO(text),
            sep="\t",
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError as exc:
        raise ParseError(f"Cannot parse file {path}, because it has no header record") from exc
    except (OSError, UnicodeDecodeError, csv.Error, pd.errors.ParserError) as exc:
        raise ParseError(f"Cannot parse file {path}, because {exc}") from exc

    for number, width in enumerate(widths[1:], start=2):
        if width != widths[0]:
            raise ParseError(
                f"Cannot parse file {path}, because record {number} has {width} fields, expected {widths[0]}"
            )

    rows = [[str(cell) for cell in row] for row in df.itertuples(index=False, name=None)]
    return rows[0], rows[1:]
