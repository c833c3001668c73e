from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from glotaran_converter.engine.ascii_writer import write
from glotaran_converter.engine.io_common import derive_output_path


class ImporterKind(str, Enum):
    LFP = "lfp"
    DAS6 = "das6"
    R4 = "r4"


@dataclass
class TraceTable:
    headers: List[str]              # first label belongs to the axis column
    body: List[List[str]] = field(default_factory=list)

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.body), len(self.headers)


@dataclass
class ConversionResult:
    output_path: Path
    table: TraceTable
    audit: List[str]


class ImporterPlugin:
    id: str = "base"
    label: str = "Base"
    suffixes: Tuple[str, ...] = ()

    def detect(self, paths: Iterable[str]) -> bool:
        return any(str(p).lower().endswith(self.suffixes) for p in paths)

    def load(self, path: Path, params: Dict[str, Any]) -> TraceTable:
        raise NotImplementedError

    def line_count(self, table: TraceTable) -> int:
        return len(table.headers)

    def output_path(self, source: Path, params: Dict[str, Any]) -> Path:
        explicit = params.get("output_path")
        if explicit:
            return Path(explicit)
        return derive_output_path(source)

    def convert(self, source, params: Optional[Dict[str, Any]] = None) -> Tuple[Path, TraceTable]:
        params = dict(params or {})
        source = Path(source)
        table = self.load(source, params)
        target = self.output_path(source, params)
        write_kwargs = {"encoding": params.get("encoding")}
        if params.get("author"):
            write_kwargs["author"] = params["author"]
        write(table.headers, table.body, self.line_count(table), target, **write_kwargs)
        return target, table
