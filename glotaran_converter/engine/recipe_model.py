from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any

import yaml

KNOWN_MODULES = ("lfp", "das6", "r4")
PRESET_DIR = Path(__file__).resolve().parent.parent / "config" / "presets"


@dataclass
class ConversionRecipe:
    module: str = "lfp"
    params: Dict[str, Any] = field(default_factory=dict)
    version: str = "0.1.0"

    @classmethod
    def from_yaml(cls, path) -> "ConversionRecipe":
        with Path(path).open("r", encoding="utf-8") as handle:
            content = yaml.safe_load(handle) or {}
        if not isinstance(content, dict):
            raise ValueError(f"Recipe file {path} must contain a mapping")
        return cls(
            module=str(content.get("module", cls.module)),
            params=dict(content.get("params") or {}),
            version=str(content.get("version", cls.version)),
        )

    @classmethod
    def preset(cls, name: str) -> "ConversionRecipe":
        return cls.from_yaml(PRESET_DIR / f"{name}.yaml")

    def to_yaml(self, path) -> None:
        data = {"module": self.module, "version": self.version, "params": self.params}
        with Path(path).open("w", encoding="utf-8") as handle:
            yaml.safe_dump(data, handle, sort_keys=False)

    def validate(self) -> list[str]:
        errs = []
        if self.module not in KNOWN_MODULES:
            errs.append(f"Unknown importer '{self.module}'")

        if self.module == "das6":
            for key, label in (("sync_delay", "Sync delay"), ("ns_per_chn", "Nanoseconds per channel")):
                value = self.params.get(key)
                if value is None:
                    errs.append(f"{label} is required for DataStation imports")
                    continue
                try:
                    float(value)
                except (TypeError, ValueError):
                    errs.append(f"{label} must be numeric")

        author = self.params.get("author")
        if author is not None and ("\n" in str(author) or not str(author).strip()):
            errs.append("Author label must be a single non-empty line")

        output_path = self.params.get("output_path")
        if output_path is not None and not str(output_path).strip():
            errs.append("Output path must not be blank")
        return errs
