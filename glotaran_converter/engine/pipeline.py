from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Type

from glotaran_converter.engine.audit import log_step, start_audit
from glotaran_converter.engine.plugin_api import ConversionResult, ImporterKind, ImporterPlugin
from glotaran_converter.engine.recipe_model import ConversionRecipe
from glotaran_converter.plugins.das6.plugin import Das6Plugin
from glotaran_converter.plugins.lfp.plugin import LfpPlugin
from glotaran_converter.plugins.r4.plugin import R4Plugin

logger = logging.getLogger(__name__)

PLUGINS: Dict[ImporterKind, Type[ImporterPlugin]] = {
    ImporterKind.LFP: LfpPlugin,
    ImporterKind.DAS6: Das6Plugin,
    ImporterKind.R4: R4Plugin,
}


def get_plugin(kind: ImporterKind | str) -> ImporterPlugin:
    return PLUGINS[ImporterKind(kind)]()


def convert(
    kind: ImporterKind | str,
    source_path: Path | str,
    recipe: Optional[ConversionRecipe] = None,
) -> ConversionResult:
    """Run one importer on ``source_path`` and append the trace to its output."""

    kind = ImporterKind(kind)
    if recipe is None:
        recipe = ConversionRecipe(module=kind.value)
    errs = recipe.validate()
    if errs:
        raise ValueError("; ".join(errs))
    if recipe.module != kind.value:
        logger.warning("Recipe targets '%s' but '%s' importer was requested", recipe.module, kind.value)

    plugin = get_plugin(kind)
    audit = start_audit(plugin.label, source_path)
    if not plugin.detect([source_path]):
        log_step(audit, f"Unexpected suffix for {plugin.label}: {Path(source_path).suffix or '(none)'}")

    output_path, table = plugin.convert(source_path, recipe.params)
    rows, cols = table.shape
    log_step(audit, f"Parsed {rows} rows x {cols} columns")
    log_step(audit, f"intervalnr {plugin.line_count(table) - 1}")
    log_step(audit, f"Appended trace to {output_path}")
    logger.info("%s conversion of %s finished", plugin.label, source_path)
    return ConversionResult(output_path=output_path, table=table, audit=audit)
