"""Convert instrument exports into Glotaran wavelength-explicit ASCII traces."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import yaml

from glotaran_converter.engine.errors import ConversionError
from glotaran_converter.engine.pipeline import convert
from glotaran_converter.engine.plugin_api import ImporterKind
from glotaran_converter.engine.recipe_model import ConversionRecipe

logger = logging.getLogger("glotaran_converter")


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "kind",
        choices=[kind.value for kind in ImporterKind],
        help="Importer matching the instrument that produced the export.",
    )
    parser.add_argument("source", help="Instrument export to convert.")
    parser.add_argument(
        "--preset",
        help="YAML recipe file; bare names resolve to the bundled presets.",
    )
    parser.add_argument(
        "--output",
        help="Trace file to append to (default: source with an .ascii suffix).",
    )
    parser.add_argument(
        "--sync-delay",
        dest="sync_delay",
        type=float,
        help="DataStation channel offset of the excitation pulse.",
    )
    parser.add_argument(
        "--ns-per-chn",
        dest="ns_per_chn",
        type=float,
        help="DataStation channel width in nanoseconds.",
    )
    parser.add_argument(
        "--author",
        help="Author label written on the second preamble line.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every conversion step.",
    )
    return parser.parse_args(argv)


def build_recipe(args: argparse.Namespace) -> ConversionRecipe:
    if args.preset:
        if args.preset.endswith((".yaml", ".yml")):
            recipe = ConversionRecipe.from_yaml(args.preset)
        else:
            recipe = ConversionRecipe.preset(args.preset)
        recipe.module = args.kind
    else:
        recipe = ConversionRecipe(module=args.kind)

    overrides = {
        "output_path": args.output,
        "sync_delay": args.sync_delay,
        "ns_per_chn": args.ns_per_chn,
        "author": args.author,
    }
    recipe.params.update({key: value for key, value in overrides.items() if value is not None})
    return recipe


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        recipe = build_recipe(args)
        result = convert(args.kind, args.source, recipe)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.error("Invalid recipe: %s", exc)
        return 1
    except ConversionError as exc:
        logger.error("%s", exc)
        return 1

    for line in result.audit:
        logger.debug(line)
    sys.stdout.write(f"{result.output_path}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
