from glotaran_converter.engine.recipe_model import ConversionRecipe


def test_das6_requires_acquisition_parameters():
    recipe = ConversionRecipe(module="das6")
    errs = recipe.validate()
    assert "Sync delay is required for DataStation imports" in errs
    assert "Nanoseconds per channel is required for DataStation imports" in errs


def test_das6_parameters_must_be_numeric():
    recipe = ConversionRecipe(module="das6", params={"sync_delay": "late", "ns_per_chn": "0.05"})
    assert recipe.validate() == ["Sync delay must be numeric"]


def test_unknown_module_is_reported():
    assert ConversionRecipe(module="opus").validate() == ["Unknown importer 'opus'"]


def test_author_must_be_single_line():
    recipe = ConversionRecipe(module="lfp", params={"author": "first\nsecond"})
    assert recipe.validate() == ["Author label must be a single non-empty line"]


def test_lfp_recipe_without_params_is_valid():
    assert ConversionRecipe().validate() == []
