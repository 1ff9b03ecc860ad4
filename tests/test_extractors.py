from recipe_import_core.parsing.extractors import (
    coerce_quantity,
    extract_ingredient,
    extract_packing,
    extract_quality,
)


def test_coerce_quantity():
    assert coerce_quantity("250") == (250.0, True)
    assert coerce_quantity("1,200.50") == (1200.5, True)
    assert coerce_quantity("2 cups") == (2.0, True)
    assert coerce_quantity(".5") == (0.5, True)
    assert coerce_quantity("a pinch") == (0.0, False)
    assert coerce_quantity("") == (0.0, False)


def test_main_ingredient_gets_numeric_quantity_and_default_unit(make_state):
    state = make_state()

    extract_ingredient(state, ["Mozzarella", "120", "", "Shredded"])

    ingredient = state.recipe.main_ingredients[0]
    assert ingredient.name == "Mozzarella"
    assert ingredient.quantity == 120.0
    assert ingredient.unit == "GM"
    assert ingredient.specifications == "Shredded"
    assert ingredient.sub_recipe_id is None
    assert state.warnings == []


def test_main_ingredient_invalid_quantity_defaults_to_zero(make_state):
    state = make_state()
    state.row_number = 12

    extract_ingredient(state, ["Salt", "to taste", "GM"])

    assert state.recipe.main_ingredients[0].quantity == 0.0
    assert [w.code for w in state.warnings] == ["invalid_quantity"]
    assert state.warnings[0].row == 12
    assert str(state.warnings[0]).startswith("Row 12: ")


def test_sub_recipe_ingredient_keeps_quantity_as_text(make_state):
    state = make_state()
    state.active_sub_index = state.registry.create("Sauce Tomato")

    extract_ingredient(state, ["Tomato", "1 can", "", "Peeled"])
    extract_ingredient(state, ["Basil", "", "leaves"])

    sub_recipe = state.recipe.sub_recipes[0]
    assert sub_recipe.ingredients[0].quantity == "1 can"
    assert sub_recipe.ingredients[0].unit == "GM"
    assert sub_recipe.ingredients[0].notes == "Peeled"
    assert sub_recipe.ingredients[1].quantity == "0"
    assert state.recipe.main_ingredients == []


def test_ingredient_rows_without_quantity_or_unit_are_skipped(make_state):
    state = make_state()

    extract_ingredient(state, ["Ingredient Name", "Quantity", "Unit"])
    extract_ingredient(state, ["Garnish notes"])
    extract_ingredient(state, [""])

    assert state.recipe.main_ingredients == []


def test_quality_mirrors_legacy_fields(make_state):
    state = make_state()

    extract_quality(state, ["Aspect", "Specification", "Check Method"])
    extract_quality(state, ["Crust", "Golden brown", "Visual", "Toasty"])

    assert len(state.recipe.quality_specifications) == 1
    spec = state.recipe.quality_specifications[0]
    assert spec.aspect == spec.parameter == "Crust"
    assert spec.specification == spec.texture == "Golden brown"
    assert spec.check_method == spec.taste_flavor_profile == "Visual"
    assert spec.aroma == "Toasty"


def test_packing_fields_and_service_items(make_state):
    state = make_state()

    extract_packing(state, ["Packing Type", "Pizza box"])
    extract_packing(state, ["Label Requirements", "", "Date + allergens"])
    extract_packing(state, ["Storage Condition", "Hot holding"])
    extract_packing(state, ["Shelf Life", "2 hours"])
    extract_packing(state, ["Service Items", "Napkins; Chili flakes, Oregano"])
    extract_packing(state, ["Unknown key", "ignored"])

    packing = state.recipe.packing_labeling
    assert packing.packing_type == "Pizza box"
    assert packing.label_requirements == "Date + allergens"
    assert packing.storage_condition == "Hot holding"
    assert packing.shelf_life == "2 hours"
    assert packing.service_items == ["Napkins", "Chili flakes", "Oregano"]
