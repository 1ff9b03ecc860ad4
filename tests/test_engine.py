from dataclasses import asdict

import pytest

from recipe_import_core import TooShortInput, parse_recipe_sheet
from recipe_import_core.config import Settings
from recipe_import_core.domains.recipes.builder import missing_required_fields, recipe_to_payload
from recipe_import_core.engine import parse_rows, run_recipe_import
from recipe_import_core.parsing.preparation import split_step_segments


def _all_step_lists(recipe):
    return [recipe.preparation] + [sr.preparation for sr in recipe.sub_recipes]


def test_parse_full_sheet(pizza_sheet, settings):
    result = parse_recipe_sheet(pizza_sheet, settings)
    recipe = result.recipe

    assert result.warnings == []
    assert result.is_complete is True

    assert recipe.name == "Margherita Pizza"
    assert recipe.recipe_id == "margherita-pizza"
    assert recipe.station == "Pizza"
    assert recipe.recipe_code == "PZ-001"
    assert recipe.yield_ == "1 Pizza (23cm)"
    assert recipe.category == "Main Course"
    assert recipe.prep_time == recipe.cook_time == "30 minutes"

    assert [i.name for i in recipe.main_ingredients] == ["Pizza Dough", "Sauce Tomato 1 KG", "Mozzarella"]
    assert recipe.main_ingredients[0].quantity == 250.0

    assert [sr.name for sr in recipe.sub_recipes] == ["Sauce Tomato", "Basil Oil"]
    assert [i.item for i in recipe.sub_recipes[0].ingredients] == ["Tomato", "Garlic"]
    assert recipe.sub_recipes[0].ingredients[0].quantity == "1000"
    assert recipe.sub_recipes[1].ingredients[1].unit == "ML"

    assert [m.name for m in recipe.required_machines_tools] == ["Pizza Oven"]
    assert recipe.quality_specifications[0].specification == "Golden brown"
    assert recipe.packing_labeling.packing_type == "Pizza box"
    assert recipe.packing_labeling.service_items == ["Napkins", "Chili flakes"]
    assert recipe.packing_labeling.shelf_life == "2 hours"


def test_steps_are_routed_to_their_owner(pizza_sheet, settings):
    recipe = parse_recipe_sheet(pizza_sheet, settings).recipe

    assert [s.instruction for s in recipe.sub_recipes[0].preparation] == [
        "Heat oil.",
        "Add garlic.",
        "Add tomato.",
    ]
    assert [s.instruction for s in recipe.sub_recipes[1].preparation] == ["Blend basil with oil."]
    assert [s.instruction for s in recipe.preparation] == [
        "Stretch dough.",
        "Spread sauce and cheese.",
        "Bake.",
    ]
    assert recipe.preparation[2].hint == "Rotate halfway"


def test_main_ingredient_is_linked_to_sub_recipe(pizza_sheet, settings):
    recipe = parse_recipe_sheet(pizza_sheet, settings).recipe

    linked = {i.name: i.sub_recipe_id for i in recipe.main_ingredients}
    assert linked["Sauce Tomato 1 KG"] == "sauce-tomato"
    assert linked["Mozzarella"] is None


def test_parse_is_idempotent(pizza_sheet, settings):
    first = parse_recipe_sheet(pizza_sheet, settings)
    second = parse_recipe_sheet(pizza_sheet, settings)

    assert asdict(first.recipe) == asdict(second.recipe)
    assert first.warnings == second.warnings


def test_step_lists_are_contiguous(make_sheet, settings):
    text = make_sheet(
        ["Recipe Name", "Gaps"],
        ["2B. Ingredients – Sauce"],
        ["Tomato", "1", "KG"],
        ["4. Step-by-Step Preparation"],
        ["A. Sub-Recipe: Sauce", "Step 2 – Chop. Step 2 – Cook. Step 9 – Season."],
        ["B. Final Recipe:", "Step 3 – Plate."],
        ["", "Step 7 – Serve."],
    )
    recipe = parse_recipe_sheet(text, settings).recipe

    for steps in _all_step_lists(recipe):
        assert [s.step for s in steps] == list(range(1, len(steps) + 1))
    assert [s.instruction for s in recipe.sub_recipes[0].preparation] == ["Chop.", "Cook.", "Season."]


def test_no_step_is_duplicated_across_owners(pizza_sheet, make_sheet, settings):
    text = pizza_sheet + "\n" + make_sheet(
        ["4. Step-by-Step Preparation"],
        ["Sub-Recipe: Mystery Sauce", "Step 1 – Mix. Step 2 – Stir."],
        ["B. Sub-Preparation: Nothing", "Step 1 – Skip me."],
    )
    result = parse_recipe_sheet(text, settings)
    recipe = result.recipe

    segments_in_input = sum(
        len(split_step_segments(line.split("\t")[1]))
        for line in text.split("\n")
        if line.count("\t") >= 1 and "Step " in line.split("\t")[1]
    )
    produced = sum(len(steps) for steps in _all_step_lists(recipe))
    assert produced <= segments_in_input
    assert produced == 3 + 1 + 3
    assert [w.code for w in result.warnings] == [
        "unmatched_sub_recipe_reference",
        "ambiguous_step_skipped",
    ]


def test_empty_input_is_fatal(settings):
    with pytest.raises(TooShortInput):
        parse_recipe_sheet("Recipe Name\tPasta\n", settings)


def test_minimal_recipe(make_sheet, settings):
    text = make_sheet(
        ["Recipe Name", "Pasta al Pomodoro"],
        [""],
        ["4. Step-by-Step Preparation"],
        ["1", "Boil water"],
        ["2", "Add pasta"],
    )
    result = parse_recipe_sheet(text, settings)
    recipe = result.recipe

    assert [(s.step, s.instruction) for s in recipe.preparation] == [(1, "Boil water"), (2, "Add pasta")]
    assert recipe.recipe_id == "pasta-al-pomodoro"
    assert recipe.sub_recipes == []
    assert result.warnings == []


def test_unresolved_reference_scenario(make_sheet, settings):
    text = make_sheet(
        ["Recipe Name", "Pasta"],
        ["2B. Ingredients – Sauce Tomato 1 KG"],
        ["Tomato", "1", "KG"],
        ["4. Step-by-Step Preparation"],
        ["Sub-Recipe: Mystery Sauce", "Step 1 – Mix. Step 2 – Stir."],
    )
    result = parse_recipe_sheet(text, settings)

    assert sum(len(steps) for steps in _all_step_lists(result.recipe)) == 0
    assert len(result.warnings) == 1
    assert result.warnings[0].code == "unmatched_sub_recipe_reference"
    assert result.warnings[0].row == 5


def test_missing_name_is_flagged_not_fatal(make_sheet, settings):
    text = make_sheet(
        ["Station", "Grill"],
        ["2. Ingredients"],
        ["Beef", "200", "GM"],
        ["4. Step-by-Step Preparation"],
        ["1", "Grill the beef"],
    )
    result = parse_recipe_sheet(text, settings)

    assert result.is_complete is False
    assert result.recipe.recipe_id == ""
    assert result.recipe.presentation.photos == []
    assert [w.code for w in result.warnings] == ["missing_required_field"]
    assert missing_required_fields(result.recipe) == ["name", "recipeId"]


def test_placeholder_photos(pizza_sheet, settings):
    recipe = parse_recipe_sheet(pizza_sheet, settings).recipe

    assert recipe.presentation.photos == [
        "https://picsum.photos/seed/margherita-pizza-1/800/600",
        "https://picsum.photos/seed/margherita-pizza-2/800/600",
        "https://picsum.photos/seed/margherita-pizza-3/800/600",
    ]


def test_custom_settings_are_applied(make_sheet):
    settings = Settings(default_unit="ML", sub_recipe_yield="500 GM", min_rows=1)
    text = make_sheet(
        ["Recipe Name", "Dressing"],
        ["2B. Ingredients – Vinaigrette"],
        ["Vinegar", "30", ""],
    )
    recipe = parse_recipe_sheet(text, settings).recipe

    assert recipe.sub_recipes[0].yield_ == "500 GM"
    assert recipe.sub_recipes[0].ingredients[0].unit == "ML"


def test_parse_rows_accepts_pre_split_rows(settings):
    rows = [
        ["Recipe Name", "Toast"],
        ["4. Step-by-Step Preparation"],
        ["1", "Toast the bread"],
    ]
    result = parse_rows(rows, settings)
    assert result.recipe.preparation[0].instruction == "Toast the bread"


def test_payload_uses_camel_case(pizza_sheet, settings):
    payload = recipe_to_payload(parse_recipe_sheet(pizza_sheet, settings).recipe)

    assert payload["recipeId"] == "margherita-pizza"
    assert payload["yield"] == "1 Pizza (23cm)"
    assert payload["daysAvailable"] == []
    assert payload["mainIngredients"][1]["subRecipeId"] == "sauce-tomato"
    assert "subRecipeId" not in payload["mainIngredients"][0]
    assert payload["subRecipes"][0]["subRecipeId"] == "sauce-tomato"
    assert payload["qualitySpecifications"][0]["tasteFlavorProfile"] == "Visual"
    assert payload["packingLabeling"]["serviceItems"] == ["Napkins", "Chili flakes"]
    assert payload["subRecipes"][0]["packingLabeling"] == {
        "packingType": "",
        "serviceItems": [],
        "labelRequirements": "",
        "storageCondition": "",
        "shelfLife": "",
    }


def test_run_recipe_import(pizza_sheet, settings):
    run = run_recipe_import(text=pizza_sheet, profile="summary", settings=settings)

    assert run["result"].recipe.name == "Margherita Pizza"
    assert run["payload"]["name"] == "Margherita Pizza"
    assert run["warnings"] == []
    assert run["missing_for_save"] == ["daysAvailable"]
    assert run["markdown"].startswith("# Margherita Pizza")


def test_run_recipe_import_with_custom_renderer(pizza_sheet, settings):
    class TitleOnly:
        def render_markdown(self, document, profile, target_yield=None):
            return f"{document.name} ({profile.id})"

    run = run_recipe_import(text=pizza_sheet, settings=settings, renderer=TitleOnly())
    assert run["markdown"] == "Margherita Pizza (full_v1)"


def test_run_recipe_import_rejects_unknown_profile(pizza_sheet, settings):
    with pytest.raises(ValueError):
        run_recipe_import(text=pizza_sheet, profile="poster", settings=settings)


def test_later_section_number_stops_ingredients(make_sheet, settings):
    text = make_sheet(
        ["Recipe Name", "Bread"],
        ["2. Ingredients"],
        ["Flour", "100", "GM"],
        ["3. Tools Needed", "Oven", ""],
        ["Knife", "1", "pc"],
    )
    result = parse_recipe_sheet(text, settings)

    assert [i.name for i in result.recipe.main_ingredients] == ["Flour"]
    assert result.warnings == []


def test_later_section_number_stops_preparation(make_sheet, settings):
    text = make_sheet(
        ["Recipe Name", "Pasta"],
        ["4. Step-by-Step Preparation"],
        ["1", "Boil water"],
        ["5. Final Checks", "Taste the sauce"],
        ["", "Plate it"],
    )
    recipe = parse_recipe_sheet(text, settings).recipe

    assert [s.instruction for s in recipe.preparation] == ["Boil water"]
