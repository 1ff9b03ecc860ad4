"""
Fixtures compartidas: planillas de ejemplo tal como llegan al pegarlas desde Excel.
"""

from typing import Callable, List

import pytest

from recipe_import_core.config import Settings
from recipe_import_core.domain_models import Recipe
from recipe_import_core.parsing import ParseState, SubRecipeRegistry


def _to_text(rows: List[List[str]]) -> str:
    return "\n".join("\t".join(cells) for cells in rows)


PIZZA_ROWS = [
    ["Recipe Name", "Margherita Pizza"],
    ["Station", "Pizza"],
    ["Recipe Code", "PZ-001"],
    ["Yield", "1 Pizza (23cm)"],
    [""],
    ["2A. Ingredients – Main Recipe"],
    ["Ingredient Name", "Quantity", "Unit", "Specifications"],
    ["Pizza Dough", "250", "GM", "Rolled 23cm"],
    ["Sauce Tomato 1 KG", "80", "GM", ""],
    ["Mozzarella", "120", "GM", "Shredded"],
    [""],
    ["2B. Ingredients – Sauce Tomato 1 KG"],
    ["Ingredient Name", "Quantity", "Unit", "Notes"],
    ["Tomato", "1000", "GM", "Peeled"],
    ["Garlic", "20", "GM", ""],
    [""],
    ["2C. Ingredients – Basil Oil (Sub-Recipe)"],
    ["Basil", "50", "GM"],
    ["Olive Oil", "200", "ML"],
    [""],
    ["3. Required Machines & Tools"],
    ["Machine/Tool", "Setting", "Purpose", "Notes"],
    ["Pizza Oven", "450C", "Baking", "Preheat 30 min"],
    [""],
    ["4. Step-by-Step Preparation"],
    ["Step Number", "Instruction", "Time", "Hint"],
    ["A. Sub-Recipe: Sauce Tomato", "Step 1 – Heat oil. Step 2 – Add garlic. Step 3 – Add tomato.", "20 min"],
    ["B. Sub-Recipe:", "Step 1 – Blend basil with oil.", "5 min"],
    ["C. Final Recipe:", "Step 1 – Stretch dough.", "2 min"],
    ["", "Step 2 – Spread sauce and cheese.", "1 min"],
    ["", "Step 3 – Bake.", "3 min", "Rotate halfway"],
    [""],
    ["5. Quality Specifications"],
    ["Aspect", "Specification", "Check Method"],
    ["Crust", "Golden brown", "Visual"],
    [""],
    ["6. Packing & Labeling"],
    ["Packing Type", "Pizza box"],
    ["Service Items", "Napkins, Chili flakes"],
    ["Shelf Life", "2 hours"],
]


@pytest.fixture
def settings() -> Settings:
    """Settings por defecto, independientes del entorno."""
    return Settings()


@pytest.fixture
def make_sheet() -> Callable[..., str]:
    """Arma el texto pegado a partir de filas de celdas."""

    def _make(*rows: List[str]) -> str:
        return _to_text(list(rows))

    return _make


@pytest.fixture
def pizza_sheet() -> str:
    return _to_text(PIZZA_ROWS)


@pytest.fixture
def make_state(settings: Settings) -> Callable[[], ParseState]:
    """Estado de pasada vacío para ejercitar handlers fila por fila."""

    def _make() -> ParseState:
        recipe = Recipe()
        return ParseState(
            settings=settings,
            recipe=recipe,
            registry=SubRecipeRegistry(recipe.sub_recipes, default_yield=settings.sub_recipe_yield),
        )

    return _make
