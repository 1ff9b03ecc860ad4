"""
Renumeración final de pasos.

La numeración de la planilla puede traer huecos o repetidos ("Step 1", "Step 3",
"Step 3"). Al terminar la pasada cada lista queda numerada 1..N en su orden.
"""

from __future__ import annotations

from typing import List

from ..domain_models import PreparationStep, Recipe


def renumber_steps(steps: List[PreparationStep]) -> List[PreparationStep]:
    """Reescribe `step` a 1..N en orden de lista. No toca las instrucciones."""
    for index, step in enumerate(steps, start=1):
        step.step = index
    return steps


def renumber_recipe(recipe: Recipe) -> None:
    """Aplica `renumber_steps` a la receta principal y a cada sub-receta por separado."""
    renumber_steps(recipe.preparation)
    for sub_recipe in recipe.sub_recipes:
        renumber_steps(sub_recipe.preparation)
