"""
Ensamblador del registro final de receta.

Cierra una pasada de parseo:
- Deriva `recipe_id` desde el nombre
- Vincula ingredientes principales con sub-recetas del mismo nombre
- Adjunta imágenes placeholder
- Marca campos obligatorios faltantes

También exporta el registro al formato camelCase que espera el colaborador
externo de alta/edición de recetas (`recipe_to_payload`).
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict, List

from ...config import Settings
from ...domain_models import ParseResult, ParseWarning, Recipe
from ...parsing.subrecipes import match_sub_recipe, slugify

logger = logging.getLogger(__name__)

PHOTO_COUNT = 3


def placeholder_photos(recipe_id: str, settings: Settings) -> List[str]:
    """Tres referencias deterministas por `recipe_id` (vacío si no hay id)."""
    if not recipe_id:
        return []
    base = settings.photo_base_url.rstrip("/")
    return [
        f"{base}/{recipe_id}-{n}/{settings.photo_size}"
        for n in range(1, PHOTO_COUNT + 1)
    ]


def missing_required_fields(recipe: Recipe, *, for_save: bool = False) -> List[str]:
    """
    Nombres (camelCase) de campos obligatorios vacíos.

    `daysAvailable` lo completa la revisión humana, por eso solo se exige con
    `for_save=True`.
    """
    missing: List[str] = []
    if not recipe.name.strip():
        missing.append("name")
    if not recipe.recipe_id:
        missing.append("recipeId")
    if for_save and not recipe.days_available:
        missing.append("daysAvailable")
    return missing


def link_sub_recipe_ingredients(recipe: Recipe) -> None:
    """
    Un ingrediente principal que nombra a una sub-receta ("Sauce Tomato 1 KG")
    queda vinculado por `sub_recipe_id`.
    """
    names = [sr.name for sr in recipe.sub_recipes]
    if not names:
        return
    for ingredient in recipe.main_ingredients:
        index = match_sub_recipe(ingredient.name, names)
        if index is not None:
            ingredient.sub_recipe_id = recipe.sub_recipes[index].sub_recipe_id


def assemble_recipe(
    recipe: Recipe,
    warnings: List[ParseWarning],
    settings: Settings,
) -> ParseResult:
    """
    Produce el `ParseResult` final a partir de los hechos acumulados.
    """
    recipe.recipe_id = slugify(recipe.name)
    link_sub_recipe_ingredients(recipe)
    recipe.presentation.photos = placeholder_photos(recipe.recipe_id, settings)

    for sub_recipe in recipe.sub_recipes:
        if not sub_recipe.preparation:
            logger.info(f"Sub-receta sin pasos de preparación: '{sub_recipe.name}'")

    result_warnings = list(warnings)
    missing = missing_required_fields(recipe)
    if "name" in missing:
        result_warnings.append(
            ParseWarning(
                code="missing_required_field",
                message="Recipe name is empty; add a 'Recipe Name' row or fill it in during review.",
            )
        )

    return ParseResult(
        recipe=recipe,
        warnings=result_warnings,
        is_complete=not missing,
    )


# ============================================================
# Export camelCase
# ============================================================

_PAYLOAD_KEYS = {
    "recipe_id": "recipeId",
    "sub_recipe_id": "subRecipeId",
    "recipe_code": "recipeCode",
    "yield_": "yield",
    "days_available": "daysAvailable",
    "prep_time": "prepTime",
    "cook_time": "cookTime",
    "main_ingredients": "mainIngredients",
    "sub_recipes": "subRecipes",
    "required_machines_tools": "requiredMachinesTools",
    "quality_specifications": "qualitySpecifications",
    "packing_labeling": "packingLabeling",
    "check_method": "checkMethod",
    "taste_flavor_profile": "tasteFlavorProfile",
    "packing_type": "packingType",
    "service_items": "serviceItems",
    "label_requirements": "labelRequirements",
    "storage_condition": "storageCondition",
    "shelf_life": "shelfLife",
}


def _camelize(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            _PAYLOAD_KEYS.get(k, k): _camelize(v)
            for k, v in value.items()
            if not (k == "sub_recipe_id" and v is None)
        }
    if isinstance(value, list):
        return [_camelize(v) for v in value]
    return value


def recipe_to_payload(recipe: Recipe) -> Dict[str, Any]:
    """
    Registro en el formato del colaborador externo (claves camelCase).

    Un `sub_recipe_id` ausente en un ingrediente principal se omite.
    """
    return _camelize(asdict(recipe))
