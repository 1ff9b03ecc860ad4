from __future__ import annotations

"""
recipe_import_core.engine
=========================

Orquestador del importador de planillas de recetas.

Expone una **API interna** y estable para correr el flujo completo:

    texto pegado → filas → pasada única (clasificar + extraer) → renumerar → ensamblar

sin preocuparse por HTTP, CLI ni persistencia. El CLI (`cli.py`) y la API
(`api/`) llaman a este módulo; la UI de revisión consume su resultado.

Modelo de ejecución
-------------------
Transformación pura y sincrónica: un string entra, un `ParseResult` sale. El
estado mutable (`ParseState`) vive solo durante la llamada, así que llamadas
concurrentes sobre entradas independientes son seguras sin locks.
"""

import logging
from typing import List, Optional, TypedDict

from .config import Settings, get_settings
from .core.abstractions import DocumentRenderer
from .domain_models import ParseResult, Recipe
from .domains.recipes.builder import assemble_recipe, missing_required_fields, recipe_to_payload
from .domains.recipes.profiles import RecipeProfile, get_profile
from .domains.recipes.renderer import RecipeRenderer
from .ingest import Row, split_rows
from .parsing import ParseState, SubRecipeRegistry, classify_row, renumber_recipe

logger = logging.getLogger(__name__)


def _new_recipe(settings: Settings) -> Recipe:
    return Recipe(
        category=settings.default_category,
        servings=settings.default_servings,
        prep_time=settings.default_time,
        cook_time=settings.default_time,
    )


def parse_rows(rows: List[Row], settings: Optional[Settings] = None) -> ParseResult:
    """
    Pasada única sobre filas ya divididas.

    Útil cuando las filas vienen de otra fuente (por ejemplo un `.xlsx` leído por
    otro componente); `parse_recipe_sheet` es el punto de entrada habitual.
    """
    settings = settings or get_settings()
    recipe = _new_recipe(settings)
    state = ParseState(
        settings=settings,
        recipe=recipe,
        registry=SubRecipeRegistry(recipe.sub_recipes, default_yield=settings.sub_recipe_yield),
    )

    for number, cells in enumerate(rows, start=1):
        state.row_number = number
        classify_row(state, cells)

    renumber_recipe(recipe)

    result = assemble_recipe(recipe, state.warnings, settings)
    logger.info(
        f"Receta '{recipe.name or '(sin nombre)'}': "
        f"{len(recipe.main_ingredients)} ingredientes, "
        f"{len(recipe.sub_recipes)} sub-recetas, "
        f"{len(recipe.preparation)} pasos, "
        f"{len(result.warnings)} advertencias"
    )
    return result


def parse_recipe_sheet(text: str, settings: Optional[Settings] = None) -> ParseResult:
    """
    Parsea el texto copiado de una planilla a un `ParseResult`.

    Raises
    ------
    TooShortInput
        Menos de `settings.min_rows` filas. No se devuelve registro parcial.
    InputTooLarge
        Más de `settings.max_rows` filas (si el límite está activo).
    """
    settings = settings or get_settings()
    rows = split_rows(
        text,
        settings.delimiter,
        min_rows=settings.min_rows,
        max_rows=settings.max_rows,
    )
    return parse_rows(rows, settings)


class RecipeImportRunResult(TypedDict):
    """
    Resultado serializable de una corrida completa, pensado para CLI y API.
    """

    result: ParseResult
    payload: dict
    warnings: List[str]
    missing_for_save: List[str]
    markdown: str


def run_recipe_import(
    *,
    text: str,
    profile: RecipeProfile | str = "full",
    target_yield: float | None = None,
    settings: Optional[Settings] = None,
    renderer: Optional[DocumentRenderer] = None,
) -> RecipeImportRunResult:
    """
    Parsea y además arma el payload camelCase y la hoja de revisión en Markdown.

    NOTA: no escribe archivos; la persistencia queda a cargo del llamador.
    """
    if isinstance(profile, str):
        profile = get_profile(profile)

    result = parse_recipe_sheet(text, settings)
    renderer = renderer or RecipeRenderer()
    markdown = renderer.render_markdown(
        result.recipe,
        profile,
        target_yield=target_yield,
    )

    return RecipeImportRunResult(
        result=result,
        payload=recipe_to_payload(result.recipe),
        warnings=result.warning_messages(),
        missing_for_save=missing_required_fields(result.recipe, for_save=True),
        markdown=markdown,
    )
