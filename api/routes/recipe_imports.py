"""
Endpoint para parsear recetas pegadas desde una planilla.

Este endpoint maneja:
- POST /api/v1/recipe-imports/parse: Parsear el texto y devolver el registro

No persiste nada: el guardado lo hace el colaborador de alta/edición de recetas
una vez que la persona revisó el resultado.
"""

import logging

from fastapi import APIRouter, HTTPException

from recipe_import_core.engine import run_recipe_import
from recipe_import_core.errors import RecipeImportError

from ..models.requests import RecipeImportRequest, RecipeImportResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/recipe-imports", tags=["recipe-imports"])


@router.post("/parse", response_model=RecipeImportResponse)
def parse_recipe_import(request: RecipeImportRequest):
    """
    Parsea una receta pegada desde Excel/Sheets.

    Args:
        request: Texto pegado, perfil de la hoja de revisión y yield objetivo opcional.

    Returns:
        RecipeImportResponse con el registro camelCase, advertencias y Markdown.

    Raises:
        HTTPException 400: Entrada demasiado corta o demasiado larga.
    """
    try:
        run = run_recipe_import(
            text=request.text,
            profile=request.profile.value,
            target_yield=request.target_yield,
        )
    except RecipeImportError as e:
        logger.info(f"Importación rechazada: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e

    return RecipeImportResponse(
        recipe=run["payload"],
        warnings=run["warnings"],
        is_complete=run["result"].is_complete,
        missing_for_save=run["missing_for_save"],
        markdown=run["markdown"],
    )
