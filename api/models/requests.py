"""
Modelos de request/response para la API.

Estos modelos definen la estructura esperada de los requests HTTP,
validando tipos y valores antes de pasarlos al core.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class RecipeProfileMode(str, Enum):
    """Perfil de la hoja de revisión a renderizar."""

    SUMMARY = "summary"
    FULL = "full"


class RecipeImportRequest(BaseModel):
    """
    Request para parsear una receta pegada desde una planilla.

    Este modelo valida los parámetros antes de llamar a `engine.run_recipe_import`.
    """

    text: str = Field(..., description="Texto copiado de la planilla (celdas separadas por tab)")
    profile: RecipeProfileMode = Field(
        default=RecipeProfileMode.FULL,
        description="Perfil de la hoja de revisión (summary o full)",
    )
    target_yield: Optional[float] = Field(
        default=None,
        gt=0,
        description="Yield objetivo para escalar cantidades en el Markdown",
    )


class RecipeImportResponse(BaseModel):
    """
    Response de un parseo.

    El registro puede ser parcial: la UI muestra `warnings` y pide completar
    `missing_for_save` antes de guardar.
    """

    recipe: dict = Field(..., description="Registro de receta en formato camelCase")
    warnings: List[str] = Field(
        default_factory=list,
        description="Advertencias no fatales, en orden de aparición",
    )
    is_complete: bool = Field(..., description="False si falta algún campo obligatorio")
    missing_for_save: List[str] = Field(
        default_factory=list,
        description="Campos obligatorios a completar antes de guardar",
    )
    markdown: str = Field(..., description="Hoja de revisión renderizada")
