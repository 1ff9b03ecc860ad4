"""
Perfiles de presentación para la hoja de revisión de recetas.

Un perfil controla *qué* secciones se muestran y con qué títulos; el mismo
`Recipe` puede imprimirse como resumen (cocina) o completo (revisión/QA).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Literal

Mode = Literal["summary", "full"]


@dataclass(frozen=True)
class RecipeProfile:
    """
    Define un perfil de render.

    Attributes
    ----------
    id:
        Identificador estable del perfil (logging, tests). Ej: "summary_v1".
    mode:
        "summary" | "full".
    label:
        Etiqueta humana del perfil.
    show:
        Claves de secciones a renderizar, alineadas con `RecipeRenderer.render_markdown`.
    titles:
        Clave de sección → título.
    """

    id: str
    mode: Mode
    label: str
    show: List[str]
    titles: Dict[str, str]


SUMMARY_V1 = RecipeProfile(
    id="summary_v1",
    mode="summary",
    label="Summary (kitchen card)",
    show=[
        "info",
        "ingredients",
        "sub_recipes",
        "preparation",
    ],
    titles={
        "info": "Recipe Information",
        "ingredients": "Ingredients",
        "sub_recipes": "Sub-Recipes",
        "preparation": "Preparation",
    },
)

FULL_V1 = RecipeProfile(
    id="full_v1",
    mode="full",
    label="Full (review sheet)",
    show=[
        "info",
        "ingredients",
        "sub_recipes",
        "machines",
        "preparation",
        "quality",
        "packing",
        "photos",
    ],
    titles={
        "info": "1. Recipe Information",
        "ingredients": "2. Ingredients",
        "sub_recipes": "Sub-Recipes",
        "machines": "3. Required Machines & Tools",
        "preparation": "4. Step-by-Step Preparation",
        "quality": "5. Quality Specifications",
        "packing": "6. Packing & Labeling",
        "photos": "Photos",
    },
)

_PROFILES: Dict[str, RecipeProfile] = {
    "summary": SUMMARY_V1,
    "full": FULL_V1,
    SUMMARY_V1.id: SUMMARY_V1,
    FULL_V1.id: FULL_V1,
}


def get_profile(mode: str) -> RecipeProfile:
    """
    Devuelve el perfil para un modo o id ("summary", "full", "full_v1", ...).

    Raises
    ------
    ValueError
        Si el modo no existe.
    """
    key = (mode or "").strip().lower()
    try:
        return _PROFILES[key]
    except KeyError:
        raise ValueError(
            f"Unknown profile '{mode}'. Available: summary, full"
        ) from None
