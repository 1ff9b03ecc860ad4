"""
Parser estructural de planillas de recetas.

- `sections`: catálogo ordenado de encabezados y despacho por sección
- `subrecipes`: registro de sub-recetas y política de matching
- `extractors`: ingredientes, máquinas, calidad y empaque
- `preparation`: router de pasos de la sección 4
- `renumber`: renumeración final 1..N
"""

from .renumber import renumber_recipe, renumber_steps
from .sections import HEADER_CATALOG, classify_row
from .state import ParseState
from .subrecipes import SubRecipeRegistry, match_sub_recipe, normalize_name, slugify

__all__ = [
    "HEADER_CATALOG",
    "ParseState",
    "SubRecipeRegistry",
    "classify_row",
    "match_sub_recipe",
    "normalize_name",
    "renumber_recipe",
    "renumber_steps",
    "slugify",
]
