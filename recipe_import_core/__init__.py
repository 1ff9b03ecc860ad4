"""
recipe_import_core
==================

Parser tolerante de recetas copiadas desde una planilla (Excel / Google Sheets).

Uso típico:

    from recipe_import_core import parse_recipe_sheet

    result = parse_recipe_sheet(pasted_text)
    result.recipe          # Recipe con sub-recetas, pasos, ingredientes, ...
    result.warning_messages()
"""

from .domain_models import ParseResult, ParseWarning, Recipe
from .engine import parse_recipe_sheet, parse_rows, run_recipe_import
from .errors import InputTooLarge, RecipeImportError, TooShortInput

__all__ = [
    "InputTooLarge",
    "ParseResult",
    "ParseWarning",
    "Recipe",
    "RecipeImportError",
    "TooShortInput",
    "parse_recipe_sheet",
    "parse_rows",
    "run_recipe_import",
]
