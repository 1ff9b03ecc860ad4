"""
Clasificador de secciones.

El catálogo de encabezados es una lista ordenada de reglas `(nombre, predicado,
handler)` evaluadas de arriba hacia abajo sobre la primera celda de cada fila: la
precedencia es dato, no estructura de código. La primera regla que coincide
consume la fila; si ninguna coincide, la fila va al extractor de la sección actual.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..core.abstractions import RowHandler
from .extractors import (
    cell,
    extract_ingredient,
    extract_machine,
    extract_packing,
    extract_quality,
    first_value,
)
from .preparation import route_preparation_row
from .state import SECTION_NUMBERS, ParseState, StepContext

logger = logging.getLogger(__name__)

Predicate = Callable[[str], bool]

DEFAULT_SUB_RECIPE_NAME = "Sub Recipe"

_INFO_HEADER = re.compile(r"^1\.\s*Recipe", re.IGNORECASE)
_INGREDIENTS_HEADER = re.compile(r"^2[A-Za-z]?\.\s*Ingredients", re.IGNORECASE)
_SUB_INGREDIENTS_HEADER = re.compile(r"^2[B-Z]\.", re.IGNORECASE)
_SUB_RECIPE_MENTION = re.compile(r"Sub[-\s]Recipe", re.IGNORECASE)
_MACHINES_HEADER = re.compile(r"^3\.\s*Required Machines", re.IGNORECASE)
_PREPARATION_HEADER = re.compile(r"^4\.\s*Step[-–—\s]*by[-–—\s]*Step", re.IGNORECASE)
_QUALITY_HEADER = re.compile(r"^5\.\s*Quality", re.IGNORECASE)
_PACKING_HEADER = re.compile(r"^6\.\s*Packing", re.IGNORECASE)
_SECTION_NUMBER = re.compile(r"^([1-6])\.")

# Nombre de sub-receta: lo que sigue a un guion (con espacio antes, o raya) y
# antes de un "1 KG" o "(Sub-Recipe)" final.
_SUB_RECIPE_NAME = re.compile(
    r"(?:\s[-–—]|[–—])\s*(.+?)(?:\s*1\s*KG|\s*\(Sub[-\s]Recipe\))?\s*$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class HeaderRule:
    name: str
    matches: Predicate
    handle: RowHandler


def extract_sub_recipe_name(header: str) -> str:
    """
    "2B. Ingredients – Sauce Tomato 1 KG" → "Sauce Tomato".

    Sin nombre extraíble → "Sub Recipe".
    """
    match = _SUB_RECIPE_NAME.search(header or "")
    if match:
        name = match.group(1).strip()
        if name:
            return name
    return DEFAULT_SUB_RECIPE_NAME


# ============================================================
# Handlers: información de la receta
# ============================================================

def _set_name(state: ParseState, cells: List[str]) -> None:
    value = first_value(cells)
    if value:
        state.recipe.name = value


def _set_station(state: ParseState, cells: List[str]) -> None:
    state.recipe.station = first_value(cells)


def _set_code(state: ParseState, cells: List[str]) -> None:
    state.recipe.recipe_code = first_value(cells)


def _set_yield(state: ParseState, cells: List[str]) -> None:
    value = first_value(cells)
    if value:
        state.recipe.yield_ = value
        state.recipe.servings = value


# ============================================================
# Handlers: encabezados de sección
# ============================================================

def _enter_info(state: ParseState, cells: List[str]) -> None:
    state.enter_section("info")
    state.active_sub_index = None


def _enter_ingredients(state: ParseState, cells: List[str]) -> None:
    header = cell(cells, 0)
    state.enter_section("ingredients")

    if _SUB_INGREDIENTS_HEADER.match(header) or _SUB_RECIPE_MENTION.search(header):
        name = extract_sub_recipe_name(header)
        state.active_sub_index = state.registry.create(name)
        logger.debug(f"Ingredientes de sub-receta '{name}' desde: '{header}'")
    else:
        state.active_sub_index = None


def _enter_machines(state: ParseState, cells: List[str]) -> None:
    state.enter_section("machines")
    state.active_sub_index = None
    state.step_context = StepContext()


def _enter_preparation(state: ParseState, cells: List[str]) -> None:
    state.enter_section("preparation")
    state.main_step_counter = 1
    state.active_sub_index = None
    state.step_context = StepContext()


def _enter_quality(state: ParseState, cells: List[str]) -> None:
    state.enter_section("quality")


def _enter_packing(state: ParseState, cells: List[str]) -> None:
    state.enter_section("packing")


def _exact(label: str) -> Predicate:
    return lambda first: first == label


def _pattern(regex: "re.Pattern[str]") -> Predicate:
    return lambda first: bool(regex.match(first))


HEADER_CATALOG: List[HeaderRule] = [
    HeaderRule("recipe_name", _exact("Recipe Name"), _set_name),
    HeaderRule("station", _exact("Station"), _set_station),
    HeaderRule("recipe_code", _exact("Recipe Code"), _set_code),
    HeaderRule("yield", lambda first: "yield" in first.lower(), _set_yield),
    HeaderRule("info", _pattern(_INFO_HEADER), _enter_info),
    HeaderRule("ingredients", _pattern(_INGREDIENTS_HEADER), _enter_ingredients),
    HeaderRule("machines", _pattern(_MACHINES_HEADER), _enter_machines),
    HeaderRule("preparation", _pattern(_PREPARATION_HEADER), _enter_preparation),
    HeaderRule("quality", _pattern(_QUALITY_HEADER), _enter_quality),
    HeaderRule("packing", _pattern(_PACKING_HEADER), _enter_packing),
]

SECTION_EXTRACTORS: Dict[str, RowHandler] = {
    "ingredients": extract_ingredient,
    "machines": extract_machine,
    "preparation": route_preparation_row,
    "quality": extract_quality,
    "packing": extract_packing,
}


def ends_current_section(state: ParseState, cells: List[str]) -> bool:
    """
    True si la fila arranca con el número de una sección posterior ("4. ..."
    estando en ingredientes) aunque no sea un encabezado reconocido. Sus demás
    celdas no se extraen.
    """
    current = SECTION_NUMBERS.get(state.section)
    if current is None:
        return False
    match = _SECTION_NUMBER.match(cell(cells, 0))
    return bool(match) and int(match.group(1)) > current


def classify_row(state: ParseState, cells: List[str]) -> Optional[str]:
    """
    Clasifica y consume una fila. Devuelve el nombre de la regla o sección que la
    procesó, "end" si cerró la sección actual, o None si se ignoró.
    """
    first = cell(cells, 0)

    for rule in HEADER_CATALOG:
        if rule.matches(first):
            rule.handle(state, cells)
            return rule.name

    if ends_current_section(state, cells):
        logger.debug(f"Fin de sección '{state.section}' por fila: '{first}'")
        state.end_section()
        return "end"

    extractor = SECTION_EXTRACTORS.get(state.section)
    if extractor is None:
        return None
    extractor(state, cells)
    return state.section
