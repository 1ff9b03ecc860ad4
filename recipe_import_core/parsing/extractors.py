"""
Extractores por sección: convierten una fila ya clasificada en un hecho tipado.

Cada extractor recibe el estado de la pasada y las celdas de la fila, y agrega a
lo sumo un registro. Ninguno levanta excepciones: un valor inválido se reemplaza
por un default seguro y, si corresponde, se registra una advertencia.
"""

from __future__ import annotations

import logging
import re
from typing import List, Tuple

from ..domain_models import (
    Ingredient,
    MachineToolRequirement,
    MainIngredient,
    QualitySpecification,
)
from .state import ParseState

logger = logging.getLogger(__name__)

# Filas de títulos de columna que se copian junto con los datos
INGREDIENT_COLUMN_TITLES = {"Ingredient Name", "Ingredient", "Item"}
MACHINE_COLUMN_TITLES = {"Machine/Tool", "Machine / Tool"}
QUALITY_COLUMN_TITLES = {"Appearance / Parameter", "Parameter", "Aspect"}

PACKING_FIELDS = {
    "Packing Type": "packing_type",
    "Label Requirements": "label_requirements",
    "Storage Condition": "storage_condition",
    "Shelf Life": "shelf_life",
}

_LEADING_NUMBER = re.compile(r"^[-+]?(\d+(\.\d*)?|\.\d+)")


def cell(cells: List[str], index: int) -> str:
    """Celda `index` (0-based) o "" si la fila es más corta."""
    return cells[index] if index < len(cells) else ""


def first_value(cells: List[str]) -> str:
    """Valor de una fila clave/valor: segunda celda, si no la tercera."""
    return cell(cells, 1) or cell(cells, 2)


def coerce_quantity(raw: str) -> Tuple[float, bool]:
    """
    Cantidad numérica a partir de una celda ("1,200.00" → 1200.0).

    Devuelve `(valor, ok)`; si no hay número al inicio → `(0.0, False)`.
    """
    text = (raw or "").strip().replace(",", "")
    match = _LEADING_NUMBER.match(text)
    if not match:
        return 0.0, False
    return float(match.group(0)), True


def extract_ingredient(state: ParseState, cells: List[str]) -> None:
    name = cell(cells, 0)
    quantity = cell(cells, 1)
    unit = cell(cells, 2)
    notes = cell(cells, 3)

    if not name or name in INGREDIENT_COLUMN_TITLES:
        return
    if not (quantity or unit):
        return

    default_unit = state.settings.default_unit

    if state.active_sub_index is not None:
        sub_recipe = state.registry[state.active_sub_index]
        sub_recipe.ingredients.append(
            Ingredient(
                item=name,
                quantity=quantity or "0",
                unit=unit or default_unit,
                notes=notes,
            )
        )
        return

    value, ok = coerce_quantity(quantity)
    if not ok and quantity:
        state.warn(
            "invalid_quantity",
            f"Quantity '{quantity}' for ingredient '{name}' is not a number; using 0.",
        )
    state.recipe.main_ingredients.append(
        MainIngredient(
            name=name,
            quantity=value,
            unit=unit or default_unit,
            specifications=notes,
        )
    )


def extract_machine(state: ParseState, cells: List[str]) -> None:
    name = cell(cells, 0)
    if not name or name in MACHINE_COLUMN_TITLES:
        return
    state.recipe.required_machines_tools.append(
        MachineToolRequirement(
            name=name,
            setting=cell(cells, 1),
            purpose=cell(cells, 2),
            notes=cell(cells, 3),
        )
    )


def extract_quality(state: ParseState, cells: List[str]) -> None:
    aspect = cell(cells, 0)
    if not aspect or aspect in QUALITY_COLUMN_TITLES:
        return
    state.recipe.quality_specifications.append(
        QualitySpecification.from_row(
            aspect=aspect,
            specification=cell(cells, 1),
            check_method=cell(cells, 2),
            extra=cell(cells, 3),
        )
    )


def _split_service_items(value: str) -> List[str]:
    return [item.strip() for item in re.split(r"[,;]", value) if item.strip()]


def extract_packing(state: ParseState, cells: List[str]) -> None:
    key = cell(cells, 0)
    packing = state.recipe.packing_labeling

    if key in PACKING_FIELDS:
        setattr(packing, PACKING_FIELDS[key], first_value(cells))
    elif key == "Service Items":
        packing.service_items = _split_service_items(first_value(cells))
