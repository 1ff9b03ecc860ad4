"""
Router de la sección 4 (Step-by-Step).

Para cada fila de preparación decide si los pasos que describe van a la receta
principal, a una sub-receta puntual o a ninguna (contexto ambiguo → se omiten con
advertencia). Duplicar un paso en dos dueños es peor que omitirlo.

Formatos que se ven en las planillas
------------------------------------
- Encabezado con letra y dos puntos, con los pasos en la segunda celda:
    "A. Sub-Recipe: Sauce Tomato"   "Step 1 – Heat oil. Step 2 – Add garlic."
    "B. Sub-Preparation: Toppings"  "..."
    "C. Final Recipe:"              "..."
- Filas sueltas de continuación:
    "1"   "Boil water"   "10 min"   "Use a big pot"
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..domain_models import PreparationStep
from .extractors import cell
from .state import ParseState, StepContext

logger = logging.getLogger(__name__)

STEP_COLUMN_TITLES = {"Step Number", "Step", "Step No.", "#"}

# Una instrucción de la primera celda se toma como paso si es así de larga
_LONG_FIRST_CELL = 50

_LETTER_HEADER = re.compile(r"^([A-Z])\.\s*([^:]+?)\s*:\s*(.*)$", re.IGNORECASE | re.DOTALL)
_PLAIN_HEADER = re.compile(r"^([^:]{1,40}?)\s*:\s*(.*)$", re.DOTALL)

_SUB_RECIPE_TITLE = re.compile(r"Sub[-\s]?Recipe\s*(.*)$", re.IGNORECASE)
_SUB_PREP_TITLE = re.compile(r"Sub[-\s]?Prep(?:aration)?\s*(.*)$", re.IGNORECASE)
_MAIN_TITLE = re.compile(r"Final[-\s]Recipe|Main[-\s]Recipe|Assembly", re.IGNORECASE)

_STEP_BOUNDARY = re.compile(r"(?=Step\s+\d+\s*[-–—])", re.IGNORECASE)
_STEP_MARKER = re.compile(r"^Step\s+(\d+)\s*[-–—]\s*(.*)$", re.IGNORECASE | re.DOTALL)
_WRAPPING_QUOTES = re.compile(r'^["“”]|["“”]$')


@dataclass(frozen=True)
class SectionHeader:
    """Encabezado de bloque dentro de la sección 4."""
    letter: str
    title: str
    rest: str


# ============================================================
# Funciones puras
# ============================================================

def parse_section_header(first_cell: str) -> Optional[SectionHeader]:
    """
    Reconoce "A. <título>: <resto>".

    Sin letra solo se acepta si el título es uno de los conocidos
    (Sub-Recipe, Sub-Preparation, Final/Main Recipe, Assembly): una instrucción
    común también puede tener dos puntos.
    """
    text = (first_cell or "").strip()
    if not text:
        return None

    match = _LETTER_HEADER.match(text)
    if match:
        return SectionHeader(
            letter=match.group(1).upper(),
            title=match.group(2).strip(),
            rest=match.group(3).strip().rstrip(":").strip(),
        )

    match = _PLAIN_HEADER.match(text)
    if match:
        title = match.group(1).strip()
        if _SUB_RECIPE_TITLE.search(title) or _SUB_PREP_TITLE.search(title) or _MAIN_TITLE.search(title):
            return SectionHeader(
                letter="",
                title=title,
                rest=match.group(2).strip().rstrip(":").strip(),
            )
    return None


def split_step_segments(text: str) -> List[str]:
    """
    Corta una celda en un segmento por cada marcador "Step N –" embebido.

    Sin marcadores devuelve la celda entera como único segmento.
    """
    cleaned = _WRAPPING_QUOTES.sub("", (text or "").strip()).strip()
    segments = [s.strip() for s in _STEP_BOUNDARY.split(cleaned)]
    return [s for s in segments if s]


def extract_step_number(segment: str) -> Tuple[Optional[int], str]:
    """
    "Step 3 – Add salt" → (3, "Add salt"). Sin marcador → (None, texto).
    """
    match = _STEP_MARKER.match(segment.strip())
    if match:
        return int(match.group(1)), match.group(2).strip()
    return None, segment.strip()


# ============================================================
# Resolución de contexto
# ============================================================

def _apply_header(state: ParseState, header: SectionHeader) -> None:
    registry = state.registry

    sub_match = _SUB_RECIPE_TITLE.search(header.title)
    if sub_match:
        candidate = sub_match.group(1).strip(" -–—") or header.rest
        index = registry.resolve(candidate, header.letter)
        if index is not None:
            state.step_context = StepContext.sub(index)
            logger.debug(f"Bloque '{header.title}' → sub-receta '{registry[index].name}'")
            return

        if candidate:
            reference = f"'{candidate}'"
        elif header.letter:
            reference = f"position {header.letter} ({len(registry)} registered)"
        else:
            reference = "an unnamed sub-recipe"
        state.warn(
            "unmatched_sub_recipe_reference",
            f"No sub-recipe matches {reference}; steps under this header were skipped.",
        )
        logger.warning(f"Sin sub-receta para {reference}; se omiten sus pasos")
        state.step_context = StepContext.ambiguous(warned=True)
        return

    if _MAIN_TITLE.search(header.title):
        logger.debug("Bloque de receta principal")
        state.step_context = StepContext.main()
        return

    prep_match = _SUB_PREP_TITLE.search(header.title)
    if prep_match:
        candidate = prep_match.group(1).strip(" -–—") or header.rest
        index = registry.find(candidate) if candidate else None
        if index is not None:
            state.step_context = StepContext.sub(index)
        else:
            logger.warning(f"Sub-preparación sin sub-receta asignable: '{header.title}'")
            state.step_context = StepContext.ambiguous()
        return

    logger.debug(f"Bloque desconocido, se asume receta principal: '{header.title}'")
    state.step_context = StepContext.main()


# ============================================================
# Alta de pasos
# ============================================================

def _append_steps(state: ParseState, text: str, time: str, hint: str) -> None:
    context = state.step_context

    for segment in split_step_segments(text):
        number, instruction = extract_step_number(segment)
        if not instruction:
            continue

        if context.kind == "sub" and context.sub_index is not None:
            sub_recipe = state.registry[context.sub_index]
            sub_recipe.preparation.append(
                PreparationStep(
                    step=number or len(sub_recipe.preparation) + 1,
                    instruction=instruction,
                    time=time,
                    critical=False,
                    hint=hint,
                )
            )
        elif context.kind == "main":
            if number is None:
                number = state.main_step_counter
                state.main_step_counter += 1
            state.recipe.preparation.append(
                PreparationStep(
                    step=number,
                    instruction=instruction,
                    time=time,
                    critical=False,
                    hint=hint,
                )
            )
        elif not context.warned:
            state.warn(
                "ambiguous_step_skipped",
                f"Skipped step with no clear owner: '{instruction[:50]}'",
            )
            logger.warning(f"Paso omitido (contexto ambiguo): {instruction[:50]}")


def route_preparation_row(state: ParseState, cells: List[str]) -> None:
    """
    Procesa una fila de contenido de la sección 4.
    """
    first = cell(cells, 0)
    text = cell(cells, 1)
    time = cell(cells, 2)
    hint = cell(cells, 3)

    if first in STEP_COLUMN_TITLES:
        return

    header = parse_section_header(first)
    if header is not None:
        _apply_header(state, header)
        if text:
            _append_steps(state, text, time, hint)
        return

    if not (text or len(first) > _LONG_FIRST_CELL):
        return

    if state.step_context.kind == "none":
        # Primera instrucción suelta: se asume de la receta principal
        logger.debug("Contexto de receta principal auto-detectado")
        state.step_context = StepContext.main()

    _append_steps(state, text or first, time, hint)
