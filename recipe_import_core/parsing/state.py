"""
Estado mutable de una pasada de parseo.

Vive solo durante una llamada a `parse_recipe_sheet` y nunca se expone afuera:
eso mantiene al parser reentrante.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

from ..config import Settings
from ..domain_models import ParseWarning, Recipe, WarningCode
from .subrecipes import SubRecipeRegistry

Section = Literal["", "info", "ingredients", "machines", "preparation", "quality", "packing"]
"""Sección actual. "" = ninguna (antes del primer encabezado o tras un terminador)."""

# Número de cada sección en los encabezados "2. Ingredients", "3. Required Machines", ...
SECTION_NUMBERS = {
    "info": 1,
    "ingredients": 2,
    "machines": 3,
    "preparation": 4,
    "quality": 5,
    "packing": 6,
}

StepContextKind = Literal["none", "main", "sub", "ambiguous"]


@dataclass
class StepContext:
    """
    A quién pertenecen los pasos entrantes de la sección 4.

    - none: todavía nadie; la primera instrucción suelta se asume de la receta principal.
    - main: receta principal.
    - sub: la sub-receta `sub_index` del registro.
    - ambiguous: encabezado sin destino resoluble; los pasos se omiten.
    """
    kind: StepContextKind = "none"
    sub_index: Optional[int] = None
    # El encabezado no resuelto ya avisó: sus pasos no generan más advertencias
    warned: bool = False

    @classmethod
    def main(cls) -> "StepContext":
        return cls(kind="main")

    @classmethod
    def sub(cls, index: int) -> "StepContext":
        return cls(kind="sub", sub_index=index)

    @classmethod
    def ambiguous(cls, warned: bool = False) -> "StepContext":
        return cls(kind="ambiguous", warned=warned)


@dataclass
class ParseState:
    settings: Settings
    recipe: Recipe
    registry: SubRecipeRegistry
    section: Section = ""
    # Sub-receta activa para los ingredientes (encabezados 2B, 2C, ...)
    active_sub_index: Optional[int] = None
    step_context: StepContext = field(default_factory=StepContext)
    main_step_counter: int = 1
    row_number: int = 0
    warnings: List[ParseWarning] = field(default_factory=list)

    def warn(self, code: WarningCode, message: str, *, row: Optional[int] = None) -> None:
        self.warnings.append(
            ParseWarning(code=code, message=message, row=self.row_number if row is None else row)
        )

    def enter_section(self, section: Section) -> None:
        self.section = section

    def end_section(self) -> None:
        """Cierra la sección actual (terminador o fin de bloque)."""
        self.section = ""
        self.active_sub_index = None
        self.step_context = StepContext()
