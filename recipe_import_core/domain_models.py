from __future__ import annotations

"""
recipe_import_core.domain_models
================================

Modelos de dominio (dataclasses) que produce el parser de planillas de recetas.

Objetivo
--------
Este módulo define las estructuras "neutras" del sistema:

- La receta (`Recipe`) y sus sub-recetas (`SubRecipe`)
- Ingredientes principales (`MainIngredient`) y de sub-receta (`Ingredient`)
- Pasos de preparación (`PreparationStep`)
- Equipamiento, calidad y empaque
- El resultado de una corrida (`ParseResult`) con sus advertencias (`ParseWarning`)

Principios de diseño
--------------------
- Dataclasses sin lógica pesada: este módulo NO parsea ni hace IO.
- Atributos en snake_case; los nombres camelCase del registro externo los arma
  `domains.recipes.builder.recipe_to_payload`.
- Asimetría heredada del formato de entrada: la cantidad de un ingrediente principal
  es numérica, la de un ingrediente de sub-receta es texto libre. Se preserva.
"""

from dataclasses import dataclass, field
from typing import List, Literal, Optional


# ============================================================
# Ingredientes
# ============================================================

@dataclass
class MainIngredient:
    """
    Ingrediente de la receta principal (sección 2 / 2A).

    Attributes:
        name: Nombre del ingrediente o referencia a una sub-receta.
        quantity: Cantidad numérica (0.0 si la celda no se pudo interpretar).
        unit: Unidad (GM, ML, unit, ...).
        specifications: Notas libres ("Shredded", "Sliced thinly").
        sub_recipe_id: Id de la sub-receta referenciada, si el nombre coincide con una.
    """
    name: str
    quantity: float
    unit: str
    specifications: str = ""
    sub_recipe_id: Optional[str] = None


@dataclass
class Ingredient:
    """
    Ingrediente de una sub-receta (secciones 2B, 2C, ...).

    `quantity` queda como string tal cual vino de la celda.
    """
    item: str
    quantity: str
    unit: str
    notes: str = ""


# ============================================================
# Preparación
# ============================================================

@dataclass
class PreparationStep:
    """
    Paso de preparación.

    Un paso pertenece a exactamente una lista (receta principal o una sub-receta).
    `step` es provisional durante la pasada y se renumera 1..N al final.
    `critical` nunca lo activa el parser.
    """
    step: int
    instruction: str
    time: str = ""
    critical: bool = False
    hint: str = ""


# ============================================================
# Equipamiento, calidad y empaque
# ============================================================

@dataclass
class MachineToolRequirement:
    name: str
    setting: str = ""
    purpose: str = ""
    notes: str = ""


@dataclass
class QualitySpecification:
    """
    Especificación de calidad normalizada.

    Conviven los nombres actuales (`aspect`, `specification`, `check_method`) y los
    legacy (`parameter`, `appearance`, `texture`, `taste_flavor_profile`, `aroma`)
    porque consumidores viejos todavía leen estos últimos.
    """
    aspect: str
    specification: str = ""
    check_method: str = ""
    parameter: str = ""
    appearance: str = ""
    texture: str = ""
    taste_flavor_profile: str = ""
    aroma: str = ""

    @classmethod
    def from_row(
        cls,
        aspect: str,
        specification: str = "",
        check_method: str = "",
        extra: str = "",
    ) -> "QualitySpecification":
        """
        Construye la especificación a partir de las columnas de la planilla,
        espejando cada valor en su alias legacy.
        """
        return cls(
            aspect=aspect,
            specification=specification,
            check_method=check_method,
            parameter=aspect,
            texture=specification,
            taste_flavor_profile=check_method,
            aroma=extra,
        )


@dataclass
class PackingLabeling:
    packing_type: str = ""
    service_items: List[str] = field(default_factory=list)
    label_requirements: str = ""
    storage_condition: str = ""
    shelf_life: str = ""


@dataclass
class Presentation:
    description: str = ""
    instructions: List[str] = field(default_factory=list)
    photos: List[str] = field(default_factory=list)


# ============================================================
# Sub-receta y receta
# ============================================================

@dataclass
class SubRecipe:
    """
    Componente con yield propio dentro de una receta (ej: una salsa).

    Su identidad (`sub_recipe_id`, `name`) no cambia una vez creada; su lista de
    pasos solo crece durante la pasada.
    """
    sub_recipe_id: str
    name: str
    yield_: str = "1 KG"
    ingredients: List[Ingredient] = field(default_factory=list)
    preparation: List[PreparationStep] = field(default_factory=list)
    notes: str = ""
    required_machines_tools: List[MachineToolRequirement] = field(default_factory=list)
    quality_specifications: List[QualitySpecification] = field(default_factory=list)
    packing_labeling: PackingLabeling = field(default_factory=PackingLabeling)


@dataclass
class Recipe:
    """
    Registro final que produce el parser.

    Invariantes al terminar la pasada:
    - `preparation` (y la de cada sub-receta) numerada 1..N sin huecos.
    - `recipe_id` es el slug determinista de `name` ("" si no hay nombre).
    """
    recipe_id: str = ""
    name: str = ""
    category: str = "Main Course"
    station: str = ""
    recipe_code: str = ""
    yield_: str = ""
    servings: str = "1 portion"
    days_available: List[str] = field(default_factory=list)
    prep_time: str = "30 minutes"
    cook_time: str = "30 minutes"
    main_ingredients: List[MainIngredient] = field(default_factory=list)
    sub_recipes: List[SubRecipe] = field(default_factory=list)
    preparation: List[PreparationStep] = field(default_factory=list)
    required_machines_tools: List[MachineToolRequirement] = field(default_factory=list)
    quality_specifications: List[QualitySpecification] = field(default_factory=list)
    packing_labeling: PackingLabeling = field(default_factory=PackingLabeling)
    presentation: Presentation = field(default_factory=Presentation)


# ============================================================
# Resultado de una corrida
# ============================================================

WarningCode = Literal[
    "ambiguous_step_skipped",
    "unmatched_sub_recipe_reference",
    "missing_required_field",
    "invalid_quantity",
]
"""
Anomalías no fatales:

- ambiguous_step_skipped: paso sin dueño claro; se omite en vez de adivinar.
- unmatched_sub_recipe_reference: encabezado "Sub-Recipe: X" sin sub-receta registrada.
- missing_required_field: campo obligatorio vacío (fatal recién al guardar).
- invalid_quantity: cantidad no numérica en un ingrediente principal (se usa 0).
"""


@dataclass(frozen=True)
class ParseWarning:
    code: WarningCode
    message: str
    row: Optional[int] = None

    def __str__(self) -> str:
        if self.row is None:
            return self.message
        return f"Row {self.row}: {self.message}"


@dataclass
class ParseResult:
    """
    Resultado tolerante de `parse_recipe_sheet`.

    El registro puede ser parcial: `is_complete` es False cuando falta algún campo
    obligatorio. La decisión de aceptarlo queda a cargo del llamador.
    """
    recipe: Recipe
    warnings: List[ParseWarning] = field(default_factory=list)
    is_complete: bool = True

    def warning_messages(self) -> List[str]:
        return [str(w) for w in self.warnings]
