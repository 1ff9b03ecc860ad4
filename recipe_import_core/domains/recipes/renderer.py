"""
Renderer de la hoja de revisión.

Implementa `DocumentRenderer` para renderizar un `Recipe` parseado a Markdown,
listo para que una persona lo revise (o lo imprima) antes de guardarlo.
"""

from __future__ import annotations

from typing import List, Optional

from ...domain_models import PreparationStep, Recipe
from .profiles import RecipeProfile
from .yield_utils import (
    calculate_multiplier,
    format_number,
    format_scaled_yield,
    parse_yield,
    scale_quantity,
)


def _cell(text: str) -> str:
    """Escapa el contenido de una celda de tabla Markdown."""
    return (text or "").replace("|", "\\|").replace("\n", " ").strip()


def _render_steps(steps: List[PreparationStep], lines: List[str]) -> None:
    for step in steps:
        lines.append(f"**{step.step}. {step.instruction}**\n")
        if step.time.strip():
            lines.append(f"- Time: {step.time.strip()}\n")
        if step.critical:
            lines.append("- ⚠️ Critical step\n")
        if step.hint.strip():
            lines.append(f"- 💡 Hint: {step.hint.strip()}\n")
        lines.append("\n")


class RecipeRenderer:
    """
    Renderer para recetas importadas.

    Las secciones a mostrar y sus títulos los decide el `RecipeProfile`.
    """

    def render_markdown(
        self,
        document: Recipe,
        profile: RecipeProfile,
        target_yield: Optional[float] = None,
    ) -> str:
        """
        Renderiza la receta a Markdown según el perfil indicado.

        Si se pasa `target_yield`, las cantidades de los ingredientes principales se
        escalan desde el yield base de la receta (ej: base "1 KG", target 10).
        """
        def title(key: str, fallback: str) -> str:
            t = (profile.titles.get(key, "") or "").strip()
            return t if t else fallback

        base_yield = parse_yield(document.yield_)
        multiplier = 1.0
        if target_yield is not None:
            multiplier = calculate_multiplier(base_yield, target_yield)

        lines: List[str] = []
        lines.append(f"# {document.name or 'Untitled recipe'}\n\n")

        # INFORMACIÓN
        if "info" in profile.show:
            lines.append(f"## {title('info', 'Recipe Information')}\n\n")
            if document.recipe_id:
                lines.append(f"- **Recipe ID**: {document.recipe_id}\n")
            if document.recipe_code.strip():
                lines.append(f"- **Recipe Code**: {document.recipe_code.strip()}\n")
            if document.station.strip():
                lines.append(f"- **Station**: {document.station.strip()}\n")
            if document.category.strip():
                lines.append(f"- **Category**: {document.category.strip()}\n")
            if document.yield_.strip():
                if multiplier != 1.0 and target_yield is not None:
                    scaled = format_scaled_yield(base_yield, target_yield)
                    lines.append(f"- **Yield**: {scaled} (base {document.yield_.strip()})\n")
                else:
                    lines.append(f"- **Yield**: {document.yield_.strip()}\n")
            if document.days_available:
                lines.append(f"- **Days available**: {', '.join(document.days_available)}\n")
            lines.append("\n")

        # INGREDIENTES PRINCIPALES
        if "ingredients" in profile.show and document.main_ingredients:
            lines.append(f"## {title('ingredients', 'Ingredients')}\n\n")
            lines.append("| Ingredient | Quantity | Unit | Specifications |\n")
            lines.append("|---|---|---|---|\n")
            for ing in document.main_ingredients:
                qty = format_number(scale_quantity(ing.quantity, multiplier))
                if multiplier != 1.0:
                    qty = f"{qty} ({format_number(ing.quantity)})"
                lines.append(
                    f"| {_cell(ing.name)} | {qty} | {_cell(ing.unit)} | {_cell(ing.specifications)} |\n"
                )
            lines.append("\n")

        # SUB-RECETAS
        if "sub_recipes" in profile.show and document.sub_recipes:
            lines.append(f"## {title('sub_recipes', 'Sub-Recipes')}\n\n")
            for sub in document.sub_recipes:
                lines.append(f"### {sub.name}")
                if sub.yield_.strip():
                    lines.append(f" ({sub.yield_.strip()})")
                lines.append("\n\n")
                if sub.ingredients:
                    for ing in sub.ingredients:
                        qty_str = f"{ing.quantity} {ing.unit}".strip()
                        lines.append(f"- **{ing.item}**: {qty_str}")
                        if ing.notes.strip():
                            lines.append(f" ({ing.notes.strip()})")
                        lines.append("\n")
                    lines.append("\n")
                if sub.preparation:
                    _render_steps(sub.preparation, lines)
                else:
                    lines.append("_No preparation steps parsed._\n\n")

        # MÁQUINAS
        if "machines" in profile.show and document.required_machines_tools:
            lines.append(f"## {title('machines', 'Required Machines & Tools')}\n\n")
            lines.append("| Machine/Tool | Setting | Purpose | Notes |\n")
            lines.append("|---|---|---|---|\n")
            for m in document.required_machines_tools:
                lines.append(
                    f"| {_cell(m.name)} | {_cell(m.setting)} | {_cell(m.purpose)} | {_cell(m.notes)} |\n"
                )
            lines.append("\n")

        # PREPARACIÓN
        if "preparation" in profile.show and document.preparation:
            lines.append(f"## {title('preparation', 'Preparation')}\n\n")
            _render_steps(document.preparation, lines)

        # CALIDAD
        if "quality" in profile.show and document.quality_specifications:
            lines.append(f"## {title('quality', 'Quality Specifications')}\n\n")
            lines.append("| Aspect | Specification | Check Method |\n")
            lines.append("|---|---|---|\n")
            for q in document.quality_specifications:
                lines.append(
                    f"| {_cell(q.aspect)} | {_cell(q.specification)} | {_cell(q.check_method)} |\n"
                )
            lines.append("\n")

        # EMPAQUE
        packing = document.packing_labeling
        if "packing" in profile.show:
            fields = [
                ("Packing Type", packing.packing_type),
                ("Service Items", ", ".join(packing.service_items)),
                ("Label Requirements", packing.label_requirements),
                ("Storage Condition", packing.storage_condition),
                ("Shelf Life", packing.shelf_life),
            ]
            filled = [(label, value) for label, value in fields if value.strip()]
            if filled:
                lines.append(f"## {title('packing', 'Packing & Labeling')}\n\n")
                for label, value in filled:
                    lines.append(f"- **{label}**: {value.strip()}\n")
                lines.append("\n")

        # FOTOS
        if "photos" in profile.show and document.presentation.photos:
            lines.append(f"## {title('photos', 'Photos')}\n\n")
            for i, url in enumerate(document.presentation.photos, start=1):
                lines.append(f"![{document.name} {i}]({url})\n\n")

        return "".join(lines)
