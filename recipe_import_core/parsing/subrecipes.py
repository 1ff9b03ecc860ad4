"""
Registro de sub-recetas y política de matching.

`normalize_name` y `match_sub_recipe` son funciones puras: la política de matching
se testea sin pasar por el router de preparación.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from ..domain_models import SubRecipe

logger = logging.getLogger(__name__)

_QUALIFIER_KG = re.compile(r"\s*1\s*KG", re.IGNORECASE)
_QUALIFIER_SUB = re.compile(r"\s*\(Sub[-\s]Recipe\)", re.IGNORECASE)
_NON_SLUG = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """
    Identificador apto para máquina: minúsculas y cada tramo no alfanumérico
    colapsado a un solo guion.

    >>> slugify("Sauce Tomato 1 KG")
    'sauce-tomato-1-kg'
    """
    return _NON_SLUG.sub("-", (name or "").lower())


def normalize_name(name: str) -> str:
    """
    Forma comparable de un nombre: sin calificadores "1 KG" / "(Sub-Recipe)",
    en minúsculas y con espacios colapsados.
    """
    text = _QUALIFIER_KG.sub("", name or "")
    text = _QUALIFIER_SUB.sub("", text)
    return " ".join(text.lower().split())


def match_sub_recipe(candidate: str, names: Sequence[str]) -> Optional[int]:
    """
    Índice del primer nombre cuyo normalizado contiene al candidato o está
    contenido en él. None si el candidato queda vacío o nada coincide.
    """
    wanted = normalize_name(candidate)
    if not wanted:
        return None

    for index, name in enumerate(names):
        have = normalize_name(name)
        if not have:
            continue
        if wanted in have or have in wanted:
            return index
    return None


def positional_index(letter: str, count: int) -> Optional[int]:
    """
    A → 0, B → 1, ... None si la letra no es válida o cae fuera de rango.
    """
    letter = (letter or "").strip().upper()
    if len(letter) != 1 or not "A" <= letter <= "Z":
        return None
    index = ord(letter) - ord("A")
    if index >= count:
        return None
    return index


class SubRecipeRegistry:
    """
    Sub-recetas en orden de creación.

    La lista es compartida con `Recipe.sub_recipes`: registrar acá es agregar a la receta.
    """

    def __init__(self, items: List[SubRecipe], default_yield: str = "1 KG"):
        self._items = items
        self._default_yield = default_yield

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> SubRecipe:
        return self._items[index]

    def names(self) -> List[str]:
        return [sr.name for sr in self._items]

    def create(self, name: str) -> int:
        """Crea y registra una sub-receta; devuelve su índice."""
        sub_recipe = SubRecipe(
            sub_recipe_id=slugify(name),
            name=name,
            yield_=self._default_yield,
        )
        self._items.append(sub_recipe)
        logger.debug(f"Sub-receta creada: '{name}' (#{len(self._items)})")
        return len(self._items) - 1

    def find(self, candidate: str) -> Optional[int]:
        return match_sub_recipe(candidate, self.names())

    def resolve(self, candidate: str, letter: str = "") -> Optional[int]:
        """
        Resuelve una referencia a sub-receta.

        Con nombre → solo matching por nombre (un nombre que no coincide NO cae al
        fallback posicional). Sin nombre → posición de la letra del encabezado.
        """
        if (candidate or "").strip():
            index = self.find(candidate)
            if index is None:
                logger.debug(f"Sin sub-receta para '{candidate}'. Disponibles: {self.names()}")
            return index

        index = positional_index(letter, len(self._items))
        if index is None and letter:
            logger.debug(
                f"Letra {letter} fuera de rango para {len(self._items)} sub-receta(s)"
            )
        return index
