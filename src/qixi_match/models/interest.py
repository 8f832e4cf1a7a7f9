"""
Modelo de Interés

Un interés elegido por un usuario, con su categoría y la importancia
(1 a 5) que el usuario le asigna antes de enviar su selección.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    """Conjunto cerrado de categorías sobre el que se calcula el score."""

    ENTERTAINMENT = "entertainment"
    SPORTS = "sports"
    FOOD = "food"
    TRAVEL = "travel"


class Interest(BaseModel):
    """
    Interés seleccionado por un usuario.

    Es inmutable: para cambiar la importancia se usa `with_importance`,
    que devuelve una copia editada.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(..., min_length=1, description="ID único dentro del catálogo")
    name: str = Field(..., min_length=1, description="Nombre para mostrar")
    category: Category = Field(..., description="Categoría del interés")
    icon: str = Field(default="", description="Emoji para mostrar (no afecta el score)")
    importance: int = Field(default=1, ge=1, le=5, description="Importancia de 1 a 5")

    def with_importance(self, importance: int) -> "Interest":
        """Devuelve una copia con otra importancia (validada)."""
        return type(self).model_validate({**self.model_dump(), "importance": importance})
