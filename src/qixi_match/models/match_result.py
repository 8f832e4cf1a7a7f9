"""
Resultado de matching entre dos usuarios.

Se calcula una única vez por par de selecciones completas y luego
se trata como salida de solo lectura.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from qixi_match.models.activity import RecommendedActivity
from qixi_match.models.interest import Interest


_FROZEN_CAMEL = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class CategoryScores(BaseModel):
    """Score de 0 a 100 por cada una de las 4 categorías."""

    model_config = _FROZEN_CAMEL

    entertainment: int = Field(default=0, ge=0, le=100)
    sports: int = Field(default=0, ge=0, le=100)
    food: int = Field(default=0, ge=0, le=100)
    travel: int = Field(default=0, ge=0, le=100)

    def get(self, category: str) -> int:
        """Score de una categoría; 0 si la categoría no existe."""
        key = getattr(category, "value", category)
        if key not in type(self).model_fields:
            return 0
        return getattr(self, key)

    def total(self) -> int:
        return self.entertainment + self.sports + self.food + self.travel

    def as_dict(self) -> dict[str, int]:
        return self.model_dump()


class UniqueInterests(BaseModel):
    """Intereses que solo eligió uno de los dos usuarios."""

    model_config = _FROZEN_CAMEL

    user1: tuple[Interest, ...] = Field(default_factory=tuple)
    user2: tuple[Interest, ...] = Field(default_factory=tuple)


class MatchResult(BaseModel):
    """Resultado completo del matching de una pareja."""

    model_config = _FROZEN_CAMEL

    overall_score: int = Field(..., ge=0, le=100, description="Score general 0-100")
    category_scores: CategoryScores = Field(default_factory=CategoryScores)
    common_interests: tuple[Interest, ...] = Field(
        default_factory=tuple, description="Intereses en común (orden del usuario 1)"
    )
    unique_interests: UniqueInterests = Field(default_factory=UniqueInterests)
    recommended_activities: tuple[RecommendedActivity, ...] = Field(
        default_factory=tuple, description="Actividades ordenadas por score"
    )

    def to_payload(self) -> dict:
        """Convierte al formato camelCase que comparten los clientes."""
        return self.model_dump(mode="json", by_alias=True)
