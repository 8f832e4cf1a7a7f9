"""
Actividades de cita del catálogo.

Las actividades no tienen score propio: el motor de matching calcula
uno por cada pareja y lo adjunta en `RecommendedActivity`.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Activity(BaseModel):
    """Entrada estática del catálogo de actividades."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(..., min_length=1)
    name: str = Field(..., description="Nombre para mostrar")
    category: str = Field(..., description="Categoría de la actividad")
    description: str = Field(default="")
    duration: str = Field(default="", description="Ej: 2-3小时, 半天")
    cost: str = Field(default="", description="Ej: 低, 中等, 较高")


class RecommendedActivity(Activity):
    """Actividad con el score calculado para una pareja puntual."""

    match_score: int = Field(..., ge=0, description="Score de la actividad para esta pareja")

    @classmethod
    def from_activity(cls, activity: Activity, match_score: int) -> "RecommendedActivity":
        return cls(**activity.model_dump(), match_score=match_score)
