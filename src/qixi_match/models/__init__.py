"""
Modelos de datos del sistema.

- Entrada: Interest (selección de cada usuario)
- Catálogo: Activity
- Salida: MatchResult (derivado, solo lectura)
"""

from qixi_match.models.interest import Category, Interest
from qixi_match.models.activity import Activity, RecommendedActivity
from qixi_match.models.match_result import (
    CategoryScores,
    MatchResult,
    UniqueInterests,
)

__all__ = [
    # Entrada
    "Category",
    "Interest",
    # Catálogo
    "Activity",
    "RecommendedActivity",
    # Resultado
    "CategoryScores",
    "MatchResult",
    "UniqueInterests",
]
