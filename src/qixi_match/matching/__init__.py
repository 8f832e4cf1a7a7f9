"""
Motor de matching.

Calcula la compatibilidad de una pareja a partir de sus intereses
y recomienda actividades de cita.
"""

from qixi_match.matching.engine import MatchingEngine, round_half_up
from qixi_match.matching.labels import (
    category_display_name,
    match_level,
    match_level_badge,
)

__all__ = [
    "MatchingEngine",
    "round_half_up",
    "category_display_name",
    "match_level",
    "match_level_badge",
]
