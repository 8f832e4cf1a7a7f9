"""
Motor de matching entre dos selecciones de intereses.

Implementa:
- Partición: intereses en común y exclusivos de cada usuario
- Score por categoría: coincidencia ponderada por importancia
- Score general: promedio de categorías + bonus por intereses en común
- Recomendación: ranking de actividades del catálogo
"""

import math
from collections import Counter
from typing import Optional, Sequence

from qixi_match.catalog import Catalog, default_catalog, load_catalog
from qixi_match.config import Settings, get_settings
from qixi_match.models import (
    Category,
    CategoryScores,
    Interest,
    MatchResult,
    RecommendedActivity,
    UniqueInterests,
)


def round_half_up(value: float) -> int:
    """Redondeo .5 hacia arriba, igual que los clientes (no bancario)."""
    return int(math.floor(value + 0.5))


class MatchingEngine:
    """
    Motor de matching puro y determinístico.

    Flujo de `compute_match`:
    1. Separar intereses en común (por id) y exclusivos de cada usuario
    2. Calcular el score de cada una de las 4 categorías
    3. Calcular el score general con el bonus por intereses en común
    4. Rankear las actividades del catálogo y quedarse con las mejores

    No hace I/O ni guarda estado entre llamadas; nunca modifica las
    listas que recibe.
    """

    # Peso de cada componente en el score de una actividad
    CATEGORY_WEIGHT = 0.7
    RELATED_WEIGHT = 0.3
    RELATED_TAG_POINTS = 10

    # Bonus general: 5 puntos por interés en común, tope 20
    COMMON_INTEREST_POINTS = 5
    MAX_COMMON_BONUS = 20

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        if catalog is None:
            if self.settings.catalog_path:
                catalog = load_catalog(self.settings.catalog_path)
            else:
                catalog = default_catalog()
        self.catalog = catalog

    def compute_match(
        self,
        interests_a: Sequence[Interest],
        interests_b: Sequence[Interest],
    ) -> MatchResult:
        """
        Calcula el resultado de matching de una pareja.

        Args:
            interests_a: Intereses del usuario 1 (ya validados)
            interests_b: Intereses del usuario 2 (ya validados)

        Returns:
            MatchResult con scores, intereses y actividades recomendadas
        """
        interests_a = list(interests_a)
        interests_b = list(interests_b)

        common, unique_a, unique_b = self.partition_interests(interests_a, interests_b)
        category_scores = self.calculate_category_scores(interests_a, interests_b)
        overall_score = self.calculate_overall_score(category_scores, common)
        recommended = self.recommend_activities(category_scores, interests_a, interests_b)

        return MatchResult(
            overall_score=overall_score,
            category_scores=category_scores,
            common_interests=common,
            unique_interests=UniqueInterests(user1=unique_a, user2=unique_b),
            recommended_activities=recommended,
        )

    def partition_interests(
        self,
        interests_a: Sequence[Interest],
        interests_b: Sequence[Interest],
    ) -> tuple[tuple[Interest, ...], tuple[Interest, ...], tuple[Interest, ...]]:
        """
        Separa por id los intereses en común y los exclusivos.

        Returns:
            (en común en el orden de A, solo de A, solo de B)
        """
        ids_a = {i.id for i in interests_a}
        ids_b = {i.id for i in interests_b}

        common = tuple(i for i in interests_a if i.id in ids_b)
        unique_a = tuple(i for i in interests_a if i.id not in ids_b)
        unique_b = tuple(i for i in interests_b if i.id not in ids_a)
        return common, unique_a, unique_b

    def calculate_category_scores(
        self,
        interests_a: Sequence[Interest],
        interests_b: Sequence[Interest],
    ) -> CategoryScores:
        """
        Score 0-100 por categoría.

        score = coincidencia (comunes / únicos totales) * importancia
        promedio de los comunes * 100, con tope 100. La importancia va
        de 1 a 5, así que el tope se alcanza seguido.
        """
        importance_a = self._importance_lookup(interests_a)
        importance_b = self._importance_lookup(interests_b)

        scores: dict[str, int] = {}
        for category in Category:
            category_a = [i for i in interests_a if i.category == category]
            category_b = [i for i in interests_b if i.category == category]

            if not category_a and not category_b:
                scores[category.value] = 0
                continue

            ids_b = {i.id for i in category_b}
            common = [i for i in category_a if i.id in ids_b]
            total = len({i.id for i in category_a} | ids_b)

            common_score = len(common) / max(total, 1)
            importance_weight = sum(
                (importance_a.get(i.id, 1) + importance_b.get(i.id, 1)) / 2
                for i in common
            ) / max(len(common), 1)

            scores[category.value] = min(
                100, round_half_up(common_score * importance_weight * 100)
            )

        return CategoryScores(**scores)

    def calculate_overall_score(
        self,
        category_scores: CategoryScores,
        common_interests: Sequence[Interest],
    ) -> int:
        """Promedio de las 4 categorías (las vacías cuentan 0) + bonus, tope 100."""
        category_average = category_scores.total() / len(Category)
        bonus = min(
            self.MAX_COMMON_BONUS,
            len(common_interests) * self.COMMON_INTEREST_POINTS,
        )
        return min(100, round_half_up(category_average + bonus))

    def recommend_activities(
        self,
        category_scores: CategoryScores,
        interests_a: Sequence[Interest],
        interests_b: Sequence[Interest],
    ) -> tuple[RecommendedActivity, ...]:
        """
        Rankea las actividades del catálogo para la pareja.

        Un tag relacionado suma puntos solo si aparece más de una vez
        entre las dos selecciones. Los empates conservan el orden del
        catálogo.
        """
        counts = Counter(i.id for i in [*interests_a, *interests_b])
        min_score = self.settings.recommendation_min_score

        scored = []
        for activity in self.catalog.activities:
            category_score = category_scores.get(activity.category)
            related_score = sum(
                self.RELATED_TAG_POINTS
                for tag in self.catalog.related_tags_for(activity.category)
                if counts[tag] > 1
            )
            match_score = round_half_up(
                category_score * self.CATEGORY_WEIGHT
                + related_score * self.RELATED_WEIGHT
            )
            if match_score > min_score:
                scored.append(RecommendedActivity.from_activity(activity, match_score))

        # sort() es estable también con reverse=True
        scored.sort(key=lambda a: a.match_score, reverse=True)
        return tuple(scored[: self.settings.max_recommendations])

    @staticmethod
    def _importance_lookup(interests: Sequence[Interest]) -> dict[str, int]:
        # Primera aparición de cada id
        lookup: dict[str, int] = {}
        for interest in interests:
            lookup.setdefault(interest.id, interest.importance)
        return lookup
