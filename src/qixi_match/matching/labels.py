"""Etiquetas para mostrar scores y categorías."""

from qixi_match.config import CATEGORY_DISPLAY_NAMES, DEFAULT_MATCH_LEVEL, MATCH_LEVELS


def _level(score: float) -> tuple[str, str]:
    for threshold, label, emoji in MATCH_LEVELS:
        if score >= threshold:
            return label, emoji
    return DEFAULT_MATCH_LEVEL


def match_level(score: float) -> str:
    """Nivel de match para un score (umbrales 90/80/70/60 inclusivos)."""
    return _level(score)[0]


def match_level_badge(score: float) -> str:
    """Nivel con su emoji, como se muestra en los resultados."""
    label, emoji = _level(score)
    return f"{label} {emoji}"


def category_display_name(category: str) -> str:
    """Nombre para mostrar; categorías desconocidas se devuelven tal cual."""
    key = getattr(category, "value", category)
    return CATEGORY_DISPLAY_NAMES.get(key, key)
