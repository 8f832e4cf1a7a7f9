"""
Configuración centralizada del sistema.
Carga variables de entorno y define settings globales.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Encontrar la raíz del proyecto (donde está el .env)
# config.py -> qixi_match/ -> src/ -> project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Configuración principal de la aplicación."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Catálogo
    catalog_path: Optional[Path] = Field(
        None, description="JSON con un catálogo alternativo (None = catálogo por defecto)"
    )

    # Validación
    max_interests_per_user: int = Field(
        20, ge=1, description="Máximo de intereses que puede elegir cada usuario"
    )

    # Recomendaciones
    max_recommendations: int = Field(
        6, ge=0, description="Máximo de actividades recomendadas"
    )
    recommendation_min_score: int = Field(
        30, ge=0, le=100, description="Score mínimo (exclusivo) para recomendar una actividad"
    )

    # Logging
    log_level: str = Field("INFO", description="Nivel de logging")


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración cacheada."""
    return Settings()


# Constantes del sistema
CATEGORIES = ["entertainment", "sports", "food", "travel"]

CATEGORY_DISPLAY_NAMES = {
    "entertainment": "娱乐",
    "sports": "运动",
    "food": "美食",
    "travel": "旅行",
}

# (umbral inferior inclusivo, etiqueta, emoji), de mayor a menor
MATCH_LEVELS = [
    (90, "天作之合", "💕"),
    (80, "心有灵犀", "💖"),
    (70, "志趣相投", "💗"),
    (60, "互相吸引", "💓"),
]

DEFAULT_MATCH_LEVEL = ("需要了解", "💝")
