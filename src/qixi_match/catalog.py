"""
Catálogo estático: intereses seleccionables, tags relacionados y actividades.

El catálogo es configuración: los dos participantes tienen que usar el
mismo para que los scores sean comparables. Se puede reemplazar por un
JSON propio vía `Settings.catalog_path` o pasando un `Catalog` al motor.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from qixi_match.config import get_settings
from qixi_match.models import Activity, Category, Interest

logger = structlog.get_logger()


class Catalog(BaseModel):
    """
    Catálogo inmutable que usa el motor de matching.

    `related_tags` es una tabla distinta del catálogo de intereses
    seleccionables: representa cercanía temática para recomendar
    actividades, aunque hoy su contenido coincida.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    interests: tuple[Interest, ...] = Field(
        default_factory=tuple, description="Intereses seleccionables"
    )
    related_tags: Mapping[Category, tuple[str, ...]] = Field(
        default_factory=dict,
        validate_default=True,
        description="Categoría -> tags para recomendar actividades",
    )
    activities: tuple[Activity, ...] = Field(
        default_factory=tuple, description="Actividades (el orden desempata el ranking)"
    )

    @field_validator("related_tags", mode="after")
    @classmethod
    def _read_only_tags(cls, value):
        return MappingProxyType(dict(value))

    @field_serializer("related_tags")
    def _serialize_tags(self, value) -> dict[str, list[str]]:
        return {Category(k).value: list(tags) for k, tags in value.items()}

    def interest_ids(self, category: Union[Category, str]) -> list[str]:
        """IDs válidos para una categoría."""
        return [i.id for i in self.interests if i.category == category]

    def find_interest(self, interest_id: str) -> Optional[Interest]:
        for interest in self.interests:
            if interest.id == interest_id:
                return interest
        return None

    def related_tags_for(self, category: Union[Category, str]) -> tuple[str, ...]:
        """Tags relacionados de una categoría; vacío si no existe."""
        try:
            return self.related_tags.get(Category(category), ())
        except ValueError:
            return ()

    def interests_by_category(self) -> dict[Category, list[Interest]]:
        grouped: dict[Category, list[Interest]] = {c: [] for c in Category}
        for interest in self.interests:
            grouped[interest.category].append(interest)
        return grouped


def _interest(id: str, name: str, category: Category, icon: str) -> Interest:
    return Interest(id=id, name=name, category=category, icon=icon)


DEFAULT_INTERESTS = (
    # Entretenimiento
    _interest("movies", "看电影", Category.ENTERTAINMENT, "🎬"),
    _interest("music", "听音乐", Category.ENTERTAINMENT, "🎵"),
    _interest("games", "玩游戏", Category.ENTERTAINMENT, "🎮"),
    _interest("concerts", "演唱会", Category.ENTERTAINMENT, "🎤"),
    _interest("theater", "话剧", Category.ENTERTAINMENT, "🎭"),
    _interest("art", "艺术展", Category.ENTERTAINMENT, "🎨"),
    # Deportes
    _interest("basketball", "篮球", Category.SPORTS, "🏀"),
    _interest("football", "足球", Category.SPORTS, "⚽"),
    _interest("tennis", "网球", Category.SPORTS, "🎾"),
    _interest("swimming", "游泳", Category.SPORTS, "🏊"),
    _interest("hiking", "徒步", Category.SPORTS, "🥾"),
    _interest("yoga", "瑜伽", Category.SPORTS, "🧘"),
    # Comida
    _interest("chinese", "中餐", Category.FOOD, "🥘"),
    _interest("western", "西餐", Category.FOOD, "🍝"),
    _interest("japanese", "日料", Category.FOOD, "🍱"),
    _interest("dessert", "甜点", Category.FOOD, "🍰"),
    _interest("coffee", "咖啡", Category.FOOD, "☕"),
    _interest("cooking", "烹饪", Category.FOOD, "👨‍🍳"),
    # Viajes
    _interest("beach", "海滩", Category.TRAVEL, "🏖️"),
    _interest("mountains", "山景", Category.TRAVEL, "🏔️"),
    _interest("city", "城市", Category.TRAVEL, "🏙️"),
    _interest("countryside", "乡村", Category.TRAVEL, "🌾"),
    _interest("museum", "博物馆", Category.TRAVEL, "🏛️"),
    _interest("shopping", "购物", Category.TRAVEL, "🛍️"),
)

DEFAULT_RELATED_TAGS = {
    Category.ENTERTAINMENT: ("movies", "music", "games", "concerts", "theater", "art"),
    Category.SPORTS: ("basketball", "football", "tennis", "swimming", "hiking", "yoga"),
    Category.FOOD: ("chinese", "western", "japanese", "dessert", "coffee", "cooking"),
    Category.TRAVEL: ("beach", "mountains", "city", "countryside", "museum", "shopping"),
}

DEFAULT_ACTIVITIES = (
    Activity(
        id="movie_night",
        name="电影之夜",
        category="entertainment",
        description="一起看一场浪漫的电影，享受二人世界",
        duration="2-3小时",
        cost="中等",
    ),
    Activity(
        id="concert",
        name="演唱会",
        category="entertainment",
        description="参加一场激动人心的演唱会",
        duration="3-4小时",
        cost="较高",
    ),
    Activity(
        id="hiking_date",
        name="徒步约会",
        category="sports",
        description="一起徒步，享受自然风光",
        duration="半天",
        cost="低",
    ),
    Activity(
        id="cooking_class",
        name="烹饪课程",
        category="food",
        description="一起学习制作美食",
        duration="2-3小时",
        cost="中等",
    ),
    Activity(
        id="beach_vacation",
        name="海滩度假",
        category="travel",
        description="享受阳光、沙滩和海浪",
        duration="几天",
        cost="较高",
    ),
    Activity(
        id="museum_visit",
        name="博物馆之旅",
        category="travel",
        description="一起探索文化和历史",
        duration="2-3小时",
        cost="低",
    ),
    Activity(
        id="game_night",
        name="游戏之夜",
        category="entertainment",
        description="一起玩游戏，享受竞争的乐趣",
        duration="2-3小时",
        cost="低",
    ),
    Activity(
        id="coffee_date",
        name="咖啡约会",
        category="food",
        description="在咖啡厅享受悠闲时光",
        duration="1-2小时",
        cost="低",
    ),
)


def default_catalog() -> Catalog:
    """Catálogo incluido con el paquete."""
    return Catalog(
        interests=DEFAULT_INTERESTS,
        related_tags=DEFAULT_RELATED_TAGS,
        activities=DEFAULT_ACTIVITIES,
    )


def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """
    Carga el catálogo.

    Args:
        path: JSON con el catálogo. Si es None se usa `Settings.catalog_path`
            y, si tampoco está configurado, el catálogo por defecto.

    Returns:
        Catalog validado
    """
    if path is None:
        path = get_settings().catalog_path

    if path is None:
        return default_catalog()

    path = Path(path)
    catalog = Catalog.model_validate_json(path.read_text(encoding="utf-8"))
    logger.info(
        "Catálogo cargado",
        path=str(path),
        interests=len(catalog.interests),
        activities=len(catalog.activities),
    )
    return catalog
