"""
Validación de la selección de intereses.

Se ejecuta antes de llamar al motor de matching: el motor asume que
recibe selecciones válidas y no repite estos chequeos.
"""

from typing import Any, Iterable, Optional, Sequence

import structlog
from pydantic import ValidationError

from qixi_match.catalog import Catalog
from qixi_match.config import get_settings
from qixi_match.models import Interest

logger = structlog.get_logger()


class InterestValidationError(ValueError):
    """La selección de intereses no cumple las precondiciones del motor."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def validate_importance(value: Any) -> int:
    """
    Valida una importancia de 1 a 5.

    Acepta enteros o strings numéricos ("3"); rechaza bools y floats
    con decimales.
    """
    if isinstance(value, bool):
        raise InterestValidationError("重要程度必须是1-5之间的整数")
    if isinstance(value, float) and not value.is_integer():
        raise InterestValidationError("重要程度必须是1-5之间的整数")
    try:
        importance = int(str(value).strip()) if isinstance(value, str) else int(value)
    except (ValueError, TypeError):
        raise InterestValidationError("重要程度必须是1-5之间的整数")

    if importance < 1 or importance > 5:
        raise InterestValidationError("重要程度必须是1-5之间的整数")
    return importance


def validate_interests(
    interests: Sequence[Interest],
    catalog: Catalog,
    max_interests: Optional[int] = None,
) -> list[Interest]:
    """
    Chequea tamaño de la selección y pertenencia al catálogo.

    Args:
        interests: Selección de un usuario
        catalog: Catálogo contra el que se valida
        max_interests: Tope de intereses (default: Settings.max_interests_per_user)

    Returns:
        La misma selección como lista

    Raises:
        InterestValidationError: si alguna precondición no se cumple
    """
    if max_interests is None:
        max_interests = get_settings().max_interests_per_user

    interests = list(interests)
    if not interests:
        raise InterestValidationError("请至少选择一个兴趣")
    if len(interests) > max_interests:
        raise InterestValidationError(f"最多只能选择{max_interests}个兴趣")

    valid_ids = {
        category: set(catalog.interest_ids(category))
        for category in {i.category for i in interests}
    }
    for interest in interests:
        if interest.id not in valid_ids[interest.category]:
            raise InterestValidationError(f'兴趣 "{interest.name}" 不存在')

    return interests


def parse_interests(
    raw: Iterable[Any],
    catalog: Catalog,
    max_interests: Optional[int] = None,
) -> list[Interest]:
    """
    Construye y valida una selección a partir de datos crudos (dicts/JSON).

    Raises:
        InterestValidationError: estructura inválida, categoría desconocida,
            importancia fuera de rango o selección inválida
    """
    if isinstance(raw, (str, bytes, dict)) or raw is None:
        raise InterestValidationError("兴趣数据格式不正确")
    try:
        raw = list(raw)
    except TypeError:
        raise InterestValidationError("兴趣数据格式不正确") from None

    # Tamaño antes que estructura
    if max_interests is None:
        max_interests = get_settings().max_interests_per_user
    if not raw:
        raise InterestValidationError("请至少选择一个兴趣")
    if len(raw) > max_interests:
        raise InterestValidationError(f"最多只能选择{max_interests}个兴趣")

    interests = []
    for position, item in enumerate(raw):
        if not isinstance(item, dict):
            raise InterestValidationError("兴趣数据格式不正确")
        if "importance" in item and item["importance"] is not None:
            item = {**item, "importance": validate_importance(item["importance"])}
        elif "importance" in item:
            item = {k: v for k, v in item.items() if k != "importance"}
        try:
            interests.append(Interest.model_validate(item))
        except ValidationError as e:
            logger.warning(
                "Interés inválido",
                position=position,
                interest_id=item.get("id"),
                errors=e.error_count(),
            )
            raise InterestValidationError(_describe(e, item)) from e

    return validate_interests(interests, catalog, max_interests=max_interests)


def _describe(error: ValidationError, item: dict) -> str:
    fields = {str(err["loc"][0]) for err in error.errors() if err["loc"]}
    if "category" in fields and item.get("category"):
        return f'兴趣分类 "{item["category"]}" 不存在'
    if fields & {"id", "name", "category"}:
        return "兴趣数据缺少必要字段"
    return "兴趣数据格式不正确"
