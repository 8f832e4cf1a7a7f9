"""
Script para calcular el match entre dos selecciones de intereses.

Lee la selección de cada usuario desde un JSON (lista de intereses),
valida ambas y muestra el resultado.

Uso:
    python -m qixi_match.scripts.run_matching --user1 a.json --user2 b.json
    python -m qixi_match.scripts.run_matching --user1 a.json --user2 b.json --summary --name1 小明 --name2 小红
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import structlog

from qixi_match.catalog import load_catalog
from qixi_match.config import get_settings
from qixi_match.matching import MatchingEngine
from qixi_match.presentation import build_result_summary, describe_category_scores
from qixi_match.validation import InterestValidationError, parse_interests

# Configurar logging
settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(message)s",
    force=True,
)

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


def _read_selection(path: str):
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InterestValidationError("兴趣数据格式不正确") from e
    # Acepta tanto la lista directa como {"interests": [...]}
    if isinstance(data, dict) and "interests" in data:
        return data["interests"]
    return data


def run_matching(
    user1_path: str,
    user2_path: str,
    catalog_path: Optional[str] = None,
    summary: bool = False,
    name1: str = "用户1",
    name2: str = "用户2",
) -> str:
    """Calcula el match y devuelve el texto a imprimir."""
    catalog = load_catalog(catalog_path)
    engine = MatchingEngine(catalog=catalog)

    interests_a = parse_interests(_read_selection(user1_path), catalog)
    interests_b = parse_interests(_read_selection(user2_path), catalog)

    result = engine.compute_match(interests_a, interests_b)
    logger.info(
        "Match calculado",
        overall_score=result.overall_score,
        common=len(result.common_interests),
        activities=len(result.recommended_activities),
    )

    if summary:
        lines = [build_result_summary(result, name1, name2), ""]
        lines.extend(describe_category_scores(result))
        return "\n".join(lines)

    return json.dumps(result.to_payload(), ensure_ascii=False, indent=2)


def main(argv: Optional[list[str]] = None):
    """Entry point del script."""
    parser = argparse.ArgumentParser(
        description="Calcula el match entre dos selecciones de intereses"
    )
    parser.add_argument("--user1", required=True, help="JSON con los intereses del usuario 1")
    parser.add_argument("--user2", required=True, help="JSON con los intereses del usuario 2")
    parser.add_argument(
        "--catalog",
        default=None,
        help="JSON con un catálogo alternativo (default: catálogo incluido)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Muestra el resumen para compartir en lugar del JSON",
    )
    parser.add_argument("--name1", default="用户1", help="Nombre del usuario 1")
    parser.add_argument("--name2", default="用户2", help="Nombre del usuario 2")

    args = parser.parse_args(argv)

    try:
        output = run_matching(
            user1_path=args.user1,
            user2_path=args.user2,
            catalog_path=args.catalog,
            summary=args.summary,
            name1=args.name1,
            name2=args.name2,
        )
        print(output)
        sys.exit(0)

    except InterestValidationError as e:
        logger.error("Selección inválida", error=e.message)
        sys.exit(2)
    except KeyboardInterrupt:
        logger.info("Matching interrumpido por usuario")
        sys.exit(130)
    except Exception as e:
        logger.error("Error fatal en matching", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
