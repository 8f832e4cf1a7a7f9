"""Configuración de pytest y fixtures."""

import pytest

from qixi_match.catalog import default_catalog
from qixi_match.config import Settings
from qixi_match.matching import MatchingEngine


@pytest.fixture
def settings():
    """Settings con defaults, sin leer el .env del proyecto."""
    return Settings(_env_file=None)


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def engine(catalog, settings):
    return MatchingEngine(catalog=catalog, settings=settings)


@pytest.fixture
def make_interest(catalog):
    """Crea un interés del catálogo con la importancia indicada."""

    def _make(interest_id: str, importance: int = 1):
        interest = catalog.find_interest(interest_id)
        assert interest is not None, f"{interest_id} no está en el catálogo"
        return interest.with_importance(importance)

    return _make


@pytest.fixture
def selection(make_interest):
    """Selección a partir de ids (importancia 1) o pares (id, importancia)."""

    def _selection(*items):
        result = []
        for item in items:
            if isinstance(item, tuple):
                result.append(make_interest(*item))
            else:
                result.append(make_interest(item))
        return result

    return _selection
