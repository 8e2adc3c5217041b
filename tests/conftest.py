"""Shared pytest fixtures for the region label test suite."""

from pathlib import Path

import pytest

from region_labels.core.config import LabelConfig
from region_labels.engine.projection import Projector

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample dataset fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def subdivisions_geojson(data_dir: Path) -> Path:
    """Five subdivisions: a split group, a holed polygon, an unnamed and a sliver."""
    return data_dir / "subdivisions.geojson"


@pytest.fixture()
def point_only_geojson(edge_cases_dir: Path) -> Path:
    """A FeatureCollection holding only Point geometry."""
    return edge_cases_dir / "point_only.geojson"


@pytest.fixture()
def not_json_geojson(edge_cases_dir: Path) -> Path:
    """A .geojson file that is not JSON at all."""
    return edge_cases_dir / "not_json.geojson"


@pytest.fixture()
def single_feature_geojson(edge_cases_dir: Path) -> Path:
    """A bare Feature instead of a FeatureCollection."""
    return edge_cases_dir / "single_feature.geojson"


# ---------------------------------------------------------------------------
# Engine fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def config() -> LabelConfig:
    """Default engine configuration (group by ``name``)."""
    return LabelConfig()


@pytest.fixture(scope="session")
def projector() -> Projector:
    """Projector on the default Earth-mean sphere."""
    return Projector()
