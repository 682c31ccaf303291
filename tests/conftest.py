import os
import sys
from pathlib import Path
import pytest
from dotenv import load_dotenv
from helpers import mark_by_dir

load_dotenv()


@pytest.fixture(autouse=True)
def _ensure_src_on_syspath():
    # Add project src/ to sys.path for src-layout imports
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))
    yield


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    # Developer shells may export DEP_HEALTH_* overrides; tests start from defaults
    for key in list(os.environ):
        if key.startswith("DEP_HEALTH_"):
            monkeypatch.delenv(key, raising=False)
    yield


TESTS = Path(__file__).parent

def pytest_collection_modifyitems(config, items):
    # Mark tests by directory structure
    mark_by_dir(items, TESTS / "dep_health" / "core", pytest.mark.unit)
    mark_by_dir(items, TESTS / "dep_health" / "infra", pytest.mark.integration)
    mark_by_dir(items, TESTS / "dep_health" / "app", pytest.mark.e2e)
    mark_by_dir(items, TESTS / "dep_health" / "shared", pytest.mark.unit)
