"""Root pytest configuration.

Test Structure:
    tests/
    └── iban_engine/
        ├── unit/            # Domain, registry loader and settings tests
        └── integration/     # HTTP API (TestClient) and CLI (CliRunner)

Settings are read from config/.env.dev or config/.env when present, the
same files local development uses.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from iban_config import clear_settings_cache
from iban_engine.infrastructure.registry import clear_default_registry_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


@pytest.fixture(autouse=True)
def fresh_caches():
    """Reload settings and the default registry for every test.

    Tests that point REGISTRY_FILE elsewhere must not leak their
    registry into the next test.
    """
    clear_settings_cache()
    clear_default_registry_cache()
    yield
    clear_settings_cache()
    clear_default_registry_cache()
