"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application module reads settings
- A SQLite test database migrated with alembic once per session
- A session-scoped API client running the real app lifespan

Architecture:
- Unit tests (test/**/unit/): mock the reservation store, never touch the database
- Integration tests: real SQLite database through aiosqlite
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are built at import time
# =============================================================================
import os
from pathlib import Path


_TEST_LOG_DIR = Path(__file__).parent / 'test_log'
_TEST_DB_PATH = _TEST_LOG_DIR / 'room_reservation_test.db'


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    _TEST_LOG_DIR.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(_TEST_LOG_DIR)

    # Fresh database file per session
    _TEST_DB_PATH.unlink(missing_ok=True)
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{_TEST_DB_PATH}'


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
import logging  # noqa: E402
from typing import Any  # noqa: E402

from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402


# =============================================================================
# Pytest Hooks
# =============================================================================
def _is_unit_test_only_run(config: pytest.Config) -> bool:
    markexpr = config.getoption('markexpr', default='')
    if markexpr and 'unit' in str(markexpr) and 'not unit' not in str(markexpr):
        return True

    args = config.args or []
    test_paths = [arg for arg in args if arg and not arg.startswith('-')]
    return bool(test_paths and all('/unit/' in path or '\\unit\\' in path for path in test_paths))


def pytest_sessionstart(session: pytest.Session) -> None:
    if _is_unit_test_only_run(session.config):
        return

    alembic_cfg = Config(str(Path(__file__).parent.parent / 'alembic.ini'))
    alembic_cfg.set_main_option('sqlalchemy.url', os.environ['DATABASE_URL'])

    # alembic's env.py applies alembic.ini's logging config (root at WARN);
    # restore the root logger so the loguru bridge set up by the app stays intact
    import room_reservation.platform.logging.loguru_io_config  # noqa: F401

    root_logger = logging.getLogger()
    root_level, root_handlers = root_logger.level, list(root_logger.handlers)
    command.upgrade(alembic_cfg, 'head')
    root_logger.setLevel(root_level)
    root_logger.handlers = root_handlers


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[Any, None, None]:
    from room_reservation.service.reservation.main import app

    with TestClient(app) as test_client:
        yield test_client
