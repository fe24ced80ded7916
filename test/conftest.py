"""
Test Configuration

Architecture:
- Unit tests (test/**/unit/): pure engine / use case / codec logic, no app
- Integration tests (test/**/integration/): full FastAPI app through TestClient

The service keeps no state between requests, so there is nothing to clean up
between tests. Only the log sink needs redirecting.
"""

# =============================================================================
# Environment setup MUST happen before application imports:
# loguru_io_config reads TEST_LOG_DIR when src.platform.logging is first imported
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

import pytest  # noqa: E402


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers and 'integration' not in markers:
            item.add_marker(pytest.mark.integration)
