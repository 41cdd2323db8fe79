# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared pytest configuration for all unit tests.

This conftest.py automatically applies the `unit` marker to all tests
in the tests/unit/ directory hierarchy.

    # Run only unit tests
    pytest -m unit

Related:
    - pyproject.toml: Marker definitions
    - tests/conftest.py: Global test fixtures
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Dynamically add unit marker to all tests in the unit directory.

    pytestmark defined in conftest.py does NOT apply to tests in other
    files, so the marker is added after collection instead.
    """
    unit_marker = pytest.mark.unit

    for item in items:
        if "unit" in item.path.parts:
            if not any(marker.name == "unit" for marker in item.iter_markers()):
                item.add_marker(unit_marker)
