"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the protoconfig test suite.
"""

import pytest

from protoconfig import ProtoConfig

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def base() -> ProtoConfig:
    """Parentless store with a single color property."""
    return ProtoConfig({"color": "red"})


@pytest.fixture
def child(base: ProtoConfig) -> ProtoConfig:
    """Store inheriting from the base fixture."""
    return ProtoConfig({"size": "L"}, proto=base)


@pytest.fixture
def grandchild(child: ProtoConfig) -> ProtoConfig:
    """Third level of the base -> child chain."""
    return ProtoConfig({"weight": 3}, proto=child)
