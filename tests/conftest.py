"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from punycoder import DomainLabelConverter


@pytest.fixture
def sample_domain() -> str:
    """Sample internationalized domain name for testing."""
    return "münchen.de"


@pytest.fixture
def sample_ace_domain() -> str:
    """ACE form of sample_domain."""
    return "xn--mnchen-3ya.de"


@pytest.fixture
def converter() -> DomainLabelConverter:
    """Converter with default settings."""
    return DomainLabelConverter()
