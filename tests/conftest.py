"""Root-level pytest fixtures for the specscope test suite.

Provides shared configuration fixtures following the Pydantic-based
architecture, plus sample text fixtures.
"""

import math

import pytest
from pathlib import Path
import tempfile
import shutil

from specscope.schemas import ParamConfig, UserConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Returns a callable that accepts UserConfig-compatible kwargs.

    Examples
    --------
    >>> def test_custom_rate(make_config):
    ...     config = make_config(sample_rate=48000)
    ...     assert config.spectrum.sample_rate == 48000.0
    """
    def _make(**user_overrides):
        """Create InternalConfig with user overrides."""
        if user_overrides:
            user = UserConfig(**user_overrides)
            return resolve_config(param_config, user, None)
        else:
            return resolve_config(param_config, None, None)

    return _make


# =============================================================================
# Directory Fixtures
# =============================================================================

@pytest.fixture
def temp_dir():
    """Temporary directory that is cleaned up after test."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


# =============================================================================
# Sample Text Fixtures
# =============================================================================

@pytest.fixture
def tone_text():
    """Two-channel capture, 8 samples.

    Pair 0 is a complex exponential at bin 1, pair 1 is DC (all ones).
    """
    n = 8
    lines = ["re0 im0 re1 im1"]
    for t in range(n):
        angle = 2 * math.pi * t / n
        lines.append(f"{math.cos(angle):.12f} {math.sin(angle):.12f} 1.0 0.0")
    return "\n".join(lines) + "\n"
