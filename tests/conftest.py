"""Pytest configuration for the parsecraft test suite.

Hypothesis profiles (selected once per session):
- dev: 500 examples, local runs
- ci: 50 derandomized examples, failure blobs printed
- verbose: 100 examples with progress output

Selection order: HYPOTHESIS_PROFILE, then CI=true, then "dev".
Example: HYPOTHESIS_PROFILE=verbose pytest tests/

Tests marked @pytest.mark.fuzz are skipped unless selected with -m fuzz.
"""

import logging
import os
from collections.abc import Iterator

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = (Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink)

# Generated parsers are cheap to build but slow to shrink, so deadlines
# are disabled; the repetition tests feed inputs of tens of thousands of symbols.
settings.register_profile(
    "dev",
    max_examples=500,
    phases=_PHASES,
    deadline=None,
)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    deadline=None,
    derandomize=True,
    print_blob=True,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    deadline=None,
    verbosity=Verbosity.verbose,
)

_PROFILES = frozenset({"dev", "ci", "verbose"})


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in _PROFILES:
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# LOGGING
# =============================================================================


@pytest.fixture
def parser_debug_log(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Capture DEBUG records from every parsecraft logger."""
    with caplog.at_level(logging.DEBUG, logger="parsecraft"):
        yield caplog


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests (skipped unless run with -m fuzz)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless the marker expression selects them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="intensive property test, run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
