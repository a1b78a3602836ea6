"""Pytest configuration for the printkit test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
These are intensive property tests designed for fuzzing, not unit testing.
Run them via: pytest -m fuzz
"""

from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from printkit.runtime.registry import RendererRegistry, get_shared_registry
from printkit.sinks import BufferSink

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    import os

    # Explicit override via env var
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    # GitHub Actions sets CI=true automatically
    if os.environ.get("CI") == "true":
        return "ci"

    # Local development
    return "dev"


# Load appropriate profile automatically
settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested.

    Fuzz tests are intensive property tests designed for dedicated fuzzing runs,
    not for inclusion in the regular test suite. They use high max_examples
    values and long input sizes.

    Behavior:
    - Normal test run (pytest tests/): Fuzz tests are SKIPPED
    - Explicit fuzz run (pytest -m fuzz): Fuzz tests run, others skipped

    This keeps the default run fast while `pytest -m fuzz` still exercises
    the full property test suite.
    """
    # Check if user explicitly requested fuzz tests via -m marker
    marker_expr = config.getoption("-m", default="")

    # If user explicitly requested fuzz tests, don't skip them
    if "fuzz" in str(marker_expr):
        return

    # Skip fuzz-marked tests in normal test runs
    skip_fuzz = pytest.mark.skip(
        reason="Fuzzing test - run with: pytest -m fuzz"
    )
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def buf() -> BufferSink:
    """Fresh capture buffer."""
    return BufferSink()


@pytest.fixture
def shared_registry() -> Iterator[RendererRegistry]:
    """The process-wide renderer registry, restored after the test.

    Types registered during the test are unregistered afterwards so
    renderers never leak between tests.
    """
    registry = get_shared_registry()
    before = set(registry)
    yield registry
    for cls in set(registry) - before:
        registry.unregister(cls)
