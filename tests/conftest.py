"""Pytest configuration for the lexcursor test suite.

Hypothesis profiles:
- dev: Local development, 500 examples
- ci: CI runs, 50 derandomized examples
- verbose: Debug mode with progress output, 100 examples

The profile comes from HYPOTHESIS_PROFILE if set, else "ci" when CI=true,
else "dev". Example: HYPOTHESIS_PROFILE=verbose pytest tests/

Tests marked @pytest.mark.fuzz (long generated sources, many examples) are
skipped unless requested with pytest -m fuzz or by naming
tests/test_cursor_fuzz.py directly.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES, derandomize=False)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile for this run."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    if any("test_cursor_fuzz" in str(arg) for arg in config.invocation_params.args):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
