"""Pytest configuration and shared fixtures for md2jira test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path

import pytest

# Configure Hypothesis for property-based testing
from hypothesis import HealthCheck, Phase, Verbosity, settings

# The autouse environment fixture holds no per-example state.
_SUPPRESSED = [HealthCheck.function_scoped_fixture]

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose, suppress_health_check=_SUPPRESSED)
settings.register_profile("dev", max_examples=20, suppress_health_check=_SUPPRESSED)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate],
    suppress_health_check=_SUPPRESSED,
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path_factory):
    """Keep user configuration and MD2JIRA_* variables out of every test.

    The home directory is redirected to an empty temporary directory so that
    configuration discovery never picks up the developer's own dotfiles.
    """
    for name in list(os.environ):
        if name.startswith("MD2JIRA_"):
            monkeypatch.delenv(name)
    fake_home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr(Path, "home", lambda: fake_home)
    yield
    # The CLI reconfigures the root logger; undo that between tests.
    root = logging.getLogger()
    for handler in list(root.handlers):
        if not type(handler).__module__.startswith("_pytest"):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.WARNING)


@pytest.fixture
def sample_markdown() -> str:
    """Provide sample Markdown content for testing.

    Returns
    -------
    str
        Standard sample document touching every supported construct.

    """
    return """# Release Notes

This release adds **bold** features, _subtle_ fixes and `inline code`.

## Steps

1. Build the package
2. Run the tests
   - unit
   - integration

```python
print("ship it")
```

> Remember to tag the release.

| Component | Status |
|-----------|--------|
| parser    | done   |
| renderer  | ~~todo~~ done |

---

See [the docs](https://example.com/docs) for details.
"""


@pytest.fixture
def sample_markdown_file(tmp_path: Path, sample_markdown: str) -> Path:
    """Write the sample document to a temporary file.

    Returns
    -------
    Path
        Path of a UTF-8 encoded Markdown file.

    """
    path = tmp_path / "sample.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path
