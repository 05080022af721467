"""Pytest configuration and shared fixtures for the md2html test suite.

This module provides shared fixtures and marker registration used across
the unit and integration tests.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def sample_markdown() -> str:
    """Provide sample Markdown content for testing.

    Returns
    -------
    str
        Standard sample document used across multiple tests.

    """
    return """# Sample Document

This is a **sample document** with _italic text_ and some `inline code`.

## Section 2

Here is a list:
- Item 1
- Item 2

### Code Block

```python
def hello_world():
    print("Hello, World!")
```

    indented code stays plain
"""


@pytest.fixture
def yaml_code_block() -> str:
    """Provide a fenced YAML code block.

    Returns
    -------
    str
        Markdown containing a single fenced block tagged ``yaml``.

    """
    return """```yaml
# Sample configuration
title: CommonMark Test
verbose: true
atm_pin: 1234
```
"""
