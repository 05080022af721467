"""Property-based tests for configuration handling.

Hypothesis generates arbitrary configuration values and unknown tokens to
check that conversion never fails on bad configuration and that rejected
tokens have no effect on the rendered output.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from md2html.constants import VALID_EXTENSIONS, VALID_OPTIONS
from md2html.converter import CommonMarkConverter
from md2html.resolver import resolve_flags

DOCUMENT = '# Heading\n\n"quoted" text\nnext line https://example.com\n\n```python\nx = 1\n```\n'

unknown_options = st.text(min_size=1, max_size=20).filter(lambda t: t.strip().upper() not in VALID_OPTIONS)
unknown_extensions = st.text(min_size=1, max_size=20).filter(lambda t: t.strip() not in VALID_EXTENSIONS)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestConfigurationFuzzing:
    """Property-based tests for the forgiving configuration surface."""

    @given(st.lists(unknown_options, max_size=5), st.lists(unknown_extensions, max_size=5))
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture], deadline=None)
    def test_unknown_tokens_render_like_default(self, options, extensions):
        """Test that unknown tokens leave output identical to the default rendering."""
        expected = CommonMarkConverter().convert(DOCUMENT)
        converter = CommonMarkConverter({"options": options, "extensions": extensions})
        assert converter.convert(DOCUMENT) == expected

    @given(st.lists(unknown_options, max_size=5), st.lists(unknown_extensions, max_size=5))
    def test_every_unknown_token_is_reported(self, options, extensions):
        """Test that each rejected token is named in a warning."""
        flags, warnings = resolve_flags(options, extensions)
        assert not flags.options
        assert not flags.extensions
        assert len(warnings) == len(options) + len(extensions)
        for token, warning in zip(options + extensions, warnings):
            assert f": {token} is not a valid" in warning

    @given(
        st.one_of(
            st.none(),
            st.booleans(),
            st.integers(),
            st.floats(allow_nan=False),
            st.text(max_size=20),
            st.lists(st.text(max_size=10), max_size=3),
        )
    )
    @settings(deadline=None)
    def test_non_mapping_config_equals_empty(self, config):
        """Test that any non-mapping configuration behaves like an empty one."""
        assert CommonMarkConverter(config).convert(DOCUMENT) == CommonMarkConverter({}).convert(DOCUMENT)

    @given(st.lists(st.sampled_from(sorted(VALID_OPTIONS)) | unknown_options, max_size=6))
    def test_resolution_is_deterministic(self, options):
        """Test that resolving the same tokens twice gives identical results."""
        assert resolve_flags(options, []) == resolve_flags(options, [])
