"""Property-based tests for the blog collection schema."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from blog_feed.exceptions import ContentValidationError
from blog_feed.schema import validate_entry

REQUIRED_FIELDS = ["title", "description", "date", "author", "summary"]

text_values = st.text(min_size=1, max_size=80).filter(lambda x: x.strip())


class TestSchemaProperties:
    """Property-based tests for validate_entry."""

    @given(st.fixed_dictionaries({field: text_values for field in REQUIRED_FIELDS}))
    def test_any_complete_text_entry_is_accepted(self, data):
        """For any entry with all fields as non-empty text, validation passes."""
        result = validate_entry("post.md", data)

        for field in REQUIRED_FIELDS:
            assert getattr(result, field) == data[field]

    @given(
        st.fixed_dictionaries({field: text_values for field in REQUIRED_FIELDS}),
        st.sampled_from(REQUIRED_FIELDS),
    )
    def test_dropping_any_field_rejects_the_entry(self, data, missing):
        """For any single missing field, the error names that field."""
        del data[missing]

        with pytest.raises(ContentValidationError) as exc_info:
            validate_entry("post.md", data)

        assert exc_info.value.field == missing
        assert exc_info.value.entry_id == "post.md"

    @given(
        st.sampled_from(REQUIRED_FIELDS),
        st.one_of(st.integers(), st.floats(allow_nan=False), st.booleans(), st.none()),
    )
    def test_non_text_values_are_rejected(self, field, value):
        """For any non-text value in a declared field, the entry is rejected."""
        data = {name: "value" for name in REQUIRED_FIELDS}
        data[field] = value

        with pytest.raises(ContentValidationError) as exc_info:
            validate_entry("post.md", data)

        assert exc_info.value.field == field
