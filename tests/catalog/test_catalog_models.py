"""
Unit tests for the upstream and projected book models.
"""

import pytest
from pydantic import ValidationError

from catalog.models import ProjectedBook, UpstreamBookRecord, UpstreamEnvelope


class TestUpstreamEnvelope:
    """Test cases for decoding the upstream envelope."""

    def test_decodes_docs_in_order(self, sample_upstream_payload):
        """Test that records keep upstream order."""
        envelope = UpstreamEnvelope.from_payload(sample_upstream_payload)

        assert [record.name for record in envelope.docs] == [
            "The Fellowship Of The Ring",
            "The Two Towers",
            "The Return Of The King",
        ]

    def test_missing_docs_is_empty(self):
        """Test that an envelope without docs decodes to no records."""
        envelope = UpstreamEnvelope.from_payload({"error": "Something went wrong"})
        assert envelope.docs == []

    def test_null_docs_is_empty(self):
        """Test that docs set to null decodes to no records."""
        envelope = UpstreamEnvelope.from_payload({"docs": None})
        assert envelope.docs == []

    def test_docs_must_be_a_list(self):
        """Test that a non-list docs field is rejected."""
        with pytest.raises(ValidationError):
            UpstreamEnvelope.from_payload({"docs": "The Hobbit"})

    def test_non_object_entries_become_nameless_records(self):
        """Test that null or scalar docs entries decode as records without a name."""
        envelope = UpstreamEnvelope.from_payload({"docs": [None, 42, {"name": "The Two Towers"}]})

        assert [record.name for record in envelope.docs] == [None, None, "The Two Towers"]

    def test_payload_must_be_an_object(self):
        """Test that a top-level array is rejected."""
        with pytest.raises(ValidationError):
            UpstreamEnvelope.from_payload([{"name": "The Two Towers"}])


class TestUpstreamBookRecord:
    """Test cases for single upstream records."""

    def test_extra_fields_are_ignored(self):
        """Test that only the name survives decoding."""
        record = UpstreamBookRecord(
            _id="5cf5805fb53e011a64671582",
            name="The Fellowship Of The Ring",
            author="J.R.R. Tolkien",
            year=1954
        )

        assert record.name == "The Fellowship Of The Ring"
        assert record.dict() == {"name": "The Fellowship Of The Ring"}

    def test_numeric_name_becomes_string(self):
        """Test that numeric titles are coerced to text."""
        assert UpstreamBookRecord(name=1984).name == "1984"

    @pytest.mark.parametrize("value", [True, ["The Hobbit"], {"en": "The Hobbit"}])
    def test_other_name_types_count_as_missing(self, value):
        """Test that non-text titles are treated as missing."""
        assert UpstreamBookRecord(name=value).name is None

    def test_missing_name_defaults_to_none(self):
        """Test that a record without a name still decodes."""
        assert UpstreamBookRecord(author="J.R.R. Tolkien").name is None


class TestProjectedBook:
    """Test cases for ProjectedBook."""

    def test_serializes_name_only(self):
        """Test the serialized shape of a projected book."""
        assert ProjectedBook(name="The Two Towers").dict() == {"name": "The Two Towers"}

    def test_name_is_required(self):
        """Test that a projected book needs a name."""
        with pytest.raises(ValidationError):
            ProjectedBook()
