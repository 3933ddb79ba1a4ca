"""
Tests for the MLA Formatter module.

Tests cover:
- Author list formatting (one, two, many, empty, malformed)
- Book, journal article and webpage templates
- Dispatch on citation type, including unknown types
- Formatting from plain mappings
"""

import pytest

from mla_citations.citation_record import CitationRecord, CitationType
from mla_citations.mla_formatter import MLAFormatter, format_authors, format_citation, format


class TestFormatAuthors:
    """Test the MLA author list rule."""

    def test_empty(self):
        assert format_authors("") == ""

    def test_whitespace_only(self):
        assert format_authors("   ") == ""

    def test_single_author(self):
        assert format_authors("Jane Doe") == "Jane Doe."

    def test_two_authors(self):
        assert format_authors("Jane Doe, John Smith") == "Jane Doe, and John Smith."

    def test_three_authors_et_al(self):
        assert format_authors("A, B, C") == "A, et al."

    def test_many_authors_keeps_first_only(self):
        assert format_authors("Doe, Smith, Brown, Wilson, Davis") == "Doe, et al."

    def test_whitespace_stripped(self):
        assert format_authors(" Jane Doe , John Smith ") == "Jane Doe, and John Smith."

    def test_single_name_padded(self):
        assert format_authors("  Jane Doe  ") == "Jane Doe."

    def test_lone_comma_gives_two_empty_names(self):
        assert format_authors(",") == ", and ."

    def test_trailing_comma_keeps_empty_name(self):
        assert format_authors("Jane Doe,") == "Jane Doe, and ."

    def test_leading_comma_keeps_empty_first_name(self):
        assert format_authors(", Jane Doe, John Smith") == ", et al."

    def test_names_not_reordered(self):
        """Names are used as typed; no last/first parsing."""
        assert format_authors("Doe Jane") == "Doe Jane."


class TestBookFormatting:
    """Test book citations."""

    def setup_method(self):
        self.formatter = MLAFormatter()

    def test_format_book_basic(self):
        record = CitationRecord(
            type="book",
            authors="Jane Doe",
            title="The Book",
            publisher="ACME",
            year="2020",
        )
        assert format_citation(record) == 'Jane Doe. "The Book." ACME, 2020.'

    def test_format_book_method(self):
        record = CitationRecord(type=CitationType.BOOK, authors="A, B", title="T", publisher="P", year="1999")
        assert self.formatter.format_book(record) == 'A, and B. "T." P, 1999.'

    def test_empty_publisher_kept_as_empty_segment(self):
        record = CitationRecord(type="book", authors="Jane Doe", title="The Book", year="2020")
        assert format_citation(record) == 'Jane Doe. "The Book." , 2020.'

    def test_all_empty(self):
        assert format_citation(CitationRecord(type="book")) == ' "." , .'

    def test_stale_fields_ignored(self):
        """Fields that belong to other types never appear."""
        record = CitationRecord(
            type="book",
            authors="Jane Doe",
            title="The Book",
            publisher="ACME",
            year="2020",
            container_title="Stale Journal",
            volume="9",
            issue="9",
            pages="1-2",
            url="http://stale",
        )
        result = format_citation(record)
        assert result == 'Jane Doe. "The Book." ACME, 2020.'
        assert "Stale" not in result
        assert "http://stale" not in result


class TestJournalFormatting:
    """Test journal article citations."""

    def test_format_journal_basic(self):
        record = CitationRecord(
            type="journal",
            authors="A, B",
            title="T",
            container_title="J",
            volume="3",
            issue="2",
            year="2021",
            pages="10-20",
        )
        assert format_citation(record) == 'A, and B. "T." J, vol. 3, no. 2, 2021, pp. 10-20.'

    def test_format_journal_et_al(self):
        record = CitationRecord(
            type="journal",
            authors="Smith J, Jones M, Brown K",
            title="Heart Failure",
            container_title="Circulation",
            volume="140",
            issue="7",
            year="2019",
            pages="e100-e120",
        )
        assert format_citation(record) == (
            'Smith J, et al. "Heart Failure." Circulation, vol. 140, no. 7, 2019, pp. e100-e120.'
        )

    def test_empty_volume_and_issue(self):
        record = CitationRecord(type="journal", authors="A", title="T", container_title="J", year="2021")
        assert format_citation(record) == 'A. "T." J, vol. , no. , 2021, pp. .'

    def test_publisher_and_url_ignored(self):
        record = CitationRecord(
            type="journal",
            title="T",
            container_title="J",
            publisher="Old Publisher",
            url="http://old",
        )
        result = format_citation(record)
        assert "Old Publisher" not in result
        assert "http://old" not in result


class TestWebsiteFormatting:
    """Test webpage citations."""

    def test_format_website_basic(self):
        record = CitationRecord(
            type="website",
            authors="Jane Doe",
            title="Page",
            container_title="Site",
            year="2022",
            url="https://example.org/page",
        )
        assert format_citation(record) == 'Jane Doe. "Page." Site, 2022, https://example.org/page.'

    def test_empty_authors_leaves_leading_space(self):
        record = CitationRecord(
            type="website",
            authors="",
            title="T",
            container_title="Site",
            year="2022",
            url="http://x",
        )
        assert format_citation(record) == ' "T." Site, 2022, http://x.'

    def test_publisher_ignored(self):
        record = CitationRecord(type="website", title="T", container_title="Site", publisher="ACME")
        assert "ACME" not in format_citation(record)


class TestDispatch:
    """Test dispatch on type and defensive defaults."""

    def setup_method(self):
        self.formatter = MLAFormatter()

    def test_unknown_type_in_mapping(self):
        assert format_citation({'type': 'podcast', 'title': 'T'}) == ""

    @pytest.mark.parametrize("tag", ["BOOK", "Journal", " journal ", "website\n"])
    def test_type_tag_must_match_exactly(self, tag):
        assert format_citation({'type': tag, 'title': 'T'}) == ""

    def test_missing_type_in_mapping(self):
        assert format_citation({'title': 'T'}) == ""

    def test_none_input(self):
        assert format_citation(None) == ""

    def test_mapping_input(self):
        data = {
            'type': 'journal',
            'authors': 'A, B',
            'title': 'T',
            'containerTitle': 'J',
            'volume': '3',
            'issue': '2',
            'year': '2021',
            'pages': '10-20',
            'id': 42,
        }
        assert format_citation(data) == 'A, and B. "T." J, vol. 3, no. 2, 2021, pp. 10-20.'

    def test_format_alias(self):
        record = CitationRecord(type="book", authors="Jane Doe", title="The Book", publisher="ACME", year="2020")
        assert format(record) == format_citation(record)

    @pytest.mark.parametrize("citation_type", ["book", "journal", "website"])
    def test_idempotent(self, citation_type):
        record = CitationRecord(
            type=citation_type,
            authors="A, B, C",
            title="T",
            publisher="P",
            container_title="C",
            volume="1",
            issue="2",
            pages="3",
            url="http://x",
            year="2000",
        )
        first = self.formatter.format(record)
        assert self.formatter.format(record) == first
        assert first != ""

    def test_does_not_mutate_record(self):
        record = CitationRecord(type="book", authors=" Jane Doe , John Smith ", title="T")
        before = record.to_dict()
        format_citation(record)
        assert record.to_dict() == before

    def test_style_name(self):
        assert MLAFormatter.STYLE_NAME == "mla"
