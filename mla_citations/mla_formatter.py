"""MLA 9th Edition Formatter Module."""

from typing import Any, Callable, Dict, Mapping, Optional, Union
from loguru import logger

from .citation_record import CitationRecord, CitationType, coerce_type


def format_authors(authors: str) -> str:
    """
    Format a comma-separated author string for MLA 9th.

    - one name: "Doe."
    - two names: "Doe, and Smith."
    - three or more: "Doe, et al."

    Names are trimmed but otherwise used verbatim, empty ones included.
    """
    if not authors or not authors.strip():
        return ""

    author_list = [author.strip() for author in authors.split(',')]

    if len(author_list) == 1:
        return f"{author_list[0]}."
    elif len(author_list) == 2:
        return f"{author_list[0]}, and {author_list[1]}."
    return f"{author_list[0]}, et al."


class MLAFormatter:
    """
    Formats citation records in MLA 9th Edition style.

    Each source type has a fixed template. Fields are substituted as
    entered, so an unset field shows up as an empty segment rather than
    being dropped:

    Book:     Authors. "Title." Publisher, Year.
    Journal:  Authors. "Title." Journal, vol. V, no. N, Year, pp. P.
    Website:  Authors. "Title." Site, Year, URL.
    """

    STYLE_NAME = "mla"

    def __init__(self):
        self._templates: Dict[CitationType, Callable[[CitationRecord], str]] = {
            CitationType.BOOK: self.format_book,
            CitationType.JOURNAL: self.format_journal,
            CitationType.WEBSITE: self.format_website,
        }

    def format(self, record: Union[CitationRecord, Mapping[str, Any], None]) -> str:
        """
        Format one record, dispatching on its type.

        Accepts a CitationRecord or a plain mapping with the same keys.
        Returns an empty string when the type tag is missing or unknown.
        """
        if not isinstance(record, CitationRecord):
            record = self._record_from_mapping(record)
            if record is None:
                return ""

        template = self._templates.get(record.type)
        if template is None:
            logger.warning(f"No MLA template for citation type: {record.type}")
            return ""
        return template(record)

    def format_book(self, record: CitationRecord) -> str:
        """Format a book: Authors. "Title." Publisher, Year."""
        citation = f'{format_authors(record.authors)} "{record.title}." {record.publisher}, {record.year}.'
        logger.debug(f"Formatted MLA book: {record.id}")
        return citation

    def format_journal(self, record: CitationRecord) -> str:
        """Format a journal article: Authors. "Title." Journal, vol. V, no. N, Year, pp. P."""
        citation = (
            f'{format_authors(record.authors)} "{record.title}." {record.container_title}, '
            f'vol. {record.volume}, no. {record.issue}, {record.year}, pp. {record.pages}.'
        )
        logger.debug(f"Formatted MLA journal article: {record.id}")
        return citation

    def format_website(self, record: CitationRecord) -> str:
        """Format a webpage: Authors. "Title." Site, Year, URL."""
        citation = (
            f'{format_authors(record.authors)} "{record.title}." {record.container_title}, '
            f'{record.year}, {record.url}.'
        )
        logger.debug(f"Formatted MLA webpage: {record.id}")
        return citation

    def _record_from_mapping(self, data: Any) -> Optional[CitationRecord]:
        if not isinstance(data, Mapping):
            logger.warning(f"Cannot format citation from {type(data).__name__}")
            return None
        try:
            coerce_type(data.get('type'))
        except ValueError:
            logger.warning(f"No MLA template for citation type: {data.get('type')!r}")
            return None
        return CitationRecord.from_dict(data)


# Shared instance; the formatter holds no per-call state
_formatter = MLAFormatter()


def format_citation(record: Union[CitationRecord, Mapping[str, Any]]) -> str:
    """Format one citation record in MLA 9th style."""
    return _formatter.format(record)


# Short name used by callers that treat the formatter as a single operation
format = format_citation


__all__ = ['MLAFormatter', 'format_authors', 'format_citation', 'format']
