"""
Citation List Module - The editable list of entries behind the citation form.

Holds the records in order, applies field edits, and runs the copy action.
Formatting is delegated to the pure MLA formatter; the clipboard is
injected so the list itself performs no I/O.
"""

import time
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Union
from loguru import logger

from .citation_record import CitationRecord, CitationType, coerce_type
from .clipboard import copy_to_clipboard
from .config import config
from .mla_formatter import format_citation


class CitationList:
    """
    Ordered list of citation records.

    Usage:
        citations = CitationList()
        record = citations.add(CitationType.JOURNAL)
        citations.update(record.id, 'title', 'Heart Failure')
        citations.copy(record.id)
    """

    def __init__(
        self,
        records: Optional[Iterable[CitationRecord]] = None,
        clipboard: Callable[[str], bool] = copy_to_clipboard,
        clock: Callable[[], float] = time.monotonic,
        notice_seconds: Optional[float] = None,
    ):
        self.clipboard = clipboard
        self.clock = clock
        self.notice_seconds = config.COPIED_NOTICE_SECONDS if notice_seconds is None else notice_seconds
        self._records: List[CitationRecord] = list(records) if records is not None else []
        self._copied_id: Optional[int] = None
        self._copied_at: float = 0.0

        if records is None:
            self.add()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CitationRecord]:
        return iter(list(self._records))

    def ids(self) -> List[int]:
        return [r.id for r in self._records]

    def _index(self, citation_id: int) -> int:
        for i, record in enumerate(self._records):
            if record.id == citation_id:
                return i
        raise KeyError(f"No citation with id {citation_id}")

    def get(self, citation_id: int) -> CitationRecord:
        """Get a record by id. Raises KeyError if missing."""
        return self._records[self._index(citation_id)]

    def add(self, citation_type: Union[CitationType, str, None] = None) -> CitationRecord:
        """Append a new empty record and return it."""
        citation_type = coerce_type(citation_type or config.DEFAULT_CITATION_TYPE)
        record = CitationRecord(type=citation_type)
        self._records.append(record)
        logger.debug(f"Added {citation_type.value} citation {record.id}")
        return record

    def remove(self, citation_id: int) -> bool:
        """Remove a record. Returns False if the id is unknown."""
        try:
            index = self._index(citation_id)
        except KeyError:
            logger.warning(f"Cannot remove unknown citation {citation_id}")
            return False
        del self._records[index]
        if self._copied_id == citation_id:
            self._copied_id = None
        logger.debug(f"Removed citation {citation_id}")
        return True

    def update(self, citation_id: int, field_name: str, value) -> CitationRecord:
        """
        Replace one field of a record.

        Raises:
            KeyError: If the id is unknown
            ValueError: If the field or type tag is invalid
        """
        index = self._index(citation_id)
        record = self._records[index].with_field(field_name, value)
        self._records[index] = record
        return record

    def format(self, citation_id: int) -> str:
        """Formatted MLA citation for one record."""
        return format_citation(self.get(citation_id))

    def format_all(self) -> Dict[int, str]:
        """Formatted MLA citations keyed by id, in list order."""
        return {record.id: format_citation(record) for record in self._records}

    def copy(self, citation_id: int) -> bool:
        """
        Copy one formatted citation to the clipboard.

        On success the entry is marked as copied for ``notice_seconds``.
        """
        text = self.format(citation_id)
        if not self.clipboard(text):
            logger.error(f"Failed to copy citation {citation_id}")
            return False
        self._copied_id = citation_id
        self._copied_at = self.clock()
        logger.info(f"Copied citation {citation_id} to clipboard")
        return True

    @property
    def copied_id(self) -> Optional[int]:
        """Id of the entry showing the copied notice, if it is still live."""
        if self._copied_id is None:
            return None
        if self.clock() - self._copied_at >= self.notice_seconds:
            self._copied_id = None
        return self._copied_id


__all__ = ['CitationList']
