"""Citation Record Module - The bibliographic entry fed to the MLA formatter."""

import itertools
from dataclasses import dataclass, field, fields, replace, asdict
from enum import Enum
from typing import Any, Dict, List, Mapping, Union


class CitationType(Enum):
    """Supported source types."""
    BOOK = "book"
    JOURNAL = "journal"
    WEBSITE = "website"


# Input fields per source type, in the order the form shows them
RELEVANT_FIELDS: Dict[CitationType, List[str]] = {
    CitationType.BOOK: ['authors', 'title', 'publisher', 'year'],
    CitationType.JOURNAL: ['authors', 'title', 'container_title', 'volume', 'issue', 'pages', 'year'],
    CitationType.WEBSITE: ['authors', 'title', 'container_title', 'url', 'year'],
}

# camelCase keys accepted by from_dict
FIELD_ALIASES: Dict[str, str] = {
    'containerTitle': 'container_title',
}

_id_counter = itertools.count(1)


def next_citation_id() -> int:
    """Allocate a fresh citation identity."""
    return next(_id_counter)


def coerce_type(value: Union[CitationType, str]) -> CitationType:
    """
    Convert a type tag to CitationType.

    Raises:
        ValueError: If the tag is not book, journal or website
    """
    if isinstance(value, CitationType):
        return value
    if isinstance(value, str):
        try:
            return CitationType(value)
        except ValueError:
            pass
    valid = ', '.join(t.value for t in CitationType)
    raise ValueError(f"Unknown citation type: {value!r}. Valid types: {valid}")


def relevant_fields(citation_type: Union[CitationType, str]) -> List[str]:
    """Return the input fields used by a source type."""
    return list(RELEVANT_FIELDS[coerce_type(citation_type)])


@dataclass(frozen=True)
class CitationRecord:
    """
    One bibliographic entry pending formatting.

    Every field except ``type`` and ``id`` is free text and may be empty.
    Fields that don't belong to the current type are kept, so switching
    type back and forth doesn't lose what the user typed, but the
    formatter never reads them.
    """
    type: CitationType = CitationType.BOOK
    authors: str = ""  # comma-separated, not parsed
    title: str = ""
    publisher: str = ""
    container_title: str = ""  # journal name or website name
    volume: str = ""
    issue: str = ""
    pages: str = ""
    url: str = ""
    year: str = ""
    id: int = field(default_factory=next_citation_id, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'type', coerce_type(self.type))

    @classmethod
    def field_names(cls) -> List[str]:
        """Editable field names (everything but the identity)."""
        return [f.name for f in fields(cls) if f.name != 'id']

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'CitationRecord':
        """Create from a mapping, e.g. decoded JSON. Unknown keys are ignored."""
        known = set(cls.field_names()) | {'id'}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            key = FIELD_ALIASES.get(key, key)
            if key not in known:
                continue
            if key == 'id':
                if value is not None:
                    kwargs['id'] = value
                continue
            kwargs[key] = "" if value is None else (value if key == 'type' else str(value))
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        data['type'] = self.type.value
        return data

    def with_field(self, name: str, value: Any) -> 'CitationRecord':
        """Return a copy with one field replaced."""
        name = FIELD_ALIASES.get(name, name)
        if name not in self.field_names():
            raise ValueError(f"Unknown citation field: {name!r}")
        if name != 'type':
            value = "" if value is None else str(value)
        return replace(self, **{name: value})

    @property
    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in self.field_names() if name != 'type')


__all__ = [
    'CitationType',
    'CitationRecord',
    'RELEVANT_FIELDS',
    'coerce_type',
    'relevant_fields',
    'next_citation_id',
]
