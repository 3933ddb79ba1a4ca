"""MLA Citation Generator Modules"""

from .citation_record import CitationRecord, CitationType, relevant_fields
from .mla_formatter import MLAFormatter, format_authors, format_citation
from .citation_list import CitationList
from .clipboard import copy_to_clipboard

__version__ = '1.0.0'
