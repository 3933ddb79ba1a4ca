#!/usr/bin/env python3
"""
MLA Citation Generator GUI - Streamlit-based citation form.

Run with:
    streamlit run gui.py

Or use the launcher:
    python gui.py
"""

import streamlit as st
from streamlit import runtime
import subprocess
import sys
from pathlib import Path

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))


def launch_streamlit():
    """Launch this script with streamlit."""
    subprocess.run([sys.executable, "-m", "streamlit", "run", __file__, "--server.headless", "true"])


# If run directly (not through streamlit), launch streamlit
if __name__ == "__main__" and not runtime.exists():
    launch_streamlit()
    sys.exit(0)


# ============================================================================
# Streamlit App (runs when launched via streamlit)
# ============================================================================

from mla_citations.citation_list import CitationList
from mla_citations.citation_record import CitationRecord, CitationType, relevant_fields
from mla_citations.logging_setup import init_from_config
from mla_citations.mla_formatter import format_citation


TYPE_LABELS = {
    CitationType.BOOK: "Book",
    CitationType.JOURNAL: "Journal",
    CitationType.WEBSITE: "Website",
}

FIELD_PLACEHOLDERS = {
    'authors': "Authors (separate with commas)",
    'title': "Title",
    'publisher': "Publisher",
    'volume': "Volume",
    'issue': "Issue",
    'pages': "Pages",
    'url': "URL",
    'year': "Year",
}

CONTAINER_PLACEHOLDERS = {
    CitationType.JOURNAL: "Journal Title",
    CitationType.WEBSITE: "Website Name",
}


def init_session_state():
    """Initialize session state variables."""
    if 'citations' not in st.session_state:
        init_from_config()
        st.session_state['citations'] = CitationList()


def placeholder_for(record: CitationRecord, field_name: str) -> str:
    if field_name == 'container_title':
        return CONTAINER_PLACEHOLDERS[record.type]
    return FIELD_PLACEHOLDERS[field_name]


def render_field(citations: CitationList, record: CitationRecord, field_name: str) -> CitationRecord:
    """Render one text input and write any edit back to the list."""
    label = placeholder_for(record, field_name)
    current = getattr(record, field_name)
    value = st.text_input(
        label,
        value=current,
        placeholder=label,
        key=f"{field_name}_{record.id}",
        label_visibility="collapsed",
    )
    if value != current:
        record = citations.update(record.id, field_name, value)
    return record


@st.fragment(run_every=0.5)
def render_copied_notice(citations: CitationList, citation_id: int):
    """Poll the list so the notice disappears once it expires."""
    if citations.copied_id == citation_id:
        st.success("Copied!")


def render_citation(citations: CitationList, record: CitationRecord):
    """Render the card for one citation entry."""
    with st.container(border=True):
        col1, col2 = st.columns([6, 1])

        with col1:
            selected = st.selectbox(
                "Source type",
                list(CitationType),
                index=list(CitationType).index(record.type),
                format_func=TYPE_LABELS.get,
                key=f"type_{record.id}",
                label_visibility="collapsed",
            )
            if selected != record.type:
                record = citations.update(record.id, 'type', selected)

        with col2:
            if st.button("🗑️", key=f"remove_{record.id}", help="Remove citation"):
                citations.remove(record.id)
                st.rerun()

        for field_name in relevant_fields(record.type):
            if field_name == 'issue':
                continue
            if field_name == 'volume':
                vol_col, issue_col = st.columns(2)
                with vol_col:
                    record = render_field(citations, record, 'volume')
                with issue_col:
                    record = render_field(citations, record, 'issue')
                continue
            record = render_field(citations, record, field_name)

        header_col, copy_col = st.columns([6, 1])
        with header_col:
            st.markdown("**Generated Citation:**")
        with copy_col:
            if st.button("📋", key=f"copy_{record.id}", help="Copy to clipboard"):
                if not citations.copy(record.id):
                    st.warning("Clipboard copy failed")

        st.code(format_citation(record), language=None, wrap_lines=True)

        if citations.copied_id == record.id:
            render_copied_notice(citations, record.id)


def main():
    """Main Streamlit application."""
    st.set_page_config(
        page_title="MLA Citation Generator",
        page_icon="📚",
        layout="centered",
    )
    init_session_state()

    st.title("MLA 9th Edition Citation Generator")

    citations: CitationList = st.session_state['citations']
    for record in citations:
        render_citation(citations, record)

    if st.button("➕ Add Another Citation", use_container_width=True):
        citations.add()
        st.rerun()


main()
