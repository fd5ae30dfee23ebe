"""
Main Streamlit app for the text census dashboard.
Single-page design with:
- PDF uploader and reset button
- Metric grid with the headline counts
- Tabs for the category chart, the per-page chart and raw data
"""

import streamlit as st

from text_census.extraction import (
    PARSE_FAILED_MESSAGE,
    UNSUPPORTED_MESSAGE,
    DocumentExtractionError,
    UnsupportedDocumentError,
)
from text_census.session import DocumentSession

from .charts import create_category_chart, create_page_chart
from .constants import ACCEPTED_UPLOAD_TYPES, CATEGORY_LABELS, MAX_UPLOAD_SIZE_MB
from .data import (
    counts_to_dataframe,
    page_counts_to_dataframe,
    page_counts_to_wide_dataframe,
)

METRIC_FIELDS = [
    "ideograph_count",
    "latin_word_count",
    "digit_count",
    "total_count",
    "chinese_punctuation_count",
    "english_punctuation_count",
    "whitespace_count",
    "total_count_no_whitespace",
]
METRICS_PER_ROW = 4


def get_session() -> DocumentSession:
    """Return the per-browser-session document holder."""
    if "document_session" not in st.session_state:
        st.session_state.document_session = DocumentSession(
            max_size_bytes=int(MAX_UPLOAD_SIZE_MB * 1024 * 1024)
        )
    return st.session_state.document_session


def handle_upload(session: DocumentSession, uploaded_file) -> None:
    """Load each distinct upload once; errors leave the previous document in place."""
    # Streamlit assigns a fresh file_id to every upload, even of a same-named file
    upload_key = uploaded_file.file_id
    if st.session_state.get("last_upload_key") == upload_key:
        return
    st.session_state.last_upload_key = upload_key

    try:
        with st.spinner(f"Parsing {uploaded_file.name}..."):
            session.load_bytes(
                uploaded_file.getvalue(),
                file_name=uploaded_file.name,
                mime_type=uploaded_file.type,
            )
    except UnsupportedDocumentError as e:
        st.session_state.upload_error = str(e) or UNSUPPORTED_MESSAGE
    except DocumentExtractionError:
        st.session_state.upload_error = f"{PARSE_FAILED_MESSAGE}: {uploaded_file.name}"
    else:
        st.session_state.upload_error = None


def reset(session: DocumentSession) -> None:
    session.clear()
    st.session_state.last_upload_key = None
    st.session_state.upload_error = None
    # A new key gives a fresh, empty uploader widget
    st.session_state.uploader_generation = (
        st.session_state.get("uploader_generation", 0) + 1
    )


def render_metrics(snapshot) -> None:
    counts = snapshot.counts
    for start in range(0, len(METRIC_FIELDS), METRICS_PER_ROW):
        columns = st.columns(METRICS_PER_ROW)
        for column, field_name in zip(
            columns, METRIC_FIELDS[start : start + METRICS_PER_ROW]
        ):
            column.metric(CATEGORY_LABELS[field_name], f"{getattr(counts, field_name):,}")


def main():
    """Main Streamlit app."""
    st.set_page_config(
        page_title="Text Census",
        page_icon=None,
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    st.title("Text Census")
    st.caption("Character and word counts for Chinese/English PDF documents")

    session = get_session()

    upload_col, reset_col = st.columns([5, 1])
    with upload_col:
        uploaded_file = st.file_uploader(
            "Upload a PDF",
            type=ACCEPTED_UPLOAD_TYPES,
            key=f"uploader_{st.session_state.get('uploader_generation', 0)}",
        )
    with reset_col:
        if st.button("Reset", use_container_width=True):
            reset(session)
            st.rerun()

    if uploaded_file is not None:
        handle_upload(session, uploaded_file)

    if st.session_state.get("upload_error"):
        st.error(st.session_state.upload_error)

    # Read the snapshot once so every widget below shows the same document
    snapshot = session.snapshot
    if snapshot is None:
        st.info("No statistics yet. Upload a PDF to see its character census.")
        return

    st.subheader(f"{snapshot.file_name} · {snapshot.page_count:,} pages")
    render_metrics(snapshot)

    df = counts_to_dataframe(snapshot.counts)
    categories_tab, pages_tab, raw_tab = st.tabs(["Categories", "Pages", "Raw Data"])

    with categories_tab:
        st.caption(
            "Categories are counted independently and may overlap; characters "
            "outside every category only appear in the totals."
        )
        st.plotly_chart(create_category_chart(df), use_container_width=True)

    with pages_tab:
        if not snapshot.page_counts:
            st.info("The document has no pages.")
        else:
            page_df = page_counts_to_dataframe(snapshot.page_counts)
            st.plotly_chart(create_page_chart(page_df), use_container_width=True)

    with raw_tab:
        st.dataframe(
            df[["category", "category_zh", "count", "percent"]],
            use_container_width=True,
            hide_index=True,
        )
        with st.expander("Per-page counts", expanded=False):
            st.dataframe(
                page_counts_to_wide_dataframe(snapshot.page_counts),
                use_container_width=True,
                hide_index=True,
            )
        st.download_button(
            "Download counts (JSON)",
            data=df.to_json(orient="records", force_ascii=False),
            file_name=f"{snapshot.file_name}.census.json",
            mime="application/json",
        )
