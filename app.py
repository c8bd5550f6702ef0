from __future__ import annotations

from typing import cast

import streamlit as st
from dotenv import load_dotenv

from howto_guide.config import Settings, configure_logging
from howto_guide.controller import QueryController
from howto_guide.errors import ConfigError
from howto_guide.llm import GeminiSearchClient
from howto_guide.loading import wait_with_quotes
from howto_guide.markdown import parse_document
from howto_guide.render import render_html, render_sources_html
from howto_guide.types import QueryState

# Load environment variables from .env if present.
load_dotenv()
settings = Settings()
configure_logging(settings.log_level)

st.set_page_config(
    page_title="AI How-To Guide",
    page_icon="💡",
    layout="centered",
)

# ──────────────────────────────────────────────
# CUSTOM CSS: slate background, cyan accents
# ──────────────────────────────────────────────
st.markdown(
    """
<style>
.stApp {
    background: #0f172a;
    color: #ffffff;
}

/* Hero header */
.hero-header {
    text-align: center;
    padding: 2rem 1rem 1.5rem;
}
.hero-header h1 {
    font-size: 3rem;
    font-weight: 800;
    background: linear-gradient(90deg, #22d3ee, #3b82f6);
    -webkit-background-clip: text;
    -webkit-text-fill-color: transparent;
    background-clip: text;
    letter-spacing: -0.5px;
}
.hero-header p {
    color: #94a3b8;
    font-size: 1.1rem;
    margin: 0;
}

/* Loading view */
.loading-quote {
    text-align: center;
    color: #94a3b8;
    font-style: italic;
    font-size: 1.1rem;
    min-height: 3rem;
    margin-top: 2rem;
}
.loading-caption {
    text-align: center;
    color: #64748b;
}

/* Answer card */
.answer-title {
    color: #22d3ee;
    font-size: 1.5rem;
    font-weight: 700;
}
.answer-h2 {
    color: #f1f5f9;
    font-size: 1.5rem;
    font-weight: 700;
    margin: 2rem 0 1rem;
}
.answer-h3 {
    color: #f1f5f9;
    font-size: 1.25rem;
    font-weight: 700;
    margin: 1.5rem 0 0.75rem;
}
.answer-p, .answer-ul li, .answer-ol li {
    color: #cbd5e1;
    font-size: 1.05rem;
    line-height: 1.7;
}
.answer-ul, .answer-ol {
    margin: 1rem 0;
    padding-left: 1.5rem;
}
.answer-strong {
    color: #f1f5f9;
    font-weight: 600;
}
.answer-code {
    color: #a5f3fc;
    background: rgba(34, 211, 238, 0.1);
    border-radius: 4px;
    padding: 0.1rem 0.3rem;
}
.answer-pre {
    background: #020617;
    border: 1px solid #334155;
    border-radius: 10px;
    padding: 1rem;
    overflow-x: auto;
    color: #e2e8f0;
}

/* Sources */
.sources {
    margin-top: 2rem;
    padding-top: 1.5rem;
    border-top: 1px solid #334155;
}
.sources-title {
    color: #22d3ee;
    font-size: 1.25rem;
    font-weight: 600;
}
.sources-list {
    list-style: none;
    padding-left: 0;
}
.source-item {
    margin-bottom: 0.75rem;
}
.source-item a {
    color: #cbd5e1;
    text-decoration: none;
    word-break: break-word;
}
.source-item a:hover {
    color: #22d3ee;
}

/* Empty state and footer */
.empty-state, .footer {
    text-align: center;
    color: #64748b;
}
.footer a {
    color: #22d3ee;
}
</style>
""",
    unsafe_allow_html=True,
)

# ──────────────────── Hero Header ────────────────────
st.markdown(
    """
<div class="hero-header">
    <h1>AI How-To Guide</h1>
    <p>Ask any "how to" question and get instant, intelligent answers powered by AI and web search.</p>
</div>
""",
    unsafe_allow_html=True,
)


@st.cache_resource(show_spinner=False)
def get_client(api_key: str, model_name: str) -> GeminiSearchClient:
    """Create the Gemini client once and reuse it across reruns."""
    return GeminiSearchClient(api_key=api_key, model_name=model_name)


def get_query_state() -> QueryState:
    """Read or initialize the query state from session state."""
    raw_state = st.session_state.get("query_state")
    if not isinstance(raw_state, QueryState):
        st.session_state["query_state"] = QueryState()
    return cast(QueryState, st.session_state["query_state"])


# ──────────────────── Initialize ────────────────────
try:
    api_key = settings.require_api_key()
    client = get_client(api_key, settings.gemini_model_name)
except ConfigError as exc:
    st.error(f"🔑 {exc}. Set it in your environment or .env file.")
    st.stop()

controller = QueryController(client, get_query_state())
state = controller.state
st.session_state.setdefault("query_input", state.query)


def start_query(controller: QueryController) -> None:
    """Form callback: enter the loading state before the next run draws the page."""
    controller.begin(st.session_state.get("query_input", ""))


# ──────────────────── Search Input ────────────────────
# Callbacks run before the script body, so the form is drawn disabled while loading.
with st.form("search", clear_on_submit=False, border=False):
    st.text_input(
        "Question",
        key="query_input",
        placeholder="How to...",
        label_visibility="collapsed",
        disabled=state.is_loading,
    )
    st.form_submit_button(
        "🔍 Search",
        on_click=start_query,
        args=(controller,),
        disabled=state.is_loading,
        use_container_width=True,
    )

if state.is_loading:
    quote_placeholder = st.empty()
    caption_placeholder = st.empty()
    caption_placeholder.markdown(
        '<p class="loading-caption">Searching for the best answer...</p>',
        unsafe_allow_html=True,
    )

    def show_quote(quote: str) -> None:
        quote_placeholder.markdown(f'<p class="loading-quote">"{quote}"</p>', unsafe_allow_html=True)

    controller.run(
        wait=lambda future: wait_with_quotes(
            future, show_quote, interval=settings.loading_quote_interval_seconds
        ),
    )
    # Redraw with the form enabled again.
    st.rerun()

# ──────────────────── Result Section ────────────────────
if state.error:
    st.error(f"**Error:** {state.error}")
    if st.button("Dismiss", key="dismiss_error"):
        controller.dismiss_error()
        st.rerun()
elif state.answer_text:
    title_col, clear_col = st.columns([4, 1])
    with title_col:
        st.markdown('<div class="answer-title">Answer</div>', unsafe_allow_html=True)
    with clear_col:
        if st.button("🗑️ Clear", key="clear_answer", use_container_width=True):
            controller.clear()
            st.rerun()

    st.html(render_html(parse_document(state.answer_text)))
    sources_html = render_sources_html(state.sources)
    if sources_html:
        st.html(sources_html)
else:
    st.markdown(
        '<div class="empty-state"><p>Ready to learn something new?</p>'
        "<p>Type your question above to get started.</p></div>",
        unsafe_allow_html=True,
    )

st.markdown("---")
st.markdown(
    '<div class="footer"><p>Powered by Google Gemini</p></div>',
    unsafe_allow_html=True,
)
