"""Streamlit dashboard for CivicEcho."""

import html
import logging
import random
import time

import pandas as pd
import plotly.express as px
import streamlit as st

from civicecho.core.config import settings
from civicecho.core.constants import UIConstants
from civicecho.core.exceptions import InvalidCSVError
from civicecho.services.pipeline import DashboardController, Tab
from civicecho.utils.data_prep import comments_to_frame, word_cloud_sizes

# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)

TAB_LABELS = {
    Tab.UPLOAD: "📤 Upload & Preview",
    Tab.SENTIMENT: "📊 Sentiment Analysis",
    Tab.SUMMARIES: "📝 Comment Summaries",
    Tab.WORDCLOUD: "☁️ Word Cloud",
}


def _progress_callback(bar):
    def _update(done: int, total: int) -> None:
        bar.progress(done / total, text=f"Processing comment {done} of {total}...")
    return _update


def render_upload(controller: DashboardController) -> None:
    uploaded_file = st.file_uploader("Upload a CSV file (id,comment)", type=["csv"])

    if uploaded_file is not None and st.button("Analyze uploaded file", disabled=controller.state.is_processing):
        bar = st.progress(0.0)
        try:
            count = controller.upload(uploaded_file.getvalue(), on_progress=_progress_callback(bar))
        except InvalidCSVError:
            st.error(controller.state.last_error)
        else:
            logger.info(f"Processed {count} comments from {uploaded_file.name}")
            st.rerun()

    st.write("Or use sample data to explore the dashboard")
    if st.button("Load Sample Data", disabled=controller.state.is_processing):
        bar = st.progress(0.0)
        controller.use_sample_data(on_progress=_progress_callback(bar))
        st.rerun()

    comments = controller.comments
    if comments:
        st.subheader("Data Preview")
        st.dataframe(comments_to_frame(controller.preview()), hide_index=True)
        if len(comments) > settings.preview_rows:
            st.caption(f"Showing first {settings.preview_rows} of {len(comments)} comments")


def render_sentiment(controller: DashboardController) -> None:
    distribution = controller.distribution()
    col_chart, col_summary = st.columns(2)

    with col_chart:
        st.subheader("Sentiment Distribution")
        if distribution.total:
            chart_df = pd.DataFrame(
                [{"sentiment": label, "count": n} for label, n in distribution.as_dict().items()]
            )
            fig = px.pie(
                chart_df, names="sentiment", values="count", hole=0.6,
                color="sentiment", color_discrete_map=UIConstants.SENTIMENT_COLORS,
            )
            st.plotly_chart(fig)
        else:
            st.caption("No comments analyzed yet")
        for label, pct in distribution.percentages().items():
            st.write(f"**{label}**: {distribution.as_dict()[label]} ({pct}%)")

    with col_summary:
        st.subheader("Analysis Summary")
        st.metric("Total Comments", len(controller.comments))
        st.metric("Most Common Sentiment", distribution.dominant().value)
        st.metric("Processing Status", "Processing..." if controller.state.is_processing else "Complete")

        report = controller.report()
        st.markdown(report.summary)
        st.markdown("**Top concerns**")
        for concern in report.top_concerns:
            st.markdown(f"- {concern}")
        st.markdown("**Recommendations**")
        for rec in report.recommendations:
            st.markdown(f"- {rec}")

    st.dataframe(comments_to_frame(controller.comments), hide_index=True)


def render_summaries(controller: DashboardController) -> None:
    st.subheader("Comment Summaries")
    for c in controller.comments:
        badge = f" · **{c.sentiment.value}**" if c.sentiment else ""
        st.markdown(f"Comment #{c.id}{badge}")
        st.write(c.text)
        st.markdown(f":blue[Summary: {c.summary or 'Generating summary...'}]")
        st.divider()


def render_word_cloud(controller: DashboardController) -> None:
    frequencies = controller.word_frequency()
    st.subheader("Word Cloud")

    # Colors are decorative; a fresh pick on every render is fine
    spans = [
        f'<span style="font-size:{size:.0f}px;color:{random.choice(UIConstants.WORD_CLOUD_COLORS)};'
        f'line-height:1.2;margin:0 6px" title="{html.escape(word)}">{html.escape(word)}</span>'
        for word, size in word_cloud_sizes(frequencies)
    ]
    st.markdown(f'<div style="text-align:center">{" ".join(spans)}</div>', unsafe_allow_html=True)

    st.subheader("Top Keywords")
    cols = st.columns(3)
    for i, wf in enumerate(controller.top_keywords()):
        cols[i % 3].metric(wf.word, wf.frequency)


RENDERERS = {
    Tab.UPLOAD: render_upload,
    Tab.SENTIMENT: render_sentiment,
    Tab.SUMMARIES: render_summaries,
    Tab.WORDCLOUD: render_word_cloud,
}

# Page configuration
st.set_page_config(page_title="CivicEcho — Comment Analysis", page_icon="💬", layout="wide")

if "controller" not in st.session_state:
    st.session_state["controller"] = DashboardController(delay=time.sleep)
controller: DashboardController = st.session_state["controller"]

st.title("💬 CivicEcho")
st.caption(f"{len(controller.comments)} comments loaded")

tabs = list(TAB_LABELS)
selected = st.radio(
    "View",
    tabs,
    index=tabs.index(controller.state.active_tab),
    format_func=TAB_LABELS.get,
    horizontal=True,
    label_visibility="collapsed",
)
controller.set_tab(selected)

RENDERERS[controller.state.active_tab](controller)
