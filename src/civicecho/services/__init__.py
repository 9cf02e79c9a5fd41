"""Services for CivicEcho."""

from .pipeline import (
    DashboardController,
    DashboardState,
    Tab,
    enrich,
    enrich_comments,
    iter_enrichments,
    sample_comments,
)

__all__ = [
    "DashboardController",
    "DashboardState",
    "Tab",
    "enrich",
    "enrich_comments",
    "iter_enrichments",
    "sample_comments",
]
