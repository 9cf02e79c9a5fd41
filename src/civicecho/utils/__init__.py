"""Utility modules for CivicEcho."""

from .data_prep import comments_to_frame, export_to_json, prepare_export, word_cloud_sizes

__all__ = [
    "comments_to_frame",
    "export_to_json",
    "prepare_export",
    "word_cloud_sizes",
]
