"""Annotation of Ares instruction trace logs."""

from __future__ import annotations

from .annotator import TraceAnnotator, TraceFormat, annotate, annotate_lines, annotate_path

__all__ = [
    "TraceAnnotator",
    "TraceFormat",
    "annotate",
    "annotate_lines",
    "annotate_path",
]
