"""Recompute document analysis on content changes, keeping the last good result."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from docoutline.analysis import AnalysisOptions, analyze_document
from docoutline.schemas import DocumentAnalysis, TocEntry
from docoutline.zones import Document

logger = logging.getLogger(__name__)


class OutlineRefresher:
    """Failure boundary for consumers that recompute on every content change.

    Listens to whatever change notification the host editor emits (wire it to
    :meth:`on_content_changed`) and also exposes :meth:`refresh` for manual
    updates. When a recomputation fails the error is logged and the previous
    still-valid analysis stays current, so navigation panels never go blank.
    Debouncing is left to the caller.
    """

    def __init__(self, options: AnalysisOptions | None = None) -> None:
        self.options = options or AnalysisOptions()
        self._current: DocumentAnalysis | None = None
        self.last_error: Exception | None = None

    @property
    def current(self) -> DocumentAnalysis | None:
        """The last successfully computed analysis."""
        return self._current

    @property
    def toc(self) -> list[TocEntry]:
        return self._current.toc if self._current else []

    def refresh(self, document: Document | Mapping[str, Any]) -> DocumentAnalysis | None:
        """Recompute everything for ``document``.

        Returns:
            The new analysis, or the previous one if recomputation failed.
        """
        try:
            analysis = analyze_document(document, self.options)
        except Exception as exc:
            self.last_error = exc
            logger.exception(
                "Outline recomputation failed; keeping previous results",
                extra={
                    "error": str(exc),
                    "has_previous": self._current is not None,
                },
            )
            return self._current

        self.last_error = None
        self._current = analysis
        return analysis

    def on_content_changed(self, document: Document | Mapping[str, Any]) -> DocumentAnalysis | None:
        """Handler for the editor's content-changed event."""
        return self.refresh(document)
