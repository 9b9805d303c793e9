# yt_transcript/transcript_fetcher/diagnostics/collector.py
"""
Diagnostics aggregation for one fetch run.

Collects the StageResult of every executed stage and synthesizes the
Diagnostics section of the TranscriptReport.
"""

from __future__ import annotations

from typing import Dict, List
from uuid import UUID

from yt_transcript.transcript_fetcher.schema import Diagnostics, StageResult


class DiagnosticsCollector:
    """
    Accumulates StageResult objects for a single run.

    One collector per run; never shared between runs.
    """

    def __init__(self, run_id: UUID) -> None:
        self.run_id = run_id
        self._stage_status: Dict[str, StageResult] = {}
        self._global_warnings: List[str] = []
        self._global_errors: List[str] = []
        self._global_suggested_fixes: List[str] = []

    def add_stage_result(self, result: StageResult) -> None:
        """Add a stage result and merge global fields."""
        if result.stage_name in self._stage_status:
            raise ValueError(f"Duplicate stage result for {result.stage_name}")

        self._stage_status[result.stage_name] = result

        self._global_warnings.extend(result.warnings)
        self._global_errors.extend(result.errors)
        self._global_suggested_fixes.extend(result.suggested_fixes)

        for failure in result.failures:
            self._global_suggested_fixes.extend(failure.suggested_fixes)

    def build_diagnostics(self) -> Diagnostics:
        # dict.fromkeys dedupes while keeping first-seen order
        return Diagnostics(
            stage_status=self._stage_status.copy(),
            warnings=self._global_warnings.copy(),
            errors=self._global_errors.copy(),
            suggested_fixes=list(dict.fromkeys(self._global_suggested_fixes)),
        )
