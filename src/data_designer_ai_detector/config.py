from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class AIDetectorColumnConfig(SingleColumnConfig):
    """Score text or code columns for AI-generated content using heuristic metrics.

    Runs the perplexity, burstiness, linguistic and (for code) code-style
    analyzers against each row and produces an averaged AI-likelihood score
    (0-100), a confidence band, and the band's indicators and recommendation.

    Attributes:
        target_columns: Columns whose content will be concatenated and scored.
        content_type: ``"text"`` or ``"code"`` to force an analyzer family, or
            ``"auto"`` to detect code per row.
        max_score: Highest overall AI score for ``is_valid=True``. Defaults to 50
            (the top of the "Low" confidence band).
        include_metrics: Include per-metric scores and details in output.
        include_report: Include the rendered plain-text report in output.
    """

    target_columns: list[str]
    content_type: Literal["auto", "text", "code"] = "auto"
    max_score: float = Field(default=50, ge=0, le=100, description="Maximum AI score for is_valid=True")
    include_metrics: bool = Field(default=False, description="Include per-metric scores and details in output")
    include_report: bool = Field(default=False, description="Include the plain-text report in output")
    column_type: Literal["ai-detector"] = "ai-detector"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f50d"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
