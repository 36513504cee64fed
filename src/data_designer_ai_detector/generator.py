from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_ai_detector.config import AIDetectorColumnConfig
from data_designer_ai_detector.report import summarize

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def build_row_output(text: str, config: AIDetectorColumnConfig) -> dict:
    """Score one row's text and shape the result per the column settings."""
    summary = summarize(text, config.content_type, include_report=config.include_report)
    output: dict = {
        "is_valid": summary["score"] <= config.max_score,
        "ai_score": summary["score"],
        "ai_confidence": summary["confidence"],
        "ai_content_type": summary["content_type"],
        "word_count": summary["stats"]["word_count"],
        "ai_indicators": summary["indicators"],
        "ai_recommendation": summary["recommendation"],
    }
    if config.include_metrics:
        output["ai_metrics"] = summary["metrics"]
    if config.include_report:
        output["ai_report"] = summary["report"]
    return output


class AIDetectorColumnGenerator(ColumnGeneratorFullColumn[AIDetectorColumnConfig]):
    """Column generator that scores text for AI-generated content via heuristic metrics."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f50d Scoring column {self.config.name!r} for AI-generated content")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   content_type: {self.config.content_type}")
        logger.info(f"   max_score: {self.config.max_score}")

        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = " ".join(str(v) for v in row.values if v is not None)
            results.append(build_row_output(text, self.config))

        flagged = sum(1 for r in results if not r["is_valid"])
        logger.info(f"   {flagged} of {len(results)} rows above max_score")

        data = data.copy()
        data[self.config.name] = results
        return data
