# SPDX-License-Identifier: Apache-2.0
"""AI content detector plugin for NeMo Data Designer.

Adds an ``ai-detector`` column type that estimates how likely text or source
code is to be AI-generated, using regex and sentence statistics heuristics
(phrase patterns, n-gram repetition, burstiness, lexical diversity, code
style). No model inference, no API dependencies.

Usage::

    from data_designer_ai_detector import AIDetectorColumnConfig

    builder.add_column(AIDetectorColumnConfig(
        name="ai_check",
        target_columns=["answer"],
        max_score=50,
    ))

The engine can also be called directly::

    from data_designer_ai_detector import analyze, assess

    report = analyze("Moreover, it utilizes formal language.")
    assess(report).confidence
"""

from data_designer_ai_detector.config import AIDetectorColumnConfig
from data_designer_ai_detector.core import (
    Hyperparameters,
    MetricResult,
    OverallAssessment,
    analyze,
    assess,
    is_code_content,
)
from data_designer_ai_detector.files import read_content_file
from data_designer_ai_detector.report import render_text_report, report_from_json, report_to_json, summarize

__all__ = [
    "AIDetectorColumnConfig",
    "Hyperparameters",
    "MetricResult",
    "OverallAssessment",
    "analyze",
    "assess",
    "is_code_content",
    "read_content_file",
    "render_text_report",
    "report_from_json",
    "report_to_json",
    "summarize",
]
