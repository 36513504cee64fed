# Static pattern tables used by the analyzers. Everything here is plain data:
# a mapping of category -> compiled regexes, plus the small word lists the
# linguistic and sentence-structure metrics look up.

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Phrase patterns (prose)
# ---------------------------------------------------------------------------

_APOS = "['’]"

AI_PHRASE_PATTERNS: dict[str, list[re.Pattern[str]]] = {
    "transitions": [
        re.compile(r"\b(?:furthermore|moreover|additionally|however|nevertheless)\b", re.IGNORECASE),
    ],
    "hedging": [
        re.compile(
            rf"\b(?:it{_APOS}s important to note|it is important to note"
            rf"|it{_APOS}s worth noting|it is worth noting|keep in mind)\b",
            re.IGNORECASE,
        ),
    ],
    "summaries": [
        re.compile(r"\b(?:in conclusion|to summarize|overall|in summary)\b", re.IGNORECASE),
    ],
    "quantifiers": [
        re.compile(r"\b(?:various|numerous|several|multiple)\b", re.IGNORECASE),
    ],
    "overused_verbs": [
        re.compile(
            r"\b(?:utiliz(?:e|es|ed|ing)|implement(?:s|ed|ing)?"
            r"|facilitat(?:e|es|ed|ing)|optimiz(?:e|es|ed|ing))\b",
            re.IGNORECASE,
        ),
    ],
    "stock_phrases": [
        re.compile(r"\b(?:in order to|with respect to|in terms of)\b", re.IGNORECASE),
    ],
    "qualifiers": [
        re.compile(r"\b(?:clearly|obviously|evidently|undoubtedly)\b", re.IGNORECASE),
    ],
}


def count_patterns_by_category(
    text: str, patterns: dict[str, list[re.Pattern[str]]] | None = None
) -> dict[str, int]:
    """Count non-overlapping matches of every pattern, grouped by category."""
    table = AI_PHRASE_PATTERNS if patterns is None else patterns
    return {
        category: sum(len(list(pat.finditer(text))) for pat in compiled)
        for category, compiled in table.items()
    }


def count_patterns(text: str, patterns: dict[str, list[re.Pattern[str]]] | None = None) -> int:
    """Total number of AI-associated phrase matches in ``text``."""
    return sum(count_patterns_by_category(text, patterns).values())


# ---------------------------------------------------------------------------
# Word lists
# ---------------------------------------------------------------------------

TRANSITION_WORDS = frozenset({
    "however", "furthermore", "moreover", "additionally", "consequently", "nevertheless",
})

SUBCLAUSE_RE = re.compile(r"\b(?:that|which|who|where|when)\b", re.IGNORECASE)
CONJUNCTION_RE = re.compile(r"\b(?:and|or|but|because|although)\b", re.IGNORECASE)
COMMA_RE = re.compile(r",")
CLAUSE_PUNCT_RE = re.compile(r"[;:]")
SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

# ---------------------------------------------------------------------------
# Code patterns
# ---------------------------------------------------------------------------

CODE_INDICATOR_PATTERNS = [
    re.compile(r"function\s+\w+\s*\("),
    re.compile(r"def\s+\w+\s*\("),
    re.compile(r"class\s+\w+"),
    re.compile(r"import\s+\w+"),
    re.compile(r"#include\s*<"),
    re.compile(r"public\s+class"),
    re.compile(r"<\?php"),
    re.compile(r"<html>", re.IGNORECASE),
]

AI_COMMENT_PATTERNS = [
    re.compile(r"//\s*(?:TODO:|FIXME:|NOTE:)", re.IGNORECASE),
    re.compile(r"/\*\*?\s*(?:This function|This method|This class)", re.IGNORECASE),
    re.compile(r"#\s*(?:This function|This method|This class)", re.IGNORECASE),
    re.compile(r"//\s*[A-Z][a-z]+\s+[a-z]+"),
    re.compile(r"//\s*[A-Z][a-z]+\s+[a-z]+\s+[a-z]+"),
    re.compile(r"//\s*[A-Z][a-z]+\s+[a-z]+\s+[a-z]+\s+[a-z]+"),
]

IDENTIFIER_RE = re.compile(r"\b[a-zA-Z_][a-zA-Z0-9_]*\b")
FUNCTION_DECL_RE = re.compile(r"function\s+\w+|def\s+\w+|public\s+\w+|private\s+\w+", re.IGNORECASE)
LEADING_WS_RE = re.compile(r"^\s*")

CONTROL_STRUCTURE_PATTERNS = [
    re.compile(r"if\s*\("),
    re.compile(r"for\s*\("),
    re.compile(r"while\s*\("),
    re.compile(r"switch\s*\("),
    re.compile(r"catch\s*\("),
]

# Missing spaces around =, == and !=
SPACING_PATTERNS = [
    re.compile(r"[^ ]=[^ ]"),
    re.compile(r"[^ ]==[^ ]"),
    re.compile(r"[^ ]!=[^ ]"),
]
