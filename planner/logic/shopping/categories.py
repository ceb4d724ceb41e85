"""Keyword based ingredient classification.

Keyword sets are data: defaults come from planner.utilities.constants and can be
overridden with a JSON document {"category": ["keyword", ...]} whose path is the
CATEGORY_KEYWORDS_FILE setting.
"""
import json
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

from planner.utilities.constants import CATEGORY_KEYWORDS, OTHER_CATEGORY

logger = logging.getLogger(__name__)

__all__ = ["load_category_keywords", "compile_keywords", "classify_ingredient", "default_keywords"]


def load_category_keywords(path: Optional[Path] = None) -> Dict[str, List[str]]:
    """Return keyword sets in precedence order, applying overrides from `path` if given.

    Raises:
        ValueError: the file names a category that does not exist or is not a
            mapping of category -> list of strings.
    """
    keywords = {name: list(words) for name, words in CATEGORY_KEYWORDS.items()}
    if path is None:
        return keywords
    with open(path, 'r', encoding='utf-8') as f:
        overrides = json.load(f)
    if not isinstance(overrides, dict):
        raise ValueError(f"Keyword file {path} must contain an object")
    for name, words in overrides.items():
        if name not in keywords:
            raise ValueError(f"Unknown shopping category in {path}: {name!r}")
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise ValueError(f"Keywords for {name!r} must be a list of strings")
        keywords[name] = [w.strip().lower() for w in words if w.strip()]
    logger.info(f"Loaded category keyword overrides from {path}")
    return keywords


def compile_keywords(keywords: Dict[str, List[str]]) -> List[tuple]:
    """Turn keyword sets into (category, pattern) pairs, keeping precedence order."""
    compiled = []
    for name, words in keywords.items():
        if not words:
            continue
        pattern = re.compile("|".join(re.escape(w) for w in words), re.IGNORECASE)
        compiled.append((name, pattern))
    return compiled


_default_patterns = None


def default_keywords() -> List[tuple]:
    """Compiled patterns for the configured keyword sets (loaded once)."""
    global _default_patterns
    if _default_patterns is None:
        from planner.utilities.config import CATEGORY_KEYWORDS_FILE
        try:
            keywords = load_category_keywords(CATEGORY_KEYWORDS_FILE)
        except (OSError, ValueError) as e:
            logger.error(f"Could not load category keywords from {CATEGORY_KEYWORDS_FILE}: {e}")
            raise
        _default_patterns = compile_keywords(keywords)
    return _default_patterns


def classify_ingredient(normalized: str, keywords: Optional[List[tuple]] = None) -> str:
    """First category whose pattern occurs anywhere in `normalized`, else 'other'."""
    for name, pattern in (keywords if keywords is not None else default_keywords()):
        if pattern.search(normalized):
            return name
    return OTHER_CATEGORY
