"""Split transformed LaTeX into articles at classification-code markers"""

import logging
import re
from typing import Sequence


logger = logging.getLogger(__name__)

MARKER_PREFIXES = ("IRSTI", "ҒТАМР", "МРНТИ", "ГРНТИ")


def _alternation(prefixes: Sequence[str]) -> str:
    """Prefixes are regex fragments; an invalid one fails when the pattern is compiled."""
    return "|".join(prefixes)


def wrap_pattern(prefixes: Sequence[str] = MARKER_PREFIXES) -> re.Pattern:
    """Marker with optional {\\bfseries wrap and stray closing brace."""
    return re.compile(r'\s*(?:\{\\bfseries\s+)?((?:' + _alternation(prefixes) + r')[0-9. ]*)\}?')


def marker_pattern(prefixes: Sequence[str] = MARKER_PREFIXES) -> re.Pattern:
    """Canonical \\id{CODE}{} marker."""
    return re.compile(r'\\id\{(?:' + _alternation(prefixes) + r')[0-9 .,]*\}\{\}')


def normalize_markers(text: str, prefixes: Sequence[str] = MARKER_PREFIXES) -> str:
    """Rewrite every marker occurrence as \\id{CODE}{}."""
    return wrap_pattern(prefixes).sub(lambda m: f"\\id{{{m.group(1).strip()}}}{{}}", text)


def split_articles(
    text: str,
    prefixes: Sequence[str] = MARKER_PREFIXES,
    keep_preamble: bool = False,
    ) -> list[str]:
    """Return trimmed articles, each starting at its own marker.

    Text before the first marker is dropped unless keep_preamble is set.
    Without any marker the whole text is a single article.
    """
    normalized = normalize_markers(text, prefixes)
    starts = [m.start() for m in marker_pattern(prefixes).finditer(normalized)]
    if not starts:
        return [normalized.strip()]

    articles = []
    preamble = normalized[:starts[0]].strip()
    if preamble:
        if keep_preamble:
            articles.append(preamble)
        else:
            logger.warning("Dropping %d characters before the first marker", len(preamble))

    for prev, start in zip(starts, starts[1:]):
        articles.append(normalized[prev:start].strip())
    articles.append(normalized[starts[-1]:].strip())

    logger.debug("Split %d marker(s) into %d article(s)", len(starts), len(articles))
    return articles
