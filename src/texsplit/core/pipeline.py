"""Ordered stage table and the transform -> split entry points"""

import logging
from functools import partial
from typing import Callable, Iterable, Sequence

from texsplit.core import transform as tx
from texsplit.core.lists import fix_lists
from texsplit.core.split import MARKER_PREFIXES, split_articles


logger = logging.getLogger(__name__)

Stage = tuple[str, Callable[[str], str]]


def build_stages(part_name: str, removed_commands: Iterable[str] = tx.REMOVED_COMMANDS) -> list[Stage]:
    """Return the fixed stage table; every stage runs once, in this order."""
    return [
        ("bold",           tx.replace_textbf),
        ("short_bold",     tx.remove_short_bold),
        ("lists",          fix_lists),
        ("number_spacing", tx.fix_number_spacing),
        ("remove_tags",    partial(tx.remove_tags, names=tuple(removed_commands))),
        ("tables",         tx.comment_out_tables),
        ("quotes",         tx.replace_quotes),
        ("envelopes",      tx.replace_envelopes),
        ("tightlist",      tx.remove_tightlists),
        ("unindent",       tx.unindent),
        ("bullets",        tx.replace_bullets),
        ("images",         partial(tx.fix_images, part_name=part_name)),
        ("scripts",        tx.replace_scripts),
        ("email_links",    tx.fix_email_links),
    ]


def run_stages(text: str, stages: list[Stage]) -> str:
    for name, fn in stages:
        text = fn(text)
        logger.debug("Stage %s -> %d chars", name, len(text))
    return text


def transform(text: str, part_name: str, removed_commands: Iterable[str] = tx.REMOVED_COMMANDS) -> str:
    """Apply every rewrite stage to pandoc LaTeX for one part."""
    return run_stages(text, build_stages(part_name, removed_commands))


def process_text(
    text: str,
    part_name: str,
    removed_commands: Iterable[str] = tx.REMOVED_COMMANDS,
    prefixes: Sequence[str] = MARKER_PREFIXES,
    keep_preamble: bool = False,
    ) -> list[str]:
    """Transform text and split it into articles."""
    transformed = transform(text, part_name, removed_commands)
    return split_articles(transformed, prefixes, keep_preamble)
