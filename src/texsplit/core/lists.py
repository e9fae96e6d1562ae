"""Rewrite itemize/enumerate blocks as plain dashed or numbered lines"""

import logging

from texsplit.core.models import ListMode, ListState


logger = logging.getLogger(__name__)

ITEM = '\\item'
LABEL_DEF = '\\def\\labelenumi{\\arabic{enumi}.}'

OPEN_TOKENS: dict[str, ListMode] = {
    '\\begin{itemize}':   ListMode.unordered,
    '\\begin{enumerate}': ListMode.ordered,
}
CLOSE_TOKENS: dict[ListMode, str] = {
    ListMode.unordered: '\\end{itemize}',
    ListMode.ordered:   '\\end{enumerate}',
}


def _parse_item(line: str) -> tuple[str, str] | None:
    """Split a leading \\item into (label, text); None for non-items."""
    if not line.startswith(ITEM):
        return None
    rest = line[len(ITEM):]
    if rest[:1].isalpha():
        return None     # \itemsep and friends
    rest = rest.strip()
    label = ''
    if rest.startswith('[') and (end := rest.find(']')) != -1:
        label, rest = rest[1:end].strip(), rest[end + 1:].strip()
    return label, rest


def replay_block(mode: ListMode, buffer: tuple[str, ...]) -> list[str]:
    """Render buffered list lines; each item is preceded by a blank line.

    An optional [label] is kept in front of the item text.
    """
    out: list[str] = []
    counter = 1
    i = 0
    while i < len(buffer):
        line = buffer[i].lstrip()
        parsed = _parse_item(line)
        if parsed is None:
            out.append(line)
            i += 1
            continue
        label, text = parsed
        if not text:
            text = buffer[i + 1].strip() if i + 1 < len(buffer) else ''
            i += 2
        else:
            i += 1
        if label:
            text = f"{label} {text}".rstrip()
        if mode == ListMode.ordered:
            out.extend(['', f"{counter}. {text}"])
            counter += 1
        else:
            out.extend(['', f"- {text}"])
    return out


def _extend_collapsed(lines: list[str], block: list[str]) -> None:
    """Append rendered block lines, never producing two blank lines in a row."""
    for line in block:
        if not line.strip() and lines and not lines[-1].strip():
            continue
        lines.append(line)


def step(state: ListState, line: str) -> tuple[ListState, list[str]]:
    """Advance the list state machine by one line; return the new state and emitted lines."""
    trimmed = line.strip()
    if trimmed == LABEL_DEF:
        return state, []

    if state.mode == ListMode.plain:
        if trimmed in OPEN_TOKENS:
            return ListState(mode=OPEN_TOKENS[trimmed]), []
        return state, [line]

    if trimmed == CLOSE_TOKENS[state.mode]:
        return ListState(), replay_block(state.mode, state.buffer)

    if trimmed in OPEN_TOKENS:
        logger.warning("Nested list open %r inside %s list is kept as text", trimmed, state.mode.value)
    return ListState(mode=state.mode, buffer=state.buffer + (line,)), []


def fix_lists(text: str) -> str:
    """Flatten list environments into '1. text' / '- text' lines."""
    state = ListState()
    lines: list[str] = []
    for line in text.split('\n'):
        in_block = state.mode != ListMode.plain
        state, emitted = step(state, line)
        if in_block:
            _extend_collapsed(lines, emitted)
        else:
            lines.extend(emitted)
    if state.mode != ListMode.plain:
        logger.warning("Unclosed %s list at end of text; rendering %d buffered line(s)",
                       state.mode.value, len(state.buffer))
        _extend_collapsed(lines, replay_block(state.mode, state.buffer))
    return '\n'.join(lines)
