"""Brace-depth scanning for LaTeX command groups"""


def find_group_end(text: str, start: int) -> int:
    """Return the index just past the '}' closing the group opened before start.

    Scanning begins at depth 1, i.e. the opening '{' sits at start - 1.
    Returns len(text) when the group is never closed.
    """
    depth = 1
    for i, ch in enumerate(text[start:], start):
        if ch == '{':
            depth += 1
        elif ch == '}':
            depth -= 1
            if depth == 0:
                return i + 1
    return len(text)


def remove_command(text: str, name: str) -> str:
    """Delete every \\name{...} group, including nested braces inside it."""
    token = f"\\{name}{{"
    parts = []
    pos = 0
    while (hit := text.find(token, pos)) != -1:
        parts.append(text[pos:hit])
        pos = find_group_end(text, hit + len(token))
    parts.append(text[pos:])
    return ''.join(parts)
