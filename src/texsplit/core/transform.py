"""Text-level rewrites applied to pandoc LaTeX output, one pure function per stage"""

import re
from typing import Iterable

from texsplit.core.utils.braces import remove_command


REMOVED_COMMANDS = ("ul", "hl", "pandocbounded")

SHORT_BOLD_RE   = re.compile(r'\{\\bfseries ([^\s0-9])\}')
NUMBER_RUN_RE   = re.compile(r'\n((?:\d+\.)+)[ \t]*')
DOT_SPACE_RE    = re.compile(r'\. (\d)')
BULLET_RE       = re.compile(r'^([ \t]*)•', re.MULTILINE)
IMAGE_RE        = re.compile(
    r'\\includegraphics(?:\[[^\]]*\])?\{media/([^}/\\]+?)(?:\.(?:png|jpe?g|pdf|webp|wmf|emf))?\}'
)
SUPERSCRIPT_RE  = re.compile(r'\\textsuperscript\{([^}]*)\}')
SUBSCRIPT_RE    = re.compile(r'\\textsubscript\{([^}]*)\}')
EMAIL_LINK_RE   = re.compile(r'\\href\{mailto:([^}]+)\}\{\\nolinkurl\{[^}]+\}\}')

TABLE_OPEN  = r'\begin{longtable}[]{@{}'
TABLE_CLOSE = r'\end{longtable}'
ENVELOPE    = '\U0001F582'   # 🖂


def replace_textbf(text: str) -> str:
    """Rewrite \\textbf{ as a {\\bfseries group; the existing closing brace ends it."""
    return text.replace('\\textbf{', '{\\bfseries ')


def remove_short_bold(text: str) -> str:
    """Drop bold around a single non-space, non-digit character."""
    return SHORT_BOLD_RE.sub(r'\1', text)


def fix_number_spacing(text: str) -> str:
    """Normalize 'N.N. text' outline numbers, then close '. N' gaps inside numbers."""
    text = NUMBER_RUN_RE.sub(r'\n\1 ', text)
    return DOT_SPACE_RE.sub(r'.\1', text)


def remove_tag(text: str, name: str) -> str:
    return remove_command(text, name)


def remove_tags(text: str, names: Iterable[str] = REMOVED_COMMANDS) -> str:
    for name in names:
        text = remove_command(text, name)
    return text


def comment_out_tables(text: str) -> str:
    """Prefix every line of a longtable environment with '%% '."""
    out = []
    inside = False
    for line in text.split('\n'):
        if line.startswith(TABLE_OPEN):
            inside = True
            out.append(f"%% {line}")
        elif inside and line.startswith(TABLE_CLOSE):
            inside = False
            out.append(f"%% {line}")
        elif inside:
            out.append(f"%% {line}")
        else:
            out.append(line)
    return '\n'.join(out)


def replace_quotes(text: str) -> str:
    return text.replace('\\textquotesingle', "'").replace('\\textquotedbl', '"')


def replace_envelopes(text: str) -> str:
    text = text.replace(ENVELOPE, '\\envelope ')
    text = text.replace('\\textsuperscript{\\envelope }', '\\envelope ')
    return text.replace('{\\bfseries \\envelope }', '\\envelope ')


def remove_tightlists(text: str) -> str:
    return text.replace('\\tightlist', '')


def unindent(text: str) -> str:
    return '\n'.join(line.lstrip() for line in text.split('\n'))


def replace_bullets(text: str) -> str:
    return BULLET_RE.sub(r'\1-', text)


def fix_images(text: str, part_name: str) -> str:
    """Point media/NAME.ext images at \\fig{part/NAME}{}; media is extracted per part."""
    return IMAGE_RE.sub(lambda m: f"\\fig{{{part_name}/{m.group(1)}}}{{}}", text)


def replace_scripts(text: str) -> str:
    text = SUPERSCRIPT_RE.sub(r'\\tsp{\1}', text)
    return SUBSCRIPT_RE.sub(r'\\tsb{\1}', text)


def fix_email_links(text: str) -> str:
    """Collapse \\href{mailto:E}{\\nolinkurl{E}} to the bare address."""
    return EMAIL_LINK_RE.sub(r'\1', text)
