"""Parsing of delimiter-marked AI output into a newsletter draft.

The model is asked to wrap each field in runs of ``*``::

    *Title*
    **Subtitle**
    ***Paragraph***
    ****tag one, tag two****

The text is split into alternating tokens: maximal runs of ``*`` and the text
between them. Fields open on a run of exactly their own length: 1 is a title,
2 a subtitle, 3 a paragraph and 4 the tag line. A subtitle or paragraph ends
at the first run at least as long as its opener; shorter runs inside it are
kept as text, so ``***Use **bold** here***`` is one paragraph. Two ambiguous
joins are accepted between a subtitle and its paragraph:

* ``**Sub*****Para***``: the closing and opening runs touch (5 stars).
* ``**Sub***Para***``: a single run of 3 both closes the subtitle and opens
  the paragraph, which must start right after it. ``**Sub*** text`` is a
  subtitle followed by a stray star, not a section.

Fields never span a newline. A stray run as long as the closer inside body
text still ends the field early, which can drop or mis-split a section.
"""
import re
from datetime import datetime
from typing import List, Optional, Tuple, Union
from dateutil import tz as dateutil_tz
from newsletter_ai.core.constants import (
    DEFAULT_TITLE,
    DEFAULT_TAG,
    DELIMITER_CHAR,
    TITLE_RUN,
    SUBTITLE_RUN,
    PARAGRAPH_RUN,
    TAG_RUN
)
from newsletter_ai.core.types import NewsletterDraft, Section

Token = Tuple[str, Union[int, str]]

STARS = 'stars'
TEXT = 'text'

_TOKEN_RE = re.compile(r'\*+|[^*]+')


def tokenize(text: str) -> List[Token]:
    """Split text into ('stars', run_length) and ('text', value) tokens."""
    return [
        (STARS, len(chunk)) if chunk.startswith(DELIMITER_CHAR) else (TEXT, chunk)
        for chunk in _TOKEN_RE.findall(text)
    ]


def _token(tokens: List[Token], index: int) -> Optional[Token]:
    if 0 <= index < len(tokens):
        return tokens[index]
    return None


def _field_text(token: Optional[Token]) -> Optional[str]:
    """Return the value of a single-line text token, otherwise None."""
    if token is None or token[0] != TEXT or '\n' in token[1]:
        return None
    return token[1]


def _is_run(token: Optional[Token], length: int) -> bool:
    return token == (STARS, length)


def find_enclosed(tokens: List[Token], run: int) -> Optional[str]:
    """Return the first text wrapped on both sides by runs of exactly `run` stars."""
    for i in range(len(tokens) - 2):
        value = _field_text(tokens[i + 1])
        if _is_run(tokens[i], run) and value is not None and _is_run(tokens[i + 2], run):
            return value.strip()
    return None


def _read_field(tokens: List[Token], start: int, closing_run: int) -> Optional[Tuple[str, int]]:
    """Read a single-line field that ends at the first run of `closing_run` or more stars.

    Shorter runs inside the field are kept as literal text. Returns the raw
    field text and the index of the closing run, or None.
    """
    parts = []
    j = start
    while j < len(tokens):
        kind, value = tokens[j]
        if kind == TEXT:
            if '\n' in value:
                return None
            parts.append(value)
        elif value < closing_run:
            parts.append(DELIMITER_CHAR * value)
        else:
            if not parts:
                return None
            return ''.join(parts), j
        j += 1
    return None


def _match_section(tokens: List[Token], i: int) -> Optional[Tuple[Section, int]]:
    """Try to read one subtitle/paragraph pair starting at token `i`.

    Returns the section and the index just past it, or None.
    """
    if not _is_run(tokens[i], SUBTITLE_RUN):
        return None
    subtitle = _read_field(tokens, i + 1, SUBTITLE_RUN)
    if subtitle is None:
        return None
    subtitle_text, j = subtitle
    closing = tokens[j][1]

    if closing == SUBTITLE_RUN + PARAGRAPH_RUN:
        p = j + 1
    elif closing == PARAGRAPH_RUN:
        # Shared run: the paragraph must follow it directly
        first = _token(tokens, j + 1)
        if first is None or first[0] != TEXT or first[1][:1].isspace():
            return None
        p = j + 1
    elif closing == SUBTITLE_RUN:
        j += 1
        gap = _token(tokens, j)
        if gap is not None and gap[0] == TEXT and not gap[1].strip():
            j += 1
        if not _is_run(_token(tokens, j), PARAGRAPH_RUN):
            return None
        p = j + 1
    else:
        return None

    paragraph = _read_field(tokens, p, PARAGRAPH_RUN)
    if paragraph is None:
        return None
    paragraph_text, k = paragraph
    return {'subtitle': subtitle_text.strip(), 'paragraph': paragraph_text.strip()}, k + 1


def find_sections(tokens: List[Token]) -> List[Section]:
    """Collect every subtitle/paragraph pair, scanning left to right."""
    sections = []
    i = 0
    while i < len(tokens):
        match = _match_section(tokens, i)
        if match is None:
            i += 1
            continue
        section, i = match
        sections.append(section)
    return sections


def parse_content(content: str, category: str) -> NewsletterDraft:
    """Parse AI-generated markup into a newsletter draft.

    Never raises: missing fields fall back to placeholders and an empty
    section list.

    Args:
        content: Raw text returned by the model
        category: Category label copied onto the draft

    Returns:
        NewsletterDraft dated with today's UTC date
    """
    tokens = tokenize(content or '')

    title = find_enclosed(tokens, TITLE_RUN)
    tag = find_enclosed(tokens, TAG_RUN)

    return {
        'title': DEFAULT_TITLE if title is None else title,
        'tag': DEFAULT_TAG if tag is None else tag,
        'category': category,
        'date': datetime.now(dateutil_tz.UTC).strftime('%Y-%m-%d'),
        'content': find_sections(tokens),
    }
