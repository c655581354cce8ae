"""
Segmenter — raw script text → ordered display segments.

Paragraphs (blank-line separated) become separate blocks with a spacer between
them; text without blank lines falls back to one block per line.  Blocks longer
than the line budget are greedily wrapped at the last whitespace that fits.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# ── Constants ─────────────────────────────────────────────────────────────────
# One segment must fit one line of the reading strip
MAX_LINE_LENGTH = 72

KIND_TEXT   = "text"
KIND_SPACER = "spacer"

_PARAGRAPH_RE = re.compile(r'\n{2,}')


@dataclass(frozen=True)
class Segment:
    text : str
    kind : str = KIND_TEXT

    @property
    def is_spacer(self) -> bool:
        return self.kind == KIND_SPACER

    @property
    def is_skip_target(self) -> bool:
        """Spacers and blank text are never landed on by navigation."""
        return self.is_spacer or not self.text.strip()


SPACER = Segment("", KIND_SPACER)


# ─────────────────────────────────────────────────────────────────────────────
#  Splitting
# ─────────────────────────────────────────────────────────────────────────────
def _split_parts(text: str) -> list[str]:
    if _PARAGRAPH_RE.search(text):
        return _PARAGRAPH_RE.split(text)
    if '\n' in text:
        return text.split('\n')
    return [text]


def _last_space(window: str) -> int:
    for i in range(len(window) - 1, 0, -1):
        if window[i].isspace():
            return i
    return 0


def wrap_part(part: str, max_line_length: int = MAX_LINE_LENGTH) -> list[str]:
    """
    Greedy wrap of one block into chunks of at most *max_line_length* chars.

    Blocks that already fit are returned untouched (no stripping).
    """
    if len(part) <= max_line_length:
        return [part]
    rest = part.strip()
    if not rest:
        return ['']
    chunks: list[str] = []
    while rest:
        if len(rest) <= max_line_length:
            chunks.append(rest)
            break
        sp       = _last_space(rest[:max_line_length + 1])
        break_at = sp + 1 if sp > 0 else max_line_length
        chunks.append(rest[:break_at].strip())
        rest = rest[break_at:].strip()
    return chunks


def segment(text: str, max_line_length: int = MAX_LINE_LENGTH) -> list[Segment]:
    """Split *text* into display segments.  Empty text gives ``[Segment("")]``."""
    text  = text.replace('\r\n', '\n').replace('\r', '\n')
    parts = _split_parts(text)

    out: list[Segment] = []
    for i, part in enumerate(parts):
        if i:
            out.append(SPACER)
        out.extend(Segment(chunk) for chunk in wrap_part(part, max_line_length))
    return out


def join_segments(segments: list[Segment]) -> str:
    """Render segments back to text: one line each, spacers as blank lines."""
    return '\n'.join('' if s.is_spacer else s.text.strip() for s in segments)


def text_segments(segments: list[Segment]) -> list[Segment]:
    return [s for s in segments if not s.is_skip_target]
