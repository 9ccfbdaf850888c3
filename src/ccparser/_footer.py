# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

r"""Footer paragraph classifier.

Footers follow the git trailer convention. The first line of each
footer paragraph is matched against these rules, in order:

1. **Breaking change**: ``BREAKING CHANGE: <title>``. The token is
   case-sensitive and singular; ``BREAKING CHANGES:`` is *not* a footer.
2. **Tag**: ``<Token>: <title>`` where the token is letter groups joined
   by single hyphens (``Reviewed-by``, ``Refs-With-User``). Any casing.
3. **Reference list**: ``<Word> #1, #2`` with no colon, e.g.
   ``Closes #1, #2``. The word must not start with ``#``.
4. **Fallback**: no tag; the first line is kept verbatim as the title.

Every line after the first is the footer ``content``.

GitHub's revert commits carry no trailers, so a ``Revert "<subject>"``
header whose body opens with ``This reverts commit <sha>.`` also yields
a synthesized ``revert`` footer.

Pure implementation: depends only on ``re`` and sibling modules.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from ccparser._header import parse_header
from ccparser._text import split_to_lines, trim_blank_lines
from ccparser._types import Footer

BREAKING_CHANGE_TAG = 'BREAKING CHANGE'
REVERT_TAG = 'revert'

# GitHub's issue-closing keywords.
DEFAULT_CLOSING_TAGS: frozenset[str] = frozenset({
    'close',
    'closed',
    'closes',
    'fix',
    'fixed',
    'fixes',
    'resolve',
    'resolved',
    'resolves',
})

FOOTER_BREAKING_CHANGE_PATTERN: re.Pattern[str] = re.compile(
    r'(?P<tag>BREAKING CHANGE):\s?(?P<title>.*)',
)

FOOTER_TAG_PATTERN: re.Pattern[str] = re.compile(
    r'(?P<tag>[a-z]+(?:-[a-z]+)*)'  # token, hyphen-joined words
    r':\s*'  # colon + optional whitespace
    r'(?P<title>.*)',
    re.IGNORECASE | re.ASCII,
)

FOOTER_REFERENCE_PATTERN: re.Pattern[str] = re.compile(
    r'(?P<tag>[a-z]{2,})'  # bare word label
    r'\s+'
    r'(?P<title>#\d+(?:(?:\s*,\s*|\s+)#\d+)*)'  # "#1, #2" or "#1 #2"
    r'\s*',
    re.IGNORECASE | re.ASCII,
)

REFERENCE_PATTERN: re.Pattern[str] = re.compile(r'#\d+', re.ASCII)

_COMMA = re.compile(r'\s*,\s*', re.ASCII)

# GitHub's default revert subject: Revert "feat: add X"
REVERT_SUBJECT_PATTERN: re.Pattern[str] = re.compile(
    r'revert\s+(?P<quote>["\'])(?P<subject>.*)(?P=quote)\s*',
    re.IGNORECASE | re.ASCII,
)

REVERT_COMMIT_PATTERN: re.Pattern[str] = re.compile(
    r'This reverts commit (?P<sha>[0-9a-fA-F]+)\.\s*',
)


def _normalize_references(refs: str) -> str:
    """Collapse whitespace in a reference list to ``#1, #2`` form."""
    return _COMMA.sub(', ', ' '.join(refs.split()))


def _tagged(match: re.Match[str]) -> tuple[str, str]:
    return match.group('tag').strip(), match.group('title').strip()


def _references(match: re.Match[str]) -> tuple[str, str]:
    return match.group('tag').strip(), _normalize_references(match.group('title'))


# Ordered (name, pattern, extractor) rules; the first match wins.
FOOTER_RULES: tuple[tuple[str, re.Pattern[str], Callable[[re.Match[str]], tuple[str, str]]], ...] = (
    ('breaking_change', FOOTER_BREAKING_CHANGE_PATTERN, _tagged),
    ('tag', FOOTER_TAG_PATTERN, _tagged),
    ('references', FOOTER_REFERENCE_PATTERN, _references),
)


def _match_rule(line: str) -> tuple[str, str] | None:
    for _name, pattern, extract in FOOTER_RULES:
        match = pattern.fullmatch(line)
        if match is not None:
            return extract(match)
    return None


def is_footer_paragraph(first_line: str) -> bool:
    """Return ``True`` if a paragraph starting with *first_line* is a footer.

    >>> is_footer_paragraph('Refs-With-User: #2')
    True
    >>> is_footer_paragraph('BREAKING CHANGES: plural is not accepted')
    False
    """
    return _match_rule(first_line) is not None


def parse_footer_paragraph(paragraph: str) -> Footer:
    """Classify a footer paragraph.

    Args:
        paragraph: The full paragraph text, possibly spanning several
            lines (continuation paragraphs included).

    Returns:
        A :class:`Footer`. Unrecognised paragraphs keep their first
        line as ``title`` with an empty ``tag``.
    """
    first, *rest = split_to_lines(paragraph)
    content = '\n'.join(trim_blank_lines(rest))

    matched = _match_rule(first)
    if matched is None:
        return Footer(tag='', title=first, content=content)
    tag, title = matched
    return Footer(tag=tag, title=title, content=content)


def extract_references(text: str) -> list[str]:
    """Return every ``#<digits>`` token in *text*, in order.

    >>> extract_references('#1, #2 and #30')
    ['#1', '#2', '#30']
    """
    return REFERENCE_PATTERN.findall(text)


def revert_footer(header: str, body: str) -> Footer | None:
    """Synthesize the footer of a GitHub revert commit.

    The title is the header subject as :func:`parse_header` reports it,
    so both always agree on what was reverted.

    Args:
        header: The header line.
        body: The body text; only its first line is inspected.

    Returns:
        A ``revert`` footer carrying the reverted SHA as ``content``,
        or ``None`` when *header* is not a quoted revert subject or
        *body* does not open with ``This reverts commit <sha>.``.

    >>> revert_footer('Revert "feat: x"', 'This reverts commit bf08694.')
    Footer(tag='revert', title='feat: x', content='bf08694')
    """
    if REVERT_SUBJECT_PATTERN.fullmatch(header) is None:
        return None
    commit_match = REVERT_COMMIT_PATTERN.fullmatch(split_to_lines(body)[0])
    if commit_match is None:
        return None
    return Footer(
        tag=REVERT_TAG,
        title=parse_header(header).subject,
        content=commit_match.group('sha'),
    )


__all__ = [
    'BREAKING_CHANGE_TAG',
    'DEFAULT_CLOSING_TAGS',
    'FOOTER_BREAKING_CHANGE_PATTERN',
    'FOOTER_REFERENCE_PATTERN',
    'FOOTER_RULES',
    'FOOTER_TAG_PATTERN',
    'REVERT_COMMIT_PATTERN',
    'REVERT_SUBJECT_PATTERN',
    'REVERT_TAG',
    'extract_references',
    'is_footer_paragraph',
    'parse_footer_paragraph',
    'revert_footer',
]
