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

r"""Header line classifier.

The header is the first line of a commit message. Rules are tried in
order and the first one that matches wins:

1. **Revert**: ``revert <rest>`` (any casing). Trailing whitespace
   and one layer of matching quotes around ``<rest>`` are stripped, so
   GitHub's default ``Revert "feat: add X"`` yields the subject
   ``feat: add X``.
2. **Conventional**: ``type(scope)!: subject``. The type may contain
   letters, digits, spaces and hyphens and is lower-cased.
3. **Fallback**: the whole line becomes the subject.

Pure implementation: depends only on ``re`` and :mod:`._types`.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from ccparser._types import Header

REVERT_HEADER_PATTERN: re.Pattern[str] = re.compile(
    r'revert\s+(?P<rest>.*)',
    re.IGNORECASE | re.ASCII,
)

HEADER_PATTERN: re.Pattern[str] = re.compile(
    r'(?P<type>[a-z0-9\s-]+)'  # type, may contain spaces and hyphens
    r'(?:\((?P<scope>[^)]*)\))?'  # optional scope in parens
    r'(?P<important>!?)'  # optional breaking change indicator
    r':\s+'  # colon + at least one whitespace
    r'(?P<subject>.*)',  # subject, kept as-is
    re.IGNORECASE | re.ASCII,
)

_QUOTES = ('"', "'")


def _strip_quotes(text: str) -> str:
    """Remove a single layer of matching single or double quotes."""
    if len(text) >= 2 and text[0] in _QUOTES and text[0] == text[-1]:
        return text[1:-1]
    return text


def _revert(match: re.Match[str], line: str) -> Header | None:
    return Header(
        type='revert',
        subject=_strip_quotes(match.group('rest').rstrip()),
        raw=line,
    )


def _conventional(match: re.Match[str], line: str) -> Header | None:
    commit_type = match.group('type').strip().lower()
    if not commit_type:
        # Only whitespace before the colon, not a real type.
        return None
    return Header(
        type=commit_type,
        scope=(match.group('scope') or '').strip(),
        subject=match.group('subject'),
        important=match.group('important') == '!',
        raw=line,
    )


# Ordered (name, pattern, extractor) rules; the first extractor to
# return a record wins.
HEADER_RULES: tuple[tuple[str, re.Pattern[str], Callable[[re.Match[str], str], Header | None]], ...] = (
    ('revert', REVERT_HEADER_PATTERN, _revert),
    ('conventional', HEADER_PATTERN, _conventional),
)


def classify_header(line: str) -> tuple[str, Header]:
    """Classify a header line and report which rule matched.

    Args:
        line: The header line (without line terminator).

    Returns:
        ``(rule_name, header)`` where ``rule_name`` is ``"fallback"``
        when no rule applied.
    """
    for name, pattern, extract in HEADER_RULES:
        match = pattern.fullmatch(line)
        if match is None:
            continue
        header = extract(match, line)
        if header is not None:
            return name, header
    return 'fallback', Header(subject=line, raw=line)


def parse_header(line: str) -> Header:
    """Parse a commit header line into a :class:`Header`.

    Never raises: lines that follow no known convention come back with
    an empty ``type`` and the whole line as ``subject``.

    >>> parse_header('fix(core)!: change y')
    Header(type='fix', scope='core', subject='change y', important=True)
    >>> parse_header('random text')
    Header(type='', scope='', subject='random text', important=False)
    """
    return classify_header(line)[1]


__all__ = [
    'HEADER_PATTERN',
    'HEADER_RULES',
    'REVERT_HEADER_PATTERN',
    'classify_header',
    'parse_header',
]
