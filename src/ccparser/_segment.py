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

r"""Split a raw commit message into header, body and footer paragraphs.

Layout of a message::

    feat(parser): support multi-paragraph footers     <- header (line 0)

    Explain the change.                               <- body paragraph(s)

    BREAKING CHANGE: footers may span paragraphs      <- footer paragraph

    This paragraph is a continuation of the footer.   <- merged into it

    Reviewed-by: Z                                    <- next footer

Paragraphs are separated by one or more blank lines. Everything before
the first footer paragraph is body; once a footer has been seen, every
later paragraph either starts a new footer or continues the previous
one, so code blocks and long explanations stay with their footer.
Inside that footer region, trailers on consecutive lines
(``Reviewed-by: Z`` then ``Refs: #123``) are separate footers.

Pure implementation: no I/O, no logging.
"""

from __future__ import annotations

from ccparser._footer import DEFAULT_CLOSING_TAGS, is_footer_paragraph
from ccparser._message import Message
from ccparser._text import is_blank, split_to_lines


def _paragraphs(lines: list[str]) -> list[list[str]]:
    """Group lines into maximal runs of non-blank lines."""
    paragraphs: list[list[str]] = []
    current: list[str] = []
    for line in lines:
        if is_blank(line):
            if current:
                paragraphs.append(current)
                current = []
        else:
            current.append(line)
    if current:
        paragraphs.append(current)
    return paragraphs


def segment(message: str, *, closing_tags: frozenset[str] = DEFAULT_CLOSING_TAGS) -> Message:
    """Split *message* into a :class:`Message`.

    Never raises. An empty string yields an empty header, an empty
    body and no footers.

    Args:
        message: The raw commit message.
        closing_tags: Lower-cased tags passed on to
            :meth:`Message.get_closes`.

    Returns:
        The segmented :class:`Message`.
    """
    header, *rest = split_to_lines(message)
    paragraphs = _paragraphs(rest)

    body: list[str] = []
    footers: list[list[str]] = []
    for lines in paragraphs:
        if not footers and not is_footer_paragraph(lines[0]):
            body.append('\n'.join(lines))
            continue
        for i, line in enumerate(lines):
            if is_footer_paragraph(line):
                footers.append([line])
            elif i == 0:
                # Continuation paragraph of the open footer.
                footers[-1].extend(('', line))
            else:
                footers[-1].append(line)

    return Message(
        header=header,
        body='\n\n'.join(body),
        footer_paragraphs=tuple('\n'.join(lines) for lines in footers),
        closing_tags=closing_tags,
    )


__all__ = [
    'segment',
]
