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

"""The segmented commit message and its on-demand classification."""

from __future__ import annotations

from dataclasses import dataclass, field

from ccparser._footer import (
    BREAKING_CHANGE_TAG,
    DEFAULT_CLOSING_TAGS,
    extract_references,
    parse_footer_paragraph,
    revert_footer,
)
from ccparser._header import parse_header
from ccparser._types import Footer, Header


@dataclass(frozen=True)
class Message:
    """A commit message split into header, body and footer paragraphs.

    Only the raw text is stored. :meth:`parse_header` and
    :meth:`parse_footers` classify it on demand and always return the
    same records for the same message.

    Attributes:
        header: The first line, verbatim.
        body: Body paragraphs joined by a blank line, or empty.
        footer_paragraphs: One entry per footer, continuation
            paragraphs already merged in.
        closing_tags: Lower-cased footer tags that :meth:`get_closes`
            treats as closing references.
    """

    header: str = ''
    body: str = ''
    footer_paragraphs: tuple[str, ...] = ()
    closing_tags: frozenset[str] = field(default=DEFAULT_CLOSING_TAGS, repr=False)

    def parse_header(self) -> Header:
        """Classify the header line."""
        return parse_header(self.header)

    def parse_footers(self) -> list[Footer]:
        """Classify every footer paragraph, in order.

        A ``revert`` footer synthesized from the header and the first
        body line of a GitHub revert commit, when present, comes first.
        """
        footers = [parse_footer_paragraph(p) for p in self.footer_paragraphs]
        revert = revert_footer(self.header, self.body)
        if revert is not None:
            footers.insert(0, revert)
        return footers

    def get_closes(self) -> list[str]:
        """Return the ``#<digits>`` references closed by this commit.

        Only footers whose tag is one of :attr:`closing_tags` (compared
        case-insensitively) are considered. Each reference appears once,
        in the order it was first seen.

        >>> from ccparser import parse
        >>> parse('feat: x\\n\\nCloses #1, #2\\n\\nFixes #2, #3').get_closes()
        ['#1', '#2', '#3']
        """
        closes: list[str] = []
        for footer in self.parse_footers():
            if footer.tag.lower() not in self.closing_tags:
                continue
            for ref in extract_references(footer.title):
                if ref not in closes:
                    closes.append(ref)
        return closes

    @property
    def is_breaking(self) -> bool:
        """``True`` for a ``!`` header or a ``BREAKING CHANGE`` footer."""
        if self.parse_header().important:
            return True
        return any(f.tag == BREAKING_CHANGE_TAG for f in self.parse_footers())


__all__ = [
    'Message',
]
