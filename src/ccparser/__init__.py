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

r"""Conventional Commits message parsing.

A message is first segmented into its raw parts, then classified on
demand:

- :func:`parse` splits the text into a :class:`Message` (header line,
  body, footer paragraphs).
- :meth:`Message.parse_header` yields a :class:`Header` with
  ``type``, ``scope``, ``important`` (``!``) and ``subject``.
- :meth:`Message.parse_footers` yields one :class:`Footer` per footer
  paragraph with ``tag``, ``title`` and ``content``.
- :meth:`Message.get_closes` collects issue references from closing
  footers such as ``Closes #1, #2``.

Nothing here raises on malformed input: text that follows no convention
comes back with empty types and tags and its content intact.

Usage::

    from ccparser import parse

    msg = parse('fix(core)!: change y\n\nBREAKING CHANGE: drop X\n\nCloses #1, #2')
    header = msg.parse_header()
    assert header.type == 'fix'
    assert header.important is True
    assert msg.parse_footers()[0].tag == 'BREAKING CHANGE'
    assert msg.get_closes() == ['#1', '#2']
"""

from ccparser._footer import (
    BREAKING_CHANGE_TAG,
    DEFAULT_CLOSING_TAGS,
    REVERT_TAG,
    extract_references,
    is_footer_paragraph,
    parse_footer_paragraph,
    revert_footer,
)
from ccparser._header import parse_header
from ccparser._message import Message
from ccparser._parser import CommitMessageParser
from ccparser._segment import segment
from ccparser._text import split_to_lines
from ccparser._types import Footer, Header
from ccparser.config import ParserConfig, load_config

# Module-level singleton for convenience.
_DEFAULT_PARSER = CommitMessageParser()


def parse(message: str) -> Message:
    """Parse a commit message with the default settings.

    Convenience wrapper around :meth:`CommitMessageParser.parse`.

    Args:
        message: The raw commit message.

    Returns:
        The segmented :class:`Message`.
    """
    return _DEFAULT_PARSER.parse(message)


__all__ = [
    'BREAKING_CHANGE_TAG',
    'CommitMessageParser',
    'DEFAULT_CLOSING_TAGS',
    'Footer',
    'Header',
    'Message',
    'ParserConfig',
    'REVERT_TAG',
    'extract_references',
    'is_footer_paragraph',
    'load_config',
    'parse',
    'parse_footer_paragraph',
    'parse_header',
    'revert_footer',
    'segment',
    'split_to_lines',
]
