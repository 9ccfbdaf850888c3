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

"""Configurable front end for the segmenter."""

from __future__ import annotations

from ccparser._message import Message
from ccparser._segment import segment
from ccparser.config import ParserConfig
from ccparser.logging import get_logger

logger = get_logger(__name__)


class CommitMessageParser:
    r"""Parse commit messages with a fixed :class:`ParserConfig`.

    Instances hold no mutable state and may be shared across threads.

    Example::

        parser = CommitMessageParser(ParserConfig(closing_tags=frozenset({'closes'})))
        msg = parser.parse('fix: x\n\nCloses #7\n\nFixes #8')
        assert msg.get_closes() == ['#7']
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        """Initialize the parser.

        Args:
            config: Parser settings. Defaults to :class:`ParserConfig()`.
        """
        self._config = config or ParserConfig()

    @property
    def config(self) -> ParserConfig:
        """The settings this parser was built with."""
        return self._config

    def parse(self, message: str) -> Message:
        """Segment *message*. Never raises.

        Args:
            message: The raw commit message.

        Returns:
            The segmented :class:`Message`; classify it with
            :meth:`Message.parse_header` and :meth:`Message.parse_footers`.
        """
        msg = segment(message, closing_tags=self._config.closing_tags)
        logger.debug(
            'message_segmented',
            header=msg.header,
            has_body=bool(msg.body),
            footers=len(msg.footer_paragraphs),
        )
        return msg


__all__ = [
    'CommitMessageParser',
]
