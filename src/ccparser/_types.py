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

"""Pure record types for commit message parsing.

This module has **zero** runtime dependencies beyond the standard library.
Everything here is a frozen dataclass: no I/O, no logging, no side
effects.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    'Footer',
    'Header',
]


@dataclass(frozen=True)
class Header:
    """A classified header line.

    Attributes:
        type: The lower-cased commit type (e.g. ``"feat"``), or empty
            when the line does not follow the convention.
        scope: The text inside the optional parentheses, trimmed.
        subject: The free text after the ``type(scope)!:`` prefix, or
            the whole line for unconventional headers.
        important: ``True`` when ``!`` precedes the colon.
        raw: The original line, excluded from equality and repr.
    """

    type: str = ''
    scope: str = ''
    subject: str = ''
    important: bool = False
    raw: str = field(default='', compare=False, repr=False)

    def __str__(self) -> str:
        """Return the original header line."""
        return self.raw

    @property
    def is_conventional(self) -> bool:
        """``True`` if a commit type was recognised."""
        return bool(self.type)


@dataclass(frozen=True)
class Footer:
    """A classified footer paragraph.

    Attributes:
        tag: The footer token (``"BREAKING CHANGE"``, ``"Reviewed-by"``,
            ``"Closes"``, ...) or empty if none was recognised.
        title: The remainder of the first line.
        content: Every following line of the paragraph, trimmed.
    """

    tag: str = ''
    title: str = ''
    content: str = ''
