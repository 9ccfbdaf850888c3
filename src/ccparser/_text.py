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

"""Line helpers shared by the segmenter and the footer classifier."""

from __future__ import annotations

import re

# Only LF and CRLF break lines; ``str.splitlines`` would also split on
# form feeds and Unicode separators that may legitimately appear in text.
_LINE_BREAK = re.compile(r'\r?\n')


def split_to_lines(text: str) -> list[str]:
    """Split text on ``\\n`` or ``\\r\\n``.

    >>> split_to_lines('line1\\r\\nline2')
    ['line1', 'line2']
    >>> split_to_lines('')
    ['']
    """
    return _LINE_BREAK.split(text)


def is_blank(line: str) -> bool:
    """``True`` for empty or whitespace-only lines."""
    return not line.strip()


def trim_blank_lines(lines: list[str]) -> list[str]:
    """Drop leading and trailing blank lines, keeping inner ones."""
    start = 0
    end = len(lines)
    while start < end and is_blank(lines[start]):
        start += 1
    while end > start and is_blank(lines[end - 1]):
        end -= 1
    return lines[start:end]
