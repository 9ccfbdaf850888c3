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

"""Configuration loading for ccparser.

Settings live in the ``[tool.ccparser]`` table of ``pyproject.toml``::

    [tool.ccparser]
    # Replace the default closing keywords entirely...
    closing_tags = ["Closes", "Fixes"]
    # ...or add to them.
    extra_closing_tags = ["Implements"]

A missing file or table is not an error: the defaults apply. Tags are
compared case-insensitively and stored lower-cased.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit
import tomlkit.exceptions

from ccparser._footer import DEFAULT_CLOSING_TAGS
from ccparser.errors import CommitParserError, E
from ccparser.logging import get_logger

logger = get_logger(__name__)

CONFIG_FILENAME = 'pyproject.toml'
CONFIG_TABLE = 'ccparser'

VALID_KEYS: frozenset[str] = frozenset({
    'closing_tags',
    'extra_closing_tags',
})


@dataclass(frozen=True)
class ParserConfig:
    """Validated parser settings.

    Attributes:
        closing_tags: Lower-cased footer tags whose ``#<digits>``
            references count as closed issues.
        config_path: The file the settings came from, or ``None`` for
            defaults.
    """

    closing_tags: frozenset[str] = DEFAULT_CLOSING_TAGS
    config_path: Path | None = None


def _suggest_key(unknown: str) -> str | None:
    """Return the closest valid key for a typo, or None."""
    matches = difflib.get_close_matches(unknown, VALID_KEYS, n=1, cutoff=0.6)
    return matches[0] if matches else None


def _validate_tag_list(key: str, value: Any) -> frozenset[str]:  # noqa: ANN401 - dynamic config
    """Check that *value* is a list of non-empty strings and lower-case it."""
    if not isinstance(value, list):
        raise CommitParserError(
            code=E.CONFIG_INVALID_VALUE,
            message=f"'{key}' must be a list of strings, got {type(value).__name__}",
            hint=f'Example: {key} = ["Closes", "Fixes"]',
        )
    tags: set[str] = set()
    for i, item in enumerate(value):
        if not isinstance(item, str) or not item.strip():
            raise CommitParserError(
                code=E.CONFIG_INVALID_VALUE,
                message=f"'{key}[{i}]' must be a non-empty string, got {item!r}",
            )
        tags.add(item.strip().lower())
    return frozenset(tags)


def parse_config_table(table: dict[str, Any], *, config_path: Path | None = None) -> ParserConfig:
    """Validate a ``[tool.ccparser]`` table.

    Args:
        table: The raw table contents.
        config_path: Where the table was read from, for reference.

    Returns:
        A validated :class:`ParserConfig`.

    Raises:
        CommitParserError: On unknown keys or badly typed values.
    """
    for key in table:
        if key not in VALID_KEYS:
            suggestion = _suggest_key(key)
            raise CommitParserError(
                code=E.CONFIG_INVALID_KEY,
                message=f"Unknown key '{key}' in [tool.{CONFIG_TABLE}]",
                hint=f"Did you mean '{suggestion}'?" if suggestion else 'Valid keys: ' + ', '.join(sorted(VALID_KEYS)),
            )

    closing_tags = DEFAULT_CLOSING_TAGS
    if 'closing_tags' in table:
        closing_tags = _validate_tag_list('closing_tags', table['closing_tags'])
    if 'extra_closing_tags' in table:
        closing_tags = closing_tags | _validate_tag_list('extra_closing_tags', table['extra_closing_tags'])

    return ParserConfig(closing_tags=closing_tags, config_path=config_path)


def load_config(root: Path) -> ParserConfig:
    """Load and validate configuration from ``pyproject.toml``.

    Args:
        root: Directory containing ``pyproject.toml``.

    Returns:
        A validated :class:`ParserConfig`; defaults if there is no file
        or no ``[tool.ccparser]`` table.

    Raises:
        CommitParserError: If the file cannot be read or parsed, or the
            table is invalid.
    """
    config_path = root / CONFIG_FILENAME

    if not config_path.is_file():
        logger.debug('no_pyproject', path=str(config_path))
        return ParserConfig()

    try:
        text = config_path.read_text(encoding='utf-8')
    except OSError as exc:
        raise CommitParserError(
            code=E.CONFIG_READ_FAILED,
            message=f'Failed to read {config_path}: {exc}',
        ) from exc

    try:
        doc = tomlkit.parse(text)
    except tomlkit.exceptions.TOMLKitError as exc:
        raise CommitParserError(
            code=E.CONFIG_PARSE_ERROR,
            message=f'Failed to parse {config_path}: {exc}',
        ) from exc

    raw: dict[str, Any] = doc.unwrap()
    tool = raw.get('tool')
    table = tool.get(CONFIG_TABLE) if isinstance(tool, dict) else None
    if table is None:
        logger.debug('no_ccparser_table', path=str(config_path))
        return ParserConfig()
    if not isinstance(table, dict):
        raise CommitParserError(
            code=E.CONFIG_INVALID_VALUE,
            message=f'[tool.{CONFIG_TABLE}] must be a table, got {type(table).__name__}',
        )

    config = parse_config_table(table, config_path=config_path)
    logger.debug('config_loaded', path=str(config_path), closing_tags=sorted(config.closing_tags))
    return config


__all__ = [
    'CONFIG_FILENAME',
    'VALID_KEYS',
    'ParserConfig',
    'load_config',
    'parse_config_table',
]
