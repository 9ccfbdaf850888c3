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

"""Structured logging for ccparser.

Configures `structlog <https://www.structlog.org/>`_ with two output modes:

- **Console** (default): human-readable output, colored on a TTY.
- **JSON** (``json_log=True``): one JSON object per line.

Both modes write to stderr. The library never calls
:func:`configure_logging` itself; applications embedding ccparser
decide whether and how its events are shown.

Event fields carry raw commit text, so string values longer than
``max_value_length`` are clipped by :func:`clip_long_values` before
rendering.

Usage::

    from ccparser.logging import configure_logging, get_logger

    configure_logging(verbose=True)
    log = get_logger()
    log.debug('message_segmented', footers=2)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

DEFAULT_MAX_VALUE_LENGTH = 120


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH,
) -> None:
    """Configure structlog for ccparser.

    Should be called once at startup, before any logging calls.

    Args:
        verbose: Enable debug-level output (classification events).
        quiet: Suppress info-level output (only warnings and errors).
        json_log: Use JSON output instead of console output.
        max_value_length: Longest string field rendered in full. Set to
            ``0`` to disable clipping.
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        format='%(message)s',
        stream=sys.stderr,
        level=level,
        force=True,
    )

    global _max_value_length  # noqa: PLW0603
    _max_value_length = max_value_length

    shared_processors: list[structlog.types.Processor] = [  # type: ignore[assignment]
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        clip_long_values,
    ]

    if json_log:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
        )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = 'ccparser') -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger.

    Args:
        name: Logger name, used for filtering and identification.

    Returns:
        A :class:`structlog.stdlib.BoundLogger` instance.
    """
    return structlog.get_logger(name)


# Fields added by the shared processors; never clipped.
_UNCLIPPED_KEYS: frozenset[str] = frozenset({'event', 'exception', 'level', 'logger', 'stack', 'timestamp'})

# Populated by configure_logging(); used by the processor.
_max_value_length: int = DEFAULT_MAX_VALUE_LENGTH


def _clip(value: object) -> object:
    if not isinstance(value, str) or len(value) <= _max_value_length:
        return value
    dropped = len(value) - _max_value_length
    return f'{value[:_max_value_length]}... (+{dropped} chars)'


def clip_long_values(
    logger: Any,  # noqa: ANN401
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor: shorten long string fields.

    Every string field except the event name and the fields added by
    the shared processors is cut to ``max_value_length`` characters
    and suffixed with the number of characters dropped.
    """
    if _max_value_length <= 0:
        return event_dict
    return {k: v if k in _UNCLIPPED_KEYS else _clip(v) for k, v in event_dict.items()}


__all__ = [
    'DEFAULT_MAX_VALUE_LENGTH',
    'clip_long_values',
    'configure_logging',
    'get_logger',
]
