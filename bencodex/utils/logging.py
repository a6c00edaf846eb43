# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Optional logging setup for applications and tools using this library.

The codec only emits structlog events, at debug level, from loggers under the `bencodex` namespace and never
configures logging by itself. `setup_logging()` routes that namespace to stderr, rendered as JSON or for a console, or
silences it. Loggers outside the namespace keep whatever configuration the application gave them.
"""

import logging
import logging.config
from collections import OrderedDict
from enum import IntEnum, auto
from typing import Any

import structlog
from structlog.dev import ConsoleRenderer
from structlog.typing import EventDict
from typing_extensions import assert_never

LOGGER_NAMESPACE = 'bencodex'


class LoggingOutput(IntEnum):
    NULL = auto()
    PRETTY = auto()
    JSON = auto()


def _handler_config(logging_output: LoggingOutput) -> dict[str, Any]:
    match logging_output:
        case LoggingOutput.NULL:
            return {'class': 'logging.NullHandler'}
        case LoggingOutput.PRETTY:
            return {'class': 'logging.StreamHandler', 'formatter': 'pretty'}
        case LoggingOutput.JSON:
            return {'class': 'logging.StreamHandler', 'formatter': 'json'}
        case _:
            assert_never(logging_output)


def setup_logging(
    *,
    logging_output: LoggingOutput,
    debug: bool = False,
    extra_log_info: dict[str, str] | None = None,
    cache_logger_on_first_use: bool = True,
) -> None:
    """ Send the codec's log events to `logging_output`.

    Decode and encode failures are only logged at debug level, so they are dropped unless `debug` is set. Every key in
    `extra_log_info` is added to every event, it must not clash with keys the events already carry.
    """
    timestamper = structlog.processors.TimeStamper(fmt='iso')

    # applied to records that come from stdlib loggers in the namespace
    foreign_pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
    ]

    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'pretty': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processor': ConsoleRenderer(colors=False),
                'foreign_pre_chain': foreign_pre_chain,
            },
            'json': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processor': structlog.processors.JSONRenderer(),
                'foreign_pre_chain': foreign_pre_chain,
            },
        },
        'handlers': {
            'codec': _handler_config(logging_output),
        },
        'loggers': {
            LOGGER_NAMESPACE: {
                'handlers': ['codec'],
                'level': 'DEBUG' if debug else 'INFO',
                'propagate': False,
            },
        },
    })

    extra_log_info = extra_log_info or {}

    def add_extra_log_info(_logger: logging.Logger, _method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in extra_log_info.items():
            assert key not in event_dict, 'extra log info conflicting with existing log key'
            event_dict[key] = value
        return event_dict

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_extra_log_info,
            timestamper,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=OrderedDict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache_logger_on_first_use,
    )
