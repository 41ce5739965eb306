#!/usr/bin/env python
# -*- coding: utf-8 -*-

import os
from typing import List, Mapping, NamedTuple, Optional

from loguru import logger

from ..errors import EnvironmentReadError
from ..messages import EMPTY_VALUE

class EnvironmentEntry(NamedTuple):
    """One environment variable after normalization."""
    key: str
    value: str

def normalize_value(value: str) -> str:
    """Replace an empty value with the display sentinel."""
    return EMPTY_VALUE if value == '' else value

def read_environment_variables(environ: Optional[Mapping[str, Optional[str]]] = None) -> List[EnvironmentEntry]:
    """Read key/value pairs from *environ*, defaulting to ``os.environ``.

    Order follows the mapping's own iteration order. Entries whose value
    is ``None`` are skipped and empty values become ``<empty>``.

    Raises:
        EnvironmentReadError: the mapping could not be enumerated.
    """
    if environ is None:
        environ = os.environ

    try:
        entries = [
            EnvironmentEntry(key, normalize_value(value))
            for key, value in environ.items()
            if value is not None
        ]
    except Exception as e:
        logger.bind(src='env_reader').error(f"Failed to enumerate environment: {e}")
        raise EnvironmentReadError(e) from e

    logger.bind(src='env_reader').debug(f"Read {len(entries)} environment variables")
    return entries
