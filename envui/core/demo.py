#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""Sample data for previewing the table layout without touching the real environment."""

from typing import List

from .env_reader import EnvironmentEntry, read_environment_variables

DEMO_ENVIRONMENT = {
    'NORMAL_VAR': 'normal_value',
    'EMPTY_VAR': '',
    'SPACE_VAR': ' ',
    'MULTILINE_VAR': 'line1\nline2',
    'SPECIAL_CHARS': 'test@#$%^&*()',
}

def generate_demo_environment_data() -> List[EnvironmentEntry]:
    return read_environment_variables(DEMO_ENVIRONMENT)
