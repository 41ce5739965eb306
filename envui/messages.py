#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""User facing message text."""

PROG_NAME = "envui"
DESCRIPTION = "Beautiful environment variable viewer"

# Table
EMPTY_VALUE = "<empty>"
HEADER_KEY = "KEY"
HEADER_VALUE = "VALUE"

# Filter
FILTER_INFO = "Filter: Variables starting with '{}' ({} of {} displayed)"
FILTER_INFO_PARTIAL = "Filter: Variables containing '{}' ({} of {} displayed)"
NO_ENVIRONMENT_VARIABLES = "No environment variables found"
NO_MATCHING_VARIABLES = "No environment variables found matching '{}'"

# Errors
ERROR_PREFIX = "Error: "
UNKNOWN_ERROR = "Unknown error"
GENERAL_ERROR = "An unexpected error occurred"
ENV_READ_CONTEXT = "Failed to read environment variables"
TABLE_CREATE_CONTEXT = "Failed to create table"
UNKNOWN_OPTION = "Unknown option: {}"
TOO_MANY_ARGUMENTS = "Too many arguments: {}"
FILTER_REQUIRES_VALUE = "--filter option requires a search text"
CONFLICTING_FILTERS = "Cannot use both PREFIX and --filter at the same time"
INVALID_CONFIG = "Invalid configuration: {}"
INVALID_OPTION_HELP = f"\nUse '{PROG_NAME} --help' to see available options."
FILTER_USAGE = (
    f"  {PROG_NAME} [PREFIX]        # Filter by prefix\n"
    f"  {PROG_NAME} --filter TEXT   # Filter by partial match"
)

# Help
HELP_USAGE = f"  {PROG_NAME} [PREFIX] [options]"
HELP_OPTIONS = [
    ("-h, --help", "display help for command"),
    ("-v, --version", "display version number"),
    ("-f, --filter TEXT", "filter variables containing TEXT (case-insensitive)"),
    ("--demo", "display sample data instead of the real environment"),
]
HELP_EXAMPLES = (
    "\nExamples:\n"
    f"  {PROG_NAME}                Display all environment variables\n"
    f"  {PROG_NAME} PREFIX         Display variables starting with PREFIX\n"
    f"  {PROG_NAME} --filter API   Display variables containing 'API'"
)
HELP_DESCRIPTION = (
    "\nDescription:\n"
    f"  {PROG_NAME} is a modern alternative to printenv that displays environment\n"
    "  variables in a clean, colorized table format for better readability."
)
