from .env_reader import EnvironmentEntry, read_environment_variables, normalize_value
from .filter import (
    NoFilter, PrefixFilter, PartialFilter, FilterConfig, FilterResult,
    filter_environment_variables, generate_filter_message, generate_no_match_message,
    create_prefix_filter, create_partial_filter,
)
from .demo import generate_demo_environment_data
