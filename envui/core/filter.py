#!/usr/bin/env python
# -*- coding: utf-8 -*-

from dataclasses import dataclass, replace
from typing import Callable, List, Union

from loguru import logger

from .env_reader import EnvironmentEntry
from .. import messages

@dataclass(frozen=True)
class NoFilter:
    """不过滤"""
    pass

@dataclass(frozen=True)
class PrefixFilter:
    """按前缀过滤 (不区分大小写)"""
    value: str

@dataclass(frozen=True)
class PartialFilter:
    """按子串过滤 (不区分大小写)"""
    value: str

FilterConfig = Union[NoFilter, PrefixFilter, PartialFilter]

@dataclass(frozen=True)
class FilterResult:
    filtered: List[EnvironmentEntry]
    total: int
    match_count: int
    filter_info: str

def create_prefix_filter(prefix: str) -> Callable[[EnvironmentEntry], bool]:
    """Return a predicate matching keys that start with *prefix*, ignoring case."""
    lower_prefix = prefix.lower()

    def matches(entry: EnvironmentEntry) -> bool:
        return entry.key.lower().startswith(lower_prefix)
    return matches

def create_partial_filter(text: str) -> Callable[[EnvironmentEntry], bool]:
    """Return a predicate matching keys that contain *text*, ignoring case."""
    lower_text = text.lower()

    def matches(entry: EnvironmentEntry) -> bool:
        return lower_text in entry.key.lower()
    return matches

def _unknown_filter(config) -> TypeError:
    return TypeError(f"Unknown filter config: {config!r}")

def filter_environment_variables(data: List[EnvironmentEntry], config: FilterConfig) -> FilterResult:
    """Filter *data* by *config*, keeping the original order."""
    total = len(data)

    if isinstance(config, NoFilter):
        return FilterResult(filtered=list(data), total=total, match_count=total, filter_info='')

    if isinstance(config, PrefixFilter):
        predicate = create_prefix_filter(config.value)
    elif isinstance(config, PartialFilter):
        predicate = create_partial_filter(config.value)
    else:
        raise _unknown_filter(config)

    filtered = [entry for entry in data if predicate(entry)]
    result = FilterResult(filtered=filtered, total=total, match_count=len(filtered), filter_info='')
    logger.bind(src='filter').debug(f"{config} matched {result.match_count} of {total}")
    return replace(result, filter_info=generate_filter_message(config, result))

def generate_filter_message(config: FilterConfig, result: FilterResult) -> str:
    """生成过滤状态信息，不过滤时返回空串"""
    if isinstance(config, NoFilter):
        return ''
    if isinstance(config, PrefixFilter):
        return messages.FILTER_INFO.format(config.value, result.match_count, result.total)
    if isinstance(config, PartialFilter):
        return messages.FILTER_INFO_PARTIAL.format(config.value, result.match_count, result.total)
    raise _unknown_filter(config)

def generate_no_match_message(config: FilterConfig) -> str:
    """生成无匹配结果时的提示信息"""
    if isinstance(config, NoFilter):
        return messages.NO_ENVIRONMENT_VARIABLES
    if isinstance(config, (PrefixFilter, PartialFilter)):
        return messages.NO_MATCHING_VARIABLES.format(config.value)
    raise _unknown_filter(config)
