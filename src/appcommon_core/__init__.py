"""Small general-purpose helpers shared across applications."""

from __future__ import annotations

from appcommon_core.array_builder import ListBuilder, build_list
from appcommon_core.errors import AppCommonError, ParentUnavailableError, describe_error
from appcommon_core.logging import configure_logging, get_logger
from appcommon_core.optional import unwrap_or, unwrap_or_raise
from appcommon_core.parent import with_parent
from appcommon_core.semver import ZERO_VERSION, SemVer, compare_versions
from appcommon_core.sequences import for_each_pair, pairs, unique
from appcommon_core.text import substitute_variables
from appcommon_core.time_source import DefaultTimeSource, MockTimeSource, TimeSource

__all__ = [
    "AppCommonError",
    "DefaultTimeSource",
    "ListBuilder",
    "MockTimeSource",
    "ParentUnavailableError",
    "SemVer",
    "TimeSource",
    "ZERO_VERSION",
    "build_list",
    "compare_versions",
    "configure_logging",
    "describe_error",
    "for_each_pair",
    "get_logger",
    "pairs",
    "substitute_variables",
    "unique",
    "unwrap_or",
    "unwrap_or_raise",
    "with_parent",
]
