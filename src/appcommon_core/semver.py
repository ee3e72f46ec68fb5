from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

_SEGMENT_PATTERN = re.compile(r"[^0-9]*([0-9]+)[^0-9]*")
_COMPONENTS = ("major", "minor", "patch")


def parse_version_components(text: str) -> tuple[int, int, int]:
    """Extract (major, minor, patch) from a loosely formatted version string.

    Non-digit characters around each segment are dropped, so `0.9-dev.5`
    reads as `0.9.5`. Segments that are not a single run of digits are
    skipped, missing components are 0 and anything past the third is ignored.
    """
    values: list[int] = []
    # 1_2_4 is seen occasionally and is read as 1.2.4.
    for segment in text.replace("_", ".").split("."):
        match = _SEGMENT_PATTERN.fullmatch(segment)
        if match is None:
            continue
        values.append(int(match.group(1)))
        if len(values) == len(_COMPONENTS):
            break
    values.extend([0] * (len(_COMPONENTS) - len(values)))
    return values[0], values[1], values[2]


class SemVer(BaseModel):
    """Three-component version that compares by (major, minor, patch).

    Validates from either a mapping or a version string and serializes back
    to the canonical `M.m.p` string.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    major: int = Field(default=0, ge=0)
    minor: int = Field(default=0, ge=0)
    patch: int = Field(default=0, ge=0)

    @model_validator(mode="before")
    @classmethod
    def _accept_version_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return dict(zip(_COMPONENTS, parse_version_components(data)))
        return data

    @model_serializer(mode="plain")
    def _serialize(self) -> str:
        return self.version

    @classmethod
    def parse(cls, text: str) -> SemVer:
        major, minor, patch = parse_version_components(text)
        return cls(major=major, minor=minor, patch=patch)

    @classmethod
    def zero(cls) -> SemVer:
        return ZERO_VERSION

    @property
    def version(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def format(self) -> str:
        return self.version

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __str__(self) -> str:
        return self.version

    def __repr__(self) -> str:
        return f"SemVer({self.version!r})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.as_tuple() <= other.as_tuple()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.as_tuple() > other.as_tuple()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.as_tuple() >= other.as_tuple()


ZERO_VERSION = SemVer(major=0, minor=0, patch=0)


def compare_versions(a: SemVer, b: SemVer) -> int:
    left = a.as_tuple()
    right = b.as_tuple()
    if left < right:
        return -1
    if left > right:
        return 1
    return 0
