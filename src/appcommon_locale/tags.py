from __future__ import annotations

import re
from dataclasses import dataclass

SUBTAG_SEPARATOR = re.compile(r"[-_]")
SCRIPT_SUBTAG = re.compile(r"[a-z]{4}")
REGION_SUBTAG = re.compile(r"[a-z]{2}|[0-9]{3}")


def _strip_modifiers(identifier: str) -> str:
    # de_DE.UTF-8@euro -> de_DE
    for marker in ("@", "."):
        identifier = identifier.split(marker, 1)[0]
    return identifier


@dataclass(frozen=True)
class LanguageTag:
    language: str
    region: str = ""

    @classmethod
    def parse(cls, identifier: str) -> LanguageTag:
        """Read the language and region of a locale identifier.

        Case is ignored, `-` and `_` both separate subtags and anything past
        the region (variants such as POSIX, charsets, keywords) is dropped.
        A script subtag (`zh-Hans-CN`) is skipped over.
        """
        normalized = _strip_modifiers(identifier.strip().lower())
        subtags = [part for part in SUBTAG_SEPARATOR.split(normalized) if part]
        if not subtags:
            return cls(language="")
        language, rest = subtags[0], subtags[1:]
        if rest and SCRIPT_SUBTAG.fullmatch(rest[0]):
            rest = rest[1:]
        region = ""
        if rest and REGION_SUBTAG.fullmatch(rest[0]):
            region = rest[0]
        return cls(language=language, region=region)

    @property
    def is_general(self) -> bool:
        return not self.region

    def __str__(self) -> str:
        if not self.region:
            return self.language
        return f"{self.language}-{self.region}"
