"""Environment-driven settings for analysis runs."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

import pyphen

CMUDICT_PATH_ENV = "TEXTSTATS_CMUDICT_PATH"
DALE_CHALL_PATH_ENV = "TEXTSTATS_DALE_CHALL_PATH"
TRACK_PROPER_NOUNS_ENV = "TEXTSTATS_TRACK_PROPER_NOUNS"
FALLBACK_TO_ALTERNATIVE_ENV = "TEXTSTATS_FALLBACK_TO_ALTERNATIVE"
HYPHENATION_LANG_ENV = "TEXTSTATS_HYPHENATION_LANG"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, value: Optional[str]) -> bool:
    if value is None:
        return False
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {value!r}")


def _parse_path(value: Optional[str]) -> Optional[Path]:
    if value is None or not value.strip():
        return None
    return Path(value.strip()).expanduser()


def _parse_lang(value: Optional[str]) -> str:
    lang = (value or "").strip() or "en_US"
    if lang not in pyphen.LANGUAGES:
        raise ValueError(f"{HYPHENATION_LANG_ENV} names no hyphenation dictionary: {lang!r}")
    return lang


@dataclass(frozen=True)
class Settings:
    """Options shared by the library entry point and the CLI.

    ``cmudict_path`` and ``dale_chall_path`` replace the bundled reference
    data. ``track_proper_nouns`` enables the capitalised-word histogram and
    ``fallback_to_alternative`` makes the reconciler pick the alternative
    count instead of ``0`` when the two estimators disagree without a
    tie-break entry.
    """

    cmudict_path: Optional[Path] = None
    dale_chall_path: Optional[Path] = None
    track_proper_nouns: bool = False
    fallback_to_alternative: bool = False
    hyphenation_lang: str = "en_US"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            cmudict_path=_parse_path(env.get(CMUDICT_PATH_ENV)),
            dale_chall_path=_parse_path(env.get(DALE_CHALL_PATH_ENV)),
            track_proper_nouns=_parse_bool(
                TRACK_PROPER_NOUNS_ENV, env.get(TRACK_PROPER_NOUNS_ENV)
            ),
            fallback_to_alternative=_parse_bool(
                FALLBACK_TO_ALTERNATIVE_ENV, env.get(FALLBACK_TO_ALTERNATIVE_ENV)
            ),
            hyphenation_lang=_parse_lang(env.get(HYPHENATION_LANG_ENV)),
        )

    def override(self, **changes: object) -> "Settings":
        """Return a copy with every non-``None`` entry of ``changes`` applied."""

        cleaned = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **cleaned) if cleaned else self


__all__ = [
    "Settings",
    "CMUDICT_PATH_ENV",
    "DALE_CHALL_PATH_ENV",
    "TRACK_PROPER_NOUNS_ENV",
    "FALLBACK_TO_ALTERNATIVE_ENV",
    "HYPHENATION_LANG_ENV",
]
