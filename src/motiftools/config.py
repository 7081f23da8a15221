"""Defaults for motif searches, overridable through the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _env_int(name: str, default: int, env: Optional[Mapping[str, str]] = None) -> int:
    env = os.environ if env is None else env
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None


def _env_bool(name: str, default: bool, env: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if env is None else env
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag (1/0, true/false), got {raw!r}.")


SAMPLE_DIVISOR = _env_int("MOTIFTOOLS_SAMPLE_DIVISOR", 3)
THRESHOLD = _env_int("MOTIFTOOLS_THRESHOLD", 0)
ONLY_COUNTS = _env_bool("MOTIFTOOLS_ONLY_COUNTS", False)


@dataclass(frozen=True)
class MotifConfig:
    """
    Caller-side knobs around the search.

    threshold:      a query graph is frequent when it has more mappings than this.
    only_counts:    keep mapping counts only, drop the mappings themselves.
    sample_divisor: default root sample is |V(input)| // sample_divisor.
    strict:         use the fully-checked extension variant.
    """

    threshold: int = THRESHOLD
    only_counts: bool = ONLY_COUNTS
    sample_divisor: int = SAMPLE_DIVISOR
    strict: bool = False

    def __post_init__(self) -> None:
        if self.threshold < 0:
            raise ValueError(f"threshold must be >= 0, got {self.threshold}.")
        if self.sample_divisor <= 0:
            raise ValueError(f"sample_divisor must be positive, got {self.sample_divisor}.")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "MotifConfig":
        """Read MOTIFTOOLS_* variables from *env* (default: os.environ)."""
        return cls(
            threshold=_env_int("MOTIFTOOLS_THRESHOLD", 0, env),
            only_counts=_env_bool("MOTIFTOOLS_ONLY_COUNTS", False, env),
            sample_divisor=_env_int("MOTIFTOOLS_SAMPLE_DIVISOR", 3, env),
            strict=_env_bool("MOTIFTOOLS_STRICT", False, env),
        )
