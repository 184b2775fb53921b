"""
Parser configuration: numeric width and separator set, optionally loaded
from a YAML file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    pass


MAX_NUMBER_BITS = 64


@dataclass(frozen=True)
class ParserConfig:
    # Atoms whose integer value does not fit in this many unsigned bits
    # are classified as identifiers.
    number_bits: int = 32
    # None => any str.isspace() character separates atoms.
    separators: Optional[str] = " "
    max_number: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if isinstance(self.number_bits, bool) or not isinstance(self.number_bits, int):
            raise ConfigError(f"number_bits must be an integer, got {self.number_bits!r}")
        if not 1 <= self.number_bits <= MAX_NUMBER_BITS:
            raise ConfigError(
                f"number_bits must be between 1 and {MAX_NUMBER_BITS}, got {self.number_bits}"
            )
        if self.separators is not None:
            if not isinstance(self.separators, str) or not self.separators:
                raise ConfigError(f"separators must be a non-empty string or null, got {self.separators!r}")
            if "(" in self.separators or ")" in self.separators:
                raise ConfigError("separators may not include parentheses")
        object.__setattr__(self, "max_number", (1 << self.number_bits) - 1)

    def is_separator(self, ch: str) -> bool:
        if self.separators is None:
            return ch.isspace()
        return ch in self.separators

    @classmethod
    def from_meta(cls, meta: Optional[Dict[str, Any]]) -> "ParserConfig":
        meta = dict(meta or {})
        known = {f.name for f in fields(cls) if f.init}
        unknown = sorted(set(meta) - known)
        if unknown:
            raise ConfigError(f"Unknown parser config key(s): {', '.join(unknown)}")
        return cls(
            number_bits=meta.get("number_bits", 32),
            separators=meta.get("separators", " "),
        )


DEFAULT_CONFIG = ParserConfig()


def load_config(path: str | Path) -> ParserConfig:
    """Load a ParserConfig from a YAML mapping. An empty file yields defaults."""
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(p, "r", encoding="utf-8") as f:
        try:
            y = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Bad YAML in {path}: {exc}") from exc
    if y is None:
        y = {}
    if not isinstance(y, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(y).__name__}")
    cfg = ParserConfig.from_meta(y)
    logger.debug(f"Loaded parser config from {p}: {cfg}")
    return cfg
