"""Suggestion engine settings loaded from JSON files and the environment."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

ENV_PREFIX = "ARGSUGGEST_"
CONFIG_ENV_VAR = "ARGSUGGEST_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".argsuggest" / "config.json"

OPTION_STRATEGIES = ("cosine", "prefix")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {value!r}")


@dataclass(frozen=True)
class SuggestConfig:
    """Tunable knobs of the suggestion engine."""

    threshold: float = 0.0
    limit: int = 3
    ngram_size: int = 2
    option_prefix: str = "-"
    keep_ties: bool = True
    option_strategy: str = "cosine"  # cosine or prefix

    def __post_init__(self) -> None:
        """Validate field ranges."""
        if not 0.0 <= self.threshold < 1.0:
            raise ValueError(f"threshold must be in [0, 1), got {self.threshold}")
        if self.limit < 1:
            raise ValueError(f"limit must be at least 1, got {self.limit}")
        if self.ngram_size < 1:
            raise ValueError(f"ngram_size must be at least 1, got {self.ngram_size}")
        if not self.option_prefix:
            raise ValueError("option_prefix must not be empty")
        if self.option_strategy not in OPTION_STRATEGIES:
            raise ValueError(
                f"option_strategy must be one of {', '.join(OPTION_STRATEGIES)}, "
                f"got {self.option_strategy!r}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SuggestConfig:
        """Build a config from a mapping, ignoring unknown keys."""
        return cls().merge(data)

    def merge(self, data: Mapping[str, Any]) -> SuggestConfig:
        """Return a copy with the known keys of ``data`` applied."""
        known = {f.name for f in fields(self)}
        updates: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown config key: {key}")
                continue
            updates[key] = self._coerce(key, value)
        return replace(self, **updates)

    def _coerce(self, key: str, value: Any) -> Any:
        """Convert a raw value to the type of field ``key``."""
        current = getattr(self, key)
        if isinstance(current, bool):
            return value if isinstance(value, bool) else _parse_bool(str(value))
        if isinstance(current, int):
            if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
                raise ValueError(f"{key} must be an integer, got {value!r}")
            return int(value)
        if isinstance(current, float):
            if isinstance(value, bool):
                raise ValueError(f"{key} must be a number, got {value!r}")
            return float(value)
        return str(value)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_file(cls, path: str | Path) -> SuggestConfig:
        """Load a JSON config file.

        Raises:
            OSError: If the file cannot be read
            json.JSONDecodeError: If the file is not valid JSON
            ValueError: If a value is out of range or has the wrong type
        """
        with open(path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object in {path}")
        return cls.from_dict(data)

    def with_env(self, environ: Mapping[str, str] | None = None) -> SuggestConfig:
        """Return a copy overridden by ``ARGSUGGEST_*`` environment variables.

        Values that fail to parse are logged and skipped.
        """
        env = os.environ if environ is None else environ
        config = self
        for f in fields(self):
            name = ENV_PREFIX + f.name.upper()
            if name not in env:
                continue
            try:
                config = config.merge({f.name: env[name]})
            except ValueError as e:
                logger.warning(f"Ignoring invalid {name}={env[name]!r}: {e}")
        return config

    @classmethod
    def load(
        cls,
        path: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> SuggestConfig:
        """Load settings from defaults, a JSON file, then the environment.

        Args:
            path: Config file; defaults to ``$ARGSUGGEST_CONFIG`` or
                ``~/.argsuggest/config.json`` when present
            environ: Environment mapping (defaults to ``os.environ``)

        Returns:
            The merged configuration
        """
        env = os.environ if environ is None else environ
        config = cls()

        if path is None and env.get(CONFIG_ENV_VAR):
            path = env[CONFIG_ENV_VAR]
        if path is None and DEFAULT_CONFIG_PATH.exists():
            path = DEFAULT_CONFIG_PATH

        if path is not None:
            try:
                config = cls.from_file(path)
                logger.debug(f"Loaded config from {path}")
            except (OSError, json.JSONDecodeError, ValueError, TypeError) as e:
                logger.warning(f"Failed to load config file {path}: {e}")

        return config.with_env(env)
