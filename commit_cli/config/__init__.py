"""Configuration Package"""

import os
import re
import sys
from dataclasses import dataclass, asdict, fields
from typing import Optional

PREFIX_RE = re.compile(r'[A-Za-z][A-Za-z0-9]*')
TRUTHY = {"1", "true", "yes", "on"}

ENV_PREFIX = "CCM_PREFIX"
ENV_REQUIRE_CAPITAL = "CCM_REQUIRE_CAPITAL"
ENV_MAX_FILE_DISPLAY = "CCM_MAX_FILE_DISPLAY"


@dataclass
class Config:
    """Runtime settings with sensible defaults."""
    work_item_prefix: str = "proj"
    require_capital: bool = False
    max_description_length: int = 72
    max_file_display: int = 8  # Max staged files shown before collapsing list

    def to_dict(self) -> dict:
        return asdict(self)

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.work_item_prefix, str) or not PREFIX_RE.fullmatch(self.work_item_prefix):
            warnings.append(f"Invalid work_item_prefix '{self.work_item_prefix}', using '{defaults.work_item_prefix}'")
            self.work_item_prefix = defaults.work_item_prefix
        self.work_item_prefix = self.work_item_prefix.lower()

        if not isinstance(self.max_description_length, int) or self.max_description_length <= 0:
            warnings.append(f"Invalid max_description_length '{self.max_description_length}', using {defaults.max_description_length}")
            self.max_description_length = defaults.max_description_length

        if not isinstance(self.max_file_display, int) or self.max_file_display <= 0:
            warnings.append(f"Invalid max_file_display '{self.max_file_display}', using {defaults.max_file_display}")
            self.max_file_display = defaults.max_file_display

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


def _env_overrides(environ) -> dict:
    data = {}
    if environ.get(ENV_PREFIX):
        data['work_item_prefix'] = environ[ENV_PREFIX].strip()
    if environ.get(ENV_REQUIRE_CAPITAL):
        data['require_capital'] = environ[ENV_REQUIRE_CAPITAL].strip().lower() in TRUTHY
    if environ.get(ENV_MAX_FILE_DISPLAY):
        raw = environ[ENV_MAX_FILE_DISPLAY].strip()
        data['max_file_display'] = int(raw) if raw.isdigit() else raw
    return data


def load_config(prefix: Optional[str] = None, require_capital: Optional[bool] = None, environ=None) -> Config:
    """Build the effective config.

    Precedence: explicit arguments (CLI) > environment variables > defaults
    """
    data = _env_overrides(os.environ if environ is None else environ)
    if prefix:
        data['work_item_prefix'] = prefix
    if require_capital:
        data['require_capital'] = True
    return Config.from_dict(data)


def env_overrides(environ=None) -> dict[str, str]:
    """Return the CCM_* variables that are set, for display."""
    environ = os.environ if environ is None else environ
    names = (ENV_PREFIX, ENV_REQUIRE_CAPITAL, ENV_MAX_FILE_DISPLAY)
    return {name: environ[name] for name in names if environ.get(name)}


__all__ = [
    "Config",
    "load_config",
    "env_overrides",
    "ENV_PREFIX",
    "ENV_REQUIRE_CAPITAL",
    "ENV_MAX_FILE_DISPLAY",
]
