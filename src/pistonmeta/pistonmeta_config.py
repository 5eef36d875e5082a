"""
Configuration parameters for pistonmeta.
"""

import inspect
import pathlib
from dataclasses import dataclass, field
from typing import Any, Dict, Union

try:
    import tomllib
except ModuleNotFoundError:
    # Python < 3.11
    import tomli as tomllib

from pistonmeta import __version__
from pistonmeta.pistonmeta_exceptions import ConfigError

MANIFEST_URL = "https://piston-meta.mojang.com/mc/game/version_manifest_v2.json"


@dataclass
class PistonMetaConfig:
    """
    Configuration parameters
    """

    manifest_url: str = MANIFEST_URL
    request_timeout: float = 30.0
    user_agent: str = field(default_factory=lambda: f"pistonmeta/{__version__}")
    follow_redirects: bool = True

    def __post_init__(self):
        if not self.manifest_url:
            raise ConfigError("manifest_url must not be empty")
        try:
            self.request_timeout = float(self.request_timeout)
        except (TypeError, ValueError) as exc:
            raise ConfigError(
                f"request_timeout must be a number, got {self.request_timeout!r}"
            ) from exc
        if self.request_timeout <= 0:
            raise ConfigError("request_timeout must be positive")

    @classmethod
    def from_dict(cls, env: Dict[str, Any]):
        """
        Create a PistonMetaConfig instance from a dictionary. Unknown keys are ignored.
        """
        return cls(
            **{k: v for k, v in env.items() if k in inspect.signature(cls).parameters}
        )

    @classmethod
    def from_toml(cls, path: Union[str, pathlib.Path]):
        """
        Load the `[pistonmeta]` table of a TOML file.

        Example:

            [pistonmeta]
            manifest_url = "https://piston-meta.mojang.com/mc/game/version_manifest_v2.json"
            request_timeout = 10
        """
        path = pathlib.Path(path)
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except OSError as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

        section = data.get("pistonmeta", {})
        if not isinstance(section, dict):
            raise ConfigError(f"[pistonmeta] in {path} must be a table")
        return cls.from_dict(section)
