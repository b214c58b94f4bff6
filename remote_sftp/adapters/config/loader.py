"""
Settings loader with priority: overrides > env > TOML

Settings are a flat mapping of dotted keys to string values, e.g.
``{"userauth.gssapi.enabled": "true"}``. Values are never coerced
to booleans here; consumers compare the raw strings.
"""
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from ...core.constants import ENV_PARAM_USERAUTH_GSSAPI, ENV_PREFIX
from ...core.exceptions import ConfigError


# Recognised setting keys
SETTING_KEYS = (
    ENV_PARAM_USERAUTH_GSSAPI,
)


def env_alias(key: str) -> str:
    """Upper-snake environment alias, e.g. REMOTE_SFTP_USERAUTH_GSSAPI_ENABLED"""
    return ENV_PREFIX + key.replace(".", "_").upper()


class ConfigLoader:
    """Settings loader with priority support"""

    def load_toml(self, path: Path) -> Dict[str, str]:
        """
        Load the ``[settings]`` table of a TOML file as dotted keys.

        Nested tables are flattened, so ``[settings.userauth.gssapi]``
        with ``enabled = true`` becomes ``userauth.gssapi.enabled``.
        TOML booleans are written back as ``"true"``/``"false"``.

        Raises:
            ConfigError: If the file is missing or not valid TOML
        """
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            data = tomllib.loads(path.read_text(encoding='utf-8'))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse TOML configuration: {e}") from e

        return self._flatten(data.get("settings", {}))

    def _flatten(self, table: Dict[str, Any], prefix: str = "") -> Dict[str, str]:
        result: Dict[str, str] = {}
        for key, value in table.items():
            full_key = f"{prefix}{key}"
            if isinstance(value, dict):
                result.update(self._flatten(value, f"{full_key}."))
            elif isinstance(value, bool):
                result[full_key] = "true" if value else "false"
            else:
                result[full_key] = str(value)
        return result

    def load_env(self, environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """
        Pick recognised settings from environment variables.

        The exact key name is looked up first, then its upper-snake
        alias.
        """
        if environ is None:
            environ = os.environ

        settings: Dict[str, str] = {}
        for key in SETTING_KEYS:
            if key in environ:
                settings[key] = environ[key]
            elif env_alias(key) in environ:
                settings[key] = environ[env_alias(key)]
        return settings

    def load_settings(
        self,
        toml_path: Optional[Path] = None,
        overrides: Optional[Mapping[str, str]] = None,
        use_env: bool = True,
        environ: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, str]:
        """
        Load settings with priority: overrides > env > TOML

        Args:
            toml_path: Path to TOML configuration file
            overrides: Explicit setting values
            use_env: Whether to load from environment variables
            environ: Environment mapping, os.environ by default

        Returns:
            Merged settings mapping
        """
        settings: Dict[str, str] = {}

        if toml_path:
            settings.update(self.load_toml(toml_path))

        if use_env:
            settings.update(self.load_env(environ))

        if overrides:
            settings.update(overrides)

        return settings
