"""Configuration helpers for the closet engine."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_MATCH_LIMIT = 10
DEFAULT_UNDERUTILIZED_LIMIT = 10
DEFAULT_SUGGESTION_LIMIT = 5


@dataclass
class EngineSettings:
    """Configuration values for an :class:`OutfitSearchEngine`.

    Nothing here is required: an engine built without settings uses the
    built-in style rules and the default result limits.
    """

    log_level: str = "INFO"
    rules_path: Optional[str] = None
    match_limit: int = DEFAULT_MATCH_LIMIT
    underutilized_limit: int = DEFAULT_UNDERUTILIZED_LIMIT
    suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is overridden key by key by upper-case environment
        variables (``RULES_PATH``, ``MATCH_LIMIT`` and so on).
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("CLOSET_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        return cls(
            log_level=str(get_value("log_level", "INFO") or "INFO").upper(),
            rules_path=get_value("rules_path"),
            match_limit=cls._as_int(get_value("match_limit"), DEFAULT_MATCH_LIMIT),
            underutilized_limit=cls._as_int(get_value("underutilized_limit"), DEFAULT_UNDERUTILIZED_LIMIT),
            suggestion_limit=cls._as_int(get_value("suggestion_limit"), DEFAULT_SUGGESTION_LIMIT),
            environment=env_name,
        )

    @staticmethod
    def _as_int(raw: Optional[str], default: int) -> int:
        if raw is None or str(raw).strip() == "":
            return default
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"Expected an integer setting, got {raw!r}") from None

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config


__all__ = ["EngineSettings", "DEFAULT_MATCH_LIMIT", "DEFAULT_UNDERUTILIZED_LIMIT", "DEFAULT_SUGGESTION_LIMIT"]
