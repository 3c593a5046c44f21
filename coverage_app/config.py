"""Configuration helpers for the wardrobe coverage engine."""

from dataclasses import dataclass, fields
from pathlib import Path
import os
from typing import Optional


@dataclass(frozen=True)
class CoverageConfig:
    """Tunable limits and thresholds for coverage evaluation.

    The defaults reproduce the documented behaviour; deployments normally only
    change ``max_workers`` and ``log_level``.
    """

    max_sample_combinations: int = 10
    max_recommendations: int = 5
    max_bulk_recommendation: int = 3
    shopping_session_threshold: int = 5
    well_covered_threshold: int = 80
    poorly_covered_threshold: int = 50
    recommendations_per_poor_scenario: int = 2
    top_recommendations_limit: int = 3
    critical_gap_limit: int = 10
    max_workers: int = 1
    log_level: str = "INFO"
    environment: Optional[str] = None

    @classmethod
    def from_env(cls) -> "CoverageConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default. Environment variables (upper-cased keys) take precedence over
        file values.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("COVERAGE_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str) -> Optional[str]:
            return os.getenv(key.upper(), yaml_config.get(key))

        values: dict = {}
        for config_field in fields(cls):
            if config_field.name == "environment":
                continue
            raw = get_value(config_field.name)
            if raw is None or raw == "":
                continue
            if config_field.type in (int, "int"):
                try:
                    values[config_field.name] = int(raw)
                except ValueError as exc:
                    raise ValueError(f"Invalid integer for '{config_field.name}': {raw!r}") from exc
            else:
                values[config_field.name] = str(raw)

        if values.get("max_workers", 1) < 1:
            values["max_workers"] = 1
        return cls(environment=env_name, **values)

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


__all__ = ["CoverageConfig"]
