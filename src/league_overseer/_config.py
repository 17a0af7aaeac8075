# Area: Shared
"""
league_overseer._config — Overseer configuration
=================================================

Loads, merges and validates the plugin configuration.

Sources, later ones win:
    1. A JSON file (``*.json``) with snake_case keys, or an INI file
       whose ``[leagueOverSeer]`` section uses the plugin key names
    2. A ``.env`` file in the working directory
    3. Environment variables named like the INI keys
"""

import configparser
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import ConfigurationError

logger = logging.getLogger("league_overseer.config")

INI_SECTION = "leagueOverSeer"

# Plugin key (INI section / environment variable) → config field
PLUGIN_KEYS = {
    "LEAGUE_OVER_SEER_URL": "league_url",
    "DEBUG_LEVEL": "debug_level",
    "ROTATIONAL_LEAGUE": "rotation_league",
    "MAPCHANGE_PATH": "mapchange_path",
    "ROLLCALL_DELAY": "rollcall_delay",
    "ROLLCALL_RETRY_DELAY": "rollcall_retry_delay",
    "ROLLCALL_MARGIN": "rollcall_margin",
    "DEFAULT_COUNTDOWN": "default_countdown",
    "MIN_COUNTDOWN": "min_countdown",
    "MAX_COUNTDOWN": "max_countdown",
    "RECORD_MATCHES": "record_matches",
    "HTTP_TIMEOUT": "http_timeout",
    "LOG_FILE": "log_file",
}


class OverseerConfig(BaseModel):
    """Validated overseer settings. Immutable once the overseer starts."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    league_url: str
    debug_level: int = Field(0, ge=0, le=4)
    rotation_league: bool = False
    mapchange_path: str = ""

    rollcall_delay: float = Field(90.0, gt=0)
    rollcall_retry_delay: float = Field(60.0, gt=0)
    rollcall_margin: float = Field(30.0, ge=0)

    default_countdown: int = 10
    min_countdown: int = Field(5, ge=1)
    max_countdown: int = 120

    record_matches: bool = True
    http_timeout: float = Field(30.0, gt=0)
    log_file: str = "league_overseer.log"

    @field_validator("league_url")
    @classmethod
    def _url_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("no URL was chosen to report matches or query teams")
        return value

    @model_validator(mode="after")
    def _countdown_bounds(self) -> "OverseerConfig":
        if self.min_countdown > self.max_countdown:
            raise ValueError("min_countdown must not exceed max_countdown")
        if not self.min_countdown <= self.default_countdown <= self.max_countdown:
            raise ValueError("default_countdown must lie between min_countdown and max_countdown")
        return self

    def clamp_countdown(self, requested: Optional[int]) -> int:
        """Requested countdown if within bounds, otherwise the default."""
        if requested is not None and self.min_countdown <= requested <= self.max_countdown:
            return requested
        return self.default_countdown


def validate_config(raw: Dict[str, Any], source: Optional[str] = None) -> OverseerConfig:
    """
    Validate a raw configuration dict.

    Raises:
        ConfigurationError: If required keys are missing or out of range
    """
    try:
        return OverseerConfig.model_validate(raw)
    except ValidationError as e:
        problems = []
        for err in e.errors():
            where = ".".join(str(part) for part in err["loc"]) or "config"
            problems.append(f"{where}: {err['msg']}")
        raise ConfigurationError(problems, source=source) from e


def _read_json(path: Path) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ConfigurationError(["top-level JSON value must be an object"], source=str(path))
    return data


def _read_ini(path: Path) -> Dict[str, Any]:
    parser = configparser.ConfigParser()
    parser.optionxform = str  # keep key case
    parser.read(path, encoding="utf-8")
    if not parser.has_section(INI_SECTION):
        raise ConfigurationError([f"missing [{INI_SECTION}] section"], source=str(path))
    config: Dict[str, Any] = {}
    for key, value in parser.items(INI_SECTION):
        field_name = PLUGIN_KEYS.get(key.upper())
        if field_name is None:
            logger.warning("Ignoring unknown configuration key %s", key)
            continue
        config[field_name] = value
    return config


def load_config(config_path: Optional[str] = None, use_dotenv: bool = True) -> OverseerConfig:
    """Load config from a file and the environment, then validate it."""
    config: Dict[str, Any] = {}
    source = None

    if config_path:
        path = Path(config_path)
        source = str(path)
        if not path.exists():
            raise ConfigurationError([f"configuration file not found: {path}"], source=source)
        try:
            config = _read_json(path) if path.suffix == ".json" else _read_ini(path)
        except (OSError, json.JSONDecodeError, configparser.Error) as e:
            raise ConfigurationError([f"could not parse configuration: {e}"], source=source) from e

    if use_dotenv:
        # Search from the working directory the server was started in
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path)

    for env_key, config_key in PLUGIN_KEYS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    return validate_config(config, source=source)


def read_map_name(mapchange_path: str) -> str:
    """
    Read the map currently being played from a map-change file.

    The file's first line names the map's world config; the ``.conf``
    suffix is dropped. Returns "" if the file cannot be read.
    """
    try:
        with open(mapchange_path, encoding="utf-8") as f:
            first_line = f.readline().strip()
    except OSError as e:
        logger.warning("Could not read map change file %s: %s", mapchange_path, e)
        return ""
    return first_line.removesuffix(".conf")
