"""Configuration file management for acctmgr."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from acctmgr.domain.amounts import format_money, parse_amount
from acctmgr.domain.models import MAXIMUM_BALANCE, OPENING_BALANCE, Money
from acctmgr.logging_config import DEFAULT_LOG_LEVEL


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "acctmgr" / "config.toml"


def default_config() -> dict[str, Any]:
    return {
        "ledger": {"opening_balance": format_money(OPENING_BALANCE)},
        "logging": {"level": DEFAULT_LOG_LEVEL},
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    A missing file at the default location yields the default configuration.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()
        if not config_path.exists():
            return default_config()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def parse_opening_balance(value: str) -> Money:
    """Parse an opening balance.

    Args:
        value: Amount in currency units, e.g. "1000.00".

    Returns:
        Opening balance in cents.

    Raises:
        ValueError: If the amount is invalid, negative or above the maximum.
    """
    amount = parse_amount(value)
    if amount is None:
        raise ValueError(f"Invalid opening balance: {value!r}")
    if amount > MAXIMUM_BALANCE:
        raise ValueError(f"Opening balance exceeds maximum of {format_money(MAXIMUM_BALANCE)}")
    return amount


def get_section(config: dict[str, Any], name: str) -> dict[str, Any]:
    """Get a config table, or an empty one if it is absent.

    Raises:
        ValueError: If the entry exists but is not a table.
    """
    section = config.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"Config entry '{name}' must be a table")
    return section


def get_opening_balance(config: dict[str, Any]) -> Money:
    """Get the configured opening balance, defaulting to 1000.00."""
    value = get_section(config, "ledger").get("opening_balance")
    if value is None:
        return OPENING_BALANCE
    return parse_opening_balance(str(value))


def get_log_level(config: dict[str, Any]) -> str:
    """Get the configured log level name.

    Raises:
        ValueError: If the level is not a string.
    """
    level = get_section(config, "logging").get("level", DEFAULT_LOG_LEVEL)
    if not isinstance(level, str):
        raise ValueError(f"Config logging level must be a string, got {level!r}")
    return level
