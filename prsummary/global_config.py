"""Global configuration management for prsummary.

Handles user-level configuration stored in ~/.prsummary/:
- config.yaml: Provider, model, diff size and target branch settings
- credentials: API keys for LLM providers
"""

import os
import stat
from pathlib import Path
from typing import Dict, Optional, Any

import yaml

from prsummary.config import LLMProvider


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".prsummary"


def get_global_config_dir() -> Path:
    """Get the global prsummary configuration directory.

    Returns:
        Path to ~/.prsummary/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.prsummary/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file."""
    return get_global_config_dir() / "config.yaml"


def get_credentials_file_path() -> Path:
    """Get path to credentials file."""
    return get_global_config_dir() / "credentials"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.prsummary/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or parsed.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.prsummary/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def _read_credentials(credentials_file: Path) -> Dict[str, str]:
    credentials = {}
    with open(credentials_file, "r") as f:
        for line in f:
            line = line.strip()
            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue

            # Parse KEY=value format
            if "=" in line:
                key, value = line.split("=", 1)
                credentials[key.strip()] = value.strip()
    return credentials


def load_credentials() -> Dict[str, str]:
    """Load API keys from ~/.prsummary/credentials.

    Returns:
        Dictionary mapping environment variable names to API keys.
    """
    credentials_file = get_credentials_file_path()

    if not credentials_file.exists():
        return {}

    try:
        return _read_credentials(credentials_file)
    except OSError as e:
        raise GlobalConfigError(f"Failed to load credentials from {credentials_file}: {e}")


def save_credential(provider_key: str, api_key: str) -> None:
    """Save or update an API key in the credentials file.

    Args:
        provider_key: Environment variable name (e.g., "OPENAI_API_KEY")
        api_key: The API key value.
    """
    ensure_global_config_dir()
    credentials_file = get_credentials_file_path()

    existing_creds = load_credentials()
    existing_creds[provider_key] = api_key

    try:
        with open(credentials_file, "w") as f:
            f.write("# prsummary API credentials\n")
            f.write("# Format: PROVIDER_API_KEY=your_key_here\n\n")

            for key, value in existing_creds.items():
                f.write(f"{key}={value}\n")

        # Owner read/write only
        os.chmod(credentials_file, stat.S_IRUSR | stat.S_IWUSR)

    except OSError as e:
        raise GlobalConfigError(f"Failed to save credential: {e}")


def get_credential(provider_key: str) -> Optional[str]:
    """Get an API key from credentials file.

    Args:
        provider_key: Environment variable name (e.g., "OPENAI_API_KEY")

    Returns:
        The API key if found, None otherwise.
    """
    return load_credentials().get(provider_key)


def get_active_provider() -> Optional[LLMProvider]:
    """Get the active LLM provider from global config.

    Returns:
        LLMProvider enum value, or None if not configured.
    """
    provider_str = load_global_config().get("provider")

    if not provider_str:
        return None

    try:
        return LLMProvider(provider_str)
    except ValueError:
        return None


def set_provider_and_model(provider: LLMProvider, model: str) -> None:
    """Set the active provider and model in global config."""
    config = load_global_config()
    config["provider"] = provider.value
    config["model"] = model
    save_global_config(config)


def set_max_diff_size(max_diff_size: int) -> None:
    """Set the maximum diff size (characters) in global config.

    Raises:
        GlobalConfigError: If the value is not positive.
    """
    if max_diff_size <= 0:
        raise GlobalConfigError("max_diff_size must be a positive number of characters")
    config = load_global_config()
    config["max_diff_size"] = max_diff_size
    save_global_config(config)


def set_target_branch(branch: str) -> None:
    """Set the default target branch in global config."""
    if not branch.strip():
        raise GlobalConfigError("Target branch cannot be empty")
    config = load_global_config()
    config["target_branch"] = branch.strip()
    save_global_config(config)


def is_configured() -> bool:
    """Check if prsummary has a config.yaml."""
    return get_config_file_path().exists()
