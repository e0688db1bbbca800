"""Configuration loader for agentsmith.

Loads from agentsmith/configs/default.toml and overrides with environment variables.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "configs" / "default.toml"


@dataclass
class LLMConfig:
    provider: str
    model: str
    timeout: float | None
    api_key: str = ""


@dataclass
class AgentConfig:
    prompt: str | None
    sentinel: str


@dataclass
class LoggingConfig:
    level: str
    format: str


@dataclass
class AgentSmithConfig:
    llm: LLMConfig
    agent: AgentConfig
    logging: LoggingConfig


def _validate_config(config: AgentSmithConfig) -> None:
    """Validate configuration values.

    Args:
        config: AgentSmithConfig to validate

    Raises:
        ValueError: If validation fails
    """
    valid_providers = {"http", "mock"}
    if config.llm.provider.lower() not in valid_providers:
        raise ValueError(
            f"llm.provider must be one of {valid_providers}, got {config.llm.provider}"
        )
    if not config.llm.model:
        raise ValueError("llm.model must not be empty")
    if config.llm.timeout is not None and config.llm.timeout < 0:
        raise ValueError(f"llm.timeout must be >= 0, got {config.llm.timeout}")

    if not config.agent.sentinel.strip():
        raise ValueError("agent.sentinel must not be blank")

    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if config.logging.level.upper() not in valid_levels:
        raise ValueError(f"logging.level must be one of {valid_levels}, got {config.logging.level}")
    valid_formats = {"text", "json"}
    if config.logging.format not in valid_formats:
        raise ValueError(
            f"logging.format must be one of {valid_formats}, got {config.logging.format}"
        )


def load_config(config_path: Path | None = None) -> AgentSmithConfig:
    """Load configuration from TOML file and override with env vars.

    Args:
        config_path: Path to TOML config file. Defaults to the bundled default.toml

    Returns:
        AgentSmithConfig instance with merged configuration

    Raises:
        ValueError: If configuration validation fails
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    with open(config_path, "rb") as f:
        config_dict = tomllib.load(f)

    llm_dict = config_dict.get("llm", {})
    agent_dict = config_dict.get("agent", {})
    logging_dict = config_dict.get("logging", {})

    # Override with environment variables (AGENTSMITH_ prefix)
    llm_provider = os.getenv("AGENTSMITH_LLM_PROVIDER", llm_dict.get("provider", "http"))
    llm_model = os.getenv("AGENTSMITH_LLM_MODEL", llm_dict.get("model", "mistral-medium"))
    # 0 means "no timeout"; TOML has no null
    llm_timeout = float(os.getenv("AGENTSMITH_LLM_TIMEOUT", llm_dict.get("timeout", 0)))
    api_key = os.getenv("API_KEY", "")

    prompt = os.getenv("AGENTSMITH_PROMPT", agent_dict.get("prompt", ""))
    sentinel = os.getenv("AGENTSMITH_SENTINEL", agent_dict.get("sentinel", "q"))

    log_level = os.getenv("AGENTSMITH_LOG_LEVEL", logging_dict.get("level", "WARNING"))
    log_format = os.getenv("AGENTSMITH_LOG_FORMAT", logging_dict.get("format", "text"))

    config = AgentSmithConfig(
        llm=LLMConfig(
            provider=llm_provider,
            model=llm_model,
            timeout=llm_timeout or None,
            api_key=api_key,
        ),
        agent=AgentConfig(prompt=prompt or None, sentinel=sentinel),
        logging=LoggingConfig(level=log_level, format=log_format),
    )

    _validate_config(config)

    return config


# Global config instance
_config: AgentSmithConfig | None = None


def get_config() -> AgentSmithConfig:
    """Get the global config instance, loading it if necessary."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
