"""
SpamGuard configuration management using Pydantic Settings.

Configuration can be provided via:
1. spamguard.yaml config file
2. SPAMGUARD_* env vars (nested with double underscore)
3. OPENAI_API_KEY as a fallback for the AI checker key
4. .env file
5. Direct instantiation

Priority (highest wins): init kwargs > spamguard.yaml > env vars > .env > defaults

The spamguard.yaml format:
    fail_open: true
    log_level: INFO
    ai:
      enabled: true
      model: gpt-4o-mini
      host: api.openai.com       # bare host or full base URL
    keywords:
      enabled: true
      list: ["cheap pills", "casino"]
      files: ["./blocklist.txt"]
      case_sensitive: false
"""

import logging
import os
from pathlib import Path
from typing import Optional, Literal, List, Dict, Any, Tuple, Type

import yaml
from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict,
    PydanticBaseSettingsSource,
)

logger = logging.getLogger(__name__)

DEFAULT_AI_MODEL = "gpt-4o-mini"


def get_default_api_key() -> Optional[SecretStr]:
    """Pick up OPENAI_API_KEY when no key is configured explicitly."""
    key = os.environ.get("OPENAI_API_KEY")
    return SecretStr(key) if key else None


class AICheckerConfig(BaseModel):
    """AI checker configuration."""

    enabled: bool = False
    api_key: Optional[SecretStr] = Field(default_factory=get_default_api_key)
    model: str = DEFAULT_AI_MODEL
    # Bare host or full base URL; empty means the OpenAI API
    host: str = ""


class KeywordsConfig(BaseModel):
    """Keyword list checker configuration."""

    enabled: bool = False
    keywords: List[str] = Field(default_factory=list)
    files: List[str] = Field(default_factory=list)
    case_sensitive: bool = False


class YamlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that reads from a spamguard.yaml config file.

    Discovers config at:
    1. Explicit path passed via _config_path init kwarg
    2. $SPAMGUARD_CONFIG env var
    3. ./spamguard.yaml
    4. ./spamguard.yml
    """

    def __init__(
        self, settings_cls: Type[BaseSettings], config_path: Optional[str] = None
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._yaml_data: Optional[Dict[str, Any]] = None
        self._load()

    def _discover_config_file(self) -> Optional[Path]:
        """Find the config file to load."""
        if self._config_path:
            p = Path(self._config_path)
            return p if p.is_file() else None

        env_path = os.environ.get("SPAMGUARD_CONFIG")
        if env_path:
            p = Path(env_path)
            return p if p.is_file() else None

        for name in ("spamguard.yaml", "spamguard.yml"):
            p = Path(name)
            if p.is_file():
                return p

        return None

    def _load(self) -> None:
        """Load and parse the YAML config file."""
        path = self._discover_config_file()
        if path is None:
            self._yaml_data = {}
            return

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            self._yaml_data = data if isinstance(data, dict) else {}
            logger.debug(f"Loaded config from {path}")
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {path}: {e}")
            self._yaml_data = {}

    # Keys within keywords: that need renaming for KeywordsConfig
    _KEYWORDS_KEY_RENAMES = {"list": "keywords"}

    def _map_to_settings(self) -> Dict[str, Any]:
        """Map YAML keys to the SpamGuardSettings structure."""
        if not self._yaml_data:
            return {}

        data = self._yaml_data
        result: Dict[str, Any] = {}

        for key in ("debug", "log_level", "fail_open"):
            if key in data:
                result[key] = data[key]

        # ai.* -> ai.*
        ai_cfg = data.get("ai")
        if isinstance(ai_cfg, dict) and ai_cfg:
            result["ai"] = dict(ai_cfg)

        # keywords: either a bare list (implies enabled) or a section
        kw_cfg = data.get("keywords")
        if isinstance(kw_cfg, list):
            result["keywords"] = {"enabled": True, "keywords": kw_cfg}
        elif isinstance(kw_cfg, dict) and kw_cfg:
            keywords = result.setdefault("keywords", {})
            for k, v in kw_cfg.items():
                keywords[self._KEYWORDS_KEY_RENAMES.get(k, k)] = v

        return result

    def get_field_value(self, field: Any, field_name: str) -> Tuple[Any, str, bool]:
        mapped = self._map_to_settings()
        value = mapped.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> Dict[str, Any]:
        return self._map_to_settings()


class SpamGuardSettings(BaseSettings):
    """
    Main SpamGuard configuration.

    All settings can be overridden via environment variables with SPAMGUARD_
    prefix. Nested settings use double underscore: SPAMGUARD_AI__MODEL

    A spamguard.yaml config file is also supported (config takes priority).
    Pass _config_path to override the config file location.
    """

    model_config = SettingsConfigDict(
        env_prefix="SPAMGUARD_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Path to spamguard.yaml (set via _config_path kwarg, not a real setting field)
    _config_path: Optional[str] = None

    # General settings
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # True = a checker abstaining (error) does not reject the comment
    # False = any abstention rejects the comment
    fail_open: bool = True

    # Checker configurations
    ai: AICheckerConfig = Field(default_factory=AICheckerConfig)
    keywords: KeywordsConfig = Field(default_factory=KeywordsConfig)

    def __init__(self, _config_path: Optional[str] = None, **kwargs: Any):
        self.__class__._config_path = _config_path
        super().__init__(**kwargs)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Insert YAML config source before env vars.

        Priority (highest first): init > yaml > env > dotenv > file_secret
        """
        yaml_source = YamlConfigSource(settings_cls, config_path=cls._config_path)
        return (
            init_settings,
            yaml_source,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    def enabled_checkers(self) -> List[str]:
        """Names of checkers switched on, in pipeline order."""
        names = []
        if self.keywords.enabled:
            names.append("keywords")
        if self.ai.enabled:
            names.append("ai")
        return names

    def get_checker_config(self, name: str) -> Dict[str, Any]:
        """
        Get constructor arguments for a checker.

        Returns:
            Kwargs ready for CheckerRegistry.create()
        """
        if name == "ai":
            api_key = self.ai.api_key.get_secret_value() if self.ai.api_key else ""
            return {
                "api_key": api_key,
                "model": self.ai.model,
                "host": self.ai.host or None,
            }
        if name == "keywords":
            return {
                "keywords": list(self.keywords.keywords),
                "files": list(self.keywords.files),
                "case_sensitive": self.keywords.case_sensitive,
            }
        raise ValueError(f"No configuration section for checker: '{name}'")
