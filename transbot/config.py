"""Configuration loaded from the environment (and an optional .env file)."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

from transbot.errors import ConfigError

load_dotenv()

PAPAGO_TRANSLATION_URL = "https://naveropenapi.apigw.ntruss.com/nmt/v1/translation"

# Credential variable names, in the order they are reported when missing
REQUIRED_ENV_VARS = (
    "SLACK_BOT_TOKEN",
    "SLACK_APP_TOKEN",
    "TRANSLATOR_API_KEY",
    "TRANSLATOR_API_SECRET",
)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


@dataclass
class SlackConfig:
    bot_token: str = ""
    app_token: str = ""


@dataclass
class TranslatorConfig:
    api_key_id: str = ""
    api_key_secret: str = ""
    api_url: str = PAPAGO_TRANSLATION_URL


@dataclass
class DispatchConfig:
    # 0 keeps the event queue unbounded
    queue_maxsize: int = 0
    # 0 disables the status server
    health_port: int = 0


@dataclass
class AppConfig:
    """Typed configuration, built once at startup and passed to the launcher."""

    slack: SlackConfig = field(default_factory=SlackConfig)
    translator: TranslatorConfig = field(default_factory=TranslatorConfig)
    dispatch: DispatchConfig = field(default_factory=DispatchConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            slack=SlackConfig(
                bot_token=os.getenv("SLACK_BOT_TOKEN", "").strip(),
                app_token=os.getenv("SLACK_APP_TOKEN", "").strip(),
            ),
            translator=TranslatorConfig(
                api_key_id=os.getenv("TRANSLATOR_API_KEY", "").strip(),
                api_key_secret=os.getenv("TRANSLATOR_API_SECRET", "").strip(),
                api_url=os.getenv("TRANSLATOR_API_URL", "").strip() or PAPAGO_TRANSLATION_URL,
            ),
            dispatch=DispatchConfig(
                queue_maxsize=_int_env("EVENT_QUEUE_MAXSIZE", 0),
                health_port=_int_env("HEALTH_PORT", 0),
            ),
        )

    def missing(self) -> List[str]:
        """Names of the required variables that are empty."""
        values = {
            "SLACK_BOT_TOKEN": self.slack.bot_token,
            "SLACK_APP_TOKEN": self.slack.app_token,
            "TRANSLATOR_API_KEY": self.translator.api_key_id,
            "TRANSLATOR_API_SECRET": self.translator.api_key_secret,
        }
        return [name for name in REQUIRED_ENV_VARS if not values[name]]

    def validate(self) -> "AppConfig":
        """Raise ConfigError unless every credential is usable."""
        missing = self.missing()
        if missing:
            raise ConfigError(f"Missing required settings: {', '.join(missing)}")
        if not self.slack.app_token.startswith("xapp-"):
            raise ConfigError("SLACK_APP_TOKEN must be an app-level token (xapp-...)")
        if self.dispatch.queue_maxsize < 0:
            raise ConfigError("EVENT_QUEUE_MAXSIZE must be >= 0")
        if not 0 <= self.dispatch.health_port <= 65535:
            raise ConfigError("HEALTH_PORT must be between 0 and 65535")
        return self
