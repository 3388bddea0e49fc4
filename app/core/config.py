from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Quote Mailer"

    # Mailjet sub-account credentials
    MJ_API_KEY: Optional[str] = None
    MJ_API_SECRET: Optional[str] = None
    MAILJET_SEND_URL: str = "https://api.mailjet.com/v3.1/send"
    MAILJET_TIMEOUT_SEC: float = 10

    MAIL_FROM_EMAIL: Optional[str] = None  # sender verified in Mailjet
    MAIL_FROM_NAME: str = "MrClean"
    RECIPIENT_EMAIL: Optional[str] = None  # internal copy
    REPLY_TO: Optional[str] = None

    CORS_ALLOW_ORIGIN: str = "*"

    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"
    # DEBUG also logs the outgoing Mailjet payload (never the credentials)
    MAILJET_LOG_LEVEL: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def mailjet_configured(self) -> bool:
        return all(
            (value or "").strip()
            for value in (self.MJ_API_KEY, self.MJ_API_SECRET, self.MAIL_FROM_EMAIL)
        )


settings = Settings()


def get_settings() -> Settings:
    return settings


def settings_for(app) -> Settings:
    """Resolve settings the same way route dependencies do, overrides included."""
    provider = app.dependency_overrides.get(get_settings, get_settings)
    return provider()
