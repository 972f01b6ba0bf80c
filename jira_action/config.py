from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from jira_action.errors import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        str_strip_whitespace=True,
    )

    jira_base_url: str = Field(min_length=1)
    jira_email: str = Field(min_length=1)
    jira_api_token: str = Field(min_length=1)
    operation: str = Field(min_length=1)
    http_timeout: float = Field(default=30.0, gt=0)
    user_agent: str = "jira-cloud-action"

    @property
    def base_url(self) -> str:
        return self.jira_base_url.rstrip("/")


DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

# Whitespace-only inputs strip down to "" and fail min_length.
_ABSENT = {"missing", "string_too_short"}


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        for error in exc.errors():
            if error["type"] in _ABSENT:
                raise ConfigurationError(
                    f"Input required and not supplied: {error['loc'][0]}"
                ) from exc
        raise ConfigurationError(str(exc)) from exc
