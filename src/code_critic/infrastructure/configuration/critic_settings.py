from pydantic import Field, SecretStr
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from code_critic.core.exceptions import ConfigurationError

_MISSING_KEY = "TOGETHER_API_KEY environment variable is required"


class CodeCriticSettings(BaseSettings):
    # App Config
    app_name: str = "Code Critic"
    log_level: str = "INFO"

    # Remote completion provider
    together_api_key: SecretStr = Field(..., description="Bearer token for the completion provider")
    together_api_url: str = "https://api.together.ai/v1"
    deepseek_model: str = "deepseek-ai/DeepSeek-R1-0528-tput"
    analysis_timeout: int = Field(default=30000, gt=0, description="Remote call timeout in milliseconds")

    # Input limits
    max_code_length: int = Field(default=50000, gt=0)

    @property
    def analysis_timeout_s(self) -> float:
        return self.analysis_timeout / 1000

    model_config = SettingsConfigDict(env_file=None, extra="ignore")


def load_settings(**overrides) -> CodeCriticSettings:
    """Build settings from the environment, failing fast when the API key is absent."""
    try:
        settings = CodeCriticSettings(**overrides)
    except PydanticValidationError as exc:
        missing = {str(err["loc"][0]) for err in exc.errors() if err.get("type") == "missing"}
        if "together_api_key" in missing:
            raise ConfigurationError(_MISSING_KEY) from exc
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
    if not settings.together_api_key.get_secret_value().strip():
        raise ConfigurationError(_MISSING_KEY)
    return settings
