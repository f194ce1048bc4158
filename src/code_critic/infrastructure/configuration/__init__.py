from code_critic.infrastructure.configuration.critic_settings import (
    CodeCriticSettings,
    load_settings,
)

__all__ = ["CodeCriticSettings", "load_settings"]
