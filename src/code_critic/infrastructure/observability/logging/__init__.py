from code_critic.infrastructure.observability.logging.critic_schema_processor import (
    critic_schema_processor,
)

__all__ = ["critic_schema_processor"]
