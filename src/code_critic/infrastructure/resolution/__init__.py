from code_critic.infrastructure.resolution.container import (
    build_completion_client,
    build_critique_usecase,
)

__all__ = ["build_completion_client", "build_critique_usecase"]
