from code_critic.infrastructure.entrypoints.api.app_factory import create_app

__all__ = ["create_app"]
