from fastapi import Request

from code_critic.core.application.critique import CritiqueCodeUseCase


def get_usecase(request: Request) -> CritiqueCodeUseCase:
    """Return the pipeline built once per app by ``create_app``."""
    return request.app.state.critique_usecase
