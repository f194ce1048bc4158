import pytest

from code_critic.core.application.ports import CompletionClient
from code_critic.core.exceptions import APIError
from code_critic.infrastructure.configuration import CodeCriticSettings
from code_critic.infrastructure.resolution import build_critique_usecase

API_URL = "https://llm.example.com/v1"
MODEL = "test-org/test-model"


class FakeCompletionClient(CompletionClient):
    """In-memory stand-in for the remote provider that records every call."""

    def __init__(self, reply: str = "{}", error: APIError | None = None, healthy: bool = True):
        self.reply = reply
        self.error = error
        self.healthy = healthy
        self.calls: list[tuple[str, str]] = []

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.reply

    async def health_check(self) -> bool:
        return self.healthy


@pytest.fixture
def settings():
    return CodeCriticSettings(
        together_api_key="sk-test-key",
        together_api_url=API_URL,
        deepseek_model=MODEL,
        analysis_timeout=2000,
        max_code_length=100,
        app_name="TestCritic",
    )


@pytest.fixture
def fake_client():
    return FakeCompletionClient()


@pytest.fixture
def usecase(settings, fake_client):
    return build_critique_usecase(settings, client=fake_client)


@pytest.fixture
def valid_payload():
    return {
        "code": "function f(){ eval(x) }",
        "context": {"language": "javascript", "userGoal": "review for security issues"},
    }


@pytest.fixture
def client_factory():
    return FakeCompletionClient
