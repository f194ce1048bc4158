from datetime import datetime

import pytest
from structlog.contextvars import get_contextvars

from code_critic.core.exceptions import APIError, ValidationError
from code_critic.infrastructure.resolution import build_critique_usecase

SECURITY_REVIEW = (
    'Here is my review: {"overall_score": 2, "critical_issues": [{"type":"security",'
    '"severity":"critical","line_range":[1,1],"description":"eval used","explanation":"...",'
    '"fix_suggestion":"avoid eval"}]}'
)


@pytest.mark.asyncio
async def test_security_review_scenario(settings, client_factory, valid_payload):
    client = client_factory(reply=SECURITY_REVIEW)
    usecase = build_critique_usecase(settings, client=client)

    result = await usecase.execute(valid_payload)

    assert result.overall_score == 2
    assert len(result.critical_issues) == 1
    assert result.critical_issues[0].type == "security"
    assert result.critical_issues[0].description == "eval used"
    assert result.suggestions == []
    assert result.alternatives == []
    assert result.context_alignment.alignment_score == 5
    assert result.analysis_metadata.model_used == settings.deepseek_model
    assert result.analysis_metadata.analysis_time_ms >= 0
    datetime.fromisoformat(result.analysis_metadata.timestamp)


@pytest.mark.asyncio
async def test_prose_reply_yields_fallback(usecase, fake_client, valid_payload):
    fake_client.reply = "I think this code is mostly fine, but eval is scary."

    result = await usecase.execute(valid_payload)

    assert result.overall_score == 5
    assert len(result.critical_issues) == 1
    assert "parse" in result.critical_issues[0].description.lower()


@pytest.mark.asyncio
async def test_prompts_reach_the_client(usecase, fake_client, valid_payload):
    await usecase.execute(valid_payload)

    assert len(fake_client.calls) == 1
    system_prompt, user_prompt = fake_client.calls[0]
    assert "RESPONSE FORMAT" in system_prompt
    assert "```javascript\nfunction f(){ eval(x) }\n```" in user_prompt
    assert "USER GOAL: review for security issues" in user_prompt


@pytest.mark.asyncio
async def test_oversized_code_fails_before_network(usecase, fake_client, settings):
    payload = {
        "code": "x" * (settings.max_code_length + 1),
        "context": {"language": "python", "userGoal": "g"},
    }

    with pytest.raises(ValidationError):
        await usecase.execute(payload)
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_empty_code_fails_before_network(usecase, fake_client):
    with pytest.raises(ValidationError):
        await usecase.execute({"code": "", "context": {"language": "python", "userGoal": "g"}})
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_api_error_propagates(usecase, fake_client, valid_payload):
    fake_client.error = APIError("Completion API error: upstream down", status=503)

    with pytest.raises(APIError) as exc:
        await usecase.execute(valid_payload)
    assert exc.value.status == 503
    assert len(fake_client.calls) == 1


@pytest.mark.asyncio
async def test_pathological_reply_still_returns_a_result(usecase, fake_client, valid_payload):
    fake_client.reply = '{"x": ' + "[" * 100_000 + "]" * 100_000 + "}"

    result = await usecase.execute(valid_payload)

    assert result.overall_score == 5
    assert len(result.critical_issues) == 1


@pytest.mark.asyncio
async def test_log_context_is_scoped_to_one_run(settings, client_factory, valid_payload):
    seen = []

    class RecordingClient(client_factory):
        async def complete(self, system_prompt, user_prompt):
            seen.append(get_contextvars())
            return await super().complete(system_prompt, user_prompt)

    usecase = build_critique_usecase(settings, client=RecordingClient())

    await usecase.execute(valid_payload)

    assert seen[0]["event_type"] == "pipeline.critique"
    assert seen[0]["model"] == settings.deepseek_model
    assert "event_type" not in get_contextvars()
    assert "model" not in get_contextvars()
