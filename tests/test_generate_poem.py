"""
TEST DOC: Generate Poem Use Case

WHAT: Tests for validation, orchestration and failure mapping
WHY: The provider must never be called for incomplete requests and every downstream failure must collapse to one error

CASES:
- Missing or empty required fields raise PoemRequestError without a provider call
- Prompt, system prompt and sampling params reach the provider
- Provider exceptions become PoemGenerationError

EDGE CASES:
- Provider returns None or empty text
- Parser raising unexpectedly
"""

import httpx
import pytest
from structlog.testing import capture_logs

from scriptorium.application.dto.schemas import PoemRequest
from scriptorium.application.errors import PoemGenerationError, PoemRequestError
from scriptorium.application.services.poem_parser import DEFAULT_STANZAS, PoemParser
from scriptorium.application.services.prompt_builder import SYSTEM_PROMPT
from scriptorium.application.use_cases.generate_poem import GeneratePoemUseCase
from tests.fakes import FailingProvider, FakeProvider

PARAMS = {"temperature": 0.8, "max_tokens": 1000}


class ExplodingParser(PoemParser):
    def parse(self, *args, **kwargs):
        raise RuntimeError("unexpected")


class TestValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["character", "location", "event", "emotion"])
    async def test_missing_field_is_rejected(self, poem_request, field):
        provider = FakeProvider()
        use_case = GeneratePoemUseCase(provider, PARAMS)
        request = poem_request.model_copy(update={field: None})

        with pytest.raises(PoemRequestError) as exc_info:
            await use_case.execute(request)

        assert str(exc_info.value) == "Missing required fields"
        assert exc_info.value.missing == [field]
        assert provider.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["character", "location", "event", "emotion"])
    async def test_empty_field_is_rejected(self, poem_request, field):
        provider = FakeProvider()
        use_case = GeneratePoemUseCase(provider, PARAMS)
        request = poem_request.model_copy(update={field: ""})

        with pytest.raises(PoemRequestError):
            await use_case.execute(request)

        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_all_missing_fields_are_reported(self):
        provider = FakeProvider()
        use_case = GeneratePoemUseCase(provider, PARAMS)

        with pytest.raises(PoemRequestError) as exc_info:
            await use_case.execute(PoemRequest())

        assert exc_info.value.missing == ["character", "location", "event", "emotion"]
        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_language_is_optional(self, poem_request):
        provider = FakeProvider()
        use_case = GeneratePoemUseCase(provider, PARAMS)
        request = poem_request.model_copy(update={"language": None})

        poem = await use_case.execute(request)

        assert poem.title == "The Knight's Lament"
        assert len(provider.calls) == 1

    @pytest.mark.asyncio
    async def test_unlisted_values_are_accepted(self, poem_request):
        provider = FakeProvider(completion="")
        use_case = GeneratePoemUseCase(provider, PARAMS)
        request = poem_request.model_copy(update={"location": "monastery", "emotion": "melancholy"})

        poem = await use_case.execute(request)

        assert poem.title == "The Hero's Valor"
        assert "Location: monastery" in provider.calls[0][0]
        assert "Emotion: melancholy" in provider.calls[0][0]


class TestOrchestration:
    @pytest.mark.asyncio
    async def test_provider_receives_prompt_and_params(self, poem_request):
        provider = FakeProvider()
        use_case = GeneratePoemUseCase(provider, PARAMS)

        await use_case.execute(poem_request)

        prompt, params = provider.calls[0]
        assert "Character: hero" in prompt
        assert "archaic English" in prompt
        assert params == {"system_prompt": SYSTEM_PROMPT, "temperature": 0.8, "max_tokens": 1000}

    @pytest.mark.asyncio
    async def test_chinese_request_uses_chinese_prompt(self, poem_request):
        provider = FakeProvider(completion="城堡高耸入云端\n骑士独立叹苍天")
        use_case = GeneratePoemUseCase(provider, PARAMS)

        poem = await use_case.execute(poem_request.model_copy(update={"language": "chinese"}))

        assert "classical Chinese poem" in provider.calls[0][0]
        assert poem.title == "英雄之战"
        assert poem.stanzas == ["城堡高耸入云端 骑士独立叹苍天"]
        assert poem.illuminated == "城"

    @pytest.mark.asyncio
    async def test_parses_completion(self, poem_request):
        use_case = GeneratePoemUseCase(FakeProvider(), PARAMS)

        poem = await use_case.execute(poem_request)

        assert poem.title == "The Knight's Lament"
        assert len(poem.stanzas) == 2
        assert poem.stanzas[0].startswith("Upon the castle walls so high The noble knight")
        assert poem.illuminated == "U"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("completion", [None, ""])
    async def test_absent_completion_is_treated_as_empty(self, poem_request, completion):
        use_case = GeneratePoemUseCase(FakeProvider(completion=completion), PARAMS)

        poem = await use_case.execute(poem_request)

        assert poem.title == "The Hero's Valor"
        assert poem.stanzas == list(DEFAULT_STANZAS)
        assert poem.illuminated == "A"


class TestFailures:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            RuntimeError("boom"),
            ValueError("OpenAI API key is not configured"),
            httpx.ConnectError("connection refused"),
        ],
    )
    async def test_provider_failure_becomes_generation_error(self, poem_request, error):
        provider = FailingProvider(error)
        use_case = GeneratePoemUseCase(provider, PARAMS)

        with pytest.raises(PoemGenerationError) as exc_info:
            await use_case.execute(poem_request)

        assert str(exc_info.value) == "Failed to generate poem"
        assert exc_info.value.__cause__ is error
        assert len(provider.calls) == 1

    @pytest.mark.asyncio
    async def test_parser_failure_becomes_generation_error(self, poem_request):
        use_case = GeneratePoemUseCase(FakeProvider(), PARAMS, poem_parser=ExplodingParser())

        with pytest.raises(PoemGenerationError):
            await use_case.execute(poem_request)


class TestOperatorLogging:
    @pytest.mark.asyncio
    async def test_request_is_logged_with_choices(self, poem_request):
        use_case = GeneratePoemUseCase(FakeProvider(), PARAMS)

        with capture_logs() as logs:
            await use_case.execute(poem_request)

        requested = [entry for entry in logs if entry["event"] == "poem_generation_requested"]
        assert len(requested) == 1
        assert requested[0]["poem_event"] == "battle"
        assert requested[0]["character"] == "hero"
        assert any(entry["event"] == "poem_generated" for entry in logs)

    @pytest.mark.asyncio
    async def test_missing_field_is_logged(self, poem_request):
        use_case = GeneratePoemUseCase(FakeProvider(), PARAMS)

        with capture_logs() as logs:
            with pytest.raises(PoemRequestError):
                await use_case.execute(poem_request.model_copy(update={"emotion": ""}))

        rejected = [entry for entry in logs if entry["event"] == "poem_request_rejected"]
        assert len(rejected) == 1
        assert rejected[0]["missing"] == ["emotion"]

    @pytest.mark.asyncio
    async def test_provider_failure_is_logged_with_traceback(self, poem_request):
        use_case = GeneratePoemUseCase(FailingProvider(RuntimeError("boom")), PARAMS)

        with capture_logs() as logs:
            with pytest.raises(PoemGenerationError):
                await use_case.execute(poem_request)

        failed = [entry for entry in logs if entry["event"] == "poem_generation_failed"]
        assert len(failed) == 1
        assert failed[0]["log_level"] == "error"
        assert failed[0]["exc_info"] is True
        assert failed[0]["error"] == "boom"
        assert failed[0]["provider"] == "fake"
