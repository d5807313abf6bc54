import argparse
import asyncio
import json
import logging

from scriptorium.application.dto.schemas import PoemRequest
from scriptorium.application.errors import PoemGenerationError, PoemRequestError
from scriptorium.application.use_cases.generate_poem import GeneratePoemUseCase
from scriptorium.domain.enums import Character, Emotion, Event, Language, Location, ProviderKind
from scriptorium.infra.ai.factory import get_provider
from scriptorium.infra.config.settings import settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def generate(args: argparse.Namespace) -> int:
    provider = get_provider(ProviderKind(args.provider))
    use_case = GeneratePoemUseCase(provider, settings.generation_params)
    request = PoemRequest(
        character=args.character,
        location=args.location,
        event=args.event,
        emotion=args.emotion,
        language=args.language,
    )
    try:
        poem = await use_case.execute(request)
    except (PoemRequestError, PoemGenerationError) as e:
        logger.error(f"Generation failed: {e}")
        return 1
    print(json.dumps(poem.model_dump(), ensure_ascii=False, indent=2))
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate one poem with the configured provider")
    parser.add_argument("--provider", choices=[k.value for k in ProviderKind], default=settings.LLM_PROVIDER.value)
    parser.add_argument("--character", choices=[c.value for c in Character], default=Character.HERO.value)
    parser.add_argument("--location", choices=[loc.value for loc in Location], default=Location.CASTLE.value)
    parser.add_argument("--event", choices=[e.value for e in Event], default=Event.BATTLE.value)
    parser.add_argument("--emotion", choices=[e.value for e in Emotion], default=Emotion.SORROW.value)
    parser.add_argument("--language", choices=[lang.value for lang in Language], default=Language.ENGLISH.value)
    return asyncio.run(generate(parser.parse_args()))


if __name__ == "__main__":
    raise SystemExit(main())
