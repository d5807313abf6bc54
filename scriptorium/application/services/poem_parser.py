import re
from typing import Dict, List, Optional, Tuple

from scriptorium.application.dto.schemas import GeneratedPoem
from scriptorium.domain.enums import Character, Event, Language

FALLBACK_TITLE = "Medieval Tale"
FALLBACK_ILLUMINATED = "A"
STANZA_LENGTH = 4

DEFAULT_STANZAS: Tuple[str, ...] = (
    "A tale of old, in parchment writ",
    "Of noble deeds and courage fit",
    "Through castle halls and forest deep",
    "The ancient secrets they would keep",
)

DEFAULT_TITLES: Dict[Tuple[Language, Character, Event], str] = {
    (Language.ENGLISH, Character.HERO, Event.BATTLE): "The Hero's Valor",
    (Language.ENGLISH, Character.HERO, Event.LOVE): "The Hero's Heart",
    (Language.ENGLISH, Character.HERO, Event.TREACHERY): "The Hero's Betrayal",
    (Language.ENGLISH, Character.NOBLE, Event.BATTLE): "The Noble Quest",
    (Language.ENGLISH, Character.NOBLE, Event.LOVE): "The Noble Courtship",
    (Language.ENGLISH, Character.NOBLE, Event.TREACHERY): "The Noble Deceit",
    (Language.ENGLISH, Character.COMMONER, Event.BATTLE): "The Common Struggle",
    (Language.ENGLISH, Character.COMMONER, Event.LOVE): "The Common Heart",
    (Language.ENGLISH, Character.COMMONER, Event.TREACHERY): "The Common Betrayal",
    (Language.CHINESE, Character.HERO, Event.BATTLE): "英雄之战",
    (Language.CHINESE, Character.HERO, Event.LOVE): "英雄之心",
    (Language.CHINESE, Character.HERO, Event.TREACHERY): "英雄之叛",
    (Language.CHINESE, Character.NOBLE, Event.BATTLE): "贵族征途",
    (Language.CHINESE, Character.NOBLE, Event.LOVE): "贵族情缘",
    (Language.CHINESE, Character.NOBLE, Event.TREACHERY): "贵族诡计",
    (Language.CHINESE, Character.COMMONER, Event.BATTLE): "平民抗争",
    (Language.CHINESE, Character.COMMONER, Event.LOVE): "平民情愫",
    (Language.CHINESE, Character.COMMONER, Event.TREACHERY): "平民背叛",
}

# Заголовок должен иметь непустой текст на той же строке
TITLE_RE = re.compile(r"Title:[^\S\r\n]*(\S[^\r\n]*)", re.IGNORECASE)


class PoemParser:
    """
    Разбирает сырой ответ модели в структуру GeneratedPoem.

    Никогда не бросает исключений: пустой или испорченный ответ
    приводит к заголовку по умолчанию и стандартным строфам.
    """

    def extract_title(self, text: str) -> Optional[str]:
        match = TITLE_RE.search(text or "")
        if not match:
            return None
        return match.group(1).strip()

    def default_title(self, language: Optional[str], character: Optional[str], event: Optional[str]) -> str:
        try:
            key = (Language(language), Character(character), Event(event))
        except ValueError:
            return FALLBACK_TITLE
        return DEFAULT_TITLES.get(key, FALLBACK_TITLE)

    def split_stanzas(self, lines: List[str]) -> List[str]:
        """Группирует непустые строки по четыре; неполный хвост становится последней строфой."""
        content = [
            line.strip()
            for line in lines
            if line.strip() and not line.strip().lower().startswith("title:")
        ]
        return [
            " ".join(content[i:i + STANZA_LENGTH])
            for i in range(0, len(content), STANZA_LENGTH)
        ]

    def parse(
        self,
        text: Optional[str],
        character: Optional[str],
        location: Optional[str],
        event: Optional[str],
        emotion: Optional[str],
        language: Optional[str],
    ) -> GeneratedPoem:
        text = text or ""
        lines = text.strip().split("\n")

        title = self.extract_title(text)
        if title is None:
            title = self.default_title(language, character, event)

        stanzas = self.split_stanzas(lines) or list(DEFAULT_STANZAS)
        illuminated = stanzas[0][:1] if stanzas and stanzas[0] else FALLBACK_ILLUMINATED

        return GeneratedPoem(title=title, stanzas=stanzas, illuminated=illuminated)
