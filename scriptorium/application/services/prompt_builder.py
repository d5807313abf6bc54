from scriptorium.domain.enums import Language

SYSTEM_PROMPT = (
    "You are a master medieval poet specializing in creating authentic illuminated manuscripts. "
    "Your poems must follow strict medieval poetic forms and use archaic language appropriate "
    "for the time period."
)

ENGLISH_PROMPT_TEMPLATE = """Create an authentic medieval poem with the following specifications:

Character: {character}
Location: {location}
Event: {event}
Emotion: {emotion}

Requirements:
1. Write in archaic English with medieval diction (use words like "thee", "thou", "hath", "doth", "verily", etc.)
2. Structure as 4-line stanzas with cross-rhyme pattern (ABAB)
3. Include vivid medieval imagery and symbolism
4. Create a compelling title that reflects the theme
5. Use elevated, poetic language suitable for illuminated manuscripts
6. Each stanza should be a complete thought that builds the narrative
7. Include at least 3 stanzas

Format your response as:
Title: [poem title]
[stanza 1]
[stanza 2]
[stanza 3]

Example structure:
Title: The Knight's Lament
Upon the castle walls so high
The noble knight doth stand and sigh
His love hath gone beyond the sky
And leaves him there to wonder why

In forest dark where shadows creep
The hero's sword begins to weep
For battles fought in dungeons deep
Where ancient secrets they would keep"""

CHINESE_PROMPT_TEMPLATE = """Create an authentic classical Chinese poem with the following specifications:

Character: {character}
Location: {location}
Event: {event}
Emotion: {emotion}

Requirements:
1. Write in Classical Chinese with traditional poetic forms
2. Structure as 4-line stanzas (quatrain form)
3. Use traditional Chinese imagery and symbolism
4. Create a title in classical Chinese style
5. Use elevated, poetic language suitable for classical poetry
6. Each stanza should be a complete thought that builds the narrative
7. Include at least 3 stanzas
8. Follow traditional Chinese poetic conventions and rhythm

Format your response as:
Title: [poem title in Chinese]
[stanza 1]
[stanza 2]
[stanza 3]

Example structure:
Title: 骑士悲歌
城堡高耸入云端
骑士独立叹苍天
爱人已逝随风去
留下孤独在人间"""


class PromptBuilder:
    system_prompt = SYSTEM_PROMPT

    def build_poem_prompt(
        self,
        character: str,
        location: str,
        event: str,
        emotion: str,
        language: str | None = Language.ENGLISH,
    ) -> str:
        """
        Собирает пользовательский промпт для генерации стихотворения.
        Для language == "chinese" используется шаблон классического китайского
        четверостишия, для любого другого значения - архаичный английский.
        """
        template = CHINESE_PROMPT_TEMPLATE if language == Language.CHINESE else ENGLISH_PROMPT_TEMPLATE
        # str.format не интерпретирует фигурные скобки внутри подставляемых значений
        return template.format(
            character=character,
            location=location,
            event=event,
            emotion=emotion,
        )
