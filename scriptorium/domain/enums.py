from enum import StrEnum, auto


class Character(StrEnum):
    HERO = auto()
    NOBLE = auto()
    COMMONER = auto()


class Location(StrEnum):
    CASTLE = auto()
    FOREST = auto()
    VILLAGE = auto()


class Event(StrEnum):
    BATTLE = auto()
    LOVE = auto()
    TREACHERY = auto()


class Emotion(StrEnum):
    JOY = auto()
    SORROW = auto()
    RAGE = auto()


class Language(StrEnum):
    ENGLISH = auto()
    CHINESE = auto()


class ProviderKind(StrEnum):
    OPENAI = auto()
    GEMINI = "gemini"
    DUMMY = auto()
