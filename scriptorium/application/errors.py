MISSING_FIELDS_MESSAGE = "Missing required fields"
GENERATION_FAILED_MESSAGE = "Failed to generate poem"


class PoemRequestError(Exception):
    """Запрос не содержит обязательных полей."""

    def __init__(self, missing: list[str]):
        super().__init__(MISSING_FIELDS_MESSAGE)
        self.missing = missing


class PoemGenerationError(Exception):
    """Любой сбой при обращении к провайдеру или разборе ответа."""

    def __init__(self, message: str = GENERATION_FAILED_MESSAGE):
        super().__init__(message)
