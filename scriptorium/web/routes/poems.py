from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from scriptorium.application.dto.schemas import ErrorResponse, GeneratedPoem, PoemRequest
from scriptorium.application.errors import PoemGenerationError, PoemRequestError
from scriptorium.application.use_cases.generate_poem import GeneratePoemUseCase
from scriptorium.web.deps import get_generate_poem_use_case

router = APIRouter()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/generate-poem",
    response_model=GeneratedPoem,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def generate_poem(
    poem_request: PoemRequest,
    use_case: GeneratePoemUseCase = Depends(get_generate_poem_use_case),
):
    """
    Генерирует стихотворение в стиле иллюминированной рукописи.
    """
    try:
        return await use_case.execute(poem_request)
    except PoemRequestError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except PoemGenerationError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
