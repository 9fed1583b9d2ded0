"""HTTP rendering of mutation results."""

from fastapi import status
from fastapi.responses import JSONResponse

from discuss.application.usecase.base import FailureKind, MutationResult

FAILURE_STATUS = {
    FailureKind.VALIDATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    FailureKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    FailureKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.STORAGE: status.HTTP_400_BAD_REQUEST,
}


def mutation_response(
    result: MutationResult, success_status: int = status.HTTP_200_OK
) -> JSONResponse:
    """Render a mutation result with the status its outcome calls for."""
    status_code = FAILURE_STATUS[result.failure] if result.failure else success_status
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))
