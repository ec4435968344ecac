from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import NotificationError, StorageFailure


def _validation_details(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = '.'.join(str(item) for item in error.get('loc', ()) if item != 'body')
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get('msg')))
    return '; '.join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotificationError)
    async def notification_error_handler(_: Request, exc: NotificationError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
        error = NotificationError('Invalid request', details=_validation_details(exc))
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error.to_payload())

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error('api.storage_failed', path=request.url.path, error=str(exc))
        error = StorageFailure('Storage failure', details=str(exc))
        return JSONResponse(status_code=error.status_code, content=error.to_payload())
