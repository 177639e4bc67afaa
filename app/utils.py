# -*- coding: utf-8 -*-
from contextlib import AbstractAsyncContextManager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger
from tortoise import Tortoise, connections
from tortoise.exceptions import DoesNotExist, IntegrityError, ValidationError

from app.modules.return_trip_validation.exceptions import (
    TripNotFoundError,
    TripRepositoryError,
)


def register_tortoise(
    app: FastAPI,
    config: dict,
    generate_schemas: bool = False,
    add_exception_handlers: bool = False,
) -> AbstractAsyncContextManager:
    """
    Opens the trip log database for the lifetime of the app.

    With `add_exception_handlers`, ORM and trip repository errors escaping a
    route are turned into JSON responses instead of a bare 500.
    """

    async def init_orm() -> None:
        await Tortoise.init(config=config)
        logger.info(f"Tortoise-ORM started, apps: {list(Tortoise.apps)}")
        if generate_schemas:
            logger.info("Tortoise-ORM generating schema")
            await Tortoise.generate_schemas()

    async def close_orm() -> None:
        await connections.close_all()
        logger.info("Tortoise-ORM shutdown")

    class Manager(AbstractAsyncContextManager):
        async def __aenter__(self) -> "Manager":
            await init_orm()
            return self

        async def __aexit__(self, *args, **kwargs) -> None:
            await close_orm()

    if add_exception_handlers:
        register_exception_handlers(app)

    return Manager()


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DoesNotExist)
    @app.exception_handler(TripNotFoundError)
    async def not_found_handler(request: Request, exc: Exception):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.exception_handler(IntegrityError)
    @app.exception_handler(ValidationError)
    async def invalid_record_handler(request: Request, exc: Exception):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": [{"loc": [], "msg": str(exc), "type": type(exc).__name__}]
            },
        )

    @app.exception_handler(TripRepositoryError)
    async def unavailable_handler(request: Request, exc: TripRepositoryError):
        logger.error(f"Trip log unavailable: {exc}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Trip log unavailable"},
        )
