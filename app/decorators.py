# -*- coding: utf-8 -*-
from functools import wraps
from typing import Any, Dict, Optional, Union

from fastapi import APIRouter, HTTPException, Request, status
from loguru import logger

from app import config
from app.rate_limiter import limiter


def router_get(
    *,
    router: APIRouter,
    path: str,
    response_model: Any,
    responses: Optional[Dict[Union[int, str], Dict[str, Any]]] = None,
):
    def decorator(f):
        @router.get(path, response_model=response_model, responses=responses)
        @limiter.limit(config.RATE_LIMIT_DEFAULT)
        @wraps(f)
        async def wrapper(*args, **kwargs):
            request: Request = None
            if "request" not in kwargs:
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail="The request dependency is missing. This is a bug. Please report it.",
                )
            request = kwargs["request"]
            full_path = router.prefix + path
            # Format the path with jinja parameters
            for key, value in kwargs.items():
                full_path = full_path.replace(f"{{{key}}}", str(value))
            try:
                response = await f(*args, **kwargs)
                logger.info(f"{request.method} {full_path} -> 200")
                return response
            except HTTPException as exc:
                logger.info(f"{request.method} {full_path} -> {exc.status_code}")
                raise exc

        return wrapper

    return decorator
