# -*- coding: utf-8 -*-
from app import config

TORTOISE_ORM = {
    "connections": {
        "default": f"postgres://{config.DATABASE_USER}:{config.DATABASE_PASSWORD}@{config.DATABASE_HOST}:{config.DATABASE_PORT}/{config.DATABASE_NAME}",  # noqa
    },
    "apps": {
        "app": {
            "models": ["aerich.models", "app.models"],
            "default_connection": "default",
        },
    },
    "use_tz": True,
    "timezone": config.TIMEZONE,
}
