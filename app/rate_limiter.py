# -*- coding: utf-8 -*-
from slowapi import Limiter
from slowapi.util import get_remote_address

from app import config

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[config.RATE_LIMIT_DEFAULT],
    storage_uri=config.RATE_LIMIT_STORAGE_URI,
)
