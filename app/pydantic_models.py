# -*- coding: utf-8 -*-
from pydantic import BaseModel


class HealthCheck(BaseModel):
    status: str
