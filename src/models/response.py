"""Callable protocol response wrapper."""

from typing import Any

from pydantic import BaseModel


class CallableResult(BaseModel):
    """Success envelope returned by every callable function."""

    result: Any
