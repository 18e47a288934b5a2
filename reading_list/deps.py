# reading_list/deps.py
from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from .plugin import Platform


def get_platform(request: Request) -> "Platform":
    return request.app.state.platform
