from __future__ import annotations

from fastapi import Request

from starledger.registry import StarRegistry


def get_registry(request: Request) -> StarRegistry:
    return request.app.state.registry
