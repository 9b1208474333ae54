from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.deps import get_registry
from api.schemas.common import ValidationErrorEntry
from starledger.registry import StarRegistry

router = APIRouter(prefix="/chain")


class ChainStatusResponse(BaseModel):
    height: int
    valid: bool
    errors: list[ValidationErrorEntry]


@router.get("/validate", response_model=ChainStatusResponse)
def validate_chain(registry: StarRegistry = Depends(get_registry)) -> ChainStatusResponse:
    errors = registry.validate_chain()
    return ChainStatusResponse(
        height=registry.current_height(),
        valid=not errors,
        errors=[ValidationErrorEntry(**e.to_dict()) for e in errors],
    )
