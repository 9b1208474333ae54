from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from api.deps import get_registry
from api.errors import StarLedgerAPIError
from api.schemas.blocks import BlockResponse
from api.schemas.common import ErrorResponse
from api.schemas.stars import SubmitStarRequest, ValidationMessageResponse, ValidationRequest
from starledger.core.exceptions import StarLedgerError
from starledger.registry import StarRegistry

router = APIRouter()


@router.post("/requestValidation", response_model=ValidationMessageResponse)
def request_validation(req: ValidationRequest, registry: StarRegistry = Depends(get_registry)) -> ValidationMessageResponse:
    return ValidationMessageResponse(message=registry.issue_challenge(req.address))


@router.post(
    "/submitstar",
    response_model=BlockResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def submit_star(req: SubmitStarRequest, registry: StarRegistry = Depends(get_registry)) -> BlockResponse:
    try:
        block = registry.submit_star(req.address, req.message, req.signature, req.star_dict())
    except StarLedgerError as e:
        raise StarLedgerAPIError.from_domain(e) from e
    return BlockResponse.from_block(block)


@router.get("/blocks/{address}", response_model=list[Any])
def stars_by_owner(address: str, registry: StarRegistry = Depends(get_registry)) -> list[Any]:
    return registry.get_stars_by_owner(address)
