from api.schemas.blocks import BlockResponse
from api.schemas.common import ErrorResponse, ValidationErrorEntry
from api.schemas.stars import StarPayload, SubmitStarRequest, ValidationMessageResponse, ValidationRequest

__all__ = [
    "BlockResponse",
    "ErrorResponse",
    "StarPayload",
    "SubmitStarRequest",
    "ValidationErrorEntry",
    "ValidationMessageResponse",
    "ValidationRequest",
]
