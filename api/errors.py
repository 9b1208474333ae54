from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from starledger.core.exceptions import (
    ChallengeExpiredError,
    ChallengeMalformedError,
    InvalidChainError,
    SignatureInvalidError,
    StarLedgerError,
)


class StarLedgerAPIError(Exception):
    def __init__(self, code: str, message: str, status: int = 400, **extra: object) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status
        self.extra = extra

    @classmethod
    def from_domain(cls, exc: StarLedgerError) -> StarLedgerAPIError:
        """Map a core exception onto an HTTP error."""

        if isinstance(exc, ChallengeMalformedError):
            return cls(code="challenge.malformed", message=str(exc), status=400)
        if isinstance(exc, ChallengeExpiredError):
            return cls(code="challenge.expired", message=str(exc), status=400)
        if isinstance(exc, SignatureInvalidError):
            return cls(code="signature.invalid", message=str(exc), status=401)
        if isinstance(exc, InvalidChainError):
            return cls(
                code="chain.invalid",
                message=str(exc),
                status=409,
                errors=[e.to_dict() for e in exc.errors],
            )
        return cls(code="starledger.error", message=str(exc), status=500)


async def starledger_error_handler(request: Request, exc: StarLedgerAPIError) -> JSONResponse:
    body = {"error": {"code": exc.code, "message": exc.message, **exc.extra}}
    return JSONResponse(status_code=exc.status, content=body)
