"""On-demand TLS ask endpoint: may this domain get a certificate here?"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from tlscheck.logging_config import get_logger
from tlscheck.models import ErrorResponse, MessageResponse
from tlscheck.policy.allowlists import AllowList
from tlscheck.policy.engine import CheckResult, evaluate, extract_domain

router = APIRouter(tags=["tls"])
logger = get_logger(__name__)


def get_allowlist(request: Request) -> AllowList:
    return request.app.state.allowlist


def build_response(result: CheckResult) -> JSONResponse:
    """Serialize a CheckResult; success carries `message`, failures carry `error`."""
    if result.allowed:
        body = MessageResponse(message=result.message)
    else:
        body = ErrorResponse(error=result.message)
    return JSONResponse(content=body.model_dump(), status_code=result.status_code)


@router.get(
    "/tls-check",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
def tls_check(request: Request, allowlist: AllowList = Depends(get_allowlist)):
    """
    Answer whether `?domain=` is on the allow-list.
    200 if whitelisted, 403 if not, 400 if the parameter is missing or empty.
    Matching is exact and case-sensitive.
    """
    check = extract_domain(request.query_params.getlist("domain"))
    result = evaluate(check, allowlist)
    logger.info(
        "tls_check",
        domain=check.domain,
        repeated=check.repeated,
        outcome=result.outcome,
        status_code=result.status_code,
    )
    return build_response(result)
