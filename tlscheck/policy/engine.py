"""Domain check: extract the queried domain, test it against the allow-list, pick the status."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from tlscheck.policy.allowlists import AllowList

Outcome = str  # "MISSING_DOMAIN" | "WHITELISTED" | "NOT_WHITELISTED"

MISSING_DOMAIN: Outcome = "MISSING_DOMAIN"
WHITELISTED: Outcome = "WHITELISTED"
NOT_WHITELISTED: Outcome = "NOT_WHITELISTED"


@dataclass(frozen=True)
class CheckRequest:
    domain: Optional[str]
    repeated: bool = False


@dataclass(frozen=True)
class CheckResult:
    outcome: Outcome
    status_code: int
    message: str

    @property
    def allowed(self) -> bool:
        return self.outcome == WHITELISTED


RESULTS = {
    MISSING_DOMAIN: CheckResult(MISSING_DOMAIN, 400, "Domain is required"),
    WHITELISTED: CheckResult(WHITELISTED, 200, "Domain is whitelisted"),
    NOT_WHITELISTED: CheckResult(NOT_WHITELISTED, 403, "Domain is not whitelisted"),
}


def extract_domain(values: Sequence[str]) -> CheckRequest:
    """
    Turn the raw values of the `domain` query parameter into a CheckRequest.
    Missing and empty both mean "no domain". A repeated parameter has no single domain.
    """
    if len(values) > 1:
        return CheckRequest(domain=None, repeated=True)
    if not values or not values[0]:
        return CheckRequest(domain=None)
    return CheckRequest(domain=values[0])


def check_domain(domain: Optional[str], allowlist: AllowList) -> CheckResult:
    if not domain:
        return RESULTS[MISSING_DOMAIN]
    if allowlist.contains(domain):
        return RESULTS[WHITELISTED]
    return RESULTS[NOT_WHITELISTED]


def evaluate(request: CheckRequest, allowlist: AllowList) -> CheckResult:
    if request.repeated:
        return RESULTS[NOT_WHITELISTED]
    return check_domain(request.domain, allowlist)
