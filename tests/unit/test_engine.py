"""Unit tests for the domain check."""
import pytest
from tlscheck.config import DEFAULT_ALLOWED_DOMAINS
from tlscheck.policy.allowlists import AllowList
from tlscheck.policy.engine import (
    MISSING_DOMAIN,
    NOT_WHITELISTED,
    WHITELISTED,
    CheckRequest,
    check_domain,
    evaluate,
    extract_domain,
)

ALLOWLIST = AllowList(DEFAULT_ALLOWED_DOMAINS)


@pytest.mark.parametrize("domain", DEFAULT_ALLOWED_DOMAINS)
def test_listed_domains_are_whitelisted(domain):
    result = check_domain(domain, ALLOWLIST)
    assert result.outcome == WHITELISTED
    assert result.status_code == 200
    assert result.message == "Domain is whitelisted"
    assert result.allowed


@pytest.mark.parametrize("domain", ["evil.com", "user-4.snapfreak.com", "snapfreak.com.", "a.snapfreak.com"])
def test_unlisted_domains_are_rejected(domain):
    result = check_domain(domain, ALLOWLIST)
    assert result.outcome == NOT_WHITELISTED
    assert result.status_code == 403
    assert result.message == "Domain is not whitelisted"
    assert not result.allowed


def test_match_is_case_sensitive():
    assert check_domain("SNAPFREAK.com", ALLOWLIST).outcome == NOT_WHITELISTED
    assert check_domain("Snapfreak.com", ALLOWLIST).outcome == NOT_WHITELISTED


def test_no_whitespace_trimming():
    assert check_domain(" snapfreak.com", ALLOWLIST).outcome == NOT_WHITELISTED


@pytest.mark.parametrize("domain", [None, ""])
def test_missing_domain(domain):
    result = check_domain(domain, ALLOWLIST)
    assert result.outcome == MISSING_DOMAIN
    assert result.status_code == 400
    assert result.message == "Domain is required"


def test_check_is_repeatable():
    first = check_domain("snapfreak.com", ALLOWLIST)
    for _ in range(5):
        assert check_domain("snapfreak.com", ALLOWLIST) == first


def test_extract_domain():
    assert extract_domain([]) == CheckRequest(domain=None)
    assert extract_domain([""]) == CheckRequest(domain=None)
    assert extract_domain(["snapfreak.com"]) == CheckRequest(domain="snapfreak.com")
    assert extract_domain(["a.com", "b.com"]) == CheckRequest(domain=None, repeated=True)


def test_repeated_parameter_is_not_whitelisted():
    req = extract_domain(["snapfreak.com", "snapfreak.com"])
    assert evaluate(req, ALLOWLIST).outcome == NOT_WHITELISTED


def test_evaluate_single_value():
    assert evaluate(extract_domain(["snapfreak.com"]), ALLOWLIST).outcome == WHITELISTED
    assert evaluate(extract_domain([]), ALLOWLIST).outcome == MISSING_DOMAIN
