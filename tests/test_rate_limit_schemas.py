"""Unit tests for rate limit rule schemas (decoding and wire encoding)."""

import pytest
from pydantic import ValidationError

from api_fixtures import RATE_LIMIT_ID, rule_json
from cf_ratelimits.schemas.rate_limit import (
    MATCH_ALL,
    RateLimit,
    RateLimitAction,
    RateLimitActionResponse,
    RateLimitKeyValue,
    RateLimitRequestMatcher,
    RateLimitResponseMatcher,
    RateLimitTrafficMatcher,
)

EXPECTED_RULE = RateLimit(
    id=RATE_LIMIT_ID,
    disabled=False,
    description="test",
    match=RateLimitTrafficMatcher(
        request=RateLimitRequestMatcher(
            methods=[MATCH_ALL],
            schemes=[MATCH_ALL],
            url_pattern="exampledomain.com/test-rate-limit",
        ),
        response=RateLimitResponseMatcher(origin_traffic=True),
    ),
    threshold=50,
    period=1,
    action=RateLimitAction(mode="ban", timeout=60),
)


class TestDecoding:
    """Decoding server JSON into typed records."""

    def test_decodes_fixture(self) -> None:
        assert RateLimit.model_validate(rule_json()) == EXPECTED_RULE

    def test_url_is_exposed_as_url_pattern(self) -> None:
        rule = RateLimit.model_validate(rule_json())

        assert rule.match.request.url_pattern == "exampledomain.com/test-rate-limit"

    def test_unknown_fields_are_ignored(self) -> None:
        rule = RateLimit.model_validate(rule_json())

        assert not hasattr(rule, "login_protect")

    def test_match_all_kept_as_literal_string(self) -> None:
        rule = RateLimit.model_validate(rule_json())

        assert rule.match.request.methods == ["_ALL_"]
        assert rule.match.request.schemes == ["_ALL_"]

    def test_method_order_preserved(self) -> None:
        data = rule_json()
        data["match"]["request"]["methods"] = ["POST", "GET", "PUT"]

        rule = RateLimit.model_validate(data)

        assert rule.match.request.methods == ["POST", "GET", "PUT"]

    def test_decodes_bypass_and_action_response(self) -> None:
        data = rule_json()
        data["bypass"] = [{"name": "url", "value": "exampledomain.com/health"}]
        data["action"] = {
            "mode": "simulate",
            "timeout": 30,
            "response": {"content_type": "text/plain", "body": "slow down"},
        }

        rule = RateLimit.model_validate(data)

        assert rule.bypass == [RateLimitKeyValue(name="url", value="exampledomain.com/health")]
        assert rule.action.response == RateLimitActionResponse(
            content_type="text/plain", body="slow down"
        )

    def test_decoded_rule_is_immutable(self) -> None:
        rule = RateLimit.model_validate(rule_json())

        with pytest.raises(ValidationError):
            rule.description = "changed"  # type: ignore[misc]


class TestEncoding:
    """Encoding typed records into request bodies."""

    def test_round_trip_reproduces_fixture(self) -> None:
        expected = rule_json()
        expected.pop("login_protect")

        payload = RateLimit.model_validate(rule_json()).to_payload()

        assert payload == expected

    def test_create_payload_drops_id(self) -> None:
        payload = EXPECTED_RULE.to_payload(include_id=False)

        assert "id" not in payload
        assert payload["description"] == "test"

    def test_unset_id_is_omitted(self) -> None:
        rule = RateLimit(description="new rule", threshold=10, period=60)

        assert "id" not in rule.to_payload()

    def test_zero_threshold_and_period_are_sent(self) -> None:
        rule = RateLimit(
            description="test",
            match=RateLimitTrafficMatcher(
                request=RateLimitRequestMatcher(url_pattern="exampledomain.com/test-rate-limit"),
            ),
            action=RateLimitAction(mode="ban", timeout=60),
        )

        payload = rule.to_payload(include_id=False)

        assert payload["threshold"] == 0
        assert payload["period"] == 0

    def test_unset_optional_fields_are_omitted(self) -> None:
        rule = RateLimit(
            match=RateLimitTrafficMatcher(
                request=RateLimitRequestMatcher(url_pattern="exampledomain.com/*"),
            ),
        )

        payload = rule.to_payload()

        assert payload["match"] == {"request": {"url": "exampledomain.com/*"}, "response": {}}
        assert "bypass" not in payload
        assert "response" not in payload["action"]

    def test_url_pattern_accepts_wire_name(self) -> None:
        matcher = RateLimitRequestMatcher(url="exampledomain.com/*")

        assert matcher.url_pattern == "exampledomain.com/*"
