"""Wire-level fixtures shared by the test modules."""

from typing import Any

RATE_LIMIT_ID = "72dae2fc158942f2adb1dd2a3d4143bc"
ZONE_ID = "abcd123"
BASE_URL = "https://api.test/client/v4"


def rule_json() -> dict[str, Any]:
    """Rule object exactly as the API returns it."""
    return {
        "id": RATE_LIMIT_ID,
        "disabled": False,
        "description": "test",
        "match": {
            "request": {
                "methods": ["_ALL_"],
                "schemes": ["_ALL_"],
                "url": "exampledomain.com/test-rate-limit",
            },
            "response": {"origin_traffic": True},
        },
        "login_protect": False,
        "threshold": 50,
        "period": 1,
        "action": {"mode": "ban", "timeout": 60},
    }


def envelope(result: Any, *, success: bool = True, **extra: Any) -> dict[str, Any]:
    return {
        "result": result,
        "success": success,
        "errors": None,
        "messages": None,
        **extra,
    }
