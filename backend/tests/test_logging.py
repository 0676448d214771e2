"""
Structured logging configuration tests.
"""
import structlog

from socialfeed.shared.core.logging import add_service_info


def test_events_carry_service_and_env():
    event = add_service_info(None, "info", {"event": "Post created"})

    assert event == {"event": "Post created", "service": "socialfeed", "env": "test"}


def test_explicit_values_are_kept():
    event = add_service_info(None, "info", {"event": "Worker ready", "service": "uploads"})

    assert event["service"] == "uploads"
    assert event["env"] == "test"


def test_processor_is_installed():
    assert add_service_info in structlog.get_config()["processors"]
