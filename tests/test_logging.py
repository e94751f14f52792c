from swipefeed.config.settings import settings
from swipefeed.shared.core.logging import _add_service


def test_records_carry_service_and_env():
    event = _add_service(None, "info", {"event": "Listing submitted"})

    assert event["service"] == settings.APP_NAME.lower()
    assert event["env"] == settings.APP_ENV


def test_bound_service_name_is_kept():
    event = _add_service(None, "info", {"event": "x", "service": "worker"})

    assert event["service"] == "worker"
