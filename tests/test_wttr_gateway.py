"""
Tests for the wttr.in weather gateway.
"""
import pytest
import requests
from unittest.mock import Mock

from weather_bot.exceptions import LookupFailure
from weather_bot.gateway import WttrWeatherGateway


@pytest.fixture
def session():
    session = Mock()
    session.get.return_value = Mock(status_code=200, text="Istanbul: ☀️ +21°C")
    return session


class TestWttrWeatherGateway:
    """Tests for WttrWeatherGateway."""

    def test_fetch_report(self, session):
        """Test that the report is returned verbatim."""
        gateway = WttrWeatherGateway(session=session)

        report = gateway.fetch_report("istanbul")

        assert report == "Istanbul: ☀️ +21°C"
        session.get.assert_called_once_with(
            "https://wttr.in/istanbul?qmT0",
            headers={"Accept-Language": "tr"},
            timeout=10.0,
        )

    def test_non_ascii_city_is_quoted(self, session):
        """Test that Turkish letters are percent-encoded in the path."""
        gateway = WttrWeatherGateway(session=session)

        assert gateway.build_url("ağrı") == "https://wttr.in/a%C4%9Fr%C4%B1?qmT0"

    def test_custom_settings(self, session):
        """Test that base URL, format, language and timeout are configurable."""
        gateway = WttrWeatherGateway(
            base_url="http://localhost:8002/",
            query_format="format=3",
            language="en",
            timeout_seconds=2.5,
            session=session,
        )

        gateway.fetch_report("van")

        session.get.assert_called_once_with(
            "http://localhost:8002/van?format=3",
            headers={"Accept-Language": "en"},
            timeout=2.5,
        )

    def test_http_error_status(self, session):
        """Test that a non-200 status is a lookup failure."""
        session.get.return_value = Mock(status_code=503, text="Service Unavailable")

        with pytest.raises(LookupFailure, match="503"):
            WttrWeatherGateway(session=session).fetch_report("ankara")

    def test_timeout(self, session):
        """Test that a timeout is a lookup failure."""
        session.get.side_effect = requests.Timeout("read timed out")

        with pytest.raises(LookupFailure, match="timed out"):
            WttrWeatherGateway(session=session, timeout_seconds=1.0).fetch_report("ankara")

    def test_connection_error(self, session):
        """Test that transport errors are lookup failures."""
        session.get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(LookupFailure, match="connection refused"):
            WttrWeatherGateway(session=session).fetch_report("ankara")
