"""
wttr.in implementation of the weather gateway.

The report is fetched as preformatted text and never parsed.
"""
import logging
from urllib.parse import quote

import requests

from ..exceptions import LookupFailure

logger = logging.getLogger(__name__)


class WttrWeatherGateway:
    """
    Fetches plain-text weather reports from wttr.in.

    Query format "qmT0": quiet, metric, no terminal colours, current conditions only.
    """

    def __init__(
        self,
        base_url: str = "https://wttr.in",
        query_format: str = "qmT0",
        language: str = "tr",
        timeout_seconds: float = 10.0,
        session: requests.Session = None,
    ):
        """
        :param base_url: Service root
        :param query_format: wttr.in option string appended as the query
        :param language: Accept-Language sent with the request
        :param timeout_seconds: Bound on connect and read time
        :param session: Optional requests session (reused connections)
        """
        self.base_url = base_url.rstrip("/")
        self.query_format = query_format
        self.language = language
        self.timeout_seconds = timeout_seconds
        self._http = session or requests

    def build_url(self, city: str) -> str:
        url = f"{self.base_url}/{quote(city)}"
        if self.query_format:
            url = f"{url}?{self.query_format}"
        return url

    def fetch_report(self, city: str) -> str:
        """
        Fetch the report for a canonical city name.

        :param city: Canonical name (lookup is case-insensitive on the service side)
        :return: Report text, verbatim
        :raises: LookupFailure on timeout, transport error or non-200 status
        """
        url = self.build_url(city)
        logger.debug(f"Fetching weather report: {url}")

        try:
            response = self._http.get(
                url,
                headers={"Accept-Language": self.language},
                timeout=self.timeout_seconds,
            )
        except requests.Timeout as e:
            raise LookupFailure(
                f"Weather lookup for '{city}' timed out after {self.timeout_seconds}s"
            ) from e
        except requests.RequestException as e:
            raise LookupFailure(f"Weather lookup for '{city}' failed: {e}") from e

        if response.status_code != 200:
            raise LookupFailure(
                f"Weather lookup for '{city}' returned HTTP {response.status_code}"
            )

        # Reports are UTF-8; requests assumes ISO-8859-1 for bare text/plain.
        response.encoding = "utf-8"
        return response.text
