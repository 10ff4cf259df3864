from typing import Protocol


class WeatherGateway(Protocol):
    """Protocol for the external weather lookup used by the resolution flow."""
    def fetch_report(self, city: str) -> str:
        """Return a preformatted report for a canonical city name or raise LookupFailure."""
        ...
