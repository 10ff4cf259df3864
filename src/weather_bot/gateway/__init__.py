from .weather_gateway import WeatherGateway
from .wttr_gateway import WttrWeatherGateway

__all__ = ["WeatherGateway", "WttrWeatherGateway"]
