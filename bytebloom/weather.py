"""Weather conditions that drive the garden simulation."""

from enum import Enum


class Weather(Enum):
    """The weather for one game tick."""

    SUNNY = "Sunny"
    CLOUDY = "Cloudy"
    RAINY = "Rainy"
    HEATWAVE = "Heatwave"

    def __str__(self) -> str:
        return self.value