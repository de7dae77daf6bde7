"""
Core vehicle model for the warehouse simulator.
"""

from typing import Any, Dict

from .config import MINUTES_PER_HOUR


class AGV:
    """
    Autonomous guided vehicle with a constant power draw while operating.

    Battery level and actual speed are mutable and only stored; nothing in the
    model depletes the battery or clamps the speed to ``max_speed_mps``.
    Equality is object identity, so an AGV shared by several operations is
    one resource.
    """

    def __init__(
        self,
        agv_id: str,
        battery_level_kwh: float,
        consumption_kw: float,
        charging_time_min: float,
        position: str,
        max_speed_mps: float,
        actual_speed_mps: float,
    ):
        """
        Initialize an AGV.

        Args:
            agv_id: Unique vehicle identifier
            battery_level_kwh: Current battery charge (kWh)
            consumption_kw: Power draw while operating (kW)
            charging_time_min: Time for a full charge (minutes)
            position: Textual position label, e.g. a dock name
            max_speed_mps: Maximum speed (m/s)
            actual_speed_mps: Current speed (m/s)
        """
        self._id = agv_id
        self._consumption_kw = consumption_kw
        self._charging_time_min = charging_time_min
        self._position = position
        self._max_speed_mps = max_speed_mps
        self.battery_level_kwh = battery_level_kwh
        self.actual_speed_mps = actual_speed_mps

    @property
    def id(self) -> str:
        return self._id

    @property
    def consumption_kw(self) -> float:
        return self._consumption_kw

    @property
    def charging_time_min(self) -> float:
        return self._charging_time_min

    @property
    def position(self) -> str:
        return self._position

    @property
    def max_speed_mps(self) -> float:
        return self._max_speed_mps

    def energy_for_duration(self, minutes: float) -> float:
        """
        Energy used while operating for the given duration.

        Args:
            minutes: Operating time in minutes

        Returns:
            Energy in kWh. Negative and infinite durations pass through the
            arithmetic unchanged.
        """
        return (minutes / MINUTES_PER_HOUR) * self._consumption_kw

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the vehicle attributes."""
        return {
            "id": self._id,
            "battery_level_kwh": self.battery_level_kwh,
            "consumption_kw": self._consumption_kw,
            "charging_time_min": self._charging_time_min,
            "position": self._position,
            "max_speed_mps": self._max_speed_mps,
            "actual_speed_mps": self.actual_speed_mps,
        }

    def __repr__(self) -> str:
        return f"AGV({self._id})"
