"""
Operation types executed by AGVs within an industrial process.

Two variants share one interface: fixed-duration work (load/unload, pick,
pack) and distance-based transport whose duration follows the AGV's speed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple
import logging
import math
import numbers

from .config import (
    DISTANCE_KEY,
    SECONDS_PER_MINUTE,
    TRANSPORT_OVERHEAD_MINUTES,
)
from .models import AGV

logger = logging.getLogger(__name__)

DataValue = str | int | float | bool


@dataclass
class OperationInfo:
    """Identity, required AGVs and metadata shared by every operation type."""
    op_id: str
    description: str
    resources: Tuple[AGV, ...] = ()
    data: Dict[str, DataValue] = field(default_factory=dict)


class Operation(ABC):
    """Base interface for operations."""

    def __init__(self, info: OperationInfo):
        self._info = info

    @property
    def id(self) -> str:
        return self._info.op_id

    @property
    def description(self) -> str:
        return self._info.description

    @property
    def resources(self) -> Tuple[AGV, ...]:
        """AGVs required by this operation, in the order they were given."""
        return self._info.resources

    @property
    def data(self) -> Mapping[str, DataValue]:
        """Read-only view of the operation metadata."""
        return MappingProxyType(self._info.data)

    def set_data(self, key: str, value: DataValue):
        """
        Store a metadata value on this operation.

        Args:
            key: Metadata key
            value: A string, real number or boolean

        Raises:
            TypeError: If the key is not a string or the value type is unsupported.
        """
        if not isinstance(key, str):
            msg = f"Operation data key must be a string, got {type(key).__name__}"
            raise TypeError(msg)
        if not isinstance(value, (str, numbers.Real)):
            msg = f"Unsupported value type for '{key}': {type(value).__name__}"
            raise TypeError(msg)
        self._info.data[key] = value

    def get_data(self, key: str, default: Optional[DataValue] = None) -> Optional[DataValue]:
        """Return the metadata value for ``key``, or ``default`` if absent."""
        return self._info.data.get(key, default)

    @abstractmethod
    def nominal_duration_minutes(self) -> float:
        """
        Planned duration of the operation.

        Returns:
            Duration in minutes, informational only
        """
        pass

    @abstractmethod
    def duration_minutes(self) -> float:
        """
        Duration used by every aggregate computation.

        Returns:
            Duration in minutes, possibly ``inf``
        """
        pass

    def __repr__(self) -> str:
        agv_ids = ",".join(agv.id for agv in self.resources)
        return f"{type(self).__name__}(id={self.id}, agvs=[{agv_ids}])"


class FixedDurationOperation(Operation):
    """Operation that takes a fixed amount of time, such as loading or picking."""

    def __init__(
        self,
        op_id: str,
        description: str,
        nominal_minutes: float,
        resources: Optional[Iterable[AGV]] = None,
    ):
        """
        Initialize a fixed-duration operation.

        Args:
            op_id: Operation identifier
            description: Human-readable description
            nominal_minutes: Duration in minutes
            resources: AGVs required by the operation (may be empty)
        """
        super().__init__(OperationInfo(op_id, description, tuple(resources or ())))
        self._nominal_minutes = nominal_minutes

    def nominal_duration_minutes(self) -> float:
        return self._nominal_minutes

    def duration_minutes(self) -> float:
        return self._nominal_minutes


class TransportOperation(Operation):
    """
    Moves goods over a distance with a single AGV.

    Duration is derived from the AGV's current speed plus a fixed start/stop
    overhead. Since the speed is read on every call, the nominal duration is
    the computed one as well; there is no separate planned value.
    """

    def __init__(self, op_id: str, description: str, distance_m: float, agv: AGV):
        """
        Initialize a transport operation.

        Args:
            op_id: Operation identifier
            description: Human-readable description
            distance_m: Travel distance in meters
            agv: The vehicle performing the transport
        """
        super().__init__(OperationInfo(op_id, description, (agv,)))
        self._distance_m = float(distance_m)
        self.set_data(DISTANCE_KEY, self._distance_m)

    @property
    def distance_m(self) -> float:
        return self._distance_m

    @property
    def agv(self) -> AGV:
        return self.resources[0]

    def duration_minutes(self) -> float:
        speed = self.agv.actual_speed_mps
        if speed <= 0:
            logger.debug(f"AGV {self.agv.id} is stalled, transport {self.id} cannot finish")
            return math.inf
        minutes = (self._distance_m / speed) / SECONDS_PER_MINUTE
        return minutes + TRANSPORT_OVERHEAD_MINUTES

    def nominal_duration_minutes(self) -> float:
        return self.duration_minutes()
