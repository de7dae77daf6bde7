"""
Industrial process: an ordered sequence of operations.
"""

from typing import Any, Dict, Iterator, List, Tuple
import logging
import math

from .models import AGV
from .operations import Operation

logger = logging.getLogger(__name__)


class IndustrialProcess:
    """
    Defines a logistics workflow as operations executed one after another.

    Operations are summed, not scheduled: the total duration is the plain sum
    of operation durations in insertion order. AGVs are referenced, never
    owned, and may appear in other processes.
    """

    def __init__(self, process_id: str):
        """
        Initialize an empty process.

        Args:
            process_id: Process identifier
        """
        self._id = process_id
        self._operations: List[Operation] = []

    @property
    def id(self) -> str:
        return self._id

    @property
    def operations(self) -> Tuple[Operation, ...]:
        return tuple(self._operations)

    def add_operation(self, operation: Operation) -> Operation:
        """Append an operation to the end of the process."""
        self._operations.append(operation)
        return operation

    def total_duration_minutes(self) -> float:
        """Sum of operation durations in insertion order."""
        total = 0.0
        for operation in self._operations:
            total += operation.duration_minutes()
        if math.isinf(total):
            logger.debug(f"Process {self._id} has an unbounded duration")
        return total

    def distinct_resources(self) -> List[AGV]:
        """
        AGVs used by any operation, each listed once.

        Returns:
            AGVs ordered by their first occurrence across the operations
        """
        seen = set()
        agvs = []
        for operation in self._operations:
            for agv in operation.resources:
                if agv not in seen:
                    seen.add(agv)
                    agvs.append(agv)
        return agvs

    def total_energy_kwh(self) -> float:
        """
        Energy consumed by all AGVs across all operations.

        An AGV listed twice by the same operation is charged twice.
        """
        total = 0.0
        for operation in self._operations:
            minutes = operation.duration_minutes()
            for agv in operation.resources:
                total += agv.energy_for_duration(minutes)
        return total

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the process aggregates."""
        return {
            "process": self._id,
            "num_operations": len(self._operations),
            "total_duration_min": self.total_duration_minutes(),
            "agvs": [agv.id for agv in self.distinct_resources()],
            "total_energy_kwh": self.total_energy_kwh(),
        }

    def __len__(self) -> int:
        return len(self._operations)

    def __iter__(self) -> Iterator[Operation]:
        return iter(self.operations)

    def __repr__(self) -> str:
        return f"IndustrialProcess(id={self._id}, operations={len(self._operations)})"
