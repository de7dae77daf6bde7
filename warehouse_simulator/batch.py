"""
Batch of industrial processes aggregated for reporting.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .models import AGV
from .process import IndustrialProcess


class ProcessBatch:
    """Collection of processes whose totals are summed for a batch summary."""

    def __init__(self, processes: Optional[Iterable[IndustrialProcess]] = None):
        self._processes: List[IndustrialProcess] = list(processes or [])

    @property
    def processes(self) -> Tuple[IndustrialProcess, ...]:
        return tuple(self._processes)

    def add_process(self, process: IndustrialProcess):
        """Add a process to the batch."""
        self._processes.append(process)

    def total_duration_minutes(self) -> float:
        return sum((p.total_duration_minutes() for p in self._processes), 0.0)

    def total_energy_kwh(self) -> float:
        return sum((p.total_energy_kwh() for p in self._processes), 0.0)

    def distinct_resources(self) -> List[AGV]:
        """AGVs used anywhere in the batch, first occurrence order across processes."""
        seen = set()
        agvs = []
        for process in self._processes:
            for agv in process.distinct_resources():
                if agv not in seen:
                    seen.add(agv)
                    agvs.append(agv)
        return agvs

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the batch totals."""
        return {
            "num_processes": len(self._processes),
            "total_duration_min": self.total_duration_minutes(),
            "total_energy_kwh": self.total_energy_kwh(),
            "agvs": [agv.id for agv in self.distinct_resources()],
        }

    def __len__(self) -> int:
        return len(self._processes)

    def __iter__(self) -> Iterator[IndustrialProcess]:
        return iter(self.processes)

    def __repr__(self) -> str:
        return f"ProcessBatch(processes={len(self._processes)})"
