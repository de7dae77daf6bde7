"""
Analyzer for reporting on a batch of industrial processes.
"""

from typing import Any, Dict, List, Optional
import json
import logging
import math

import pandas as pd

from .batch import ProcessBatch
from .config import (
    DESCRIPTION_WIDTH,
    DURATION_DECIMALS,
    ENERGY_DECIMALS,
    ID_SEPARATOR,
)
from .operations import Operation
from .process import IndustrialProcess

logger = logging.getLogger(__name__)


def _join_ids(agvs) -> str:
    return ID_SEPARATOR.join(agv.id for agv in agvs)


def _format_number(value: float, decimals: int) -> str:
    """Fixed-decimal text, with Infinity, -Infinity or NaN for non-finite values."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{value:.{decimals}f}"


def _json_safe(value: Any) -> Any:
    """Replace non-finite floats, which JSON cannot represent, with strings."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_safe(v) for v in value]
    return value


class BatchAnalyzer:
    """Formats reports and summaries for the processes of a batch."""

    def __init__(self, batch: Optional[ProcessBatch] = None):
        """
        Initialize the analyzer.

        Args:
            batch: Batch to report on (an empty batch if omitted)
        """
        self.batch = batch if batch is not None else ProcessBatch()

    def add_process(self, process: IndustrialProcess):
        """Add a process to the analyzed batch."""
        self.batch.add_process(process)

    @staticmethod
    def format_operation_line(operation: Operation) -> str:
        return (
            f"- op[{operation.id}] {operation.description:<{DESCRIPTION_WIDTH}} "
            f"duration={_format_number(operation.duration_minutes(), DURATION_DECIMALS)} min  "
            f"AGVs=[{_join_ids(operation.resources)}]"
        )

    def format_process_report(self, process: IndustrialProcess) -> str:
        """
        Build the text report of a single process.

        The report ends with a blank line so consecutive reports stay separated.
        """
        agvs = process.distinct_resources()
        lines = [f"=== IndustrialProcess: {process.id} ==="]
        lines.extend(self.format_operation_line(op) for op in process.operations)
        total = _format_number(process.total_duration_minutes(), DURATION_DECIMALS)
        lines.append(f"Total duration: {total} minutes")
        lines.append(f"AGVs required: {len(agvs)} -> {_join_ids(agvs)}")
        energy = _format_number(process.total_energy_kwh(), ENERGY_DECIMALS)
        lines.append(f"Energy consumption: {energy} kWh")
        lines.append("")
        return "\n".join(lines) + "\n"

    def format_batch_summary(self) -> str:
        """Build the one-line batch summary with its header."""
        return (
            "=== Batch Summary ===\n"
            f"Processes: {len(self.batch)} | "
            f"Total time: {_format_number(self.batch.total_duration_minutes(), DURATION_DECIMALS)} min | "
            f"Energy: {_format_number(self.batch.total_energy_kwh(), ENERGY_DECIMALS)} kWh | "
            f"Distinct AGVs: {_join_ids(self.batch.distinct_resources())}\n"
        )

    def _warn_unbounded(self):
        """Log once for every process whose total duration is infinite."""
        for process in self.batch:
            if math.isinf(process.total_duration_minutes()):
                logger.warning(f"Process {process.id} has an unbounded duration, an AGV is stalled")

    def format_report(self) -> str:
        """Every process report followed by the batch summary."""
        self._warn_unbounded()
        reports = [self.format_process_report(p) for p in self.batch]
        return "".join(reports) + self.format_batch_summary()

    def print_report(self):
        """Print the full batch report."""
        print(self.format_report(), end="")

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get statistical summary of the processes in the batch.

        Returns:
            Dictionary with min/max/avg process duration and energy
        """
        if not len(self.batch):
            return {}

        durations = [p.total_duration_minutes() for p in self.batch]
        energies = [p.total_energy_kwh() for p in self.batch]

        return {
            "num_processes": len(durations),
            "duration_min": {
                "min": min(durations),
                "max": max(durations),
                "avg": sum(durations) / len(durations),
            },
            "energy_kwh": {
                "min": min(energies),
                "max": max(energies),
                "avg": sum(energies) / len(energies),
            },
        }

    def operations_dataframe(self) -> pd.DataFrame:
        """
        Tabulate every operation of the batch.

        Returns:
            DataFrame with one row per operation, in batch and process order
        """
        rows: List[Dict[str, Any]] = []
        for process in self.batch:
            for op in process.operations:
                minutes = op.duration_minutes()
                rows.append({
                    "process": process.id,
                    "operation": op.id,
                    "description": op.description,
                    "type": type(op).__name__,
                    "duration_min": minutes,
                    "nominal_duration_min": op.nominal_duration_minutes(),
                    "agvs": ID_SEPARATOR.join(agv.id for agv in op.resources),
                    "energy_kwh": sum((agv.energy_for_duration(minutes) for agv in op.resources), 0.0),
                })
        columns = [
            "process", "operation", "description", "type",
            "duration_min", "nominal_duration_min", "agvs", "energy_kwh",
        ]
        return pd.DataFrame(rows, columns=columns)

    def export_to_json(self, filepath: str):
        """
        Export summaries to JSON file.

        Args:
            filepath: Path to output JSON file
        """
        data = {
            "batch": self.batch.get_summary(),
            "statistics": self.get_statistics(),
            "processes": [p.get_summary() for p in self.batch],
        }
        self._warn_unbounded()

        with open(filepath, 'w') as f:
            json.dump(_json_safe(data), f, indent=2)
        logger.info(f"Exported {len(self.batch)} process summaries to {filepath}")

    def visualize(self, save_path: Optional[str] = None):
        """
        Create a bar chart of duration and energy per process.
        Requires matplotlib library.

        Args:
            save_path: Path to save the figure (if None, displays interactively)
        """
        try:
            import matplotlib.pyplot as plt
        except ImportError:
            print("matplotlib is required for visualization. Install it with: pip install matplotlib")
            return

        if not len(self.batch):
            print("No processes to visualize.")
            return

        names = [p.id for p in self.batch]
        durations = [p.total_duration_minutes() for p in self.batch]
        energies = [p.total_energy_kwh() for p in self.batch]

        fig, (ax_time, ax_energy) = plt.subplots(1, 2, figsize=(12, 5))

        ax_time.bar(names, durations, color='steelblue', alpha=0.8)
        ax_time.set_title("Process duration")
        ax_time.set_ylabel("Minutes")
        ax_time.grid(True, axis='y', alpha=0.3)

        ax_energy.bar(names, energies, color='darkorange', alpha=0.8)
        ax_energy.set_title("Energy consumption")
        ax_energy.set_ylabel("kWh")
        ax_energy.grid(True, axis='y', alpha=0.3)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"Visualization saved to {save_path}")
        else:
            plt.show()
        plt.close(fig)
