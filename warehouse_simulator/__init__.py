"""
Warehouse Logistics Simulator
Computes duration, resource usage and energy of AGV-driven industrial processes.
"""

from .models import AGV
from .operations import (
    DataValue,
    Operation,
    OperationInfo,
    FixedDurationOperation,
    TransportOperation,
)
from .process import IndustrialProcess
from .batch import ProcessBatch
from .analyzer import BatchAnalyzer
from .scenarios import build_demo_agvs, build_demo_batch

__version__ = "0.1.0"

__all__ = [
    "AGV",
    "DataValue",
    "Operation",
    "OperationInfo",
    "FixedDurationOperation",
    "TransportOperation",
    "IndustrialProcess",
    "ProcessBatch",
    "BatchAnalyzer",
    "build_demo_agvs",
    "build_demo_batch",
]
