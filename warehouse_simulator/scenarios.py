"""
Demonstration scenario: inbound receiving and outbound picking.
"""

from typing import Tuple

from . import config
from .batch import ProcessBatch
from .models import AGV
from .operations import FixedDurationOperation, TransportOperation
from .process import IndustrialProcess


def build_demo_agvs() -> Tuple[AGV, AGV]:
    """Create the two AGVs used by the demonstration scenario."""
    agv_a = AGV(
        "AGV-A",
        battery_level_kwh=config.DEMO_BATTERY_KWH,
        consumption_kw=config.AGV_A_CONSUMPTION_KW,
        charging_time_min=config.DEMO_CHARGING_TIME_MIN,
        position=config.AGV_A_POSITION,
        max_speed_mps=config.DEMO_MAX_SPEED_MPS,
        actual_speed_mps=config.AGV_A_SPEED_MPS,
    )
    agv_b = AGV(
        "AGV-B",
        battery_level_kwh=config.DEMO_BATTERY_KWH,
        consumption_kw=config.AGV_B_CONSUMPTION_KW,
        charging_time_min=config.DEMO_CHARGING_TIME_MIN,
        position=config.AGV_B_POSITION,
        max_speed_mps=config.DEMO_MAX_SPEED_MPS,
        actual_speed_mps=config.AGV_B_SPEED_MPS,
    )
    return agv_a, agv_b


def build_inbound_process(agv: AGV) -> IndustrialProcess:
    """Receive -> Transport -> Putaway, all with one AGV."""
    inbound = IndustrialProcess("Inbound-Receiving")
    inbound.add_operation(FixedDurationOperation("OP-1", "Dock receive", 6.0, [agv]))
    inbound.add_operation(TransportOperation(
        "OP-2", "Move pallets to storage (120 m)", config.INBOUND_DISTANCE_M, agv))
    inbound.add_operation(FixedDurationOperation("OP-3", "Putaway at rack", 4.0, [agv]))
    return inbound


def build_outbound_process(agv: AGV) -> IndustrialProcess:
    """Pick -> Transport -> Pack, all with one AGV."""
    outbound = IndustrialProcess("Outbound-Picking")
    outbound.add_operation(FixedDurationOperation("OP-4", "Pick at rack", 5.0, [agv]))
    outbound.add_operation(TransportOperation(
        "OP-5", "Move to packing (150 m)", config.OUTBOUND_DISTANCE_M, agv))
    outbound.add_operation(FixedDurationOperation("OP-6", "Packing", 7.0, [agv]))
    return outbound


def build_demo_batch() -> ProcessBatch:
    """
    Build the demonstration batch.

    Returns:
        ProcessBatch with the inbound process on AGV-A and the outbound
        process on AGV-B
    """
    agv_a, agv_b = build_demo_agvs()
    return ProcessBatch([build_inbound_process(agv_a), build_outbound_process(agv_b)])
