"""
Basic example of using the warehouse simulator.
"""

from warehouse_simulator import (
    AGV,
    BatchAnalyzer,
    FixedDurationOperation,
    IndustrialProcess,
    ProcessBatch,
    TransportOperation,
    build_demo_batch,
)


def main():
    print("=" * 80)
    print("Warehouse Simulator - Basic Example")
    print("=" * 80)

    # Demonstration scenario
    print("\nRunning demonstration scenario...\n")
    analyzer = BatchAnalyzer(build_demo_batch())
    analyzer.print_report()

    # A custom process where two AGVs share a lift
    print("\n" + "-" * 80)
    print("Custom cross-dock process...\n")
    fast = AGV("AGV-C", 20.0, 2.4, 45.0, "Dock-3", 2.5, 2.5)
    slow = AGV("AGV-D", 12.0, 1.5, 25.0, "Dock-4", 1.5, 0.8)

    cross_dock = IndustrialProcess("Cross-Dock")
    cross_dock.add_operation(FixedDurationOperation("OP-10", "Tandem unload", 8.0, [fast, slow]))
    cross_dock.add_operation(TransportOperation("OP-11", "Move to outbound dock (200 m)", 200.0, fast))
    cross_dock.add_operation(FixedDurationOperation("OP-12", "Stage for loading", 3.0, [slow]))

    custom = BatchAnalyzer(ProcessBatch([cross_dock]))
    custom.print_report()

    # Slowing down an AGV changes every transport it performs
    slow.actual_speed_mps = 0.0
    print(f"\nStalled {slow!r}: cross-dock still takes "
          f"{cross_dock.total_duration_minutes():.2f} min (transport uses {fast!r})")

    print("\nOperations table:")
    print(analyzer.operations_dataframe().to_string(index=False))

    print("\n" + "=" * 80)
    print("Example completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()
