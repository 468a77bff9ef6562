"""
Basic usage
===========

Shows how to:
- create text and numeric ID handles with create_uuid
- use UniqueID directly with an event bus attached
- audit a batch of IDs for duplicates

Run:
    python examples/basic_usage.py
"""

import logging

from uniqueid_sdk import InMemoryEventBus, UniqueID, UUIDOptions, create_uuid


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # ---------------------------------------------------------------------
    # 1. Wrapper handles
    # ---------------------------------------------------------------------
    print("string id:        ", create_uuid().generate())
    print("numeric id (14):  ", create_uuid(type="number", length=14).generate())
    print("prefixed id (10): ", create_uuid(UUIDOptions(prefix="prefix", length=10)).generate())

    # ---------------------------------------------------------------------
    # 2. Generator with observability
    # ---------------------------------------------------------------------
    bus = InMemoryEventBus()
    bus.on_all(lambda e: print(f"  event {e.event_type}: {e.payload}"))
    gen = UniqueID("req", event_bus=bus)

    batch = [gen.generate(24) for _ in range(5)]
    for uid in batch:
        print("  ", uid)

    # ---------------------------------------------------------------------
    # 3. Diagnostics
    # ---------------------------------------------------------------------
    report = gen.find_duplicates(batch + [batch[0]])
    print("duplicate free:", report.has_duplicate_free)
    for note in report.collision_notes:
        print("  ", note)

    print("stress test (10k):", gen.verify_uniqueness(10_000))


if __name__ == "__main__":
    main()
