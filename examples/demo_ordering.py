#!/usr/bin/env python3
"""
uuid7_core Demo — Time-ordered identifiers for event records

Walks through the library surface:
  1. Generate identifiers (single and batch)
  2. Attach them to Pydantic models as a validated field type
  3. Parse untrusted input strictly and safely
  4. Recover creation times and sort records chronologically

Run:
    python examples/demo_ordering.py

Requirements:
    pip install pydantic uuid6
"""

import functools
import os
import random
import sys
import time

# Ensure project root is on path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pydantic import BaseModel, Field

from uuid7_core import (
    UUID7,
    ValidationError,
    compare,
    create,
    create_many,
    from_string,
    get_timestamp,
    is_valid,
    try_from_string,
)


class Event(BaseModel):
    """A minimal event whose id doubles as its creation time."""

    event_id: UUID7 = Field(default_factory=create)
    kind: str


# ============================================================
# Sections
# ============================================================

def show_generation() -> None:
    print("\n[1] Generation")
    single = create()
    print(f"    create()        -> {single}")
    for i, uid in enumerate(create_many(3)):
        print(f"    create_many[{i}]  -> {uid}")


def show_parsing() -> None:
    print("\n[2] Parsing untrusted input")
    inputs = [
        "01923f4a-7b3d-7123-8456-426614174000",
        "01923F4A-7B3D-7123-A456-426614174000",
        "01923f4a-7b3d-4123-8456-426614174000",   # version 4
        "not-a-uuid",
    ]
    for value in inputs:
        mark = "✓" if is_valid(value) else "✗"
        print(f"    {mark} {value!r:42s} try_from_string -> {try_from_string(value)!r}")

    try:
        from_string("not-a-uuid")
    except ValidationError as e:
        print(f"    from_string raised: {e}")


def show_ordering() -> None:
    print("\n[3] Chronological ordering")
    events = []
    for kind in ("login", "view", "purchase", "logout"):
        events.append(Event(kind=kind))
        time.sleep(0.002)

    shuffled = events[:]
    random.shuffle(shuffled)
    ordered = sorted(
        shuffled, key=functools.cmp_to_key(lambda a, b: compare(a.event_id, b.event_id))
    )

    for event in ordered:
        when = get_timestamp(event.event_id).isoformat(timespec="milliseconds")
        print(f"    {when}  {event.kind:9s} {event.event_id}")

    assert [e.kind for e in ordered] == [e.kind for e in events]
    print(f"    JSON: {ordered[0].model_dump_json()}")


def main():
    print("━" * 72)
    print("  uuid7_core demo")
    print("━" * 72)

    show_generation()
    show_parsing()
    show_ordering()

    print(f"\n{'━' * 72}")


if __name__ == "__main__":
    main()
