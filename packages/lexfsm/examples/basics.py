"""Turnstile -- the simplest possible lexfsm program.

Demonstrates:
- Creating a machine with a default state
- Registering edges with literal values and with predicates
- Silent edges that move the machine without being reported
- Printing the graph in DOT form

Run: python -m examples.basics
"""

import sys

from lexfsm import FSM, EdgeFlag, dump_graph

LOCKED, UNLOCKED = 0, 1
COIN, PUSH = "coin", "push"


def main() -> None:
    print("=== Turnstile ===\n")

    fsm = FSM(LOCKED)
    fsm.set_state_name(LOCKED, "locked")
    fsm.set_state_name(UNLOCKED, "unlocked")

    # A plain value is compared by equality.
    fsm.create_edge(LOCKED, UNLOCKED, COIN, "coin")
    # Extra coins keep it unlocked but are not worth reporting.
    fsm.create_edge(UNLOCKED, UNLOCKED, COIN, "coin", EdgeFlag.SILENT)
    # Any callable works as a predicate.
    fsm.create_edge(UNLOCKED, LOCKED, lambda event: event == PUSH, "push")

    for event in [PUSH, COIN, COIN, PUSH, PUSH]:
        previous, changed = fsm.step(event)
        print(
            f"  {event:<5} {fsm.state_name(previous):>8} -> "
            f"{fsm.state_name(fsm.current_state):<8} changed={changed}"
        )

    print()
    dump_graph(fsm, sys.stdout)


if __name__ == "__main__":
    main()
