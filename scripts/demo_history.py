"""AIRS history demo.

Counts down a launch, changes its mind, undoes the scare and records a
liftoff, printing every value the history emits along the way.  Then
shrinks the retention limit while navigated.

Run:
    python scripts/demo_history.py
    python scripts/demo_history.py --limit 5 --delay 0.2
"""

from __future__ import annotations

import argparse
import sys
import time

from airs import history, state
from airs.utils.logging import setup_logging


def main() -> int:
    parser = argparse.ArgumentParser(description="AIRS history demo")
    parser.add_argument("--limit", type=int, default=0, help="History limit (0 = unbounded)")
    parser.add_argument("--delay", type=float, default=0.0, help="Seconds between steps")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    setup_logging(args.log_level)

    # ------------------------------------------------------------------
    # Plain state
    # ------------------------------------------------------------------
    print("=== state ===")
    counter = state(1)
    print(f"counter() = {counter()}")
    with counter.subscribe(lambda v: print(f"  counter -> {v}")):
        counter.set(2)
        counter.set(lambda v: v * 10)

    mouse = state({"x": 0, "y": 0})
    mouse.patch({"x": 1})
    print(f"mouse() = {mouse()}")

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------
    print("\n=== history ===")
    launch = history("10", args.limit)
    sub = launch.subscribe(lambda v: print(f"  {v}"))

    def step(fn, *a):
        fn(*a)
        if args.delay > 0:
            time.sleep(args.delay)

    for i in range(9, 0, -1):
        step(launch.set, str(i))
    step(launch.set, "Engine ignition confirmed.")
    step(launch.set, "Oh wait ! Wait !")
    step(launch.set, "... It's ok guys. False alarm.")
    step(launch.undo, 2)
    step(launch.set, "Liftoff !")

    print(f"\nretained ({launch.history_limit!r}): {launch.get_all_values()}")
    print(f"previous 3: {launch.get_previous_values(3)}")

    print("\n=== shrink while navigated ===")
    step(launch.undo, 4)
    launch.history_limit = 3
    print(f"retained: {launch.get_all_values()}  current: {launch()!r}")

    sub.unsubscribe()
    return 0


if __name__ == "__main__":
    sys.exit(main())
