"""Scenario tests for history handles.

Tests realistic usage patterns: page navigation with undo/redo, sliding
retention windows, shrinking the limit while navigated, and observers
following a session.
"""

from __future__ import annotations

import random

import pytest

from airs.core.types import UNBOUNDED
from airs.state import history


# ---------------------------------------------------------------------------
# Page navigation
# ---------------------------------------------------------------------------


class TestNavigationScenarios:
    def test_undo_back_to_homepage(self):
        h = history("homepage")
        h.set("about")
        h.undo()
        assert h() == "homepage"

    def test_undo_then_redo(self):
        h = history("homepage")
        h.set("about")
        h.undo()
        h.redo()
        assert h() == "about"

    def test_limit_one_sliding_window(self):
        h = history("homepage", limit=1)
        h.set("about")
        h.set("page1")
        h.set("page2")
        assert h.get_all_values() == ["page2"]

    def test_shrink_after_unbounded(self):
        h = history("initial")
        h.set("value1")
        h.set("value2")
        h.set("value3")
        h.history_limit = 2
        assert len(h.get_all_values()) == 2
        # the current snapshot survives the eviction and stays current
        assert h() == "value3"
        assert h.get_all_values()[1] == h()

    def test_previous_values(self):
        h = history("homepage")
        h.set("about")
        h.set("clients")
        h.set("commands")
        assert h.get_previous_values() == ["homepage", "about", "clients"]
        assert h.get_previous_values(0) == ["homepage", "about", "clients"]

    def test_countdown_with_correction(self, received):
        h = history("10")
        h.subscribe(received.append)
        for i in range(9, 0, -1):
            h.set(str(i))
        h.set("Engine ignition confirmed.")
        h.set("Oh wait ! Wait !")
        h.set("... It's ok guys. False alarm.")
        h.undo(2)
        h.set("Liftoff !")
        assert h() == "Liftoff !"
        assert h.get_all_values()[-2:] == ["Engine ignition confirmed.", "Liftoff !"]
        assert received[-3:] == ["... It's ok guys. False alarm.", "Engine ignition confirmed.", "Liftoff !"]


# ---------------------------------------------------------------------------
# Properties over random sessions
# ---------------------------------------------------------------------------


def _random_session(rng: random.Random, limit, steps: int = 200):
    """Drive a history with random operations, mirroring it with a plain model."""
    h = history(0, limit)
    model = [0]
    idx = 0
    counter = 0
    for _ in range(steps):
        op = rng.choice(["set", "set", "undo", "redo"])
        if op == "set":
            counter += 1
            h.set(counter)
            model = model[: idx + 1] + [counter]
            if limit is not UNBOUNDED and len(model) > limit:
                model = model[-limit:]
            idx = len(model) - 1
        elif op == "undo":
            k = rng.randint(-2, 5)
            h.undo(k)
            idx = max(0, min(len(model) - 1, idx - k))
        else:
            k = rng.randint(-2, 5)
            h.redo(k)
            idx = max(0, min(len(model) - 1, idx + k))
        yield h, model, idx


class TestRandomSessions:
    @pytest.mark.parametrize("seed", range(5))
    @pytest.mark.parametrize("limit", [UNBOUNDED, 1, 3, 8])
    def test_matches_model(self, seed, limit):
        rng = random.Random(seed)
        for h, model, idx in _random_session(rng, limit):
            assert h.get_all_values() == model
            assert h() == model[idx]
            assert h.engine.current_index == idx
            if limit is not UNBOUNDED:
                assert len(h.get_all_values()) <= limit

    @pytest.mark.parametrize("seed", range(5))
    def test_observer_always_sees_current(self, seed):
        rng = random.Random(seed)
        seen = []
        for h, _model, _idx in _random_session(rng, 4, steps=100):
            if not seen:
                h.subscribe(seen.append)
            assert seen[-1] == h()

    def test_huge_undo_redo_hit_the_walls(self):
        h = history("a", 5)
        for v in "bcdefg":
            h.set(v)
        h.undo(10**12)
        assert h() == h.get_all_values()[0] == "c"
        h.redo(10**12)
        assert h() == "g"


# ---------------------------------------------------------------------------
# Shrinking while navigated
# ---------------------------------------------------------------------------


class TestShrinkWhileNavigated:
    def test_keeps_position_on_same_snapshot(self):
        h = history("p0")
        for i in range(1, 10):
            h.set(f"p{i}")
        h.undo(3)  # at p6
        h.history_limit = 5  # keeps p5..p9
        assert h() == "p6"
        h.redo(10)
        assert h() == "p9"
        h.undo(10)
        assert h() == "p5"

    def test_falls_back_to_oldest_retained(self, received):
        h = history("p0")
        for i in range(1, 10):
            h.set(f"p{i}")
        h.undo(8)  # at p1
        h.subscribe(received.append)
        h.history_limit = 3  # keeps p7..p9
        assert h() == "p7"
        assert received == ["p1", "p7"]

    def test_shrink_then_set_drops_redo(self):
        h = history(0)
        for v in range(1, 6):
            h.set(v)
        h.undo(2)  # at 3
        h.history_limit = 4  # [2, 3, 4, 5]
        h.set(99)
        assert h.get_all_values() == [2, 3, 99]
