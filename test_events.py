#!/usr/bin/env python3
"""EventBus publish / poll tests."""

from __future__ import annotations

import unittest

from events import EventBus, LEVEL_UP, RUN_OVER


class EventBusTests(unittest.TestCase):
    def test_poll_drains_topic_in_order(self) -> None:
        bus = EventBus()
        first = bus.publish(LEVEL_UP, {"level": 2}, ts=10.0)
        bus.publish(LEVEL_UP, {"level": 3}, ts=20.0)

        events = bus.poll(LEVEL_UP)
        self.assertEqual([e.payload["level"] for e in events], [2, 3])
        self.assertEqual(events[0].id, first)
        self.assertEqual(events[0].ts, 10.0)
        self.assertEqual(bus.poll(LEVEL_UP), [])

    def test_topics_are_independent(self) -> None:
        bus = EventBus()
        bus.publish(RUN_OVER, {"final_score": 5})

        self.assertEqual(bus.poll(LEVEL_UP), [])
        self.assertEqual(bus.pending(RUN_OVER), 1)

    def test_payload_is_copied(self) -> None:
        bus = EventBus()
        payload = {"level": 2}
        bus.publish(LEVEL_UP, payload)
        payload["level"] = 99

        self.assertEqual(bus.poll(LEVEL_UP)[0].payload["level"], 2)

    def test_metrics(self) -> None:
        bus = EventBus()
        bus.publish(LEVEL_UP)
        bus.publish(RUN_OVER)
        bus.publish(RUN_OVER)
        bus.poll(RUN_OVER)

        report = bus.metrics.report()
        self.assertEqual(report["published"], 3)
        self.assertEqual(report["delivered"], 2)
        self.assertEqual(report["by_topic"], {LEVEL_UP: 1, RUN_OVER: 2})


if __name__ == "__main__":
    unittest.main()
