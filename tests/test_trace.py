import logging

from ddengine.model.state import State
from ddengine.trace import LoggingTraceSink, NullTraceSink


class RecordingSink(NullTraceSink):
    def __init__(self):
        self.events = []

    def root(self, state):
        self.events.append(("root", dict(state)))

    def candidates(self, index, state, candidates):
        self.events.append(("candidates", index, list(candidates)))

    def transition(self, index, candidate, state, inserted):
        self.events.append(("transition", index, candidate, inserted))

    def depth(self, index, variable, states):
        self.events.append(("depth", index, variable, len(states)))

    def compacting(self, index, size, width_limit):
        self.events.append(("compacting", index, size, width_limit))

    def compacted(self, index, states):
        self.events.append(("compacted", index, len(states)))


def test_custom_sink_receives_events_in_order(binary_diagram):
    sink = RecordingSink()
    dd = binary_diagram(
        n=2, trace=sink, width_limit=3, compaction=lambda i, s, d: list(s)[:3]
    )
    dd.run()
    assert sink.events[:5] == [
        ("root", {"x": 0}),
        ("candidates", 0, [0, 1]),
        ("transition", 0, 0, True),
        ("transition", 0, 1, True),
        ("depth", 0, "x1", 2),
    ]
    assert ("depth", 1, "x2", 4) in sink.events
    assert sink.events[-2:] == [("compacting", 1, 4, 3), ("compacted", 1, 3)]


def test_sentinel_candidate_is_traced(binary_diagram):
    sink = RecordingSink()
    dd = binary_diagram(
        n=1, trace=sink, candidates=lambda i, s, d: [], empty_candidate="-"
    )
    dd.run()
    assert ("candidates", 0, ["-"]) in sink.events


def test_tracing_does_not_change_results(binary_diagram):
    plain = binary_diagram().run()
    traced = binary_diagram(trace=RecordingSink()).run()
    assert plain == traced


def test_logging_sink_writes_lines(binary_diagram, caplog):
    with caplog.at_level(logging.INFO, logger="ddengine.trace"):
        binary_diagram(n=1, trace=True).run()
    messages = [r.getMessage() for r in caplog.records if r.name == "ddengine.trace"]
    assert messages[0] == " * Forwarding at the root {'x': 0}"
    assert any("we have the candidates [0, 1]" in m for m in messages)
    assert any("(kept)" in m for m in messages)


def test_logging_sink_custom_logger_and_level(caplog):
    logger = logging.getLogger("ddengine.tests.trace")
    sink = LoggingTraceSink(logger=logger, level=logging.WARNING)
    with caplog.at_level(logging.WARNING, logger="ddengine.tests.trace"):
        sink.compacting(2, 10, 4)
        sink.transition(2, "c", State(a=1), False)
    assert "Compacting layer 2 from 10 to 4 states" in caplog.text
    assert "(rejected)" in caplog.text
