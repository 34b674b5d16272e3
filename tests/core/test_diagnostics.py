import logging

from openspec_resolver.core.diagnostics import WarningCollector, ensure_collector


def test_warn_deduplicates_and_records_events(caplog) -> None:
    collector = WarningCollector()

    with caplog.at_level(logging.WARNING):
        assert collector.warn("boom", source="config", path="/x") is True
        assert collector.warn("boom") is False

    assert collector.messages == ["boom"]
    assert len(collector.events) == 1
    event = collector.events[0]
    assert event["source"] == "config"
    assert event["level"] == "WARNING"
    assert event["path"] == "/x"
    assert [r.getMessage() for r in caplog.records].count("boom") == 1


def test_collectors_are_independent() -> None:
    first, second = WarningCollector(), WarningCollector()
    first.warn("boom")

    assert second.warn("boom") is True
    assert first.has_warned("boom") and second.has_warned("boom")


def test_ensure_collector_keeps_empty_collector() -> None:
    collector = WarningCollector()

    assert ensure_collector(collector) is collector
    assert isinstance(ensure_collector(None), WarningCollector)
