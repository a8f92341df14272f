import logging

from paparazzo_search import AStar, NullObserver, SearchObserver
from paparazzo_search.observers import CompositeObserver, ExpansionRecorder, LoggingObserver


def test_observers_satisfy_protocol():
    for obs in (NullObserver(), ExpansionRecorder(), LoggingObserver(), CompositeObserver()):
        assert isinstance(obs, SearchObserver)


def test_default_observer_is_noop(letters_graph):
    engine = AStar(letters_graph, letters_graph, letters_graph)
    assert isinstance(engine.observer, NullObserver)


def test_recorder_reset():
    rec = ExpansionRecorder()
    rec.added_to_open_set("a")
    rec.added_to_closed_set("a")
    rec.updated_g_cost("b", 1.0)
    assert rec.expansions == 1
    rec.reset()
    assert (rec.opened, rec.closed, rec.g_updates) == ([], [], [])


def test_composite_fans_out(letters_graph):
    one, two = ExpansionRecorder(), ExpansionRecorder()
    AStar(letters_graph, letters_graph, letters_graph, CompositeObserver(one, two)).search("start", "goal")
    assert one.closed == two.closed == ["start", "a", "b", "d", "e"]
    assert one.g_updates == two.g_updates


def test_logging_observer_writes_records(letters_graph, caplog):
    obs = LoggingObserver(level=logging.INFO)
    with caplog.at_level(logging.INFO, logger="paparazzo_search.observers"):
        AStar(letters_graph, letters_graph, letters_graph, obs).search("start", "goal")
    messages = [r.getMessage() for r in caplog.records if r.name == "paparazzo_search.observers"]
    assert messages[0] == "open   'start'"
    assert "closed 'start'" in messages
    assert any(m.startswith("g      'd'") for m in messages)


def test_engine_debug_trace(letters_graph, caplog):
    with caplog.at_level(logging.DEBUG, logger="paparazzo_search.astar_core"):
        AStar(letters_graph, letters_graph, letters_graph).search("start", "goal")
    assert any("At goal" in r.getMessage() for r in caplog.records)
