import pytest

from graphbot.core import Conversation, DialogueGraph
from graphbot.utils.testing import TOY_GRAPH, first_answer


def pytest_report_header(config, start_path):
    return f"allow_skip: {config.getoption('--allow-skip')}"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Fails tests that skip, if skipping them is not allowed via config.
    """
    outcome = yield
    rep = outcome.get_result()

    allow_skip = item.config.getoption("--allow-skip")
    if allow_skip == "all":
        return

    test_marks = [mark.name for mark in item.own_markers]
    if allow_skip != "none" and any(mark in test_marks for mark in allow_skip.split(",")):
        return

    if rep.skipped and call.excinfo is not None and call.excinfo.errisinstance(pytest.skip.Exception):
        rep.outcome = "failed"
        rep.longrepr = f"Forbidden skipped test - {call.excinfo.value}"


def pytest_addoption(parser):
    parser.addoption(
        "--allow-skip",
        action="store",
        default="all",
        help="A comma-separated list of marks. Any test without a mark from the list will fail on skip."
        " If not passed, every test is permitted to skip."
        " Pass `none` to disallow any test from skipping.",
    )


@pytest.fixture
def replies():
    return []


@pytest.fixture
def sink(replies):
    def _sink(response, payload):
        replies.append((response, payload))

    return _sink


@pytest.fixture
def toy_graph():
    return DialogueGraph.model_validate(TOY_GRAPH)


@pytest.fixture
def conversation_factory(sink):
    def _conversation_factory(graph=TOY_GRAPH):
        return Conversation(graph, sink, selector=first_answer)

    return _conversation_factory
