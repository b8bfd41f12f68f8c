import pytest

from graphbot.core import GraphEdge, select_edge, edge_distance


def edges(*keyword_lists):
    return [GraphEdge(target=index, keywords=list(keywords)) for index, keywords in enumerate(keyword_lists)]


@pytest.mark.parametrize(
    "keyword_lists,text,result",
    [
        ((["hi"], ["bye"]), "hai", 0),
        ((["hi"], ["bye"]), "by", 1),
        ((["weather", "forecast"], ["news"]), "FORECAST", 0),
        ((["cat"], ["bat"]), "hat", 0),
        ((["bat"], ["cat"]), "hat", 0),
        (([], ["news"]), "weather", 1),
        ((["far away", "close"], ["closer"]), "close", 0),
        ((["abc"], ["xyz", "hello"]), "hello", 1),
        (([], []), "anything", None),
        ((), "anything", None),
    ],
)
def test_select_edge(keyword_lists, text, result):
    selected = select_edge(edges(*keyword_lists), text)
    assert (selected.target if selected is not None else None) == result


def test_tie_resolves_to_first_keyword_in_order():
    candidates = [
        GraphEdge(target="first", keywords=["zzzz", "dog"]),
        GraphEdge(target="second", keywords=["dig"]),
    ]
    assert select_edge(candidates, "dug").target == "first"


@pytest.mark.parametrize(
    "keywords,text,result",
    [
        (["hi", "hello"], "helo", 1),
        (["kitten"], "sitting", 3),
        ([], "text", None),
    ],
)
def test_edge_distance(keywords, text, result):
    assert edge_distance(GraphEdge(target=0, keywords=keywords), text) == result
