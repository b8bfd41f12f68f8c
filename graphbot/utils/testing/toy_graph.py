"""
Toy graph
---------
This module contains a simple dialogue graph and a dialog which are used in tests and examples.
"""

from typing import Sequence

TOY_GRAPH = {
    "root": 0,
    "nodes": [
        {
            "id": 0,
            "answers": ["Hello! Ask me about the weather or the news."],
            "edges": [
                {"target": 1, "keywords": ["weather", "forecast"]},
                {"target": 2, "keywords": ["news", "headlines"]},
            ],
        },
        {
            "id": 1,
            "answers": ["It is sunny today. Anything else?"],
            "edges": [
                {"target": 3, "keywords": ["tomorrow"]},
                {"target": 0, "keywords": ["back", "menu"]},
            ],
        },
        {
            "id": 2,
            "answers": ["Nothing new happened. Anything else?"],
            "edges": [{"target": 0, "keywords": ["back", "menu"]}],
        },
        {
            "id": 3,
            "answers": ["Tomorrow it will rain."],
        },
    ],
}
"""
An example of a simple graph.

:meta hide-value:
"""

HAPPY_PATH = (
    ("wether", "It is sunny today. Anything else?"),
    ("tomorow", "Tomorrow it will rain."),
    ("thanks", "Hello! Ask me about the weather or the news."),
    ("news", "Nothing new happened. Anything else?"),
    ("menu", "Hello! Ask me about the weather or the news."),
)
"""
An example of a simple dialog through :py:data:`TOY_GRAPH`,
misspelled requests included.

:meta hide-value:
"""


def first_answer(answers: Sequence[str]) -> str:
    """
    Answer selector that always picks the first answer.
    Use it instead of :py:func:`random.choice` to make replies reproducible.
    """
    return answers[0]
