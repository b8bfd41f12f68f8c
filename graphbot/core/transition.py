"""
Transition
----------
This module defines how the next edge is chosen from the user's message.

Every keyword of every outgoing edge is compared with the message using
:py:func:`~graphbot.core.distance.distance`; the closest keyword wins.
"""

from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING
import logging

from graphbot.core.distance import distance
from graphbot.utils.logging import collapse_num_list

if TYPE_CHECKING:
    from graphbot.core.graph import GraphEdge


logger = logging.getLogger(__name__)


def edge_distance(edge: GraphEdge, text: str) -> Optional[int]:
    """
    Compute the distance between ``text`` and the closest keyword of ``edge``.

    :return: Minimal distance over the keywords or ``None`` if the edge has no keywords.
    """
    distances = [distance(keyword, text) for keyword in edge.keywords]
    logger.debug(f"Distances of {text!r} to keywords of edge to {edge.target!r}: {collapse_num_list(distances)}")
    if len(distances) == 0:
        return None
    return min(distances)


def select_edge(edges: List[GraphEdge], text: str) -> Optional[GraphEdge]:
    """
    Determine the edge to follow for ``text``.

    The process is as follows:

    1. For every edge, the distance between ``text`` and each of its keywords is computed
       (see :py:func:`edge_distance`). Edges without keywords produce no candidates.
    2. The edge with the smallest distance is chosen.
       If several edges share the smallest distance, the first one in ``edges`` is chosen.

    :return: The chosen edge or ``None`` if there were no candidates
        (``edges`` is empty or none of them has keywords).
    """
    best_edge: Optional[GraphEdge] = None
    best_distance: Optional[int] = None
    for edge in edges:
        current_distance = edge_distance(edge, text)
        if current_distance is None:
            continue
        if best_distance is None or current_distance < best_distance:
            best_edge, best_distance = edge, current_distance

    if best_edge is None:
        logger.debug(f"No candidate edges for {text!r}.")
    else:
        logger.debug(f"Selected edge to {best_edge.target!r} with distance {best_distance} for {text!r}.")
    return best_edge
