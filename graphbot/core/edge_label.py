"""
Edge Label
----------
This module defines a class for addressing edges without holding them.

Nodes keep labels of the edges that lead into them (:py:attr:`~graphbot.core.graph.GraphNode.parent_edges`).
A label is a plain pair of the source node id and the position of the edge in the source's edge list,
so a node never holds a reference to an edge owned by another node.
"""

from __future__ import annotations

from typing import Union, Tuple, List

from typing_extensions import TypeAlias, Annotated
from pydantic import BaseModel, model_validator

NodeId: TypeAlias = Union[int, str]
"""Types that can identify a :py:class:`~graphbot.core.graph.GraphNode`."""


class EdgeLabel(BaseModel, frozen=True):
    """
    A label addressing a specific edge in the graph by its source node and position.
    """

    source: NodeId
    """
    Id of the node that owns the edge.
    """
    index: int
    """
    Position of the edge in :py:attr:`~graphbot.core.graph.GraphNode.edges` of the source node.
    """

    @model_validator(mode="before")
    @classmethod
    def validate_from_tuple(cls, data):
        """
        Allow instantiating of this class from a tuple or list of two items (source id and index).
        """
        if isinstance(data, (tuple, list)):
            if len(data) == 2 and isinstance(data[1], int):
                return {"source": data[0], "index": data[1]}
            else:
                raise ValueError(
                    f"Cannot validate EdgeLabel from {data!r}: "
                    f"{type(data).__name__} should contain a node id and an index."
                )
        return data


EdgeLabelInitTypes: TypeAlias = Union[
    EdgeLabel,
    Tuple[Annotated[NodeId, "source"], Annotated[int, "index"]],
    Annotated[List[Union[int, str]], "list of a node id and an index"],
    Annotated[dict, "dict following the EdgeLabel data model"],
]
"""Types that :py:class:`~.EdgeLabel` can be validated from."""
