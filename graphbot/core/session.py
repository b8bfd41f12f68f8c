"""
Session
-------
Session is the cursor of a conversation.

It is held by exactly one :py:class:`~graphbot.core.graph.GraphNode` at a time and keeps the id of that node
in :py:attr:`Session.current_node`. On every user message the session picks an outgoing edge of its node
(see :py:func:`~graphbot.core.transition.select_edge`) and asks the node to move it along that edge.
Whenever the session enters a node it replies with one of the node's answers.

The session also carries an optional :py:attr:`Session.payload` for the presentation layer.
The payload is never inspected; it is passed to the reply sink together with every reply.
Copies of a session (e.g. via ``model_copy``) share or duplicate the payload the way pydantic does,
and are never held by a node, so they cannot continue the conversation.
"""

from __future__ import annotations
import logging
import random
import weakref
from typing import Any, Callable, Optional, Sequence, TYPE_CHECKING

from typing_extensions import TypeAlias
from pydantic import BaseModel, Field, PrivateAttr

from graphbot.core.edge_label import NodeId
from graphbot.core.transition import select_edge

if TYPE_CHECKING:
    from graphbot.core.graph import DialogueGraph, GraphNode

logger = logging.getLogger(__name__)

ReplySink: TypeAlias = Callable[[str, Any], None]
"""
A callable receiving every reply together with :py:attr:`Session.payload`.
"""
AnswerSelector: TypeAlias = Callable[[Sequence[str]], str]
"""
A callable choosing a reply out of the answers of a node.
Defaults to :py:func:`random.choice`.
"""


class EmptyAnswerSet(Exception):
    """Raised when the session enters a node that has no answers."""


class NoSessionAttached(Exception):
    """Raised when a message is received by a session that is not held by any node."""


class Session(BaseModel, arbitrary_types_allowed=True):
    """
    A live conversation moving through a :py:class:`~graphbot.core.graph.DialogueGraph`.
    """

    current_node: Optional[NodeId] = None
    """
    Id of the node that holds this session.
    ``None`` until the session is attached.
    """
    last_answer: Optional[str] = None
    """
    The last reply produced by this session.
    """
    payload: Any = None
    """
    Opaque data carried along with the session (e.g. an avatar for the presentation layer).
    """
    sink: Optional[ReplySink] = Field(default=None, exclude=True, repr=False)
    """
    Receiver of replies. If ``None``, replies are only stored in :py:attr:`last_answer`.
    """
    selector: AnswerSelector = Field(default=random.choice, exclude=True, repr=False)
    """
    Function used to pick a reply out of the answers of a node.
    """
    _graph: Optional[weakref.ReferenceType] = PrivateAttr(None)
    """
    Weak reference to the graph this session navigates.
    """

    @property
    def graph(self) -> Optional[DialogueGraph]:
        """
        The graph this session navigates or ``None`` if the session was never attached
        (or the graph no longer exists).
        """
        if self._graph is None:
            return None
        return self._graph()

    def bind(self, graph: DialogueGraph):
        """
        Make this session navigate ``graph``.
        Called by :py:meth:`~graphbot.core.graph.DialogueGraph.attach_session`.
        """
        self._graph = weakref.ref(graph)

    @property
    def is_resident(self) -> bool:
        """Whether a node of :py:attr:`graph` currently holds this session."""
        graph = self.graph
        if graph is None or self.current_node is None:
            return False
        node = graph.get_node(self.current_node)
        return node is not None and node.session is self

    @property
    def node(self) -> GraphNode:
        """
        The node holding this session.

        :raises NoSessionAttached: If no node holds this session.
        """
        if not self.is_resident:
            raise NoSessionAttached("Session is not attached to any node.")
        return self.graph.get_node(self.current_node)

    def set_current_node(self, node: GraphNode, require_answer: bool = True) -> Optional[str]:
        """
        Update :py:attr:`current_node` to ``node`` and reply with one of its answers.

        Called by the node that has just taken ownership of this session.

        :param node: Node that holds this session.
        :param require_answer: Whether a node without answers is an error.
            If ``False``, entering such a node produces no reply.
        :return: The reply or ``None`` if no reply was produced.
        :raises EmptyAnswerSet: If ``node`` has no answers and ``require_answer`` is set.
        """
        self.current_node = node.id
        self.last_answer = None
        if len(node.answers) == 0:
            if require_answer:
                raise EmptyAnswerSet(f"Node {node.id!r} has no answers.")
            return None

        answer = self.selector(node.answers)
        self.last_answer = answer
        logger.debug(f"Node {node.id!r} replied: {answer!r}")
        if self.sink is not None:
            self.sink(answer, self.payload)
        return answer

    def receive_message(self, text: str) -> None:
        """
        Process a user message:

        1. Select an outgoing edge of the current node (see :py:func:`~graphbot.core.transition.select_edge`).
        2. If no edge was selected, fall back to the root of the graph.
        3. Move this session to the chosen node, which makes it reply.

        :raises NoSessionAttached: If no node holds this session.
        :raises EmptyAnswerSet: If the chosen node has no answers.
        """
        node = self.node
        graph = self.graph
        logger.debug(f"Received message at node {node.id!r}: {text!r}")

        edge = select_edge(node.edges, text)
        if edge is None:
            logger.debug(f"Node {node.id!r} has no matching edges, falling back to root {graph.root!r}.")
            target = graph.root_node
        else:
            target = graph.get_node(edge.target)

        node.move_session_to(target)
