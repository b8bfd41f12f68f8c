"""
Graph
-----
The Graph module provides a set of `pydantic` models for representing the dialogue graph.

A :py:class:`DialogueGraph` owns its :py:class:`GraphNode` objects, and every node owns its outgoing
:py:class:`GraphEdge` objects. Edges and back-references address nodes by id only.

At most one node at a time holds the live :py:class:`~graphbot.core.session.Session`.
Ownership of the session is moved between nodes with :py:meth:`GraphNode.move_session_to`.
"""

from __future__ import annotations
import logging
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, AliasChoices, PrivateAttr, model_validator

from graphbot.core.edge_label import EdgeLabel, EdgeLabelInitTypes, NodeId
from graphbot.core.session import Session, NoSessionAttached

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when a graph cannot be built from the given records."""


class GraphEdge(BaseModel, extra="forbid"):
    """
    A directed transition between two nodes, triggered by keywords.

    An edge with no keywords is valid but is never selected:
    it produces no candidates during :py:func:`~graphbot.core.transition.select_edge`.
    """

    keywords: List[str] = Field(validation_alias=AliasChoices("keywords", "KEYWORDS"), default_factory=list)
    """Trigger strings compared against user input."""
    target: NodeId = Field(validation_alias=AliasChoices("target", "TARGET", "child"))
    """Id of the node this edge leads to."""
    source: Optional[NodeId] = Field(default=None, validation_alias=AliasChoices("source", "SOURCE", "parent"))
    """
    Id of the node that owns this edge.
    Set by :py:class:`DialogueGraph` when the graph is built.
    """


class GraphNode(BaseModel, extra="forbid"):
    """
    Node is a single state of the conversation.

    A node replies with one of its :py:attr:`answers` whenever the session enters it.
    """

    id: NodeId
    """Identifier of the node, unique in the graph."""
    answers: List[str] = Field(validation_alias=AliasChoices("answers", "ANSWERS"), default_factory=list)
    """Replies this node can produce. Only the root node may leave this empty."""
    edges: List[GraphEdge] = Field(validation_alias=AliasChoices("edges", "EDGES"), default_factory=list)
    """Outgoing edges in selection order."""
    parent_edges: List[EdgeLabel] = Field(default_factory=list, exclude=True)
    """
    Labels of the edges leading into this node.
    Filled in by :py:class:`DialogueGraph`; never used for traversal.
    """
    _session: Optional[Session] = PrivateAttr(None)

    @property
    def session(self) -> Optional[Session]:
        """The session held by this node or ``None``."""
        return self._session

    def accept_session(self, session: Session):
        """
        Install a session that is not held by any node.

        The node announces itself to the session (see :py:meth:`.Session.set_current_node`),
        a greeting is emitted only if the node has answers.

        :raises ValueError: If this node already holds a session or if ``session`` is held by another node.
        """
        if self._session is not None:
            raise ValueError(f"Node {self.id!r} already holds a session.")
        if session.is_resident:
            raise ValueError(f"Session is already held by node {session.current_node!r}.")
        self._session = session
        logger.debug(f"Session attached to node {self.id!r}.")
        session.set_current_node(self, require_answer=False)

    def move_session_to(self, target: GraphNode):
        """
        Transfer the session held by this node to ``target``.

        The session is installed in ``target`` and removed from this node in a single step,
        after which ``target`` makes the session reply with one of its answers.

        :raises NoSessionAttached: If this node does not hold a session.
        :raises EmptyAnswerSet: If ``target`` has no answers. Ownership has already moved by then.
        """
        if self._session is None:
            raise NoSessionAttached(f"Node {self.id!r} does not hold a session.")
        if target is not self:
            target._session, self._session = self._session, None
        logger.debug(f"Session moved from node {self.id!r} to node {target.id!r}.")
        target._session.set_current_node(target)


class DialogueGraph(BaseModel, extra="forbid"):
    """
    A collection of nodes representing an entire dialogue.

    Nodes may be passed either as a mapping from ids to nodes or as a list of nodes.
    If :py:attr:`root` is not given, the only node without incoming edges becomes the root.
    """

    nodes: Dict[NodeId, GraphNode]
    """All nodes of the graph by their ids."""
    root: Optional[NodeId] = Field(default=None, validation_alias=AliasChoices("root", "ROOT"))
    """Id of the node conversations start from and fall back to."""

    @model_validator(mode="before")
    @classmethod
    def validate_nodes_from_list(cls, data):
        """
        Allow instantiating nodes from:

        - A list of node records, each with its own ``id``;
        - A mapping of ids to node records, where ``id`` may be omitted from the record.

        :raises ConfigurationError: If the list contains the same id twice.
        """
        if not isinstance(data, dict):
            return data
        nodes = data.get("nodes", data.get("NODES"))
        if isinstance(nodes, (list, tuple)):
            node_dict = {}
            for node in nodes:
                if isinstance(node, GraphNode):
                    node_id = node.id
                elif isinstance(node, dict):
                    node_id = node.get("id")
                else:
                    node_id = None
                if node_id is not None and node_id in node_dict:
                    raise ConfigurationError(f"Duplicate node id: {node_id!r}")
                node_dict[node_id] = node
            data = {k: v for k, v in data.items() if k != "NODES"}
            data["nodes"] = node_dict
        elif isinstance(nodes, dict):
            data = {k: v for k, v in data.items() if k != "NODES"}
            data["nodes"] = {
                node_id: ({"id": node_id, **node} if isinstance(node, dict) and "id" not in node else node)
                for node_id, node in nodes.items()
            }
        return data

    @model_validator(mode="after")
    def validate_graph(self):
        """
        Link edges (see :py:meth:`link_edges`), then validate the root (see :py:meth:`validate_root`).
        """
        self.link_edges()
        self.validate_root()
        logger.info(f"Dialogue graph built: {len(self.nodes)} nodes, root {self.root!r}.")
        return self

    def link_edges(self):
        """
        Check that every edge leads to an existing node and fill in
        :py:attr:`GraphEdge.source` and :py:attr:`GraphNode.parent_edges`.

        :raises ConfigurationError: If a node is stored under a different id
            or an edge leads to an unknown node.
        """
        for node_id, node in self.nodes.items():
            if node_id != node.id:
                raise ConfigurationError(f"Node {node.id!r} is stored under a different id {node_id!r}.")
            node.parent_edges = []

        for node in self.nodes.values():
            for index, edge in enumerate(node.edges):
                target = self.nodes.get(edge.target)
                if target is None:
                    raise ConfigurationError(f"Edge {index} of node {node.id!r} leads to unknown node {edge.target!r}.")
                edge.source = node.id
                target.parent_edges.append(EdgeLabel(source=node.id, index=index))

    def validate_root(self):
        """
        Validate :py:attr:`root` is in :py:attr:`nodes` or infer it if it is missing.

        :raises ConfigurationError: If the root is unknown or cannot be inferred.
        """
        if self.root is None:
            candidates = [node.id for node in self.nodes.values() if len(node.parent_edges) == 0]
            if len(candidates) != 1:
                raise ConfigurationError(
                    f"Cannot infer root: expected exactly one node without incoming edges, found {candidates!r}."
                )
            self.root = candidates[0]
            logger.debug(f"Inferred root node {self.root!r}.")
        elif self.root not in self.nodes:
            raise ConfigurationError(f"Unknown root={self.root!r}")

    def __deepcopy__(self, memo=None):
        """
        Copy the graph along with the session held by one of its nodes (if any).
        The copied session navigates the copied graph.
        """
        graph_copy = super().__deepcopy__(memo)
        holder = graph_copy.session_node
        if holder is not None:
            holder.session.bind(graph_copy)
        return graph_copy

    @property
    def root_node(self) -> GraphNode:
        """The node conversations start from."""
        return self.nodes[self.root]

    @property
    def session_node(self) -> Optional[GraphNode]:
        """The node currently holding a session or ``None``."""
        for node in self.nodes.values():
            if node.session is not None:
                return node
        return None

    def get_node(self, node_id: NodeId) -> Optional[GraphNode]:
        """
        Get node with the ``node_id``.

        :return: Node or ``None`` if it doesn't exist.
        """
        return self.nodes.get(node_id)

    def get_edge(self, label: EdgeLabelInitTypes) -> Optional[GraphEdge]:
        """
        Get edge addressed by ``label``.

        :return: Edge or ``None`` if it doesn't exist.
        """
        label = EdgeLabel.model_validate(label)
        node = self.get_node(label.source)
        if node is None or not 0 <= label.index < len(node.edges):
            return None
        return node.edges[label.index]

    def get_parent_edges(self, node_id: NodeId) -> List[GraphEdge]:
        """
        Get edges leading into the node with the ``node_id``.

        :return: A list of edges, empty if the node doesn't exist.
        """
        node = self.get_node(node_id)
        if node is None:
            return []
        return [self.get_edge(label) for label in node.parent_edges]

    def attach_session(self, session: Session, node_id: Optional[NodeId] = None) -> Session:
        """
        Bind ``session`` to this graph and install it in the node with ``node_id``
        (:py:attr:`root` by default).

        :raises ValueError: If a node of this graph already holds a session
            or if ``session`` is held by a node of any graph.
        :raises KeyError: If ``node_id`` is not in the graph.
        """
        holder = self.session_node
        if holder is not None:
            raise ValueError(f"Node {holder.id!r} already holds a session.")
        if session.is_resident:
            raise ValueError(f"Session is already held by node {session.current_node!r}.")
        node = self.root_node if node_id is None else self.nodes[node_id]
        session.bind(self)
        node.accept_session(session)
        logger.info(f"Session attached at node {node.id!r}.")
        return session

    def detach_session(self) -> Optional[Session]:
        """
        Remove the session from the node holding it.

        :return: The detached session or ``None`` if no node held one.
        """
        holder = self.session_node
        if holder is None:
            return None
        session, holder._session = holder._session, None
        session.current_node = None
        logger.info(f"Session detached from node {holder.id!r}.")
        return session
