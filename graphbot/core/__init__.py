"""
This module defines core feature of graphbot.
"""

from graphbot.core.distance import distance
from graphbot.core.edge_label import NodeId, EdgeLabel, EdgeLabelInitTypes
from graphbot.core.session import Session, EmptyAnswerSet, NoSessionAttached, ReplySink, AnswerSelector
from graphbot.core.graph import GraphEdge, GraphNode, DialogueGraph, ConfigurationError
from graphbot.core.transition import select_edge, edge_distance
from graphbot.core.graph_parsing import GraphImporter, GraphImportError
from graphbot.core.conversation import Conversation
