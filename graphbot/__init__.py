# -*- coding: utf-8 -*-
# flake8: noqa: F401
from importlib.metadata import version


__version__ = version(__name__)


from graphbot.core import (
    distance,
    NodeId,
    EdgeLabel,
    EdgeLabelInitTypes,
    Session,
    EmptyAnswerSet,
    NoSessionAttached,
    ReplySink,
    AnswerSelector,
    GraphEdge,
    GraphNode,
    DialogueGraph,
    ConfigurationError,
    select_edge,
    GraphImporter,
    GraphImportError,
    Conversation,
)
from graphbot.messengers import MessengerInterface, CallbackMessengerInterface, CLIMessengerInterface
