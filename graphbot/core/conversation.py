"""
Conversation
------------
Conversation is the main element of graphbot.

It ties a :py:class:`~graphbot.core.graph.DialogueGraph` to a
:py:class:`~graphbot.messengers.common.interface.MessengerInterface` that receives replies,
and manages the single :py:class:`~graphbot.core.session.Session` moving through the graph.
"""

import logging
import random
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from graphbot.core.graph import DialogueGraph, GraphNode
from graphbot.core.graph_parsing import GraphImporter
from graphbot.core.session import AnswerSelector, NoSessionAttached, Session
from graphbot.messengers.common import MessengerInterface, CallbackMessengerInterface
from graphbot.messengers.console import CLIMessengerInterface

logger = logging.getLogger(__name__)


class Conversation(BaseModel, extra="forbid", arbitrary_types_allowed=True):
    """
    Class that connects a dialogue graph with a messenger interface.
    """

    graph: DialogueGraph
    """
    (required) A :py:class:`~.DialogueGraph` instance (object or dict).
    """
    messenger_interface: MessengerInterface = Field(default_factory=CLIMessengerInterface)
    """
    A `MessengerInterface` instance for this conversation.

    Every reply is passed to its :py:meth:`~.MessengerInterface.send_response`.
    A plain callable accepting a reply and a payload is wrapped in :py:class:`~.CallbackMessengerInterface`.
    """
    selector: AnswerSelector = Field(default=random.choice)
    """
    Function used to pick a reply out of the answers of a node.

    Defaults to :py:func:`random.choice`.
    """

    def __init__(
        self,
        graph: Union[DialogueGraph, dict],
        messenger_interface: Optional[MessengerInterface] = None,
        *,
        selector: Optional[AnswerSelector] = None,
    ):
        init_dict = {
            "graph": graph,
            "messenger_interface": messenger_interface,
            "selector": selector,
        }
        super().__init__(**{k: v for k, v in init_dict.items() if v is not None})

    @classmethod
    def from_file(cls, file: Union[str, Path], **overrides) -> "Conversation":
        """
        Create Conversation by importing its graph from a file.

        See :py:meth:`.GraphImporter.import_graph_file` for more information.

        :param file: Path to a json or yaml file containing the graph.
        :param overrides: Other init parameters of the conversation.
        """
        graph = GraphImporter().import_graph_file(file)
        return cls(graph=graph, **overrides)

    @field_validator("messenger_interface", mode="before")
    @classmethod
    def validate_messenger_from_callable(cls, value):
        """Allow passing a plain callable as :py:attr:`messenger_interface`."""
        if not isinstance(value, MessengerInterface) and callable(value):
            return CallbackMessengerInterface(value)
        return value

    @property
    def session(self) -> Optional[Session]:
        """The session held by the graph or ``None`` if no session is attached."""
        node = self.graph.session_node
        if node is None:
            return None
        return node.session

    @property
    def current_node(self) -> Optional[GraphNode]:
        """The node holding the session or ``None`` if no session is attached."""
        return self.graph.session_node

    @property
    def current_answer(self) -> Optional[str]:
        """The last reply of the attached session."""
        session = self.session
        if session is None:
            return None
        return session.last_answer

    def attach_session(self, payload: Any = None) -> Session:
        """
        Start a new conversation at the root of the graph.

        A session attached earlier is detached and discarded.

        :param payload: Opaque data carried by the session and passed along with every reply.
        :return: The new session.
        """
        if self.graph.detach_session() is not None:
            logger.info("Previous session discarded.")
        session = Session(payload=payload, sink=self.messenger_interface.send_response, selector=self.selector)
        return self.graph.attach_session(session)

    def receive_message(self, text: str) -> None:
        """
        Deliver a user message to the attached session.
        See :py:meth:`.Session.receive_message`.

        :raises NoSessionAttached: If no session is attached.
        :raises EmptyAnswerSet: If the next node has no answers.
        """
        session = self.session
        if session is None:
            raise NoSessionAttached("No session is attached to the conversation.")
        session.receive_message(text)

    def run(self):
        """
        Method that starts the conversation on :py:attr:`messenger_interface`.

        This method blocks until the messenger interface stops producing requests.
        """
        logger.info("Conversation is accepting requests.")
        self.messenger_interface.connect(self)
