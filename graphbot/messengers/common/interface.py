"""
Message Interfaces
------------------
The Message Interfaces module contains several basic classes that define the message interfaces.
These classes provide a way to define the structure of the messengers that are used to communicate with graphbot.

A messenger interface is the outbound end of a :py:class:`~graphbot.core.conversation.Conversation`:
every reply is passed to :py:meth:`MessengerInterface.send_response`.
Interfaces that also produce user input implement :py:meth:`MessengerInterface.connect`.
"""

from __future__ import annotations
import abc
import logging
from typing import Any, Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from graphbot.core.conversation import Conversation

logger = logging.getLogger(__name__)


class MessengerInterface(abc.ABC):
    """
    Class that represents a message interface used for communication between a conversation and users.
    """

    @abc.abstractmethod
    def send_response(self, response: str, payload: Any = None):
        """
        Deliver a reply to the user.

        :param response: Reply text chosen by the current node.
        :param payload: :py:attr:`~graphbot.core.session.Session.payload` of the session.
        """
        raise NotImplementedError

    def connect(self, conversation: Conversation):
        """
        Method invoked when the conversation starts running on this interface.
        Attaches a new session to the conversation, which may produce a greeting.

        :param conversation: Conversation to deliver user messages to.
        """
        conversation.attach_session()

    def __call__(self, response: str, payload: Any = None):
        self.send_response(response, payload)


class PollingMessengerInterface(MessengerInterface):
    """
    Polling message interface runs a loop, constantly asking the user for a new message.
    """

    @abc.abstractmethod
    def _request(self) -> Optional[str]:
        """
        Method used for receiving the next user message.

        :return: Message text or ``None`` if the user has left.
        """
        raise NotImplementedError

    def connect(self, conversation: Conversation):
        """
        Attach a new session and deliver every message returned by :py:meth:`_request`
        to ``conversation`` until it returns ``None``.
        """
        super().connect(conversation)
        while True:
            request = self._request()
            if request is None:
                break
            conversation.receive_message(request)
        logger.info("Messenger interface stopped polling.")


class CallbackMessengerInterface(MessengerInterface):
    """
    Callback message interface passes every reply to a user-provided function.

    User messages are expected to be delivered by external code
    via :py:meth:`~graphbot.core.conversation.Conversation.receive_message`.
    """

    def __init__(self, callback: Callable[[str, Any], None]):
        self._callback = callback

    def send_response(self, response: str, payload: Any = None):
        self._callback(response, payload)
