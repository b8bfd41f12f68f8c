import logging
from typing import Any, Iterable, Optional, TextIO

from graphbot.messengers.common.interface import PollingMessengerInterface

logger = logging.getLogger(__name__)


class CLIMessengerInterface(PollingMessengerInterface):
    """
    Command line message interface is the default message interface, communicating with user via `STDIN/STDOUT`.
    This message interface can maintain dialog with one user at a time only.

    Polling stops on end of input or when the user enters one of ``exit_commands``.
    The session payload is not rendered.
    """

    def __init__(
        self,
        intro: Optional[str] = None,
        prompt_request: str = "request: ",
        prompt_response: str = "response: ",
        out_descriptor: Optional[TextIO] = None,
        exit_commands: Iterable[str] = ("exit", "quit"),
    ):
        self._intro: Optional[str] = intro
        self._prompt_request: str = prompt_request
        self._prompt_response: str = prompt_response
        self._descriptor: Optional[TextIO] = out_descriptor
        self._exit_commands = {command.casefold() for command in exit_commands}

    def _request(self) -> Optional[str]:
        try:
            request = input(self._prompt_request)
        except EOFError:
            return None
        if request.strip().casefold() in self._exit_commands:
            return None
        return request

    def send_response(self, response: str, payload: Any = None):
        print(f"{self._prompt_response}{response}", file=self._descriptor)

    def connect(self, conversation):
        """
        Print the intro (if any) and start polling ``STDIN``.

        :param conversation: Conversation to deliver user messages to.
        """
        if self._intro is not None:
            print(self._intro, file=self._descriptor)
        logger.info("Console messenger interface is accepting requests.")
        super().connect(conversation)
