from graphbot.messengers.common import MessengerInterface, PollingMessengerInterface, CallbackMessengerInterface
from graphbot.messengers.console import CLIMessengerInterface
