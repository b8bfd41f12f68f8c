from .interface import MessengerInterface, PollingMessengerInterface, CallbackMessengerInterface
