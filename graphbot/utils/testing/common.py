"""
Common
------
This module contains functions which are used to run demonstrations and tests.
"""

from typing import Tuple

from graphbot.core.conversation import Conversation


def check_happy_path(
    conversation: Conversation,
    happy_path: Tuple[Tuple[str, str], ...],
    printout_enable: bool = True,
):
    """
    Running a conversation for provided requests, comparing replies with correct expected replies.

    A new session is attached to ``conversation`` before the first request.

    :param conversation: The Conversation instance, that will be used for checking.
    :param happy_path: A tuple of (request, reply) tuples, so-called happy path,
        its requests are passed to the conversation and the conversation replies are compared to its replies.
    :param printout_enable: A flag that enables requests and replies fancy printing (to STDOUT).
    """
    conversation.attach_session()
    for step_id, (request, reference_response) in enumerate(happy_path):
        conversation.receive_message(request)
        candidate_response = conversation.current_answer
        if printout_enable:
            print(f"(user) >>> {request!r}")
            print(f" (bot) <<< {candidate_response!r}")
        if candidate_response != reference_response:
            raise Exception(
                f"\n\nnode = {conversation.current_node.id!r}\n"
                f"step_id = {step_id}\n"
                f"request = {request!r}\n"
                f"candidate_response = {candidate_response!r}\n"
                f"reference_response = {reference_response!r}\n"
                "candidate_response != reference_response"
            )
