from typing import Sequence, Union


def collapse_num_list(num_list: Sequence[Union[int, float]], limit: int = 10) -> str:
    """
    Produce representation for a sequence of numbers while collapsing large sequences.

    For sequences with ``limit`` or fewer items return the representation of the list.
    Otherwise, return a string with the minimum and maximum items as well as the number of items.
    """
    if len(num_list) > limit:
        return f"{min(num_list)} .. {max(num_list)} ({len(num_list)} items)"
    else:
        return repr(list(num_list))
