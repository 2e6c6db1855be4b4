"""Shared token datatypes."""
from typing import Any, Union

USER_ID_CLAIM = "user_id"

UserId = Union[int, str]


def is_user_id(value: Any) -> bool:
    # bool is an int subclass but never a valid id
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and value != ""
