from .basic import assert_, equal
from .raising import Outcome, capture_await, capture_call, errors_match, rejects, throws

__all__ = [
    "Outcome",
    "assert_",
    "capture_await",
    "capture_call",
    "equal",
    "errors_match",
    "rejects",
    "throws",
]
