"""Minimal assertions for test runners.

``assert_``, ``equal``, ``throws`` and ``rejects`` raise
:class:`muggle_assert.AssertionError` on failure, carrying the failed
``operator`` along with ``expected``/``actual`` values and a trimmed stack.
"""

from .assertions import assert_, equal, rejects, throws
from .config import AssertSettings, configure, get_settings, load_settings
from .errors import ASSERTION_ERROR_NAME, DEFAULT_MESSAGE, AssertionError
from .stack import FrameStackCapture, NullStackCapture, StackCapture, get_stack_capture, set_stack_capture
from .util import deep_equal

__all__ = [
    "ASSERTION_ERROR_NAME",
    "DEFAULT_MESSAGE",
    "AssertSettings",
    "AssertionError",
    "FrameStackCapture",
    "NullStackCapture",
    "StackCapture",
    "assert_",
    "configure",
    "deep_equal",
    "equal",
    "get_settings",
    "get_stack_capture",
    "load_settings",
    "rejects",
    "set_stack_capture",
    "throws",
]
