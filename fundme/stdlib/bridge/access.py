from functools import wraps
from typing import Any

from fundme.execution.runtime import rt


def __export(contract):
    """Marks a function callable from outside ``contract``.

    Each call is charged as a call and, when it crosses from another contract,
    runs in a new frame whose caller is the contract that called it.
    """
    def decorator(fn):
        @wraps(fn)
        def call(*args, **kwargs):
            rt.deduct_call()
            entered = rt.context.enter(contract)
            try:
                return fn(*args, **kwargs)
            finally:
                if entered:
                    rt.context.leave()
        return call
    return decorator


exports = {
    '__export': __export,
    'ctx': rt.context,
    'rt': rt,
    'Any': Any
}
