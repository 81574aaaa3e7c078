import threading

from tblib import pickling_support


@pickling_support.install
class EvaluationError(Exception):
    """Raised when a user supplied callback fails on an element."""


# Settings --------------------------------------------------------------------

def seterr(evaluation=None):
    """Set how errors are handled.

    Args:
        evaluation (str): how errors from the callbacks passed to array
            methods (predicates, transforms, orderings...) are propagated:

            - `'wrap'`: raise :class:`EvaluationError` with original error as
              its cause.
            - `'passthrough'`: let the error propagate through SeqArray code,
              might facilitate step-by-step debugging.
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if evaluation == 'wrap':
        error_config.passthrough = False
    elif evaluation == 'passthrough':
        error_config.passthrough = True
    elif evaluation is not None:
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    return "passthrough" if error_config.passthrough else 'wrap'


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.passthrough = False


error_config = ErrorConfig()


# Helpers ---------------------------------------------------------------------

def check_callable(f, name):
    if not callable(f):
        raise TypeError("{} must be callable".format(name))


def evaluate(f, args, index, where):
    """Call `f(*args)` and handle its failure according to :func:`seterr`.

    Args:
        f (Callable): user code.
        args (tuple): arguments for `f`.
        index (Optional[int]): index of the item being evaluated, only used
            to build the error message.
        where (str): name of the calling operation.
    """
    try:
        return f(*args)

    except Exception as cause:
        if error_config.passthrough or isinstance(cause, EvaluationError):
            raise
        elif index is None:
            msg = "Failed to evaluate {} in {}".format(
                getattr(f, '__name__', 'callback'), where)
        else:
            msg = "Failed to evaluate item {} in {}".format(index, where)
        raise EvaluationError(msg) from cause
