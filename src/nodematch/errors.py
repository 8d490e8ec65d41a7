"""Exception types raised by nodematch."""


class NodematchError(Exception):
    """Base class for all nodematch errors."""


class ExpectationNotMet(NodematchError, AssertionError):
    """An assertion did not observe the expected state before its wait ran out.

    This is the only exception the ``has_*`` predicates convert to ``False``.
    Anything else raised while resolving a query is a defect and propagates.
    """
