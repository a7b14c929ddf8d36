"""
Module-level functions and predicates used across the test suite.
"""


def increment(x):
    return x + 1


def double(x):
    return x * 2


def explode(x):
    raise RuntimeError(f"exploded on {x!r}")


class IsEven:
    """Predicate capability: even integers."""

    def test(self, value):
        return value % 2 == 0

    def __eq__(self, other):
        return isinstance(other, IsEven)

    def __hash__(self):
        return hash(IsEven)


class Recorder:
    """Function capability that records the order in which it was applied."""

    def __init__(self, name, log, result=None):
        self.name = name
        self.log = log
        self.result = result

    def apply(self, value):
        self.log.append(self.name)
        return value if self.result is None else self.result


class CallCounter:
    """Callable counting its invocations."""

    def __init__(self):
        self.calls = 0

    def __call__(self, value):
        self.calls += 1
        return value
