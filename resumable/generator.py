"""The resumable computation underlying every object of this library."""

import functools
import traceback

from tblib import Traceback

from .errors import EvaluationError, ExhaustionError, seterr
from .utils import get_logger


logger = get_logger(__name__)


class Generator:
    """A computation that emits values one at a time and can be resumed.

    The computation is a Python generator: each ``yield`` emits a value
    and suspends the computation, which keeps its local state until the
    next call to :meth:`resume`. Subclasses implement the computation by
    overriding :meth:`_run`, otherwise `body` is called to obtain it.

    Args:
        body (Optional[Callable[[], Iterator]]): A function called without
            arguments on the first resumption, it must return the
            iterator of emitted values.

    Attributes:
        value: The last emitted value, `None` before the first resumption
            and once the generator is done.
        done (bool): Whether the generator has completed.
        n_emitted (int): How many values have been emitted so far.
    """

    def __init__(self, body=None):
        self.body = body
        self.coroutine = None
        self.value = None
        self.done = False
        self.n_emitted = 0
        self.failure = None
        # only generators which evaluate user code record their creation site
        self.stack = None

    def _run(self):
        if self.body is None:
            raise NotImplementedError
        return self.body()

    def resume(self):
        """Run the computation up to its next emission.

        Returns:
            (Any, bool): The emitted value and `False`, or `None` and `True`
            when the computation has ended.

        Raises:
            ExhaustionError: The generator had already completed.
        """
        if self.done:
            self._raise_exhausted()

        if self.coroutine is None:
            self.coroutine = iter(self._run())

        try:
            self.value = next(self.coroutine)

        except StopIteration:
            self._terminate()
            return None, True

        except Exception as error:
            self._terminate(error)
            if self.stack is None or seterr() == 'passthrough' \
                    or isinstance(error, (EvaluationError, ExhaustionError)):
                raise
            else:
                msg = "Failed to evaluate item {} in {} created at:\n{}".format(
                    self.n_emitted, self.__class__.__name__, self.stack)
                raise EvaluationError(msg) from error

        except BaseException as error:
            # interrupted bodies are finished too, never report them as done
            self._terminate(error)
            raise

        self.n_emitted += 1
        return self.value, False

    def _terminate(self, error=None):
        self.done = True
        self.coroutine = None
        self.value = None

        if error is not None:
            logger.debug("%s terminated by %r after %d items",
                         self.__class__.__name__, error, self.n_emitted)
            self.failure = repr(error), Traceback(error.__traceback__)

    def _raise_exhausted(self):
        name = self.__class__.__name__
        if self.failure is None:
            raise ExhaustionError(name + " resumed after completion")

        error, tb = self.failure
        raise ExhaustionError(
            "{} resumed after it failed with {}, traceback:\n{}".format(
                name, error, "".join(traceback.format_tb(tb.as_traceback()))))

    def __iter__(self):
        return self

    def __next__(self):
        value, done = self.resume()
        if done:
            raise StopIteration
        return value


def coroutine(func):
    """Decorate a generator function to return :class:`Generator` objects.

    Example:

        >>> @coroutine
        ... def countdown(n):
        ...     while n > 0:
        ...         yield n
        ...         n -= 1
        >>> g = countdown(2)
        >>> g.resume()
        (2, False)
        >>> g.resume()
        (1, False)
        >>> g.resume()
        (None, True)
    """
    @functools.wraps(func)
    def create(*args, **kwargs):
        return Generator(lambda: func(*args, **kwargs))

    return create


def iterate(source):
    """Return a generator walking once over the items of `source`.

    Generators are returned as is, so that consuming the result also
    advances them.
    """
    if isinstance(source, Generator):
        return source

    return Generator(lambda: iter(source))
