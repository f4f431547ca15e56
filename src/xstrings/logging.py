"""
Logging helpers.
"""


# std
import functools as ftl
import contextlib as ctx

# third-party
from loguru import logger


# ---------------------------------------------------------------------------- #
@ctx.contextmanager
def disabled(*libraries):
    """
    Temporarily disable logging for `libraries`.
    """

    for lib in libraries:
        logger.disable(lib)

    try:
        yield

    finally:
        # re-enable
        for lib in libraries:
            logger.enable(lib)


@ctx.contextmanager
def enabled(*libraries):
    """
    Temporarily enable logging for `libraries`, eg. to see the debug messages
    from `xstrings` which is silent by default.
    """

    for lib in libraries:
        logger.enable(lib)

    try:
        yield

    finally:
        for lib in libraries:
            logger.disable(lib)


# ---------------------------------------------------------------------------- #
class LoggingMixin:
    class Logger:

        # use descriptor so we can access the logger via logger and cls().logger

        @staticmethod
        def add_parent(record, parent):
            """Prepend the class name to the function name in the log record."""
            fname = record['function']

            if fname.startswith(('<cell line:', '<module>')):
                # catch interactive use
                return

            record['function'] = f'{parent.__name__}.{fname}'

        def __get__(self, obj, kls=None):
            return logger.patch(
                ftl.partial(self.add_parent, parent=(kls or type(obj)))
            )

    logger = Logger()
