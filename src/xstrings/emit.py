"""
Emit messages or warnings, or raise exceptions depending on a configurable
action.
"""

# std
import warnings
from enum import IntEnum

# third-party
from loguru import logger


# ---------------------------------------------------------------------------- #

def noop(*_, **__):
    """Do nothing."""


def raises(exception):
    """Raises an exception of type `exception`."""

    assert issubclass(exception, BaseException)

    def _raises(msg, *args, **kws):
        raise exception(msg.format(*args, **kws))

    return _raises


def warns(category=UserWarning):
    """Issue a warning of type `category`."""

    def _warns(msg, *args, **kws):
        warnings.warn(msg.format(*args, **kws), category, stacklevel=3)

    return _warns


def is_exception(obj):
    return isinstance(obj, Exception) \
        or (type(obj) is type and issubclass(obj, Exception))


# ---------------------------------------------------------------------------- #

class Action(IntEnum):

    NONE = IGNORE = SILENT = 0   # silently ignore
    INFO = NOTE = 1
    DEBUG = 2
    WARN = WARNING = 3
    ERROR = RAISE = 4
    CUSTOM = 5

    @classmethod
    def _missing_(cls, action):

        if action is None:
            return cls.NONE

        if isinstance(action, str):
            action = action.upper().rstrip('S')
            return cls.__members__.get(action)


class Emit:
    """
    Emit messages or warnings, or raise exceptions depending on requested action.
    Custom actions are also supported.

    Examples
    --------
    Issue a `UserWarning` with message "Unused arguments: (1, 2)":

    >>> Emit('warn')('Unused arguments: {}', (1, 2))
    """

    __slots__ = ('_action', 'emit', 'exception')

    def __init__(self, action='ignore', exception=Exception):
        self.exception = exception
        # resolve action
        self.action = action or 'ignore'

    def __call__(self, message, *args, **kws):
        self.emit(message, *args, **kws)

    def __repr__(self):
        return f'{type(self).__name__}({self._action.name.lower()!r})'

    @property
    def action(self):
        """set message action"""
        return self._action

    @action.setter
    def action(self, obj):
        self._action, self.emit = self._resolve_action_emitter(obj)

    def _resolve_action_emitter(self, action):
        if is_exception(action):
            # handle case: >>> ValueError('Bad dog!') and ValueError
            return Action.ERROR, raises(action if type(action) is type
                                        else type(action))

        if callable(action):
            # custom action (emit function)
            return Action.CUSTOM, action

        resolved = Action(action)
        if resolved is Action.CUSTOM:
            raise ValueError(
                f'Action {action!r} needs a callable emitter: pass the callable '
                'itself as the action.'
            )

        emitters = {
            Action.NONE:    noop,
            Action.INFO:    logger.opt(depth=1).info,
            Action.DEBUG:   logger.opt(depth=1).debug,
            Action.WARN:    warns(),
            Action.ERROR:   raises(self.exception)
        }
        return resolved, emitters[resolved]
