"""
Action DSL installed on every ``Controller`` subclass.

Usage::

    class ArticlesController(Controller):
        @action("Index")
        def index(self, params):
            self.body = "articles"

    ArticlesController.Index()({})  # => (200, {}, ["articles"])

The decorated function becomes the ``call`` method of a new ``Action``
subclass nested on the controller under the given name.
"""

from typing import Any, Callable, Dict, Optional, Type

from actionwire.core.logging_config import get_logger
from actionwire.exceptions import DuplicateActionError

logger = get_logger(__name__)

CallFunction = Callable[[Any, Any], Any]


class ActionDefinition:
    """Placeholder left in a controller body by ``@action`` until the class is built."""

    def __init__(self, name: str, call: CallFunction, base: Optional[type] = None):
        self.name = name
        self.call = call
        self.base = base

    def __repr__(self) -> str:
        return f"<ActionDefinition {self.name}>"


def action(name: str, base: Optional[type] = None) -> Callable[[CallFunction], ActionDefinition]:
    """
    Declare an action inside a controller body.

    Args:
        name: Class name of the generated action, e.g. ``"Index"``
        base: Action class to inherit from; defaults to ``actionwire.action.Action``
    """

    def decorator(call: CallFunction) -> ActionDefinition:
        return ActionDefinition(name, call, base)

    return decorator


def build_action(controller: type, name: str, call: CallFunction, base: Optional[type] = None) -> type:
    """Create the action class ``controller.<name>`` and register it."""
    if "_declared_actions" not in controller.__dict__:
        raise TypeError(f"Actions must be defined on a Controller subclass, not {controller.__qualname__}")
    if name in controller._declared_actions:
        raise DuplicateActionError(controller.__qualname__, name)

    # Imported here: actionwire.action depends on the controller configuration.
    from actionwire.action import Action

    namespace = {
        "call": call,
        "__module__": controller.__module__,
        "__qualname__": f"{controller.__qualname__}.{name}",
        "__doc__": call.__doc__,
    }
    action_cls = type(name, (base or Action,), namespace)

    setattr(controller, name, action_cls)
    controller._declared_actions.add(name)
    controller.actions[name] = action_cls
    logger.debug(f"Defined action {controller.__qualname__}.{name}")
    return action_cls


def install(controller: type) -> None:
    """Install the DSL on a freshly created controller class."""
    controller.actions = dict(getattr(controller, "actions", {}))
    controller._declared_actions = set()

    definitions = [
        (attr, value) for attr, value in list(vars(controller).items()) if isinstance(value, ActionDefinition)
    ]
    for attr, definition in definitions:
        delattr(controller, attr)
        build_action(controller, definition.name, definition.call, definition.base)


class Dsl:
    """Class-level helpers available on every controller."""

    actions: Dict[str, Type[Any]] = {}

    @classmethod
    def define_action(cls, name: str, call: CallFunction, base: Optional[type] = None) -> type:
        """Declare an action after the controller body has run and return its class."""
        return build_action(cls, name, call, base)
