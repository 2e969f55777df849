"""actionwire.

A small web-action framework: controllers group actions, and actions turn a
request env into a ``(status, headers, body)`` response.

Core subpackages
----------------

- ``actionwire.controller``: the ``Controller`` base class, the process-wide
  exception handling configuration and the ``@action`` DSL.
- ``actionwire.action``: the ``Action`` base class (params, callbacks,
  exposures, redirects, halting and exception translation).
- ``actionwire.core``: settings, logging configuration and HTTP status table.
- ``actionwire.server``: FastAPI adapter and application factory.

Typical bootstrap
-----------------

1. Configure ``Controller.handled_exceptions`` and
   ``Controller.handle_exceptions``.
2. Import the application's controllers and actions; each action copies the
   handled exceptions registry when it is defined.
3. Call actions directly, or mount them with ``actionwire.server.create_app``.
"""

from actionwire.controller import Controller, action
from actionwire.action import Action, Params

__all__ = ["Action", "Controller", "Params", "action"]
