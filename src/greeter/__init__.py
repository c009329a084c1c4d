"""greeter: format a greeting for a name."""

from greeter.core import greet

__all__ = ["greet"]
