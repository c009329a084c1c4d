"""Core functionality for greeter."""


def greet(name: str) -> str:
    """Return a greeting message for the given name.

    The name is interpolated as-is; an empty name gives ``"Hello, !"``.

    Args:
        name: The name to greet.

    Returns:
        A greeting string.
    """
    return f"Hello, {name}!"
