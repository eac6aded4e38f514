class MalformedDeclaration(ValueError):
    """A project file declaration does not have the expected shape."""


class MissingWorkspaceContext(RuntimeError):
    """No workspace folder is open but a record needs a directory."""
