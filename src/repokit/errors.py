"""Error kinds raised by the generator and the repository proxy."""


class RepositoryError(Exception):
    """Base class for repokit errors."""


class MissingArgument(RepositoryError):
    """The repository class name was not supplied."""


class AlreadyExists(RepositoryError):
    """The target repository module is already present on disk."""


class NoModelBound(RepositoryError, AttributeError):
    """A call was forwarded to a repository that wraps no model."""


class UnresolvedPlaceholder(RepositoryError):
    """A template placeholder survived rendering."""
