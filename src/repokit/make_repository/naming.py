"""Map repository class names to their package and module path."""

from pathlib import Path

from repokit.inflection import snake_case

REPOSITORIES_PACKAGE = "repositories"


def repository_namespace(root_package: str, segments=()) -> str:
    """Return the dotted package a repository class is generated into."""
    parts = [root_package, REPOSITORIES_PACKAGE]
    parts.extend(snake_case(segment) for segment in segments)
    return ".".join(parts)


def module_path(base_path: Path, namespace: str, class_name: str) -> Path:
    """Return the file path of *class_name* inside *namespace* under *base_path*.

    ``app.repositories`` + ``UserProfile`` maps to
    ``<base_path>/app/repositories/user_profile.py``.
    """
    return Path(base_path, *namespace.split(".")) / f"{snake_case(class_name)}.py"
