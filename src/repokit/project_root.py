"""Locate the application root that generated files are written under."""

from pathlib import Path

from git import InvalidGitRepositoryError, NoSuchPathError, Repo


def resolve_base_path(start=None) -> Path:
    """Return the git working tree root containing *start*.

    Falls back to *start* itself (default: the current directory) when it is
    not inside a git repository.
    """
    start = Path(start) if start is not None else Path.cwd()
    try:
        repo = Repo(start, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return start
    if repo.working_tree_dir is None:
        return start
    return Path(repo.working_tree_dir)
