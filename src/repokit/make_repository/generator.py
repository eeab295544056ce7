"""RepositoryGenerator renders the repository template into the application."""

import re
from pathlib import Path

from repokit.errors import AlreadyExists, MissingArgument, UnresolvedPlaceholder
from repokit.filesystem import Filesystem
from repokit.inflection import snake_case
from repokit.make_repository.naming import module_path, repository_namespace
from repokit.make_repository.request import GeneratorConfig, ScaffoldRequest
from repokit.templates.template_renderer import render_template

TEMPLATE_NAME = "repository.py.j2"

COMMENT_NAMESPACE_WHEN_NO_MODEL = "# Don't forget to update the model's namespace"
COMMENT_WHEN_NO_MODEL = "# Don't forget to update the model's name"
COMMENT_SETUP_MODEL = "# setup the model"

PLACEHOLDERS = (
    "[model_namespace]",
    "[comment_namespace_when_no_model]",
    "[comment_when_no_model]",
    "[model]",
)

_JINJA_MARKERS = re.compile(r"\{\{|\}\}|\{%|%\}")


class RepositoryGenerator:
    """Generates repository modules for a single application.

    Collaborators are injected so tests can substitute the filesystem or the
    template renderer.
    """

    type = "Repository"

    def __init__(self, config: GeneratorConfig, files=None, render=render_template):
        self._config = config
        self._files = files if files is not None else Filesystem()
        self._render = render

    def generate(self, request: ScaffoldRequest) -> Path:
        """Write the repository module for *request* and return its path.

        Raises:
            MissingArgument: If no class name was given.
            AlreadyExists: If the target module exists; nothing is written.
            UnresolvedPlaceholder: If rendering leaves a token behind; nothing
                is written.
        """
        if not request.class_name or not request.repository_class.strip():
            raise MissingArgument("Missing required argument class name")

        namespace = repository_namespace(self._config.root_package, request.segments)
        path = self.get_path(namespace, request.repository_class)

        if self._files.exists(path):
            raise AlreadyExists(f"{self.type} already exists!")

        source = self.build_class(request, namespace)
        self._files.make_directory(path.parent)
        self._files.put(path, source)
        return path

    def get_path(self, namespace: str, class_name: str) -> Path:
        return module_path(self._config.base_path, namespace, class_name)

    def build_class(self, request: ScaffoldRequest, namespace: str) -> str:
        """Render the template for *request* with every placeholder resolved."""
        stub = self._render(
            TEMPLATE_NAME,
            package=__package__,
            class_name=request.repository_class,
            namespace=namespace,
            module=snake_case(request.repository_class),
        )
        stub = replace_model_placeholders(stub, request)
        stub = "\n".join(line.rstrip() for line in stub.split("\n"))
        ensure_resolved(stub)
        return stub


def replace_model_placeholders(stub: str, request: ScaffoldRequest) -> str:
    """Substitute the bracket placeholders, in their fixed order."""
    stub = stub.replace("[model_namespace]", request.model_reference)

    if request.uses_default_model:
        stub = stub.replace("[comment_namespace_when_no_model]", COMMENT_NAMESPACE_WHEN_NO_MODEL)
        stub = stub.replace("[comment_when_no_model]", COMMENT_WHEN_NO_MODEL)
    else:
        stub = stub.replace("[comment_namespace_when_no_model]", "")
        stub = stub.replace("[comment_when_no_model]", COMMENT_SETUP_MODEL)

    return stub.replace("[model]", request.model)


def ensure_resolved(source: str) -> None:
    """Raise UnresolvedPlaceholder if any template token is left in *source*."""
    leftover = [p for p in PLACEHOLDERS if p in source]
    if _JINJA_MARKERS.search(source):
        leftover.append("{{ }}")
    if leftover:
        raise UnresolvedPlaceholder(f"Unresolved placeholders: {', '.join(leftover)}")
