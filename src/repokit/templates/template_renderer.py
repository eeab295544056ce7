"""Load and render Jinja2 templates from a caller's templates subpackage."""

import importlib.resources

import jinja2


def load_template(template_name: str, *, package: str) -> str:
    """Return the raw text of a template shipped in ``{package}.templates``.

    Raises:
        FileNotFoundError: If the template does not exist.
    """
    templates = importlib.resources.files(f"{package}.templates")
    return templates.joinpath(template_name).read_text(encoding="utf-8")


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Load a Jinja2 template by name and render it with the given arguments.

    Args:
        template_name: Template filename (e.g. "repository.py.j2")
        package: The caller's package (pass __package__). Templates are loaded
            from a ``templates`` subpackage beneath it.
        **kwargs: Template variables. Every variable the template uses must
            be supplied.

    Returns:
        The rendered template string, trailing newline preserved.
    """
    source = load_template(template_name, package=package)
    template = jinja2.Template(
        source, undefined=jinja2.StrictUndefined, keep_trailing_newline=True,
    )
    return template.render(**kwargs)
