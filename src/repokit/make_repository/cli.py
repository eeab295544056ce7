"""Click command for scaffolding repository classes."""

import sys
from pathlib import Path

import click

from repokit.errors import MissingArgument, RepositoryError
from repokit.make_repository.generator import RepositoryGenerator
from repokit.make_repository.request import MODEL_DEFAULT, GeneratorConfig, ScaffoldRequest
from repokit.project_root import resolve_base_path


@click.command("make-repository")
@click.argument("class_name", metavar="CLASS", required=False)
@click.option("-M", "--model", "model_reference", default=MODEL_DEFAULT, show_default=True,
              help="The model that will be used by your repository, as a full dotted path.")
@click.option("--base-path", type=click.Path(file_okay=False, path_type=Path),
              envvar="REPOKIT_BASE_PATH",
              help="Application root (default: enclosing git working tree, else cwd).")
@click.option("--root-package", default="app", show_default=True, envvar="REPOKIT_ROOT_PACKAGE",
              help="Root package of the application.")
def make_repository_cmd(class_name, model_reference, base_path, root_package):
    """Create a repository class in the <root-package>/repositories package."""
    config = GeneratorConfig(
        base_path=base_path if base_path is not None else resolve_base_path(),
        root_package=root_package,
    )
    request = ScaffoldRequest(class_name=class_name, model_reference=model_reference)
    generator = RepositoryGenerator(config)

    try:
        generator.generate(request)
    except MissingArgument as exc:
        raise click.UsageError(str(exc)) from exc
    except RepositoryError as exc:
        click.secho(str(exc), fg="red", err=True)
        sys.exit(1)

    click.secho(f"{generator.type} created successfully.", fg="green")
    click.echo(f"{click.style('Created Repository :', fg='green')} {request.repository_class}")


def register_commands(group: click.Group) -> click.Group:
    """Add the repokit commands to a host application's Click group."""
    group.add_command(make_repository_cmd)
    return group
