"""Value objects for one make-repository invocation."""

from dataclasses import dataclass
from pathlib import Path

from repokit.inflection import capitalize_first, class_basename

MODEL_DEFAULT = "app.your.Model"


@dataclass(frozen=True)
class ScaffoldRequest:
    """The class name and model reference supplied by the user."""

    class_name: str | None
    model_reference: str = MODEL_DEFAULT

    @property
    def segments(self) -> list[str]:
        """Nested package segments given with ``/``, excluding the class."""
        return [s for s in self.class_name.split("/")[:-1] if s]

    @property
    def repository_class(self) -> str:
        return capitalize_first(self.class_name.split("/")[-1])

    @property
    def model(self) -> str:
        return class_basename(self.model_reference)

    @property
    def uses_default_model(self) -> bool:
        return self.model_reference == MODEL_DEFAULT


@dataclass(frozen=True)
class GeneratorConfig:
    """Where the application lives and its root package."""

    base_path: Path
    root_package: str = "app"
