"""Repository base class: a has-a wrapper that forwards calls to an ORM model.

Methods a repository does not define are looked up on the wrapped model, so
``repo.find_all()`` returns exactly what ``model.find_all()`` returns. Methods
decorated with :func:`repository_method` are overrides: before they run, the
repository binds the model to ``self.model`` and its table name to
``self.current_table``.
"""

import functools
import importlib

from repokit.errors import NoModelBound
from repokit.inflection import table_name_for

_OVERRIDE_MARKER = "__repository_method__"


def repository_method(func):
    """Register *func* as a repository override that runs with the model bound."""

    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        self.bind_model()
        return func(self, *args, **kwargs)

    setattr(wrapper, _OVERRIDE_MARKER, True)
    return wrapper


def load_model(path: str):
    """Import and return the model class named by a dotted path.

    Backslash separators are accepted and treated as dots.
    """
    module_name, _, attr = path.replace("\\", ".").rpartition(".")
    if not module_name:
        raise ImportError(f"Model path must include a module: {path}")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise ImportError(f"Model {attr!r} not found in {module_name}") from exc


class Repository:
    """Wraps one model object and forwards undefined calls to it."""

    model_path = None
    _overrides: dict = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        overrides = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if getattr(attr, _OVERRIDE_MARKER, False) is True:
                    overrides[name] = attr
                else:
                    # redefined without the decorator
                    overrides.pop(name, None)
        cls._overrides = overrides

    def __init__(self, model=None):
        self._model = model
        self.model = None
        self.current_table = None

    @classmethod
    def overrides(cls) -> dict:
        """Return the registered override methods keyed by name."""
        return dict(cls._overrides)

    def handles(self, method: str) -> bool:
        return method in self._overrides

    def call(self, method: str, *args, **kwargs):
        """Invoke *method* as an override if registered, else forward it."""
        if self.handles(method):
            return getattr(self, method)(*args, **kwargs)
        return self.forward(method, *args, **kwargs)

    def forward(self, method: str, *args, **kwargs):
        """Call *method* on the wrapped model and return its result unchanged.

        Raises:
            NoModelBound: If the repository wraps no model.
        """
        return getattr(self._wrapped(), method)(*args, **kwargs)

    def bind_model(self) -> "Repository":
        """Bind the wrapped model and its table name; returns self."""
        self.model = self._wrapped()
        return self.set_table(self.get_table())

    def set_table(self, table: str) -> "Repository":
        self.current_table = table
        return self

    def get_table(self) -> str:
        """Return the model's explicit table, or the name derived from its class."""
        model = self._wrapped()
        for attr in ("table", "__tablename__"):
            explicit = getattr(model, attr, None)
            if isinstance(explicit, str) and explicit:
                return explicit
        model_class = model if isinstance(model, type) else type(model)
        return table_name_for(model_class.__name__)

    def _wrapped(self):
        model = self.__dict__.get("_model")
        if model is None:
            raise NoModelBound(f"{type(self).__name__} has no model bound")
        return model

    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        return getattr(self._wrapped(), name)
