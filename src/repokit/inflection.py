"""Case and plural conversions used for module paths and table names."""

import re

_IRREGULAR = {
    "child": "children",
    "foot": "feet",
    "goose": "geese",
    "man": "men",
    "mouse": "mice",
    "person": "people",
    "tooth": "teeth",
    "woman": "women",
}

_UNCOUNTABLE = frozenset({
    "audio", "data", "equipment", "feedback", "fish", "information",
    "metadata", "money", "news", "series", "sheep", "species",
})

_F_TO_VES = {
    "half": "halves",
    "knife": "knives",
    "leaf": "leaves",
    "life": "lives",
    "shelf": "shelves",
    "wife": "wives",
    "wolf": "wolves",
}

_NAMESPACE_SEPARATORS = re.compile(r"[.\\]")


def capitalize_first(name: str) -> str:
    """Upper-case the first character only, leaving the rest untouched."""
    return name[:1].upper() + name[1:]


def class_basename(qualified: str) -> str:
    """Return the last segment of a dotted or backslash-separated name."""
    return _NAMESPACE_SEPARATORS.split(qualified)[-1]


def snake_case(name: str) -> str:
    """Convert ``OrderItem``/``HTTPClient`` to ``order_item``/``http_client``."""
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    return name.replace("-", "_").lower()


def pluralize(word: str) -> str:
    """Return the English plural of a single lower-case word."""
    if not word or word in _UNCOUNTABLE:
        return word
    if word in _IRREGULAR:
        return _IRREGULAR[word]
    for singular, plural in _F_TO_VES.items():
        if word.endswith(singular):
            return word[: -len(singular)] + plural
    if re.search(r"[^aeiou]y$", word):
        return word[:-1] + "ies"
    if re.search(r"(s|x|z|ch|sh)$", word):
        return word + "es"
    return word + "s"


def table_name_for(name: str) -> str:
    """Derive the conventional table name for a model class name.

    Namespace qualifiers are dropped and only the last word is pluralised,
    so ``app.models.OrderItem`` becomes ``order_items``.
    """
    words = snake_case(class_basename(name)).split("_")
    words[-1] = pluralize(words[-1])
    return "_".join(words)
