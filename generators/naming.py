"""
Name inflection helpers used to derive file paths and class names.

Covers the subset of English inflection the generators need:
snake case, Pascal case, and English plural/singular forms.
"""
from __future__ import annotations

import keyword
import re
from typing import List

from generators.exceptions import InvalidIdentifierError

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

_UNCOUNTABLE = {
    "equipment", "information", "rice", "money", "species",
    "series", "fish", "sheep", "jeans", "police", "news", "metadata",
}

_IRREGULAR = {
    "person": "people",
    "man": "men",
    "woman": "women",
    "child": "children",
    "sex": "sexes",
    "move": "moves",
    "zombie": "zombies",
    "ox": "oxen",
    "mouse": "mice",
    "goose": "geese",
    "tooth": "teeth",
    "foot": "feet",
}
_IRREGULAR_PLURALS = {plural: singular for singular, plural in _IRREGULAR.items()}

# Rules are tried in order, first match wins.
_PLURAL_RULES = [
    (re.compile(r"(quiz)$"), r"\1zes"),
    (re.compile(r"(matr|vert|ind)(?:ix|ex)$"), r"\1ices"),
    (re.compile(r"(x|ch|ss|sh|z)$"), r"\1es"),
    (re.compile(r"([^aeiouy]|qu)y$"), r"\1ies"),
    (re.compile(r"(?:([^f])fe|([lr])f)$"), r"\1\2ves"),
    (re.compile(r"sis$"), "ses"),
    (re.compile(r"(bu|statu|alia)s$"), r"\1ses"),
    (re.compile(r"(octop|vir)us$"), r"\1i"),
    (re.compile(r"(buffal|tomat|her)o$"), r"\1oes"),
    (re.compile(r"s$"), "s"),
    (re.compile(r"$"), "s"),
]

_SINGULAR_RULES = [
    (re.compile(r"(quiz)zes$"), r"\1"),
    (re.compile(r"(matr)ices$"), r"\1ix"),
    (re.compile(r"(vert|ind)ices$"), r"\1ex"),
    (re.compile(r"(octop|vir)(?:us|i)$"), r"\1us"),
    (re.compile(r"(alias|status|bus)(?:es)?$"), r"\1"),
    (re.compile(r"(buffal|tomat|her)oes$"), r"\1o"),
    (re.compile(r"(x|ch|ss|sh|z)es$"), r"\1"),
    (re.compile(r"([^aeiouy]|qu)ies$"), r"\1y"),
    (re.compile(r"([lr])ves$"), r"\1f"),
    (re.compile(r"([^f])ves$"), r"\1fe"),
    (re.compile(r"(analy|ba|diagno|parenthe|progno|synop|the)ses$"), r"\1sis"),
    (re.compile(r"ss$"), "ss"),
    (re.compile(r"s$"), ""),
]


def underscore(name: str) -> str:
    """``SearchPosts`` / ``search-posts`` / ``Admin::Post`` -> ``search_posts`` / ``admin/post``."""
    word = name.strip().replace("::", "/")
    word = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", word)
    word = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", word)
    word = re.sub(r"[-\s]+", "_", word)
    return word.lower()


def camelize(name: str) -> str:
    """``search_posts`` -> ``SearchPosts``."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


def _inflect(word: str, table: dict, rules: list) -> str:
    # Only the last underscore-separated segment is inflected: blog_post -> blog_posts
    head, sep, last = word.rpartition("_")
    lower = last.lower()
    if not lower or lower in _UNCOUNTABLE:
        return word
    if lower in table:
        return f"{head}{sep}{table[lower]}"
    for pattern, replacement in rules:
        if pattern.search(lower):
            return f"{head}{sep}{pattern.sub(replacement, lower, count=1)}"
    return word


def pluralize(word: str) -> str:
    if word.lower().rpartition("_")[2] in _IRREGULAR_PLURALS:
        return word
    return _inflect(word, _IRREGULAR, _PLURAL_RULES)


def singularize(word: str) -> str:
    if word.lower().rpartition("_")[2] in _IRREGULAR:
        return word
    return _inflect(word, _IRREGULAR_PLURALS, _SINGULAR_RULES)


def _identifier_problem(value: str) -> str | None:
    if not value:
        return "must not be empty"
    if not _IDENTIFIER.match(value):
        return "must start with a letter or underscore and contain only letters, digits and underscores"
    if keyword.iskeyword(value):
        return "is a reserved Python keyword"
    return None


def validate_identifier(value: str, *, kind: str = "name") -> str:
    """Return ``value`` unchanged, or raise ``InvalidIdentifierError``."""
    problem = _identifier_problem(value)
    if problem:
        raise InvalidIdentifierError(value, kind=kind, reason=problem)
    return value


def split_name(name: str, *, kind: str = "name") -> List[str]:
    """
    Normalise a possibly namespaced name into validated snake_case segments.

    ``Admin/SearchPosts`` -> ``["admin", "search_posts"]``.
    """
    segments = underscore(name).split("/")
    for segment in segments:
        problem = _identifier_problem(segment)
        if problem:
            raise InvalidIdentifierError(name, kind=kind, reason=problem)
    return segments


def tool_class_name(name: str, segments: List[str], *, kind: str = "name") -> str:
    """
    Pascal-case ``segments`` and append ``Tool``: ``["admin", "show", "post"]`` -> ``AdminShowPostTool``.

    ``name`` is the name as given and is what the error reports.
    """
    stems = [camelize(segment) for segment in segments]
    if not all(stems):
        raise InvalidIdentifierError(name, kind=kind, reason="does not produce a class name")
    class_name = "".join(stems) + "Tool"
    problem = _identifier_problem(class_name)
    if problem:
        raise InvalidIdentifierError(name, kind=kind, reason=f"does not produce a valid class name ({class_name!r})")
    return class_name
