"""Parsing of project search clauses.

Search roots are declared with the OSGi-style parameter syntax used by bnd
headers::

    root1;depth=2, root2;depth=1, "dir with, comma"

Clauses are separated by commas. Within a clause the first element is the
root directory and the remaining ``name=value`` elements are attributes.
Values may be double-quoted to protect separators.
"""

from workspace_scanner.exceptions import ConfigurationError
from workspace_scanner.models import SearchClause


def _split(text: str, separator: str) -> list[str]:
    """Split text on separator, ignoring separators inside double quotes."""
    parts = []
    current = []
    quoted = False
    for char in text:
        if char == '"':
            quoted = not quoted
        elif char == separator and not quoted:
            parts.append(''.join(current))
            current = []
            continue
        current.append(char)

    if quoted:
        raise ConfigurationError(f"Unterminated quote in search clauses: {text}")

    parts.append(''.join(current))
    return parts


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def parse_parameters(text: str) -> list[tuple[str, dict[str, str]]]:
    """Parse a parameter header into ordered (key, attributes) pairs.

    Args:
        text: Header text such as ``root1;depth=2,root2``

    Returns:
        List of (key, attribute dict) tuples in declaration order.
        Blank text yields an empty list.

    Raises:
        ConfigurationError: If a clause is empty, an attribute has no '=',
                            or a key or attribute name is repeated
    """
    if not text or not text.strip():
        return []

    parameters = []
    seen = set()

    for clause in _split(text, ','):
        elements = _split(clause, ';')
        key = _unquote(elements[0])
        if not key:
            raise ConfigurationError(f"Empty clause in search clauses: {text}")
        if key in seen:
            raise ConfigurationError(f"Duplicate search root: {key}")
        seen.add(key)

        attributes = {}
        for element in elements[1:]:
            name, sep, value = element.partition('=')
            name = name.strip()
            if not sep or not name:
                raise ConfigurationError(
                    f"Malformed attribute {element.strip()!r} in clause {key}"
                )
            if name in attributes:
                raise ConfigurationError(f"Duplicate attribute {name!r} in clause {key}")
            attributes[name] = _unquote(value)

        parameters.append((key, attributes))

    return parameters


def parse_clauses(text: str) -> list[SearchClause]:
    """Parse project search clauses.

    Example:
        >>> parse_clauses("root1;depth=2,root2")
        [SearchClause(root=PosixPath('root1'), depth=2), SearchClause(root=PosixPath('root2'), depth=1)]
    """
    return [
        SearchClause.from_attributes(key, attributes)
        for key, attributes in parse_parameters(text)
    ]
