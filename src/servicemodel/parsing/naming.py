"""Naming policy for synthetic entity names."""

from __future__ import annotations


def uppercase_first(name: str) -> str:
    """Uppercase the first character of a name, leaving the rest untouched.

    Args:
        name (str): Property name.

    Returns:
        str: Name with an uppercase first character.
    """
    return name[:1].upper() + name[1:]


def property_entity_name(enclosing_name: str, property_name: str) -> str:
    """Name the entity of an anonymous property schema.

    Args:
        enclosing_name (str): Name of the enclosing structure.
        property_name (str): Property name.

    Returns:
        str: Synthetic entity name.
    """
    return enclosing_name + uppercase_first(property_name)


def array_entity_names(enclosing_name: str) -> tuple[str, str]:
    """Derive the element and list names for an array with anonymous items.

    English-only approximation: a trailing "s" (any case) marks a plural. A
    plural name keeps naming the list and loses the "s" for the element; a
    singular name names the element and gains an "s" for the list.

    Args:
        enclosing_name (str): Name proposed for the array field.

    Returns:
        tuple[str, str]: Element entity name and list entity name.
    """
    if enclosing_name[-1:].lower() == "s":
        return enclosing_name[:-1], enclosing_name
    return enclosing_name, f"{enclosing_name}s"


def combinator_namespace(enclosing_name: str, index: int) -> str:
    """Name the synthetic namespace of the `index`-th combinator member.

    Args:
        enclosing_name (str): Name of the combined structure.
        index (int): Zero-based position of the member schema.

    Returns:
        str: Namespace prefix, numbered from 1.
    """
    return f"{enclosing_name}{index + 1}"
