from .attributes import class_tokens, compose_class, merge_attributes
from .string_template import StringTemplate

__all__ = [
    "StringTemplate",
    "merge_attributes",
    "compose_class",
    "class_tokens",
]
