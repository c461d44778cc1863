from .models import CommandLine, Recipe, RecipeSet
from .parser import HEADER_RE, load

__all__ = [
    "HEADER_RE",
    "CommandLine",
    "Recipe",
    "RecipeSet",
    "load",
]
