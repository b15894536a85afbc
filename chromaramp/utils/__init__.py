from .default import value_or_default
from .ordering import is_non_decreasing
from .copying import clone_value

__all__ = ["value_or_default", "is_non_decreasing", "clone_value"]
