"""cssbuilder - fluent builder for CSS3 selector strings."""

from cssbuilder.builder import SelectorBuilder
from cssbuilder.config import BuilderConfig
from cssbuilder.errors import CountViolation, OrderViolation, SelectorError
from cssbuilder.facade import BuilderFacade, css_selector_builder
from cssbuilder.model import Combinator, FragmentKind
from cssbuilder.objects import Rectangle, from_json, get_json

__version__ = "0.1.0"

__all__ = [
    "BuilderConfig",
    "BuilderFacade",
    "Combinator",
    "CountViolation",
    "FragmentKind",
    "OrderViolation",
    "Rectangle",
    "SelectorBuilder",
    "SelectorError",
    "css_selector_builder",
    "from_json",
    "get_json",
]
