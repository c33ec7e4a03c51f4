# guppy/indicators/base.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable
from enum import Enum
import inspect, re

class IndicatorType(str, Enum):
    LINE    = "line"      # one or more continuous lines (EMA, GMMA bundles)
    SIGNAL  = "signal"    # boolean/ternary signals (compression, trend change)

class Indicator(ABC):
    """
    Base class for every indicator in the catalogue.

    Concrete subclasses register themselves under their `slug` when the class
    is created, so `Indicator.create("gmma")` works once the defining module
    has been imported (see guppy.indicators.discover_all).
    """
    _registry: Dict[str, type["Indicator"]] = {}

    indicator_type: IndicatorType = IndicatorType.LINE
    category: str = "uncategorized"

    # string alias of indicator_type, kept in sync per subclass
    type: str = indicator_type.value

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if not inspect.isabstract(cls):
            slug = cls.__dict__.get("slug") or _to_slug(cls.__name__)
            if slug in Indicator._registry and Indicator._registry[slug] is not cls:
                raise RuntimeError(f"Duplicate indicator slug: {slug}")
            cls.slug = slug
            cls.type = cls.indicator_type.value
            Indicator._registry[slug] = cls

    @classmethod
    def create(cls, slug: str, **params) -> "Indicator":
        if slug not in cls._registry:
            raise KeyError(f"Unknown indicator: {slug}")
        return cls._registry[slug](**params)

    @classmethod
    def available(cls) -> list[str]:
        return sorted(cls._registry.keys())

    @classmethod
    def by_category(cls) -> dict[str, list[str]]:
        out: dict[str, list[str]] = {}
        for slug, klass in cls._registry.items():
            out.setdefault(klass.category, []).append(slug)
        for v in out.values():
            v.sort()
        return out

    @classmethod
    def meta(cls) -> dict:
        """Slug, display name, category and indicator type of this class."""
        return {
            "slug": getattr(cls, "slug", _to_slug(cls.__name__)),
            "name": getattr(cls, "name", cls.__name__),
            "category": cls.category,
            "type": cls.indicator_type.value,
        }

    @abstractmethod
    def required_columns(self) -> Iterable[str]: ...
    @abstractmethod
    def compute(self, df) -> Any: ...

def _to_slug(name: str) -> str:
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()
