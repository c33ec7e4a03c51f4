# guppy/indicators/__init__.py
"""
Indicator discovery.

Indicator classes register themselves when their module is imported, so the
registry is only complete after the modules below guppy.indicators are loaded.
"""

from __future__ import annotations
import importlib
import pkgutil
from typing import List


def discover_all(package_name: str = __name__) -> List[str]:
    """
    Import every module below `package_name` (recursively).

    Returns the imported module names in walk order.
    """
    pkg = importlib.import_module(package_name)
    return [
        importlib.import_module(info.name).__name__
        for info in pkgutil.walk_packages(pkg.__path__, f"{package_name}.")
    ]


def discover_category(category: str, package_name: str = __name__) -> List[str]:
    """Import one category subpackage only, e.g. discover_category("signal")."""
    if not category or "." in category:
        raise ValueError("category must be a simple subpackage name like 'trend'")
    return discover_all(f"{package_name}.{category}")
