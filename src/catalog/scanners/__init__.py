"""Source scanners used by component discovery."""

from .base import ComponentScanner, ScanContext
from .core import CoreComponentScanner
from .examples import ExampleScanner
from .remote import FALLBACK_COMPONENTS, RemoteScanner
from .theme import ThemeTokenScanner
from .themed import ThemedPackageScanner
from .unstyled import UnstyledPackageScanner

__all__ = [
    "ComponentScanner",
    "ScanContext",
    "CoreComponentScanner",
    "ExampleScanner",
    "FALLBACK_COMPONENTS",
    "RemoteScanner",
    "ThemeTokenScanner",
    "ThemedPackageScanner",
    "UnstyledPackageScanner",
]
