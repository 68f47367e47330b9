"""recipe-watch - upstream release tracking for stone.yaml recipes."""

from .discovery import Repository as Repository
from .discovery import discover_packages as discover_packages
from .dispatch import dispatch as dispatch
from .recipe import Package as Package
from .recipe import PackageReport as PackageReport
from .recipe import decide as decide
from .recipe import resolve as resolve
from .settings import Settings as Settings
from . import recipe as recipe

__version__ = "0.1.0"
