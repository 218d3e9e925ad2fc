import importlib.metadata

from .charset import *
from .config import *
from .errors import *
from .generator import *
from .pattern import *

PROJECT_NAME = "refcode"

try:
    VERSION = importlib.metadata.version(PROJECT_NAME)
except importlib.metadata.PackageNotFoundError:
    VERSION = "unknown"  # type: ignore
