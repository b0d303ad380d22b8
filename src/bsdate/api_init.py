"""Default registry and converter bootstrap (import side-effect)."""
from .api import set_converter, set_registry
from .bootstrap import build_converter, build_registry

set_registry(build_registry())
set_converter(build_converter())
