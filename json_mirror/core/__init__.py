from . import convention
from . import emitter
from . import enumeration
from . import schema
from . import utils
from .context import CONVENTIONS
from .errors import EmptyResult, InvalidInput, JsonMirrorError

__all__ = [
    "convention",
    "emitter",
    "enumeration",
    "schema",
    "utils",
    "CONVENTIONS",
    "EmptyResult",
    "InvalidInput",
    "JsonMirrorError",
]
