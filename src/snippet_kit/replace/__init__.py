from .engine import ReplaceEngine
from .escapes import decode_escapes
from .models import ReplaceOperation, ReplaceStep
from .store import OperationPersistence, OperationStore, dump_operations, load_operations
from .template import expand_template

__all__ = [
    "OperationPersistence",
    "OperationStore",
    "ReplaceEngine",
    "ReplaceOperation",
    "ReplaceStep",
    "decode_escapes",
    "dump_operations",
    "expand_template",
    "load_operations",
]
