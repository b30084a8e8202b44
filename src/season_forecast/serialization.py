import dataclasses
from enum import Enum
from typing import Any


def to_json_dict(obj: Any) -> Any:
    """Convert output records into JSON-safe primitives.

    Dataclasses become dicts, tuples become lists and enums become their values.
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_json_dict(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (list, tuple)):
        return [to_json_dict(item) for item in obj]
    if isinstance(obj, dict):
        return {str(k): to_json_dict(v) for k, v in obj.items()}
    return obj
