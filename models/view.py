# models/view.py
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple

class ViewResult(NamedTuple):
    view_name: str
    context: Mapping[str, Any]

def view(view_name: str, **context: Any) -> ViewResult:
    return ViewResult(view_name, MappingProxyType(context))
