"""Tree subpackage: the untyped JSON value layer underneath ``LockedJson``.

Re-exports the public API for the tree module:
- NodeKind: StrEnum of the six JSON kinds
- kind_of / describe_kind: classify a Python value as a JSON kind
- access: unguarded get / set / set-path / delete primitives
- coerce: strict conversions that raise TypeMismatchError
"""

from locked_json.tree import access, coerce
from locked_json.tree.nodes import JsonValue, NodeKind, describe_kind, kind_of

__all__ = ["JsonValue", "NodeKind", "access", "coerce", "describe_kind", "kind_of"]
