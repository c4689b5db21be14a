from typing import Dict, Optional

from inty.values import Value


class Environment:
    """Represents a scope mapping identifiers to values, linked to its enclosing scope.

    Lookups fall through to the parent chain; insertions always land in the
    local table, so an inner `let` shadows an outer binding without touching it.
    """
    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.values: Dict[str, Value] = {}

    def get(self, name: str) -> Optional[Value]:
        if name in self.values:
            return self.values[name]
        if self.parent is not None:
            return self.parent.get(name)
        return None

    def put(self, name: str, value: Value) -> Optional[Value]:
        # returns the value this binding shadowed in the local table, if any
        previous = self.values.get(name)
        self.values[name] = value
        return previous

    def has(self, name: str) -> bool:
        return name in self.values

    def child(self) -> 'Environment':
        return Environment(parent=self)

    def depth(self) -> int:
        return 0 if self.parent is None else self.parent.depth() + 1
