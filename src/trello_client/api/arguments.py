"""
Request Arguments

Caller-supplied query parameters and their encoding into
``(name, value)`` pairs for the request URL.
"""

from typing import List, Mapping, Optional, Tuple


class Arguments(dict):
    """
    Mapping from parameter name to a string or a sequence of strings.
    
    Example:
        Arguments(fields="name,url", filter=["open", "starred"])
    """
    
    @classmethod
    def coerce(cls, value: Optional[Mapping]) -> "Arguments":
        """Return ``value`` as an Arguments instance (``None`` gives an empty one)."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise TypeError(f"Arguments must be a mapping, got {type(value).__name__}")
        return cls(value)
    
    def to_query_params(self) -> List[Tuple[str, str]]:
        """
        Flatten the mapping into query parameter pairs.
        
        Pairs are ordered by name (compared as strings); a sequence
        value contributes one pair per element in its original order.
        ``None`` values are skipped.
        
        Returns:
            List of ``(name, value)`` string pairs.
        """
        params = []
        for name in sorted(self, key=str):
            value = self[name]
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                params.extend((str(name), _to_str(item)) for item in value)
            else:
                params.append((str(name), _to_str(value)))
        return params


def _to_str(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
