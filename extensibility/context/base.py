"""Base class shared by all context records."""

from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Dict, List, Mapping, Optional

from pydantic import BaseModel

from extensibility.context.param import ContextParam


def key_table(mapping: Dict[Enum, str]) -> Mapping[str, str]:
    """Freeze a context key -> attribute name mapping.

    Args:
        mapping: Context key enum members mapped to record attribute names

    Returns:
        Read-only mapping keyed by the keys' string values
    """
    return MappingProxyType({key.value: attr for key, attr in mapping.items()})


class ContextRecord(BaseModel):
    """Typed view of one context domain (account, user, client, ...).

    Subclasses declare their attributes as optional string fields and a
    ``KEYS`` table mapping each context key to the attribute it fills. The
    marshalling in both directions is driven by that table alone.

    A record is mutated in place while it is being hydrated and is not safe
    to hydrate from several threads at once.
    """

    KEYS: ClassVar[Mapping[str, str]] = MappingProxyType({})
    # Attribute that identifies the record; None for records without identity
    IDENTIFIER: ClassVar[Optional[str]] = "id"

    def init_from(self, param: ContextParam) -> bool:
        """Attempt to initialize one attribute from a context parameter.

        Args:
            param: Incoming context parameter

        Returns:
            True if the parameter key belongs to this record and the attribute
            was set, False if the key is unknown (record left untouched)
        """
        attr = self.KEYS.get(param.key)
        if attr is None:
            return False
        setattr(self, attr, param.value)
        return True

    def to_params(self) -> List[ContextParam]:
        """Convert the current state to context parameters.

        Attributes holding None are omitted. Output follows the key table
        order.
        """
        params = []
        for key, attr in self.KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                params.append(ContextParam(key=key, value=value))
        return params

    @property
    def has_identity(self) -> bool:
        """Whether the identifying attribute is set (always True without one)."""
        if self.IDENTIFIER is None:
            return True
        return bool(getattr(self, self.IDENTIFIER))
