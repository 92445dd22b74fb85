"""Conversion between context records and context parameter sequences."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Type, TypeVar

from extensibility.context.base import ContextRecord
from extensibility.context.param import ContextParam
from extensibility.context.records import (
    AccountContext,
    ClientContext,
    OpportunityContext,
    ProspectContext,
    UserContext,
)

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=ContextRecord)


def hydrate(record_cls: Type[R], params: Iterable[ContextParam]) -> Tuple[R, List[ContextParam]]:
    """Build a fresh record from a parameter sequence.

    Args:
        record_cls: Context record class to build
        params: Incoming context parameters

    Returns:
        (record, unmatched) where unmatched keeps the parameters the record
        did not recognize, in their original order
    """
    record = record_cls()
    unmatched = []
    for param in params:
        if not record.init_from(param):
            unmatched.append(param)

    if unmatched:
        logger.debug(
            f"{record_cls.__name__}: {len(unmatched)} unmatched parameter(s): "
            f"{[p.key for p in unmatched]}"
        )
    return record, unmatched


def serialize(*records: Optional[ContextRecord]) -> List[ContextParam]:
    """Concatenate the parameters of several records (None entries skipped)."""
    params = []
    for record in records:
        if record is not None:
            params.extend(record.to_params())
    return params


@dataclass
class HostContext:
    """All context records received from the host in one exchange.

    Record kinds the host sent nothing for stay None. Parameters no record
    recognizes are kept in ``unknown`` so they can be sent back unchanged.
    """

    account: Optional[AccountContext] = None
    user: Optional[UserContext] = None
    client: Optional[ClientContext] = None
    opportunity: Optional[OpportunityContext] = None
    prospect: Optional[ProspectContext] = None
    unknown: List[ContextParam] = field(default_factory=list)

    # (attribute, record class), in the order parameters are offered to them
    RECORDS = (
        ("account", AccountContext),
        ("user", UserContext),
        ("client", ClientContext),
        ("opportunity", OpportunityContext),
        ("prospect", ProspectContext),
    )

    @classmethod
    def from_params(cls, params: Iterable[ContextParam]) -> HostContext:
        """Hydrate every record kind from one mixed parameter sequence."""
        context = cls()
        for param in params:
            if not context.init_from(param):
                context.unknown.append(param)

        for attr, _ in cls.RECORDS:
            record = getattr(context, attr)
            if record is not None and not record.has_identity:
                logger.warning(
                    f"{type(record).__name__} received without its "
                    f"'{record.IDENTIFIER}' attribute"
                )

        if context.unknown:
            logger.debug(f"Unknown context keys: {[p.key for p in context.unknown]}")
        return context

    def init_from(self, param: ContextParam) -> bool:
        """Offer one parameter to each record kind until one accepts it.

        Records are created on first use, so a kind only appears once the
        host sent at least one of its keys.
        """
        for attr, record_cls in self.RECORDS:
            if param.key not in record_cls.KEYS:
                continue
            record = getattr(self, attr)
            if record is None:
                record = record_cls()
                setattr(self, attr, record)
            return record.init_from(param)
        return False

    def to_params(self) -> List[ContextParam]:
        """Serialize all records, followed by the unknown parameters verbatim."""
        records = [getattr(self, attr) for attr, _ in self.RECORDS]
        return serialize(*records) + list(self.unknown)
