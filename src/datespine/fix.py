"""
FixToolkit: value generators for FIX order messages in test scripts.

Order-entry scripts need a fresh ``ClOrdID`` (11) per message, a
``TransactTime`` (60) near "now", and the odd random token or quantity.
The generators read time from a :class:`DateToolkit`, so a toolkit built
with a fixed clock makes the generated ids and times deterministic too.

Examples:
    >>> import random
    >>> from datetime import datetime
    >>> toolkit = DateToolkit(clock=lambda: datetime(2017, 5, 30, 14, 0))
    >>> fix = FixToolkit(toolkit, rng=random.Random(7))
    >>> fix.generate_cl_ord_id()
    '1496152800001'
    >>> fix.generate_cl_ord_id()
    '1496152800002'
    >>> fix.generate_transact_time("h+1")
    datetime.datetime(2017, 5, 30, 15, 0)

Tags:
    fix, order-id, generator, date-spine
"""

from __future__ import annotations

import itertools
import random
import struct
from datetime import datetime

from datespine.core.errors import ValidationError
from datespine.core.logging import get_logger
from datespine.core.timestamps import to_epoch_millis
from datespine.toolkit import DateToolkit

logger = get_logger(__name__)


class FixToolkit:
    """
    Per-session FIX value generators.

    Args:
        toolkit: Source of the current time (a default toolkit when omitted)
        rng: Random source for hex strings and integers
    """

    def __init__(self, toolkit: DateToolkit | None = None, rng: random.Random | None = None):
        self.toolkit = toolkit or DateToolkit()
        self._rng = rng or random.Random()
        self._next_id = itertools.count(1)

    def generate_cl_ord_id(self) -> str:
        """
        Epoch milliseconds of the current time plus a per-instance counter.

        The counter starts at 1 and grows by one per call, so ids drawn in
        the same millisecond still differ.
        """
        cl_ord_id = str(to_epoch_millis(self.toolkit.now()) + next(self._next_id))
        logger.debug("cl_ord_id_generated", cl_ord_id=cl_ord_id)
        return cl_ord_id

    def generate_transact_time(self, modify_pattern: str = "") -> datetime:
        """Current naive UTC time with ``modify_pattern`` applied."""
        return self.toolkit.get_date_time(modify_pattern)

    def generate_hex_string(self) -> str:
        """Hex digits of the IEEE-754 bits of a random double in [0, 1)."""
        bits = struct.unpack(">Q", struct.pack(">d", self._rng.random()))[0]
        return format(bits, "x")

    def generate_integer(self, bound: int) -> int:
        """Random integer in ``[0, bound)``."""
        if isinstance(bound, bool) or not isinstance(bound, int) or bound <= 0:
            raise ValidationError(f"Bound must be a positive integer, got {bound!r}", field="bound", value=bound)
        return self._rng.randrange(bound)


__all__ = ["FixToolkit"]
