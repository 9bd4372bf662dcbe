"""Account number generation."""

import random
from typing import Container

from bank_ledger.config import DEFAULT_BANK_PREFIX, is_valid_prefix
from bank_ledger.exceptions import ConfigurationError
from bank_ledger.logging import get_logger
from bank_ledger.models.enums import AccountKind

logger = get_logger(__name__)


class AccountNumberGenerator:
    """Generate account numbers of the form ``<prefix><7 digits><tag>``.

    The middle segment is drawn uniformly from [0, 10 000 000) and
    zero-padded. On a clash with an already issued number the segment is
    drawn again (not incremented) until a fresh number comes up.

    Parameters
    ----------
    prefix : str
        Seven-digit bank prefix.
    rng : random.Random | None
        Random source. Anything with a ``randrange`` method works, which
        lets tests script the drawn values.
    seed : int | None
        Seed for the default random source when ``rng`` is not given.
    """

    SEGMENT_RANGE = 10_000_000

    def __init__(
        self,
        prefix: str = DEFAULT_BANK_PREFIX,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        if not is_valid_prefix(prefix):
            raise ConfigurationError(f"Bank prefix must be 7 digits, got {prefix!r}")
        self.prefix = prefix
        self.rng = rng or random.Random(seed)

    def generate(self, kind: AccountKind, issued: Container[str] = ()) -> str:
        """Return a number for ``kind`` that is not in ``issued``.

        The caller must record the result as issued; this method does not.
        """
        while True:
            segment = self.rng.randrange(self.SEGMENT_RANGE)
            number = f"{self.prefix}{segment:07d}{kind.tag}"
            if number not in issued:
                return number
            logger.debug("Account number %s already issued, drawing again", number)
