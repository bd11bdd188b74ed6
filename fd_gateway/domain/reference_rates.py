"""Static reference rates used to flag outlier deposit inputs"""

import logging
from typing import Tuple

# (max tenure in years, inclusive) -> prevailing rate in percent
REFERENCE_RATE_TABLE: Tuple[Tuple[float, float], ...] = (
    (1.0, 5.0),
    (3.0, 6.0),
)
LONG_TERM_REFERENCE_RATE = 7.0


def reference_rate(tenure_years: float) -> float:
    """
    Prevailing FD rate for a tenure bucket.

    Buckets:
    - up to 1 year:  5%
    - up to 3 years: 6%
    - longer:        7%

    Defined for positive tenures; callers validate before looking up.
    """
    logging.debug("Reference rate lookup", extra={"tenure_years": tenure_years})
    for max_tenure, rate in REFERENCE_RATE_TABLE:
        if tenure_years <= max_tenure:
            return rate
    return LONG_TERM_REFERENCE_RATE
