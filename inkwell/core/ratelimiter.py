"""Rate limiting for the HTTP frontend, backed by slowapi.

Every route shares one default limit keyed by client address: a sustained
per-second rate expressed per minute, plus a one-second burst ceiling.
"""

from typing import List

from slowapi import Limiter
from slowapi.util import get_remote_address


def default_limits(per_second: int, burst: int) -> List[str]:
    return [f"{per_second * 60}/minute", f"{burst}/second"]


def create_limiter(enabled: bool = True, per_second: int = 10, burst: int = 20) -> Limiter:
    """Build the limiter stored on ``app.state.limiter``.

    Args:
        enabled: When False every request passes; used by the test suite.
        per_second: Sustained requests per second per client.
        burst: Requests allowed within any single second.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=default_limits(per_second, burst),
        enabled=enabled,
        headers_enabled=False,
    )
