"""Rate limiting global / Global rate limiter.

Utilise slowapi pour limiter les requetes par IP. Seules les routes decorees
avec ``@limiter.limit`` sont limitees ; sondes et /metrics ne le sont pas.
Only routes decorated with ``@limiter.limit`` are limited; probes and
/metrics are not.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from country_directory.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
