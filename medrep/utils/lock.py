import logging
import uuid
from contextlib import contextmanager

from django.conf import settings
from django.core.cache import cache
from redis.exceptions import LockError

logger = logging.getLogger(__name__)


@contextmanager
def try_cache_lock(key: str, *, timeout: int | None = None):
    """Yields True if the lock was acquired, False if someone else holds it.

    Only the holder releases the lock. A holder that outlives ``timeout``
    leaves alone whatever lock has since been taken under the same key.
    """
    timeout = timeout or settings.APPROVAL_LOCK_TIMEOUT
    if hasattr(cache, "lock"):
        with _redis_lock(key, timeout) as acquired:
            yield acquired
        return

    token = uuid.uuid4().hex
    acquired = cache.add(key, token, timeout)
    try:
        yield acquired
    finally:
        if acquired and cache.get(key) == token:
            cache.delete(key)


@contextmanager
def _redis_lock(key, timeout):
    lock = cache.lock(key, timeout=timeout)
    acquired = lock.acquire(blocking=False)
    try:
        yield acquired
    finally:
        if acquired:
            try:
                lock.release()
            except LockError:
                logger.warning("Lock %s expired before its holder released it", key)
