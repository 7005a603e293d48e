import time
import logging
from functools import wraps

logger = logging.getLogger(__name__)


def timed_step(name):
    """Log how long the wrapped step took, at DEBUG level"""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            result = func(*args, **kwargs)
            elapsed = time.perf_counter() - start
            logger.debug(f"[{name}] took {elapsed:.4f} seconds")
            return result
        return wrapper
    return decorator


def log_search_summary(name, stats):
    """One INFO line per finished search, keyed by the counters in stats"""
    details = ", ".join(f"{key.replace('_', ' ')}={value}" for key, value in stats.items())
    logger.info(f"[{name}] {details}")
