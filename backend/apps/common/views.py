import time
import uuid

from django.core.cache import cache
from django.db import connections
from django.db.utils import OperationalError
from django.http import JsonResponse

from .logger import get_logger

logger = get_logger(__name__).bind(component="common", layer="health")

_CACHE_PROBE_KEY = "health:probe"


def _elapsed_ms(started: float) -> float:
    return round((time.monotonic() - started) * 1000, 2)


def _db_check(alias: str = "default"):
    started = time.monotonic()
    try:
        with connections[alias].cursor() as cursor:
            cursor.execute("SELECT 1")
    except OperationalError as exc:
        logger.warning("Database health check failed", alias=alias, error=str(exc))
        return {"status": "fail", "error": str(exc)}
    except Exception as exc:
        logger.error(
            "Database health check failed unexpectedly",
            alias=alias,
            error=str(exc),
            exception=exc.__class__.__name__,
        )
        return {"status": "fail", "error": str(exc), "exception": exc.__class__.__name__}
    latency = _elapsed_ms(started)
    logger.debug("Database health check succeeded", alias=alias, latency_ms=latency)
    return {"status": "ok", "latency_ms": latency}


def _cache_check():
    # The redis backend is configured to ignore errors, so a lost round trip
    # shows up as a mismatched read rather than an exception.
    started = time.monotonic()
    token = uuid.uuid4().hex
    try:
        cache.set(_CACHE_PROBE_KEY, token, timeout=5)
        echoed = cache.get(_CACHE_PROBE_KEY)
    except Exception as exc:
        logger.warning("Cache health check failed", error=str(exc))
        return {"status": "fail", "error": str(exc)}
    if echoed != token:
        logger.warning("Cache health check returned stale value")
        return {"status": "fail", "error": "cache round trip mismatch"}
    return {"status": "ok", "latency_ms": _elapsed_ms(started)}


def live_health(request):
    """Liveness probe: the process is up and serving requests."""
    logger.debug("Liveness probe served")
    return JsonResponse({"status": "alive"})


def ready_health(request):
    """Readiness probe: database and cache must both answer."""
    checks = {"database": _db_check(), "cache": _cache_check()}
    failing = [name for name, result in checks.items() if result.get("status") == "fail"]
    overall = "degraded" if failing else "ok"
    logger.info("Readiness probe evaluated", status=overall, failing_components=failing)
    return JsonResponse(
        {"status": overall, "checks": checks}, status=503 if failing else 200
    )
