"""
Decorators for the League Dashboard backend

Reduces logging boilerplate in the aiohttp route handlers.
"""
from functools import wraps
from typing import Optional

from exceptions import NotFoundError, ValidationException
from utils.logging import set_request_context, get_contextual_logger, clear_context


def logged_route(route_name: Optional[str] = None):
    """
    Decorator for aiohttp handlers that adds request logging.

    This decorator automatically handles:
    - Setting request context (method, path, division)
    - Starting/ending operation timing with a trace id
    - Logging route start/completion/failure

    Exceptions are re-raised after logging so the error middleware can map
    them to a response.

    Example:
        @logged_route("league")
        async def get_league(request):
            ...
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(request, *args, **kwargs):
            name = route_name or func.__name__
            set_request_context(request=request, route=name)

            logger = get_contextual_logger(f'{func.__module__}.{func.__name__}')
            trace_id = logger.start_operation(f"{name}_route")

            try:
                logger.info(f"{request.method} {request.path} started")
                response = await func(request, *args, **kwargs)
                logger.info(f"{request.method} {request.path} completed", status=response.status)
                logger.end_operation(trace_id, "completed")
                return response

            except (ValidationException, NotFoundError) as e:
                logger.warning(f"{request.method} {request.path} rejected: {e}")
                logger.end_operation(trace_id, "rejected")
                raise
            except Exception as e:
                logger.error(f"{request.method} {request.path} failed", error=e)
                logger.end_operation(trace_id, "failed")
                raise
            finally:
                clear_context()

        return wrapper
    return decorator
