"""
Error middleware for the League Dashboard backend

Maps the exception families onto HTTP status codes with a JSON body.
"""
import logging

from aiohttp import web

from exceptions import DashboardException, NotFoundError, ValidationException

logger = logging.getLogger(f'{__name__}.ErrorMiddleware')


def status_for(error: Exception) -> int:
    """HTTP status for an exception raised by a query."""
    if isinstance(error, ValidationException):
        return 400
    if isinstance(error, NotFoundError):
        return 404
    return 500


@web.middleware
async def error_middleware(request: web.Request, handler):
    """Convert dashboard exceptions to {"error": message} responses."""
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except DashboardException as e:
        return web.json_response({'error': str(e)}, status=status_for(e))
    except Exception as e:
        logger.exception(f"Unhandled error for {request.method} {request.path}: {e}")
        return web.json_response({'error': str(e)}, status=500)
