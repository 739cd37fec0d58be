from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.logging import bind_request_context

CORRELATION_ID_HEADER = "X-Correlation-ID"
USER_EMAIL_HEADER = "X-User-Email"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind correlation id and acting user to the logging context of a request.

    The acting user comes from the ``X-User-Email`` header set by the
    authenticating proxy and is recorded as the author of saved overrides.
    """

    async def dispatch(self, request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_ID_HEADER),
            user_email=request.headers.get(USER_EMAIL_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ):
            response = await call_next(request)
        return response
