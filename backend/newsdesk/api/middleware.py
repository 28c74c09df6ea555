"""HTTP Middleware — HEAD answered by the matching GET route.

APIRoute only dispatches the methods it declares, so without this every
HEAD request would fall through to "Path not found".
"""

from fastapi import Request, Response


async def answer_head_as_get(request: Request, call_next):
    """Run HEAD as GET, then send the GET status and headers with no body."""
    if request.method != "HEAD":
        return await call_next(request)

    request.scope["method"] = "GET"
    response = await call_next(request)
    async for _ in response.body_iterator:
        pass
    return Response(status_code=response.status_code, headers=dict(response.headers))
