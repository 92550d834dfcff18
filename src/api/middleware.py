"""
Method override for HTML forms.

Browsers only submit GET and POST, so edit and delete forms POST to
"/campgrounds/<id>/edit?_method=PUT" or "/campgrounds/<id>?_method=DELETE".
This middleware rewrites the request method before routing happens.
"""
from urllib.parse import parse_qs

OVERRIDABLE_METHODS = {"PUT", "PATCH", "DELETE"}


class MethodOverrideMiddleware:
    def __init__(self, app, param: str = "_method"):
        self.app = app
        self.param = param

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http" and scope["method"] == "POST":
            query = parse_qs(scope.get("query_string", b"").decode("latin-1"))
            override = query.get(self.param, [""])[0].upper()
            if override in OVERRIDABLE_METHODS:
                scope = dict(scope, method=override)
        await self.app(scope, receive, send)
