"""
Request/response middleware for the campgrounds app.

- MethodOverrideMiddleware: lets HTML forms issue PUT/DELETE through a
  hidden `_method` field.
- ErrorTranslatorMiddleware: turns any exception escaping a view into the
  rendered error page with a status code.

Errors raised before a view runs (CSRF rejection, oversized or unreadable
bodies, failures inside other middleware) never reach process_exception;
Django hands those to CSRF_FAILURE_VIEW and the handler400/403/500 views in
config/urls.py, which render the same page through render_error().
"""

import logging

from django.http import Http404
from django.shortcuts import render

from .errors import AppError, DEFAULT_ERROR_MESSAGE, NotFoundError

logger = logging.getLogger(__name__)

OVERRIDE_FIELD = "_method"
OVERRIDABLE = {"PUT": "PUT", "PATCH": "PUT", "DELETE": "DELETE"}


class MethodOverrideMiddleware:
    """
    Rewrite `request.method` from the `_method` form field of a POST.
    Runs in process_view so it must sit after CsrfViewMiddleware: the CSRF
    token is still checked against the original POST.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_view(self, request, view_func, view_args, view_kwargs):
        if request.method != "POST":
            return None
        override = (request.POST.get(OVERRIDE_FIELD) or "").strip().upper()
        if override in OVERRIDABLE:
            request.method = OVERRIDABLE[override]
        return None


class ErrorTranslatorMiddleware:
    """
    Single tail stage for view errors: status_code (default 500) and message
    (default "Oh no, Something went Wrong") go to templates/error.html.
    """

    template_name = "error.html"

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, AppError):
            status_code, message = exception.status_code, exception.message
        elif isinstance(exception, Http404):
            status_code, message = 404, NotFoundError.default_message
        else:
            status_code, message = 500, DEFAULT_ERROR_MESSAGE

        if status_code >= 500:
            logger.error(
                "Unhandled error on %s %s", request.method, request.path, exc_info=exception
            )
        else:
            logger.warning("%s %s -> %s: %s", request.method, request.path, status_code, message)

        return render_error(request, status_code, message)


def render_error(request, status_code: int, message: str | None = None):
    """Render templates/error.html; shared by the middleware and Django's error handlers."""
    err = {"status_code": status_code, "message": message or DEFAULT_ERROR_MESSAGE}
    return render(request, ErrorTranslatorMiddleware.template_name, {"err": err}, status=status_code)
