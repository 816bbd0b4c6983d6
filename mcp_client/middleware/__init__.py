"""HTTP client middleware."""

from .request_logging import event_hooks, log_request, log_response

__all__ = ["event_hooks", "log_request", "log_response"]
