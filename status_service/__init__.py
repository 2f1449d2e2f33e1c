"""Status Service: process and host introspection over HTTP."""

__title__ = "status-service"
__description__ = "Minimal HTTP service reporting liveness, build metadata and environment"
__version__ = "1.0.0"
