"""Core functionality for the status service."""

from status_service.core.catalog import ENDPOINTS, EndpointDoc, endpoint_index
from status_service.core.environment import (
    REDACTED,
    SENSITIVE_KEYWORDS,
    is_sensitive,
    redact_environment,
)
from status_service.core.exceptions import IntrospectionError, StatusServiceError
from status_service.core.system import (
    HostFacts,
    MemoryFacts,
    ProcessFacts,
    collect_host_facts,
    collect_memory_facts,
    collect_process_facts,
    format_uptime,
)

__all__ = [
    "ENDPOINTS",
    "EndpointDoc",
    "endpoint_index",
    "REDACTED",
    "SENSITIVE_KEYWORDS",
    "is_sensitive",
    "redact_environment",
    "IntrospectionError",
    "StatusServiceError",
    "HostFacts",
    "MemoryFacts",
    "ProcessFacts",
    "collect_host_facts",
    "collect_memory_facts",
    "collect_process_facts",
    "format_uptime",
]
