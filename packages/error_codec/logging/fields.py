"""Canonical logging field names for structured error logging.

These constants define a stable key set for structured logs and context
propagation, so handlers and formatters agree on field names.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"

# Request fields.
REQUEST_PATH = "request_path"
REQUEST_METHOD = "request_method"

# Error classification fields.
ERROR_KIND = "error_kind"
HTTP_STATUS = "http_status"
EXCEPTION_TYPE = "exception_type"
DRIVER = "driver"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
