"""Constants for the Backlog API client."""

# Default relay the browser-facing client talks to instead of the upstream hosts
DEFAULT_RELAY_URL = "http://localhost:3001/api"

# Upstream mirrors, tried in this order by the gateway
UPSTREAM_URL_TEMPLATES = (
    "https://{space_id}.backlog.com/api/v2",
    "https://{space_id}.backlog.jp/api/v2",
)

DEFAULT_TIMEOUT = 30.0

# Backlog priority ids
PRIORITY_HIGH = 2
PRIORITY_NORMAL = 3
PRIORITY_LOW = 4

# Environment variable names
ENV_BACKLOG_API_KEY = "BACKLOG_API_KEY"
ENV_BACKLOG_SPACE_ID = "BACKLOG_SPACE_ID"
ENV_BACKLOG_BASE_URL = "BACKLOG_BASE_URL"
ENV_BACKLOG_RELAY_URL = "BACKLOG_RELAY_URL"
