# Environment variables
ENV_BASE_URL = "MLCASHIER_URL"
ENV_API_KEY = "MLCASHIER_API_KEY"
ENV_TIMEOUT = "MLCASHIER_TIMEOUT"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"
HEADER_USER_AGENT = "User-Agent"

# Content types
APPLICATION_JSON = "application/json"

# Defaults
DEFAULT_TIMEOUT = 30.0
