# Environment variables
ENV_SERVER_URL = "JUPYTER_SERVER_URL"
ENV_ELYRA_SERVER_URL = "ELYRA_SERVER_URL"
ENV_SERVER_TOKEN = "JUPYTER_TOKEN"
ENV_REQUEST_TIMEOUT = "ELYRA_REQUEST_TIMEOUT"
ENV_VERIFY_SSL = "ELYRA_VERIFY_SSL"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"

# Defaults
DEFAULT_TIMEOUT = 30.0
DEFAULT_PROGRESS_MESSAGE = "Waiting for the server to respond..."

# Logging
LOGGER_NAME = "elyra_services"
