"""Environment-variable-based configuration."""

import os


def get_endpoint() -> str:
    """Return the YQL query endpoint from YQL_ENDPOINT."""
    return os.environ.get("YQL_ENDPOINT", "https://query.yahooapis.com/v1/public/yql")


def get_request_token_url() -> str:
    """Return the OAuth request-token URL from YQL_REQUEST_TOKEN_URL."""
    return os.environ.get(
        "YQL_REQUEST_TOKEN_URL", "https://api.login.yahoo.com/oauth/v2/get_request_token"
    )


def get_authorize_url() -> str:
    """Return the OAuth user-authorization URL from YQL_AUTHORIZE_URL."""
    return os.environ.get("YQL_AUTHORIZE_URL", "https://api.login.yahoo.com/oauth/v2/request_auth")


def get_access_token_url() -> str:
    """Return the OAuth access-token URL from YQL_ACCESS_TOKEN_URL."""
    return os.environ.get("YQL_ACCESS_TOKEN_URL", "https://api.login.yahoo.com/oauth/v2/get_token")


def get_timeout() -> float:
    """Return the HTTP timeout in seconds from YQL_TIMEOUT."""
    return float(os.environ.get("YQL_TIMEOUT", "5.0"))


def get_dsn() -> str:
    """Return the default connection descriptor from YQL_DSN."""
    return os.environ.get("YQL_DSN", "")


def get_log_level() -> str:
    """Return the logging level from YQL_LOG_LEVEL."""
    return os.environ.get("YQL_LOG_LEVEL", "WARNING")
