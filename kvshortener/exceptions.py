class KVShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:kvshortener_error'


class InvalidInputError(KVShortenerError):
    """Raised when a link request carries unusable input (e.g. empty content)."""

    error_code = 'link:invalid_input_error'


class LinkExpiredError(KVShortenerError):
    """Raised when a link is observed after its expiration time.

    The expired record is purged before this is raised.
    """

    error_code = 'link:expired_error'


class ConfigurationError(KVShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
