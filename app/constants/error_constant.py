# Error names exposed in response bodies
ERROR_MISSING_PARAM = "MissingParamError"
ERROR_INVALID_PARAM = "InvalidParamError"
ERROR_SERVER = "ServerError"

# Messages (client-facing, keep verbatim)
MESSAGE_MISSING_PARAM = "Missing param: {param}"
MESSAGE_INVALID_PARAM = "Invalid param: {param}"
MESSAGE_SERVER_ERROR = "Internal server error"

# Settings
ERROR_CONFIG_INVALID_LOG_LEVEL = "error.config.invalid-log-level"
ERROR_CONFIG_PASSWORD_LENGTH = "error.config.password-max-below-min"
