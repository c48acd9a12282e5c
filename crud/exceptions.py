class ResolverError(Exception):
    """Base class for failures raised out of a resolver."""
    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ResolverError):
    code = "NOT_FOUND"


class UnknownOperationError(ResolverError):
    code = "UNKNOWN_OPERATION"


class InvalidArgumentsError(ResolverError):
    code = "BAD_USER_INPUT"
