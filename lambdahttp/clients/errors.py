# -*- coding: utf-8 -*-

from typing import Any, Dict, Optional


class LambdaClientError(Exception):
    """Base for every failure raised by the lambda http adapter"""


class InvalidClientError(LambdaClientError):
    pass


class InvalidFunctionArnError(LambdaClientError):
    def __init__(self, function_arn: Any, reason: str):
        self.function_arn = function_arn
        super().__init__(f"arn.parse[{function_arn}]: {reason}")


class DispatchError(LambdaClientError):
    """The invoke call itself did not complete (transport, auth, throttling)"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)


class DeadlineExceededError(DispatchError):
    pass


class FunctionExecutionError(LambdaClientError):
    """
    The function was reached but its code faulted,
    function_error is the raw FunctionError marker e.g. "Unhandled"
    """

    def __init__(
        self, function_error: str, details: Optional[Dict[str, Any]] = None
    ):
        self.function_error = function_error
        self.details = details or {}

        message = f"output.FunctionError: {function_error}"
        if self.details.get("errorMessage"):
            error_type = self.details.get("errorType", "Error")
            message = f"{message} ({error_type}: {self.details['errorMessage']})"
        super().__init__(message)


class UnexpectedStatusError(LambdaClientError):
    def __init__(self, status_code: Any, expected: int):
        self.status_code = status_code
        self.expected = expected
        super().__init__(f"output.StatusCode: {status_code}, expected {expected}")


class UnexpectedInnerStatusError(LambdaClientError):
    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"response statusCode: {status_code}")


class EmptyPayloadError(LambdaClientError):
    pass


class UnexpectedPayloadError(LambdaClientError):
    def __init__(self, payload: bytes, message: str):
        self.payload = payload
        super().__init__(message)


class MalformedEnvelopeError(LambdaClientError):
    def __init__(self, payload: bytes, message: str):
        self.payload = payload
        super().__init__(message)
