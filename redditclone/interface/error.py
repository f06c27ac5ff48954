"""Interface layer errors.

Route handlers translate domain errors into these; the application's
exception handlers render them.
"""

from typing import Any, Optional


class InterfaceError(Exception):
    """Base interface error."""

    pass


class HTTPError(InterfaceError):
    """Error answered with a status code and a one-field JSON body.

    The body is {field: message}. With no field the message is sent as
    plain text.
    """

    def __init__(
        self, status_code: int, message: str, field: Optional[str] = "message"
    ):
        self.status_code = status_code
        self.message = message
        self.field = field
        super().__init__(message)


class FieldValidationError(InterfaceError):
    """Request field rejected with a 422 and an errors list."""

    def __init__(self, param: str, value: Any, msg: str, location: str = "body"):
        self.location = location
        self.param = param
        self.value = value
        self.msg = msg
        super().__init__(f"{param}: {msg}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "errors": [
                {
                    "location": self.location,
                    "param": self.param,
                    "value": self.value,
                    "msg": self.msg,
                }
            ]
        }


def unauthorized() -> HTTPError:
    """The 401 sent for every authentication failure."""
    return HTTPError(401, "unauthorized")
