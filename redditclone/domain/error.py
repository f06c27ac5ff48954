"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str = ""):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class AlreadyExistsError(DomainError):
    """Raised when creating a resource whose unique key is taken."""

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"{resource} already exists")


class InvalidCredentialsError(DomainError):
    """Raised when a password does not match the stored hash."""

    def __init__(self) -> None:
        super().__init__("invalid credentials")


class InvalidIdentifierError(ValidationError):
    """Raised when an identifier is not in the storage's canonical form."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__("invalid ID format")


class InvalidActionError(ValidationError):
    """Raised for vote actions other than upvote, downvote and unvote."""

    def __init__(self, action: str):
        self.action = action
        super().__init__("invalid action")


class MissingIdentityError(ValidationError):
    """Raised when an operation needs a user but none was given."""

    def __init__(self) -> None:
        super().__init__("missing username")


class SessionCreationError(DomainError):
    """Raised when a login session cannot be stored."""

    def __init__(self) -> None:
        super().__init__("failed to create session")


class ConcurrentUpdateError(DomainError):
    """Raised when a post keeps changing underneath a conditional write."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__("concurrent update conflict")
