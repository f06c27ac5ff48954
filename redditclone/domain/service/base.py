"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span an aggregate and its
    repository, such as initializing a new post or dispatching votes.
    """

    pass
