"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business logic that spans more than one
    aggregate or needs a repository round trip.
    """

    pass
