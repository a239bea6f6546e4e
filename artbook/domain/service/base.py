"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business rules that span entities: depth limits,
    ownership checks, like toggling, cascading deletes.
    """

    pass
