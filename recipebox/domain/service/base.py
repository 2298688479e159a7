"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services coordinate repositories and other services for one concern
    (likes, comments, counters). They raise domain errors and leave the
    translation into results to the application layer.
    """
