class DomainError(Exception):
    """Base class for domain errors raised across port boundaries."""
    pass
