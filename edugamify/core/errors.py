"""Domain errors raised by services and translated to HTTP status codes by routes."""


class EduGamifyError(Exception):
    """Base class for every error the service layer raises on purpose"""


class NotFoundError(EduGamifyError):
    """A quiz or user identifier does not resolve"""


class InvalidSubmissionError(EduGamifyError):
    """Answers or time spent are malformed; nothing has been scored or stored"""


class PersistenceConflictError(EduGamifyError):
    """Concurrent updates kept colliding after the ledger exhausted its retries"""


class DependencyUnavailableError(EduGamifyError):
    """The database could not be reached or refused the unit of work"""


class AuthenticationError(EduGamifyError):
    """Credentials or bearer token are missing or invalid"""


class DuplicateEmailError(EduGamifyError):
    """A user with this email is already registered"""
