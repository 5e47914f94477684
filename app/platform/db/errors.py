from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError


def is_connection_failure(exc: BaseException) -> bool:
    """True when `exc` means the database could not be reached, not that a statement was wrong."""
    if isinstance(exc, (OperationalError, InterfaceError, OSError)):
        return True
    return isinstance(exc, DBAPIError) and exc.connection_invalidated
