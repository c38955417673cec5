import logging

from fastapi import HTTPException, status

from fixturedesk.core.exceptions import DataFileError, FixtureDeskError, GroupingInvariantError

logger = logging.getLogger(__name__)

def to_http_exception(exc: FixtureDeskError) -> HTTPException:
    """Maps a service error to the HTTP response the admin UI expects."""
    if isinstance(exc, GroupingInvariantError):
        logger.error("Internal grouping error: %s", exc)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal error while grouping players: {exc}",
        )
    if isinstance(exc, DataFileError):
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
    if isinstance(exc, LookupError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
