"""Shared API dependencies."""

from typing import Annotated, NoReturn

from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from productcategories.application.results import ErrorCode
from productcategories.catalog.unit_of_work import SqlAlchemyUnitOfWork, UnitOfWork
from productcategories.infrastructure.database import get_session


async def get_unit_of_work(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> UnitOfWork:
    """Get a unit of work bound to the request's database session."""
    return SqlAlchemyUnitOfWork(session)


def raise_bad_request(error_code: ErrorCode | None, message: str | None) -> NoReturn:
    """Raise the 400 response used for every failed operation.

    Raises:
        HTTPException: Always.
    """
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "error_code": (error_code or ErrorCode.INTERNAL_ERROR).value,
            "message": message or "Something went wrong",
        },
    )
