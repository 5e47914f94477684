from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.waitlist.schemas.waitlist import (
    WaitlistIn,
    WaitlistJoinOut,
    WaitlistJoinResponse,
    WaitlistStatsOut,
    WaitlistStatsResponse,
)
from app.features.waitlist.services.waitlist import WaitlistService
from app.features.waitlist.utils.validator import validate_submission
from app.platform.db.session import get_db
from app.platform.response import api_response
from app.platform.schemas import ErrorResponse

router = APIRouter(prefix="/waitlist", tags=["Waitlist"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=WaitlistJoinResponse,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def join_waitlist(waitlist_in: WaitlistIn, db: AsyncSession = Depends(get_db)):
    submission = validate_submission(waitlist_in)

    entry = await WaitlistService(db).add_to_waitlist(submission, source=waitlist_in.source)

    data = WaitlistJoinOut.model_validate(entry)
    return api_response(
        data=data,
        message="Successfully added to waitlist",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/stats", response_model=WaitlistStatsResponse)
async def waitlist_stats(db: AsyncSession = Depends(get_db)):
    stats = await WaitlistService(db).get_stats()
    return api_response(
        data=WaitlistStatsOut(**stats),
        message="Waitlist statistics retrieved",
        status_code=status.HTTP_200_OK,
    )
