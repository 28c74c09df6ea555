"""Topics Route — read-only listing."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.infrastructure.database import get_db
from newsdesk.repositories.topics import select_topics
from newsdesk.schemas.topic import TopicListResponse, TopicResponse

router = APIRouter(prefix="/api/topics", tags=["topics"])


@router.get("", response_model=TopicListResponse)
async def get_topics(db: AsyncSession = Depends(get_db)):
    """Serves an array of all topics."""
    topics = await select_topics(db)
    return TopicListResponse(
        topics=[TopicResponse.model_validate(t) for t in topics],
    )
