# api/routes/feedback.py

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from booknet.identity import ActingUser
from booknet.sa.database import get_db
from booknet.services.feedback_service import FeedbackService
from api.dependencies import get_acting_user
from api.schemas.common import PageResponse, IdResponse
from api.schemas.feedback import FeedbackRequest, FeedbackResponse

router = APIRouter(prefix="/feedbacks", tags=["feedbacks"])

@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
def save_feedback(
    request: FeedbackRequest,
    user: ActingUser = Depends(get_acting_user),
    db: Session = Depends(get_db)
):
    feedback_id = FeedbackService(db).save_feedback(request.book_id, request.note, request.comment, user)
    return IdResponse(id=feedback_id)

@router.get("/book/{book_id}", response_model=PageResponse[FeedbackResponse])
def find_all_feedbacks_by_book(
    book_id: int,
    page: int = Query(0, ge=0, description="Page number (zero-based)"),
    size: int = Query(10, ge=1, le=100, description="Items per page"),
    user: ActingUser = Depends(get_acting_user),
    db: Session = Depends(get_db)
):
    result = FeedbackService(db).find_all_feedbacks_by_book(book_id, page, size, user)
    return PageResponse[FeedbackResponse].from_page(result)
