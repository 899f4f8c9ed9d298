# api/routes/books.py

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from booknet.identity import ActingUser
from booknet.sa.database import get_db
from booknet.services.book_service import BookService
from booknet.services.lending import LendingService
from api.dependencies import get_acting_user
from api.schemas.book import BookRequest, BookResponse, BorrowedBookResponse
from api.schemas.common import PageResponse, IdResponse, StatusResponse

router = APIRouter(prefix="/books", tags=["books"])

def _page_params(
    page: int = Query(0, ge=0, description="Page number (zero-based)"),
    size: int = Query(10, ge=1, le=100, description="Items per page")
) -> tuple[int, int]:
    return page, size

@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
def save_book(
    request: BookRequest,
    user: ActingUser = Depends(get_acting_user),
    db: Session = Depends(get_db)
):
    book_id = BookService(db).save_book(
        user,
        title=request.title,
        author_name=request.author_name,
        isbn=request.isbn,
        synopsis=request.synopsis,
        shareable=request.shareable
    )
    return IdResponse(id=book_id)

@router.get("", response_model=PageResponse[BookResponse])
def find_all_books(
    paging: tuple[int, int] = Depends(_page_params),
    user: ActingUser = Depends(get_acting_user),
    db: Session = Depends(get_db)
):
    """
    Get the books the acting user can borrow: shareable, not archived and
    owned by someone else, newest first.
    """
    page, size = paging
    result = BookService(db).find_all_books(page, size, user)
    result.content = [BookResponse.model_validate(book) for book in result.content]
    return PageResponse[BookResponse].from_page(result)

@router.get("/owner", response_model=PageResponse[BookResponse])
def find_all_books_by_owner(
    paging: tuple[int, int] = Depends(_page_params),
    user: ActingUser = Depends(get_acting_user),
    db: Session = Depends(get_db)
):
    page, size = paging
    result = BookService(db).find_all_books_by_owner(page, size, user)
    result.content = [BookResponse.model_validate(book) for book in result.content]
    return PageResponse[BookResponse].from_page(result)

@router.get("/borrowed", response_model=PageResponse[BorrowedBookResponse])
def find_all_borrowed_books(
    paging: tuple[int, int] = Depends(_page_params),
    user: ActingUser = Depends(get_acting_user),
    db: Session = Depends(get_db)
):
    page, size = paging
    result = BookService(db).find_all_borrowed_books(page, size, user)
    result.content = [BorrowedBookResponse.from_history(h) for h in result.content]
    return PageResponse[BorrowedBookResponse].from_page(result)

@router.get("/returned", response_model=PageResponse[BorrowedBookResponse])
def find_all_returned_books(
    paging: tuple[int, int] = Depends(_page_params),
    user: ActingUser = Depends(get_acting_user),
    db: Session = Depends(get_db)
):
    page, size = paging
    result = BookService(db).find_all_returned_books(page, size, user)
    result.content = [BorrowedBookResponse.from_history(h) for h in result.content]
    return PageResponse[BorrowedBookResponse].from_page(result)

@router.get("/{book_id}", response_model=BookResponse)
def find_book_by_id(
    book_id: int,
    user: ActingUser = Depends(get_acting_user),
    db: Session = Depends(get_db)
):
    return BookService(db).find_by_id(book_id)

@router.patch("/shareable/{book_id}", response_model=StatusResponse)
def update_shareable_status(
    book_id: int,
    user: ActingUser = Depends(get_acting_user),
    db: Session = Depends(get_db)
):
    return StatusResponse(value=LendingService(db).toggle_shareable(book_id, user))

@router.patch("/archived/{book_id}", response_model=StatusResponse)
def update_archived_status(
    book_id: int,
    user: ActingUser = Depends(get_acting_user),
    db: Session = Depends(get_db)
):
    return StatusResponse(value=LendingService(db).toggle_archived(book_id, user))

@router.post("/borrow/{book_id}", response_model=IdResponse)
def borrow_book(
    book_id: int,
    user: ActingUser = Depends(get_acting_user),
    db: Session = Depends(get_db)
):
    return IdResponse(id=LendingService(db).borrow(book_id, user))

@router.patch("/borrow/return/{book_id}", response_model=IdResponse)
def return_borrowed_book(
    book_id: int,
    user: ActingUser = Depends(get_acting_user),
    db: Session = Depends(get_db)
):
    return IdResponse(id=LendingService(db).return_book(book_id, user))

@router.patch("/borrow/return/approve/{book_id}", response_model=IdResponse)
def approve_return_borrowed_book(
    book_id: int,
    user: ActingUser = Depends(get_acting_user),
    db: Session = Depends(get_db)
):
    return IdResponse(id=LendingService(db).approve_return(book_id, user))
