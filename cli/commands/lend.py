import click
from booknet.config import ApprovalGuard
from booknet.services.lending import LendingService
from ..utils import session_scope, resolve_acting_user, handle_errors, print_success

@click.group()
def lend():
    """Borrow, return and approve books"""
    pass

@lend.command()
@click.argument('book_id', type=int)
@click.option('--user-id', type=int, required=True, help='Borrowing user')
@click.pass_context
@handle_errors
def borrow(ctx, book_id: int, user_id: int):
    """Borrow BOOK_ID"""
    with session_scope(ctx) as session:
        record_id = LendingService(session).borrow(book_id, resolve_acting_user(session, user_id))
        print_success("Borrowed, record", record_id)

@lend.command(name='return')
@click.argument('book_id', type=int)
@click.option('--user-id', type=int, required=True, help='Borrowing user')
@click.pass_context
@handle_errors
def return_book(ctx, book_id: int, user_id: int):
    """Return a borrowed BOOK_ID"""
    with session_scope(ctx) as session:
        record_id = LendingService(session).return_book(book_id, resolve_acting_user(session, user_id))
        print_success("Returned, record", record_id)

@lend.command()
@click.argument('book_id', type=int)
@click.option('--user-id', type=int, required=True, help='Approving user')
@click.option('--guard', type=click.Choice([g.value for g in ApprovalGuard]), default=None,
              help='Override the configured approval guard')
@click.pass_context
@handle_errors
def approve(ctx, book_id: int, user_id: int, guard: str):
    """Approve the return of BOOK_ID"""
    with session_scope(ctx) as session:
        service = LendingService(session, approval_guard=ApprovalGuard(guard) if guard else None)
        record_id = service.approve_return(book_id, resolve_acting_user(session, user_id))
        print_success("Return approved, record", record_id)
