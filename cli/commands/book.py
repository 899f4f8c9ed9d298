import click
from booknet.services.book_service import BookService
from booknet.services.lending import LendingService
from ..utils import session_scope, resolve_acting_user, handle_errors, print_success

@click.group()
def book():
    """Book catalog commands"""
    pass

@book.command()
@click.option('--user-id', type=int, required=True, help='Owner of the book')
@click.option('--title', required=True, help='Book title')
@click.option('--author', 'author_name', required=True, help='Author name')
@click.option('--isbn', default=None, help='ISBN')
@click.option('--synopsis', default=None, help='Short synopsis')
@click.option('--shareable/--private', default=False, help='Whether other users may borrow the book')
@click.pass_context
@handle_errors
def add(ctx, user_id: int, title: str, author_name: str, isbn: str, synopsis: str, shareable: bool):
    """Upload a book owned by a user"""
    with session_scope(ctx) as session:
        book_id = BookService(session).save_book(
            resolve_acting_user(session, user_id),
            title=title,
            author_name=author_name,
            isbn=isbn,
            synopsis=synopsis,
            shareable=shareable
        )
        print_success("Created book", book_id)

@book.command(name='list')
@click.option('--user-id', type=int, required=True, help='Viewing user')
@click.option('--owned', is_flag=True, help='List the books the user owns instead of the borrowable catalog')
@click.option('--page', default=0, help='Page number (zero-based)')
@click.option('--size', default=10, help='Items per page')
@click.pass_context
@handle_errors
def list_books(ctx, user_id: int, owned: bool, page: int, size: int):
    """List borrowable books, or the user's own books with --owned"""
    with session_scope(ctx) as session:
        service = BookService(session)
        acting_user = resolve_acting_user(session, user_id)
        if owned:
            result = service.find_all_books_by_owner(page, size, acting_user)
        else:
            result = service.find_all_books(page, size, acting_user)

        for b in result.content:
            flags = []
            if b.shareable:
                flags.append("shareable")
            if b.archived:
                flags.append("archived")
            click.echo(
                click.style(f"[{b.id}] ", fg='blue') +
                click.style(b.title, fg='cyan') +
                f" by {b.author_name}" +
                (click.style(f" ({', '.join(flags)})", fg='yellow') if flags else "")
            )
        click.echo(click.style(
            f"Page {result.number + 1} of {max(result.total_pages, 1)} ({result.total_elements} books)", fg='blue'
        ))

@book.command()
@click.argument('book_id', type=int)
@click.option('--user-id', type=int, required=True, help='Acting user (must own the book)')
@click.pass_context
@handle_errors
def shareable(ctx, book_id: int, user_id: int):
    """Toggle whether BOOK_ID can be borrowed"""
    with session_scope(ctx) as session:
        value = LendingService(session).toggle_shareable(book_id, resolve_acting_user(session, user_id))
        print_success("Shareable", value)

@book.command()
@click.argument('book_id', type=int)
@click.option('--user-id', type=int, required=True, help='Acting user (must own the book)')
@click.pass_context
@handle_errors
def archived(ctx, book_id: int, user_id: int):
    """Toggle whether BOOK_ID is archived"""
    with session_scope(ctx) as session:
        value = LendingService(session).toggle_archived(book_id, resolve_acting_user(session, user_id))
        print_success("Archived", value)
