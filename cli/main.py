# cli/main.py
import click
from booknet.config import configure_logging, get_settings
from booknet.sa.database import Database
from .commands.db import db
from .commands.user import user
from .commands.book import book
from .commands.lend import lend

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None, help='SQLAlchemy database URL')
@click.option('--log-level', default=None, help='Logging level (defaults to BOOKNET_LOG_LEVEL)')
@click.pass_context
def cli(ctx, database_url, log_level):
    """Book Network CLI"""
    try:
        settings = get_settings()
    except ValueError as e:
        raise click.UsageError(str(e))
    configure_logging(log_level or settings.log_level)
    ctx.ensure_object(dict)
    ctx.obj["db"] = Database(database_url)

cli.add_command(db)
cli.add_command(user)
cli.add_command(book)
cli.add_command(lend)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
