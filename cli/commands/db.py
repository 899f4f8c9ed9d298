import click
from ..utils import get_db

@click.group()
def db():
    """Database management commands"""
    pass

@db.command()
@click.option('--drop', is_flag=True, help='Drop all tables before creating them')
@click.pass_context
def init(ctx, drop: bool):
    """Create the database schema"""
    database = get_db(ctx)
    if drop:
        click.confirm("This will delete all data. Continue?", abort=True)
        database.drop_db()
    database.init_db()
    click.echo(click.style("Database initialized", fg='green'))
