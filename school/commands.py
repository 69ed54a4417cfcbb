import click

from .database import session_scope
from .extensions import db
from .queries import load_student_by_id


def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables."""
        db.create_all()
        click.echo("Database initialised")

    @app.cli.command("bulletin")
    @click.argument("student_id")
    def bulletin(student_id):
        """Print the bulletin of a student."""
        try:
            with session_scope() as session:
                student = load_student_by_id(session, student_id)
                if student is None:
                    raise click.ClickException(f"Student {student_id} does not exist")
                student.load_evaluations(session)
        except ValueError:
            raise click.ClickException(f"Invalid student id: {student_id}")
        click.echo(student.bulletin())
