from flask import Flask, current_app
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
import json
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)


def get_registry():
    return current_app.extensions['session_registry']


def get_archive():
    return current_app.extensions['scorecard_archive']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    origins = flask_app.config.get('CORS_ORIGINS') or []
    # Only the read-only scorecard API is exposed cross-origin
    CORS(flask_app, resources={r'/api/*': {'origins': origins}})

    socketio.init_app(flask_app, cors_allowed_origins=origins)

    from yahtzee.services.games import ScorecardArchive, SessionRegistry
    flask_app.extensions['session_registry'] = SessionRegistry(
        lock_timeout=float(flask_app.config.get('SESSION_LOCK_TIMEOUT_SEC', 5)),
    )
    flask_app.extensions['scorecard_archive'] = ScorecardArchive()

    from yahtzee.main import main
    flask_app.register_blueprint(main)

    from yahtzee.api.scorecards import scorecards
    flask_app.register_blueprint(scorecards, url_prefix='/api')

    from yahtzee.errors import register_error_handlers
    register_error_handlers(flask_app)

    from yahtzee.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    # Ensure the table is known to metadata before create_all / migrations
    from yahtzee import models  # noqa: F401

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates the scorecard tables."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            print('Database has been reset!')

    @click.command('scorecard')
    @click.argument('session_id')
    def scorecard_command(session_id):
        """Prints an archived scorecard as JSON."""
        with flask_app.app_context():
            card = get_archive().load(session_id)
            if card is None:
                raise click.ClickException(f'No scorecard archived under {session_id}')
            click.echo(json.dumps(card.to_dict(), indent=2))

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(scorecard_command)

    return flask_app
