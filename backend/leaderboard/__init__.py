import click
from flask import Flask, jsonify
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError

from leaderboard.config import Config
from leaderboard.errors import LeaderboardError

db = SQLAlchemy()
cors = CORS()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES and ON DELETE unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    with flask_app.app_context():
        if db.engine.dialect.name == 'sqlite':
            event.listen(db.engine, 'connect', _enable_sqlite_foreign_keys)
    cors.init_app(flask_app, origins=flask_app.config.get('CORS_ORIGINS', []))

    # Import and register blueprints here
    from leaderboard.main import main
    flask_app.register_blueprint(main)

    from leaderboard.api.games import games
    flask_app.register_blueprint(games, url_prefix='/games')

    # Ensure models are registered on the metadata before any create_all
    import leaderboard.models  # noqa: F401

    @flask_app.errorhandler(LeaderboardError)
    def handle_leaderboard_error(exc):
        return jsonify(exc.to_dict()), exc.status_code

    @flask_app.errorhandler(SQLAlchemyError)
    def handle_storage_error(exc):
        db.session.rollback()
        flask_app.logger.error(f"[storage] {type(exc).__name__}: {exc}")
        return jsonify({'error': 'storage failure'}), 500

    @click.command('init-db')
    def init_db_command():
        """Creates any missing tables."""
        with flask_app.app_context():
            db.create_all()
        click.echo('Database tables created.')

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates all tables, deleting every game and score."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
        click.echo('Database has been reset!')

    @click.command('create-game')
    @click.argument('name')
    def create_game_command(name):
        """Registers a game and prints its keys (shown only once)."""
        from leaderboard.services.games.scores import create_game
        with flask_app.app_context():
            try:
                game_id, keys = create_game(name)
            except LeaderboardError as exc:
                raise click.ClickException(exc.message)
        click.echo(f'id: {game_id}')
        for tier, key in keys.to_dict().items():
            click.echo(f'{tier}: {key}')

    flask_app.cli.add_command(init_db_command)
    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(create_game_command)

    return flask_app
