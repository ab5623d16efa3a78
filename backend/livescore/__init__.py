from flask import Flask, current_app
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config
from livescore.clock import ManualClock, SystemClock
from livescore.services.matches import MatchRegistry

allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5174",
    "http://127.0.0.1:5174",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)

REGISTRY_EXTENSION_KEY = 'match_registry'

# Sample fixtures for the demo command: (home, away, home_score, away_score)
DEMO_FIXTURES = [
    ('Mexico', 'Canada', 0, 5),
    ('Spain', 'Brazil', 10, 2),
    ('Germany', 'France', 2, 2),
    ('Uruguay', 'Italy', 6, 6),
    ('Argentina', 'Australia', 3, 1),
]


def get_registry() -> MatchRegistry:
    """Return the registry bound to the current Flask app."""
    return current_app.extensions[REGISTRY_EXTENSION_KEY]


def create_app(config_class=Config, clock=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    flask_app.extensions[REGISTRY_EXTENSION_KEY] = MatchRegistry(clock=clock or SystemClock())

    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Import and register blueprints here
    from livescore.routes import main
    flask_app.register_blueprint(main)

    from livescore.api.matches import matches
    flask_app.register_blueprint(matches, url_prefix='/api/matches')

    # Importing here ensures the handlers bind to the initialized socketio instance
    from livescore.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('scoreboard-demo')
    @click.option('--limit', default=5, show_default=True, type=click.IntRange(min=1),
                  help='Number of scoreboard rows to print.')
    def scoreboard_demo_command(limit):
        """Seeds a throwaway registry with sample fixtures and prints the scoreboard."""
        clock = ManualClock()
        registry = MatchRegistry(clock=clock)
        for home, away, home_score, away_score in DEMO_FIXTURES:
            match = registry.start_new_match(home, away)
            registry.update_score(match.id, home, home_score)
            registry.update_score(match.id, away, away_score)
            clock.advance(60)

        for position, match in enumerate(registry.get_scoreboard(limit), start=1):
            click.echo(f"{position}. {match.home_team} {match.home_score} - {match.away_team} {match.away_score}")

    flask_app.cli.add_command(scoreboard_demo_command)

    return flask_app
