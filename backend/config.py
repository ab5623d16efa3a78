import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Scoreboard size when the caller does not pass ?limit=
    SCOREBOARD_DEFAULT_LIMIT = int(os.environ.get('SCOREBOARD_DEFAULT_LIMIT', '5'))
    # Push scoreboard/match updates over Socket.IO after each mutation. 0 disables.
    BROADCAST_UPDATES = os.environ.get('BROADCAST_UPDATES', '1') not in ('0', 'false', 'False')
