import os

HOST = os.environ.get('HOST', '0.0.0.0')
PORT = int(os.environ.get('PORT', '8000'))
DEBUG = os.environ.get('DEBUG', '0') == '1'
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Appearance returned from GET /
SNAKE_INFO = {
    "apiversion": "1",
    "author": os.environ.get('SNAKE_AUTHOR', 'duelsnake'),
    "color": os.environ.get('SNAKE_COLOR', '#FF0000'),
    "head": os.environ.get('SNAKE_HEAD', 'default'),
    "tail": os.environ.get('SNAKE_TAIL', 'default'),
    "version": "0.1.0",
}
