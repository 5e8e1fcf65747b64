import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma separated list, '*' allows any origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    # Board markers for the first and second player
    SYMBOL_A = os.environ.get('SYMBOL_A', '\U0001fa84')
    SYMBOL_B = os.environ.get('SYMBOL_B', '\U0001f9d9')
    # How many times to redraw a room code that is already taken
    ROOM_CODE_ATTEMPTS = int(os.environ.get('ROOM_CODE_ATTEMPTS', '100'))
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
