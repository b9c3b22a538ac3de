from decouple import Choices, config

BASE_MODULE = 'ecommerce'

DEBUG = config('DEBUG', default=False, cast=bool)
ENVIRONMENT = config('ENVIRONMENT', default='local', cast=Choices(['local', 'testing', 'staging', 'production']))
IS_LOCAL = ENVIRONMENT == 'local'
IS_PRODUCTION = ENVIRONMENT == 'production'
IS_STAGING = ENVIRONMENT == 'staging'
IS_TESTING = ENVIRONMENT == 'testing'  # Set in tests/conftest.py
IS_DEPLOYED_ENV = IS_PRODUCTION or IS_STAGING

LOG_LEVEL = config('LOG_LEVEL', 'INFO')

# Support both DATABASE_URL and individual vars (local)
DATABASE_URL = config('DATABASE_URL', default=None)
if not DATABASE_URL:
    DB_NAME = config('DB_NAME', default='ecommerce')
    DB_USER = config('DB_USER', default='postgres')
    DB_PASSWORD = config('DB_PASSWORD', default='dev1')
    DB_HOST = config('DB_HOST', default='127.0.0.1')
    DB_PORT = config('DB_PORT', default=5432, cast=int)
    DATABASE_URL = f'postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}'
DB_LOG_STATEMENTS = config('DB_LOG_STATEMENTS', default=False, cast=bool)

# Packages holding a `models.py` to register with the declarative base
BOUNDARIES = [
    'core.customer',
    'core.customer_order',
    'core.address',
]
