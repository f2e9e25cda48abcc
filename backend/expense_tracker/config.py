import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from the package directory or the backend directory
env_path = Path(__file__).parent / '.env'
if not env_path.exists():
    env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    PORT = int(os.getenv('PORT') or 8000)
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    MONGO_URI = os.getenv('MONGO_URI') or 'mongodb://localhost:27017/expense_tracker'
    MONGO_DBNAME = os.getenv('MONGO_DBNAME')
    MONGO_DEFAULT_DBNAME = 'expense_tracker'
    MONGO_SERVER_SELECTION_TIMEOUT_MS = int(os.getenv('MONGO_SERVER_SELECTION_TIMEOUT_MS') or 5000)
    MONGO_PING_ON_START = True

    MAIL_SERVER = os.getenv('MAIL_SERVER', 'smtp.gmail.com')
    MAIL_PORT = int(os.getenv('MAIL_PORT') or 587)
    MAIL_USE_TLS = _env_flag('MAIL_USE_TLS', True)
    # EMAIL_USER / EMAIL_PASS are accepted for existing deployments
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME') or os.environ.get('EMAIL_USER')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD') or os.environ.get('EMAIL_PASS')
    MAIL_DEFAULT_SENDER = MAIL_USERNAME
    REPORT_SUBJECT = 'Expense Update'


class TestConfig(Config):
    TESTING = True
    MONGO_URI = 'mongodb://localhost:27017/expense_tracker_test'
    MONGO_DBNAME = 'expense_tracker_test'
    MONGO_PING_ON_START = False

    MAIL_SUPPRESS_SEND = True
    MAIL_USERNAME = 'reports@example.com'
    MAIL_PASSWORD = 'not-a-real-password'
    MAIL_DEFAULT_SENDER = MAIL_USERNAME
