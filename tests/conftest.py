"""Root pytest configuration.

Points the application at an in-memory database before anything under
``apps`` or ``core`` reads its settings.
"""

import os

os.environ["DB_DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["APP_ENVIRONMENT"] = "development"
os.environ["APP_SEED_ON_STARTUP"] = "true"
