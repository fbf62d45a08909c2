import os
from dotenv import load_dotenv

load_dotenv()

STORE_PATH = os.getenv("SAGRE_STORE_PATH", "sagre-store.json")
TIMEZONE = os.getenv("TIMEZONE", "Europe/Rome")
LOG_LEVEL = os.getenv("SAGRE_LOG_LEVEL", "WARNING")

# Demo admin account. The site has no user backend; this is the only login.
DEMO_ADMIN_EMAIL = "admin@sagrecampania.it"
DEMO_ADMIN_PASSWORD = "admin123"

ADMIN_EMAIL = os.getenv("SAGRE_ADMIN_EMAIL", DEMO_ADMIN_EMAIL)
ADMIN_PASSWORD = os.getenv("SAGRE_ADMIN_PASSWORD", DEMO_ADMIN_PASSWORD)
ADMIN_NAME = os.getenv("SAGRE_ADMIN_NAME", "Amministratore")

# Fail fast on an empty override; a blank password would let anyone in.
_blank = []
if not ADMIN_EMAIL.strip():
    _blank.append("SAGRE_ADMIN_EMAIL")
if not ADMIN_PASSWORD.strip():
    _blank.append("SAGRE_ADMIN_PASSWORD")
if _blank:
    raise EnvironmentError(
        f"Blank environment variables: {', '.join(_blank)}. "
        "Unset them to use the demo defaults or set a real value in .env."
    )
