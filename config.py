import os
from dotenv import load_dotenv, find_dotenv

# Carga .env si existe (local); en producción vienen del entorno.
load_dotenv(find_dotenv(usecwd=True))

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./app.db")

# Firma de la cookie de sesión (SessionMiddleware)
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
SESSION_MAX_AGE = int(os.getenv("SESSION_MAX_AGE", str(14 * 24 * 60 * 60)))

# Si está activo, un fallo al escribir el activity log tumba la petición
# y el carrito de la sesión NO se modifica.
ACTIVITY_LOG_STRICT = os.getenv("ACTIVITY_LOG_STRICT", "true").lower() in ("1", "true", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
