from pathlib import Path

from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.orm import sessionmaker
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url

from config import DATABASE_URL as RAW_DATABASE_URL


# ============================================================
# 1) Normalizar DATABASE_URL
# ============================================================

def normalize_url(raw: str) -> str:
    """postgres:// -> postgresql+psycopg2:// (formato que dan algunos hostings)."""
    if raw.startswith("postgres://"):
        return raw.replace("postgres://", "postgresql+psycopg2://", 1)
    return raw


DATABASE_URL = normalize_url(RAW_DATABASE_URL)


# ============================================================
# 2) Engine + factory de sesiones
# ============================================================

def make_engine(database_url: str, **kwargs) -> Engine:
    url = make_url(database_url)
    connect_args = {}
    if url.drivername.startswith("sqlite"):
        # Necesario para SQLite + threads (FastAPI)
        connect_args = {"check_same_thread": False}
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    return create_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,
        connect_args=connect_args,
        **kwargs,
    )


engine = make_engine(DATABASE_URL)

SessionLocal = sessionmaker(
    bind=engine,
    class_=Session,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
)


# ============================================================
# 3) Dependencia de FastAPI
# ============================================================

def get_session():
    """
    Uso:

    @router.post("/algo")
    def algo(db: Session = Depends(get_session)):
        ...
    """
    with SessionLocal() as session:
        yield session


def init_db(bind: Engine = None) -> None:
    """Crea las tablas de los modelos (idempotente)."""
    import models  # noqa: F401  (registra los modelos en el metadata)
    SQLModel.metadata.create_all(bind=bind or engine)
