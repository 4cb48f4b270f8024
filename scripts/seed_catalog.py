"""
Crea las tablas y carga datos de ejemplo (un producto con stock 3 y un usuario).

Uso:
  python3 scripts/seed_catalog.py
"""

import os
import sys

from sqlmodel import Session, select

# Permite ejecutar el script desde la raíz del repo
sys.path.append(os.path.abspath("."))

from db import engine, init_db  # noqa: E402
from models import Product, User  # noqa: E402
from security import hash_password  # noqa: E402


def main():
    init_db(engine)
    with Session(engine) as session:
        if not session.exec(select(Product).where(Product.name == "Test Device")).first():
            session.add(Product(name="Test Device", price=100, stock=3))
        if not session.exec(select(User).where(User.username == "testuser")).first():
            session.add(User(username="testuser", password_hash=hash_password("password")))
        session.commit()
    print("OK: tablas creadas y datos de ejemplo cargados.")


if __name__ == "__main__":
    main()
