# Lógica del carrito guardado en sesión.
#
# Las funciones reciben el carrito (dict) y la sesión de BD de forma explícita
# y devuelven un carrito NUEVO; quien llama decide cuándo escribirlo en
# request.session. Así se prueban sin levantar FastAPI.

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Mapping, Any

from sqlmodel import Session

from models import Product, User

log = logging.getLogger("uvicorn.error")

Cart = Dict[str, int]  # {"<product_id>": qty}

SESSION_KEY = "cart"

# Máximo de INTEGER en SQLite / BIGINT en Postgres
MAX_PRODUCT_ID = 2**63 - 1


# ============ Errores ============

class CartError(Exception):
    """Error esperado del carrito; lleva el status HTTP y el mensaje para el cliente."""
    status_code = 400
    message = "Bad request"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class InvalidQuantity(CartError):
    status_code = 400
    message = "Invalid quantity"


class ProductNotFound(CartError):
    status_code = 404
    message = "Product not found"


class CartItemNotFound(CartError):
    status_code = 404
    message = "Product not found in cart"


@dataclass
class CartAddResult:
    cart: Cart
    product: Product
    added: int


# ============ Lectura / parseo ============

def cart_from_session(session: Mapping[str, Any]) -> Cart:
    """Copia del carrito en sesión; vacío si no existe o está corrupto."""
    raw = session.get(SESSION_KEY)
    if not isinstance(raw, dict):
        return {}
    cart: Cart = {}
    for key, qty in raw.items():
        if isinstance(qty, int) and qty > 0:
            cart[str(key)] = qty
    return cart


def parse_quantity(raw) -> int:
    try:
        qty = int(str(raw).strip())
    except (TypeError, ValueError):
        raise InvalidQuantity()
    if qty <= 0:
        raise InvalidQuantity()
    return qty


def cart_key(product_id) -> str:
    """Clave del carrito para un productId: "01" y "1" son la misma."""
    raw = str(product_id).strip()
    try:
        return str(int(raw))
    except ValueError:
        return raw


def get_product(db: Session, product_id: str) -> Optional[Product]:
    # int() lanza ValueError con ids mal formados: lo trata la ruta como 500
    pid = int(product_id)
    if not 0 < pid <= MAX_PRODUCT_ID:
        return None
    return db.get(Product, pid)


def clamp_quantity(current: int, requested: int, stock: int) -> int:
    """Cuánto se puede agregar sin pasar el stock. Nunca negativo."""
    return max(0, min(requested, stock - current))


# ============ Activity log ============

def append_activity(db: Session, user_id: int, entry: str) -> bool:
    """Agrega `entry` al activity log del usuario. No hace commit.

    Devuelve False si el usuario ya no existe.
    """
    user = db.get(User, int(user_id))
    if not user:
        log.info(f"[activity] user_id={user_id} no existe, se omite: {entry!r}")
        return False
    # Reasignar (no .append) para que SQLAlchemy detecte el cambio en la columna JSON
    user.activity_log = [*(user.activity_log or []), entry]
    db.add(user)
    return True


# ============ Mutaciones ============

def add_to_cart(
    db: Session,
    cart: Mapping[str, int],
    product_id: str,
    quantity: int,
    user_id: Optional[int] = None,
    strict_log: bool = True,
) -> CartAddResult:
    product = get_product(db, product_id)
    if not product:
        raise ProductNotFound()

    key = cart_key(product.id)
    current = int(cart.get(key, 0))
    added = clamp_quantity(current, quantity, product.stock)

    new_cart: Cart = dict(cart)
    total = current + added
    if total > 0:
        new_cart[key] = total
    else:
        new_cart.pop(key, None)

    if user_id and added > 0:
        try:
            append_activity(db, user_id, f"Added {added} of {product.name} to cart")
            db.commit()
        except Exception:
            db.rollback()
            if strict_log:
                raise
            log.warning(
                f"[cart] no se pudo escribir el activity log user_id={user_id} product_id={key}",
                exc_info=True,
            )

    return CartAddResult(cart=new_cart, product=product, added=added)


def remove_from_cart(cart: Mapping[str, int], product_id: str) -> Cart:
    key = cart_key(product_id)
    if not cart.get(key):
        raise CartItemNotFound()
    new_cart: Cart = dict(cart)
    del new_cart[key]
    return new_cart
