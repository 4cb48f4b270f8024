# Agregar / quitar productos del carrito de la sesión.

import logging

from fastapi import APIRouter, Request, Depends, Form
from fastapi.responses import RedirectResponse, PlainTextResponse
from sqlmodel import Session
from starlette.status import HTTP_302_FOUND, HTTP_500_INTERNAL_SERVER_ERROR

import config
from db import get_session
from utils.cart import (
    SESSION_KEY,
    CartError,
    add_to_cart,
    cart_from_session,
    parse_quantity,
    remove_from_cart,
)

router = APIRouter(tags=["Cart"])
log = logging.getLogger("uvicorn.error")  # usa el logger de Uvicorn


@router.get("/cart")
def cart_view(request: Request):
    """Carrito actual como JSON: {"cart": {"<product_id>": qty}}."""
    return {"cart": cart_from_session(request.session)}


@router.post("/addToCart")
def cart_add(
    request: Request,
    productId: str = Form(...),
    quantity: str = Form(...),
    session: Session = Depends(get_session),
):
    try:
        qty = parse_quantity(quantity)
        result = add_to_cart(
            session,
            cart_from_session(request.session),
            productId,
            qty,
            user_id=request.session.get("user_id"),
            strict_log=config.ACTIVITY_LOG_STRICT,
        )
    except CartError as e:
        return PlainTextResponse(e.message, status_code=e.status_code)
    except Exception:
        log.exception(f"[cart] error agregando product_id={productId!r} al carrito")
        return PlainTextResponse(
            "Error in adding product to cart", status_code=HTTP_500_INTERNAL_SERVER_ERROR
        )

    request.session[SESSION_KEY] = result.cart
    log.info(f"[cart] +{result.added} product_id={result.product.id} (pedido {qty}, stock {result.product.stock})")
    return RedirectResponse("/index", status_code=HTTP_302_FOUND)


@router.post("/removeFromCart")
def cart_remove(request: Request, productId: str = Form(...)):
    try:
        new_cart = remove_from_cart(cart_from_session(request.session), productId)
    except CartError as e:
        return PlainTextResponse(e.message, status_code=e.status_code)
    except Exception:
        log.exception(f"[cart] error quitando product_id={productId!r} del carrito")
        return PlainTextResponse(
            "Error removing product from cart", status_code=HTTP_500_INTERNAL_SERVER_ERROR
        )

    request.session[SESSION_KEY] = new_cart
    log.info(f"[cart] removido product_id={productId}")
    return RedirectResponse("/cart", status_code=HTTP_302_FOUND)
