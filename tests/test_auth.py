def test_login_ok_sets_session_user(test_client, user, product, db):
    response = test_client.post("/login", data={"username": "testuser", "password": "password"})
    assert response.status_code == 302
    assert response.headers["location"] == "/index"

    # con sesión de usuario, agregar deja rastro en el activity log
    test_client.post("/addToCart", data={"productId": str(product.id), "quantity": "1"})
    db.refresh(user)
    assert user.activity_log == ["Added 1 of Test Device to cart"]


def test_login_bad_password(test_client, user):
    response = test_client.post("/login", data={"username": "testuser", "password": "nope"})
    assert response.status_code == 401


def test_login_unknown_user(test_client):
    response = test_client.post("/login", data={"username": "ghost", "password": "x"})
    assert response.status_code == 401


def test_login_keeps_anonymous_cart(test_client, user, product):
    test_client.post("/addToCart", data={"productId": str(product.id), "quantity": "2"})
    test_client.post("/login", data={"username": "testuser", "password": "password"})

    assert test_client.get("/cart").json() == {"cart": {str(product.id): 2}}


def test_logout_clears_cart(logged_client, product):
    logged_client.post("/addToCart", data={"productId": str(product.id), "quantity": "2"})

    response = logged_client.get("/logout")

    assert response.status_code == 302
    assert logged_client.get("/cart").json() == {"cart": {}}
