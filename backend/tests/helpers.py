def product_payload(name="Pen", price=1.5, image="pen.png"):
    return {"name": name, "price": price, "image": image}

def post_product(client, **fields):
    return client.post("/api/products", json=product_payload(**fields))

def make_product(client, **fields):
    r = post_product(client, **fields)
    return r.get_json()["data"]

def list_products(client):
    return client.get("/api/products").get_json()["data"]
