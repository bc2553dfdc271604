# storefront/product_service/main.py
from fastapi import FastAPI, HTTPException

app = FastAPI(title="Product Catalog (dev mock)")

# ten sam ksztalt co fakestoreapi.com/products
PRODUCTS = {
    1: {
        "id": 1,
        "title": "Cotton Shirt",
        "price": 19.99,
        "description": "Plain cotton shirt",
        "category": "men's clothing",
        "image": "https://example.com/img/1.jpg",
        "rating": {"rate": 4.1, "count": 120},
    },
    2: {
        "id": 2,
        "title": "Leather Backpack",
        "price": 109.95,
        "description": "Fits a 15 inch laptop",
        "category": "accessories",
        "image": "https://example.com/img/2.jpg",
        "rating": {"rate": 3.9, "count": 120},
    },
    3: {
        "id": 3,
        "title": "Silver Ring",
        "price": 9.99,
        "description": "Sterling silver",
        "category": "jewelery",
        "image": "https://example.com/img/3.jpg",
        "rating": {"rate": 4.6, "count": 400},
    },
}


@app.get("/products")
def list_products():
    return list(PRODUCTS.values())


@app.get("/products/{product_id}")
def get_product(product_id: int):
    product = PRODUCTS.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
