"""API routes."""

from fastapi import APIRouter

from app.routes import categories, inventory, products

api_router = APIRouter()

# Product catalog (CRUD, listing, search)
api_router.include_router(products.router, tags=["products"])

# Categories
api_router.include_router(categories.router, tags=["categories"])

# Checkout stock bookkeeping
api_router.include_router(inventory.router, tags=["inventory"])
