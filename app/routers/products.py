# app/routers/products.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session, joinedload

from app.core.errors import NotFoundError
from app.database import get_db, transaction
from app.models.manufacturer import Manufacturer
from app.models.products import Product
from app.schemas.base import MessageResponse
from app.schemas.product import (
    ProductBatchCreate,
    ProductUpdate,
    ProductResponse,
    ProductDetailResponse,
)
from app.services.lookups import apply_updates, get_or_404, require_all_existing, require_existing

router = APIRouter(
    prefix="/product",
    tags=["Products"],
)


@router.post(
    "",
    response_model=list[ProductResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_products(
    product_data: ProductBatchCreate,
    db: Session = Depends(get_db),
):
    require_all_existing(
        db,
        Manufacturer,
        [item.manufacturer_id for item in product_data.products],
        "Manufacturer does not exist",
    )

    products = [
        Product(
            name=item.name,
            description=item.description,
            price=item.price,
            storage_condition=item.storage_condition,
            manufacturer_id=item.manufacturer_id,
        )
        for item in product_data.products
    ]

    with transaction(db):
        db.add_all(products)

    for product in products:
        db.refresh(product)

    return products


@router.get("", response_model=list[ProductDetailResponse])
def list_products(db: Session = Depends(get_db)):
    return (
        db.query(Product)
        .options(joinedload(Product.manufacturer))
        .order_by(Product.id)
        .all()
    )


@router.get("/manufacturer/{manufacturer_id}", response_model=list[ProductResponse])
def list_manufacturer_products(
    manufacturer_id: str,
    db: Session = Depends(get_db),
):
    get_or_404(db, Manufacturer, manufacturer_id, "Manufacturer")

    return (
        db.query(Product)
        .filter(Product.manufacturer_id == manufacturer_id)
        .order_by(Product.id)
        .all()
    )


@router.get("/{product_id}", response_model=ProductDetailResponse)
def read_product(
    product_id: int,
    db: Session = Depends(get_db),
):
    product = (
        db.query(Product)
        .options(joinedload(Product.manufacturer))
        .filter(Product.id == product_id)
        .first()
    )

    if not product:
        raise NotFoundError("Product not found")

    return product


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    db: Session = Depends(get_db),
):
    product = get_or_404(db, Product, product_id, "Product")

    if product_data.manufacturer_id is not None:
        require_existing(db, Manufacturer, product_data.manufacturer_id, "Manufacturer does not exist")

    with transaction(db):
        apply_updates(product, product_data)

    db.refresh(product)
    return product


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
):
    product = get_or_404(db, Product, product_id, "Product")

    with transaction(db):
        db.delete(product)

    return {"message": "Product deleted successfully"}
