"""
Marketplace API Router
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from johar.models.schemas import MarketItem, MarketItemCreate, Transaction
from johar.services import Services, get_services

router = APIRouter(prefix="/market", tags=["market"])


@router.get("/items", response_model=List[MarketItem])
async def list_items(services: Services = Depends(get_services)):
    return services.market.list_items()


@router.post("/items", response_model=MarketItem, status_code=201)
async def add_item(request: MarketItemCreate, services: Services = Depends(get_services)):
    return services.market.add_item(request.title, request.price, request.seller)


@router.post("/items/{item_id}/buy", response_model=Transaction)
async def buy_item(item_id: str, services: Services = Depends(get_services)):
    """Simulated payment; records a transaction"""
    tx = services.market.buy(item_id)
    if not tx:
        raise HTTPException(status_code=404, detail="Item not found")
    return tx


@router.get("/transactions", response_model=List[Transaction])
async def list_transactions(services: Services = Depends(get_services)):
    return services.market.list_transactions()
