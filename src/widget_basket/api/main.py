"""
Basket API - FastAPI front end for the basket calculator.

Each request builds its own Basket from the shared configuration.
"""
import logging
from typing import List, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from widget_basket import __version__
from widget_basket.config.logging_config import setup_logging
from widget_basket.engine import Basket
from widget_basket.errors import InvalidItemsTypeError, NoApplicableDeliveryRuleError, UnknownProductError
from widget_basket.api.state import config, settings

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Widget Basket API",
    description="Prices widget baskets with multi-buy offers and tiered delivery",
    version=__version__
)


class CalcRequest(BaseModel):
    items: Union[List[str], str]


@app.get("/")
async def root():
    return {"status": "online", "message": "Widget Basket API Active"}


@app.post("/calculate")
async def calculate_basket(req: CalcRequest):
    try:
        basket = Basket.initialize_with_items(req.items, config.catalog, config.delivery_rules, config.offers, rounding=settings.rounding)
        result = basket.calculate()
    except UnknownProductError as e:
        raise HTTPException(status_code=400, detail={"message": str(e), "valid_codes": e.valid_codes})
    except InvalidItemsTypeError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except NoApplicableDeliveryRuleError as e:
        logger.error("Delivery rules do not cover subtotal %s", e.subtotal)
        raise HTTPException(status_code=500, detail=str(e))
    return result.to_dict()


@app.get("/catalog")
async def get_catalog():
    return {
        code: {"name": product.name, "price": str(product.price)}
        for code, product in config.catalog.items()
    }


@app.get("/delivery-rules")
async def get_delivery_rules():
    return [
        {"min_total": str(rule.min_total), "cost": str(rule.cost)}
        for rule in config.delivery_rules
    ]


@app.get("/system/status")
async def get_status():
    return {
        "engine_active": True,
        "products_count": len(config.catalog),
        "delivery_rules_count": len(config.delivery_rules),
        "offers_count": len(config.offers),
        "rounding": settings.rounding,
    }
