import logging

from fastapi import FastAPI
import uvicorn
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from core.api_client import ApiClient
from core.config import settings
from routers.beers import router as beers_router
from routers.customers import router as customers_router
from routers.beer_orders import router as beer_orders_router
from routers.shipments import router as shipments_router
from routers.dashboard import router as dashboard_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with ApiClient(settings.api_base_url) as client:
        app.state.api_client = client
        yield


app = FastAPI(
    title="Beer Distribution Console",
    description="Console for beers, customers, beer orders and shipments",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
app.include_router(beers_router, prefix="/beers", tags=["beers"])
app.include_router(customers_router, prefix="/customers", tags=["customers"])
app.include_router(beer_orders_router, prefix="/beer-orders", tags=["beer-orders"])
app.include_router(shipments_router, prefix="/shipments", tags=["shipments"])

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
