import logging
from fastapi import FastAPI
from infra.settings import settings
from app.adapters.driver.controllers.subscription_controller import router as subscription_router

def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(title=f"{settings.PRODUCT_NAME} Mailing List")
    app.include_router(subscription_router, tags=["subscriptions"])
    return app

app = create_app()
