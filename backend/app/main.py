from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from app.core.config import settings
from app.core.database import connect_to_mongo, close_mongo_connection, get_database
from app.core.exceptions import AppError
from app.core.rate_limit import ClientWindowStore, RateLimiter
from app.api.middleware import RateLimitMiddleware, RequestLoggingMiddleware
from app.api.routes import auth, cart, customers, products, orders
from app.repositories.mongodb.cart import MongoCartRepository
from app.repositories.mongodb.product import MongoProductRepository
from app.services.cart_service import CartService

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render application errors as {"error": message} with their status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app(rate_limit_store: Optional[ClientWindowStore] = None) -> FastAPI:
    """Build the FastAPI application around one rate-limit store."""
    store = rate_limit_store or ClientWindowStore(
        window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
        idle_seconds=settings.RATE_LIMIT_IDLE_SECONDS,
        cleanup_interval_seconds=settings.RATE_LIMIT_CLEANUP_INTERVAL_SECONDS
    )
    rate_limiter = RateLimiter(store, settings.RATE_LIMIT_PER_MINUTE)

    application = FastAPI(
        title=settings.PROJECT_NAME,
        description="Order management API: customers, products, orders and shopping carts",
        version="2.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )
    application.state.rate_limit_store = store
    application.state.rate_limiter = rate_limiter

    # Outermost first: CORS -> rate limit -> request logging -> routes
    application.add_middleware(RequestLoggingMiddleware)
    application.add_middleware(RateLimitMiddleware, limiter=rate_limiter)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(AppError, app_error_handler)

    @application.on_event("startup")
    async def startup_event():
        """Initialize services on startup."""
        logger.info("Starting up Order Management API...")
        await connect_to_mongo()
        db = get_database()
        application.state.cart_service = CartService(
            MongoCartRepository(db),
            MongoProductRepository(db)
        )
        store.start()
        logger.info("Order Management API started successfully")

    @application.on_event("shutdown")
    async def shutdown_event():
        """Clean up services on shutdown."""
        logger.info("Shutting down Order Management API...")
        await store.stop()
        await close_mongo_connection()
        logger.info("Order Management API shut down successfully")

    @application.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "ok",
            "message": "API is running"
        }

    @application.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.PROJECT_NAME,
            "version": "2.0.0",
            "docs": "/docs",
            "health": "/health"
        }

    # Include routers
    application.include_router(auth.router, prefix=f"{settings.API_V1_PREFIX}/auth", tags=["Authentication"])
    application.include_router(customers.router, prefix=f"{settings.API_V1_PREFIX}/customers", tags=["Customers"])
    application.include_router(cart.router, prefix=f"{settings.API_V1_PREFIX}/customers", tags=["Cart"])
    application.include_router(products.router, prefix=f"{settings.API_V1_PREFIX}/products", tags=["Products"])
    application.include_router(orders.router, prefix=f"{settings.API_V1_PREFIX}/orders", tags=["Orders"])

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080)
