# app/main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.routes import department_router, employee_router, inventory_router
from app.database import connect_to_mongo, close_mongo_connection, init_db, insert_sample_data
from app.exceptions import ServiceError, service_error_handler
from app.config import get_settings
from app.utils.logger import setup_logger

settings = get_settings()
setup_logger(level=settings.LOG_LEVEL)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_mongo()
    await init_db()
    if settings.INSERT_SAMPLE_DATA:
        await insert_sample_data()
    yield
    # Shutdown
    await close_mongo_connection()

app = FastAPI(title="Company Services", lifespan=lifespan)

app.add_exception_handler(ServiceError, service_error_handler)

app.include_router(department_router, prefix=settings.API_PREFIX, tags=["departments"])
app.include_router(employee_router, prefix=settings.API_PREFIX, tags=["employees"])
app.include_router(inventory_router, prefix=settings.INVENTORY_PREFIX, tags=["inventory"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Company Services API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
