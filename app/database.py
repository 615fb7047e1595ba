# app/database.py
import logging
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument
from app.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

class Database:
    client: AsyncIOMotorClient = None
    db = None

db = Database()

async def connect_to_mongo():
    db.client = AsyncIOMotorClient(settings.MONGODB_URI)
    db.db = db.client[settings.MONGODB_DB_NAME]
    logger.info("Connected to MongoDB: %s", settings.MONGODB_DB_NAME)

async def close_mongo_connection():
    if db.client:
        db.client.close()
        logger.info("Closed MongoDB connection")

async def get_database():
    return db.db

async def next_sequence(database: AsyncIOMotorDatabase, name: str) -> int:
    """Atomically allocate the next positive integer ID for a collection"""
    counter = await database.counters.find_one_and_update(
        {"_id": name},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return counter["seq"]

async def create_indexes(database: AsyncIOMotorDatabase):
    # Unique indexes are where uniqueness is actually enforced
    await database.departments.create_index([("code", ASCENDING)], unique=True)
    await database.employees.create_index([("email", ASCENDING)], unique=True)
    await database.employees.create_index([("department_code", ASCENDING)])
    await database.inventory.create_index([("sku_code", ASCENDING)], unique=True)

async def init_db():
    if not db.client:
        await connect_to_mongo()
    try:
        collections = await db.db.list_collection_names()
        for name in ("departments", "employees", "inventory", "counters"):
            if name not in collections:
                await db.db.create_collection(name)

        await create_indexes(db.db)

        logger.info("Database initialized successfully")
        return True
    except Exception:
        logger.exception("Database initialization failed")
        return False

async def insert_sample_data():
    if not db.client:
        await connect_to_mongo()
    try:
        if await db.db.departments.count_documents({}) > 0:
            logger.info("Sample data already exists. Skipping insertion.")
            return True

        departments = [
            {"name": "Research and Development", "code": "RD-001", "description": "Product research"},
            {"name": "Human Resources", "code": "HR-001", "description": "People operations"},
            {"name": "Finance", "code": "FIN-001", "description": "Accounting and payroll"},
        ]
        for department in departments:
            department["_id"] = await next_sequence(db.db, "departments")
        await db.db.departments.insert_many(departments)

        employees = [
            {"first_name": "John", "last_name": "Doe", "email": "john.doe@example.com", "department_code": "RD-001"},
            {"first_name": "Jane", "last_name": "Smith", "email": "jane.smith@example.com", "department_code": "HR-001"},
            {"first_name": "Bob", "last_name": "Johnson", "email": "bob.johnson@example.com", "department_code": "FIN-001"},
        ]
        for employee in employees:
            employee["_id"] = await next_sequence(db.db, "employees")
        await db.db.employees.insert_many(employees)

        inventory = [
            {"sku_code": "iphone_13", "quantity": 100},
            {"sku_code": "iphone_13_red", "quantity": 0},
        ]
        for item in inventory:
            item["_id"] = await next_sequence(db.db, "inventory")
        await db.db.inventory.insert_many(inventory)

        logger.info("Sample data inserted successfully")
        return True
    except Exception:
        logger.exception("Failed to insert sample data")
        return False
