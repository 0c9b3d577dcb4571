# app/main.py
from fastapi import FastAPI
from app.database import engine, create_tables
from app.routes import auth, comments, tours, users
from app.core.config import get_settings
from app.core.errors import register_error_handlers
from app.core.logging_config import setup_logging

settings = get_settings()
setup_logging()
app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)

register_error_handlers(app)

app.include_router(auth.router)
app.include_router(users.router)
app.include_router(tours.router)
app.include_router(comments.router)

@app.on_event("startup")
async def startup_event():
    # create tables if they don't exist
    await create_tables()

@app.on_event("shutdown")
async def shutdown_event():
    await engine.dispose()

@app.get("/health")
async def health():
    return {"status": "ok", "app": settings.APP_NAME}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.APP_HOST, port=settings.APP_PORT, reload=settings.DEBUG)
