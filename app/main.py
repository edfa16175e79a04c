from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.routes import events_router
from app.config import ALLOWED_ORIGINS
from app.core.error_handling import register_exception_handlers

app = FastAPI(title="Events API")

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
    max_age=3600,
)

app.include_router(events_router)

@app.get("/")
async def root():
    """Root endpoint for health check."""
    return {
        "message": "Events API is running",
        "status": "healthy",
        "version": "1.0.0"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
