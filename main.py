import logging

import uvicorn
from fastapi import FastAPI

from uxlink.core.config import settings
from uxlink.routers.plugin import router as plugin_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

app = FastAPI(
    title="UXLink Layer Export API",
    description="Structured layer records extracted from a design document selection.",
    version="1.0.0",
)

app.include_router(plugin_router)

@app.get("/health")
def health():
    return {"status": "ok"}

@app.get("/", tags=["Root"])
async def read_root():
    return {"message": "UXLink layer export. POST messages to /api/plugin/messages; see /docs."}

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
