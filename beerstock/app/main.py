import uvicorn
from fastapi import FastAPI

from beerstock.app.api.errors import register_exception_handlers
from beerstock.app.api.v1.router import router as v1_router

app = FastAPI(title="Beer Stock API", version="0.1.0")
register_exception_handlers(app)
app.include_router(v1_router, prefix="/api/v1")

if __name__ == "__main__":
    uvicorn.run("beerstock.app.main:app", host="0.0.0.0", port=8000, reload=True)
