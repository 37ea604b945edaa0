# main.py
from fastapi import FastAPI

from api.unique import router as unique_router
from api.range import router as range_router

app = FastAPI(title="uniqrand: unique random integers in arbitrary ranges")

@app.get("/health")
def health():
    return {"ok": True}


app.include_router(unique_router)   # /unique, /unique/stream
app.include_router(range_router)    # /range/by-seed
