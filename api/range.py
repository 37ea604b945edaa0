# api/range.py
from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from models import RangeBySeedIn
from services.sample import sample_range_by_seed
from sources.os_entropy import seed_from_hex

router = APIRouter()

@router.post("/range/by-seed")
async def range_by_seed(body: RangeBySeedIn = Body(...)):
    try:
        seed = seed_from_hex(body.seed_hex)
        value, meta = sample_range_by_seed(seed, body.n1, body.n2, label=body.label)
    except ValueError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})

    # value строкой: диапазон может быть шире 2^53
    return {"value": str(value), **meta, "lo": str(meta["lo"]), "hi": str(meta["hi"]),
            "rangeSize": str(meta["rangeSize"])}
