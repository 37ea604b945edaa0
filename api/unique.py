# api/unique.py
from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse, StreamingResponse
from settings import settings
from errors import ResourceError
from models import UniqueDrawIn, UniqueDrawOut
from rng.state import GeneratorState
from services.unique import DrawPlan, generate_plan
from sources.os_entropy import seed_from_hex, seed_to_hex

router = APIRouter()


def _prepare(body: UniqueDrawIn, limit=None):
    """Проверка входа, лимита и seed. Всё это - до первой выборки."""
    plan = DrawPlan(body.low, body.high, body.count)
    # лимит раньше seed: /dev/random может блокировать
    if limit is not None and plan.count > limit:
        raise ValueError(f"count {plan.count} exceeds MAX_API_COUNT={limit}; use /unique/stream")
    if body.seed_hex is not None:
        state = GeneratorState(seed_from_hex(body.seed_hex))
    else:
        state = GeneratorState.from_entropy(body.strong)
    return plan, state


def _error(stage: str, e: Exception):
    status = 500 if isinstance(e, ResourceError) else 400
    print(f"[unique/{stage}] error:", e)
    return JSONResponse(status_code=status, content={"error": str(e)})


@router.post("/unique", response_model=UniqueDrawOut)
def unique_draw(body: UniqueDrawIn = Body(...)):
    try:
        plan, state = _prepare(body, limit=settings.MAX_API_COUNT)
        values = [str(v) for v in generate_plan(state, plan)]
    except (ValueError, ResourceError) as e:
        return _error("json", e)
    return UniqueDrawOut(
        low=str(plan.low),
        high=str(plan.high),
        count=plan.count,
        strategy=plan.strategy,
        seed_hex=seed_to_hex(state.seed),
        values=values,
    )


@router.post("/unique/stream")
def unique_stream(body: UniqueDrawIn = Body(...)):
    try:
        plan, state = _prepare(body)
        values = generate_plan(state, plan)
    except (ValueError, ResourceError) as e:
        return _error("stream", e)

    def gen():
        for v in values:
            yield f"{v}\n".encode("ascii")

    headers = {
        "X-Seed-Hex": seed_to_hex(state.seed),
        "X-Strategy": plan.strategy,
    }
    return StreamingResponse(gen(), media_type="text/plain; charset=utf-8", headers=headers)
