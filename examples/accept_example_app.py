"""Example FastAPI app exposing parsed Accept headers.

Run with:
    uvicorn examples.accept_example_app:app --reload

Try:
    curl -H "Accept: text/*;q=0.3, text/html;level=1, */*;q=0.5" localhost:8000/accept
"""
from __future__ import annotations

from typing import Any

from fastapi import Depends, FastAPI

from fastapi_accept import AcceptClause, AcceptMiddleware, get_accept_clauses
from fastapi_accept.logging import setup_logging
from fastapi_accept.settings import get_settings

settings = get_settings()
setup_logging(settings.env)

app = FastAPI(title="Accept header example")
app.add_middleware(AcceptMiddleware)


@app.get("/accept")
async def show_accept(
    clauses: list[AcceptClause] = Depends(get_accept_clauses),
) -> dict[str, Any]:
    return {
        "clauses": [
            {
                "media_range": clause.media_range,
                "quality": clause.quality,
                "parameters": clause.parameters,
            }
            for clause in clauses
        ]
    }
