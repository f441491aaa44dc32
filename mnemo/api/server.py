"""
mnemo FastAPI server: memory extraction and personality responses over HTTP.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mnemo.api.routes_memory import router as memory_router
from mnemo.api.routes_messages import router as messages_router
from mnemo.api.routes_personas import router as personas_router
from mnemo.api.routes_status import router as status_router
from mnemo.utils.completion import complete

# Ensure observability logs appear
_log = logging.getLogger("mnemo.observability")
if not _log.handlers:
    _log.setLevel(logging.INFO)
    _log.addHandler(logging.StreamHandler())


app = FastAPI(
    title="mnemo",
    description="Memory extraction and personality-styled responses",
    version="0.1.0",
)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


@app.on_event("startup")
def startup():
    # Routes read the completion function from app.state so it can be swapped
    if getattr(app.state, "llm_fn", None) is None:
        app.state.llm_fn = complete


app.include_router(memory_router)
app.include_router(messages_router)
app.include_router(personas_router)
app.include_router(status_router)


@app.get("/health")
def health():
    return {"status": "ok", "service": "mnemo"}
