"""REST API adapter."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, Query as FastQuery

from fndep.cache import FunctionRecord
from fndep.context import AnalysisContext


def create_app(context: AnalysisContext) -> FastAPI:
    app = FastAPI(title="fndep Server (REST)")

    @app.get("/healthz")
    def healthz() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/functions")
    def list_functions() -> Dict[str, Any]:
        return {
            "functions": [_record_summary(record) for record in context.list_functions()],
        }

    @app.get("/functions/{name}")
    def get_function(name: str) -> Dict[str, Any]:
        record = context.cache.get(name) if context.cache else None
        if not record:
            return {"error": "not_found"}
        return {**_record_summary(record), "body": record.body}

    @app.get("/analyze/{name}")
    def analyze(name: str, max_depth: Optional[int] = FastQuery(None, ge=1, le=100)) -> Dict[str, Any]:
        result = context.analyze(name, max_depth=max_depth)
        return result.model_dump()

    return app


def _record_summary(record: FunctionRecord) -> Dict[str, Any]:
    return {
        "name": record.name,
        "source_location": record.source_location,
    }
