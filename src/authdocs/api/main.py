"""FastAPI entrypoint for ask/tool/trace endpoints."""

from __future__ import annotations

import os
from dataclasses import asdict
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from authdocs.agent.registry import ToolRegistry
from authdocs.agent.tools import AskToolInput, register_builtin_tools
from authdocs.config import CorpusConfig, RetrievalConfig
from authdocs.ingest.corpus import CorpusCache
from authdocs.obs.log import configure_logging
from authdocs.obs.tracing import Timer, TraceStore
from authdocs.retrieval.retriever import CorpusRetriever
from authdocs.types import ToolTrace


def create_app(
    corpus_dir: str | Path | None = None,
    *,
    retrieval_config: RetrievalConfig | None = None,
) -> FastAPI:
    corpus_config = CorpusConfig(
        corpus_dir=Path(corpus_dir or os.getenv("AUTHDOCS_CORPUS_DIR", "docs"))
    )
    corpus = CorpusCache(corpus_config)
    retriever = CorpusRetriever(corpus, retrieval_config or RetrievalConfig())
    registry = ToolRegistry()
    register_builtin_tools(registry, retriever, corpus)
    trace_store = TraceStore()

    app = FastAPI(title="Auth Docs Tool Server", version="0.1.0")

    @app.get("/health")
    def health() -> dict[str, Any]:
        return {
            "status": "ok",
            "corpus_state": corpus.state.value,
            "corpus_dir": str(corpus_config.corpus_dir),
            "tools": registry.names(),
        }

    @app.get("/tools")
    def list_tools() -> dict[str, Any]:
        return {"items": [spec.describe() for spec in registry.specs()]}

    @app.post("/tools/{name}")
    def execute_tool(name: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            output = registry.execute(name, payload)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except ValidationError as exc:
            raise HTTPException(
                status_code=422, detail=exc.errors(include_url=False, include_context=False)
            ) from exc
        return {"tool": name, "output": output}

    @app.post("/ask")
    def ask(request: AskToolInput) -> dict[str, Any]:
        with Timer() as timer:
            result = retriever.retrieve(request.topic, request.question)
        record = trace_store.create_record(
            question=request.question,
            topic=request.topic,
            result=result,
            tool_traces=[
                ToolTrace(
                    name="ask_documentation",
                    input_payload=request.model_dump(),
                    output_preview=result.answer[:320],
                    latency_ms=timer.elapsed_ms,
                )
            ],
            latency_ms=timer.elapsed_ms,
        )
        return {**result.to_payload(), "trace_id": record.trace_id, "latency_ms": record.latency_ms}

    @app.get("/traces")
    def traces(limit: int = 20) -> dict[str, Any]:
        records = [asdict(record) for record in trace_store.list_recent(limit=limit)]
        return {"items": records}

    @app.get("/traces/{trace_id}")
    def trace_detail(trace_id: str) -> dict[str, Any]:
        try:
            record = trace_store.get(trace_id)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return asdict(record)

    @app.get("/metrics")
    def metrics() -> dict[str, Any]:
        return trace_store.summary()

    return app


configure_logging(os.getenv("AUTHDOCS_LOG_LEVEL", "INFO"))
app = create_app()
