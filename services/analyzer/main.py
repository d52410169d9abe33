"""Analyzer service - Prompt intent, constraint gaps, scoring and drift."""
import uuid
from datetime import datetime
from typing import Optional

import structlog
from fastapi import BackgroundTasks, FastAPI, HTTPException
from fastapi.responses import JSONResponse

from . import config
from .analyzer import build_analyzer
from .models import (
    AnalyzeRequest,
    AnalyzeResponse,
    ClarifyRequest,
    ClarifyResponse,
    PromptRecord,
    PromptVersion,
    RefineRequest,
    RefineResponse,
)
from .storage import PromptStore

# Configure structured logging
structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.JSONRenderer()
    ]
)

logger = structlog.get_logger()

app = FastAPI(
    title="Prompt Analyzer - Analyzer Service",
    description="Intent detection, constraint gaps, quality scoring and drift detection",
    version="0.1.0",
)

storage = PromptStore(config.DATA_DIR)
analyzer = build_analyzer()


def generate_prompt_id() -> str:
    """Generate unique prompt ID."""
    return f"prm_{uuid.uuid4().hex[:12]}"


def persist(record: PromptRecord) -> None:
    """Save a snapshot in the background; failures never reach the client."""
    try:
        storage.save(record)
    except Exception as e:
        logger.error("prompt_save_failed", prompt_id=record.prompt_id, error=str(e))


def load_prompt(prompt_id: Optional[str]) -> Optional[PromptRecord]:
    """Look up a stored prompt, treating storage errors as a miss."""
    if not prompt_id:
        return None
    try:
        return storage.get(prompt_id)
    except Exception as e:
        logger.error("prompt_load_failed", prompt_id=prompt_id, error=str(e))
        return None


def original_text_of(existing: Optional[PromptRecord]) -> str:
    if existing and existing.versions:
        return existing.versions[0].text
    return ""


@app.post("/api/prompt", response_model=AnalyzeResponse)
def analyze_prompt(request: AnalyzeRequest, background_tasks: BackgroundTasks):
    """Analyze a raw prompt."""
    raw_text = request.text.strip()
    if not raw_text:
        raise HTTPException(status_code=400, detail='Missing or empty "text" field.')

    try:
        prompt_id = generate_prompt_id()
        result = analyzer.analyze(raw_text)

        versions = [
            PromptVersion(label="v0_raw", text=raw_text),
            PromptVersion(label="v1_structured", text=result.refined),
        ]

        background_tasks.add_task(persist, PromptRecord(
            prompt_id=prompt_id,
            versions=versions,
            intent=result.intent,
            gaps=result.gaps,
            suggestions=result.suggestions,
            scores=result.scores,
            warnings=result.warnings,
        ))

        logger.info(
            "prompt_analyzed",
            prompt_id=prompt_id,
            intent=result.intent.detected,
            gap_count=len(result.gaps),
            total=result.scores.total,
            text_length=len(raw_text)
        )

        return AnalyzeResponse(
            prompt_id=prompt_id,
            intent=result.intent,
            gaps=result.gaps,
            suggestions=result.suggestions,
            scores=result.scores,
            warnings=result.warnings,
            versions=versions,
            drift_warning="",
        )

    except Exception as e:
        logger.error("analyze_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error.")


@app.post("/api/clarify", response_model=ClarifyResponse)
def clarify_prompt(request: ClarifyRequest, background_tasks: BackgroundTasks):
    """Merge selected constraint chips into the original prompt and re-analyze."""
    if not request.prompt_id or request.selections is None:
        raise HTTPException(status_code=400, detail='Missing "promptId" or "selections".')

    existing = load_prompt(request.prompt_id)
    raw_text = original_text_of(existing) or (request.original_text or "").strip()
    if not raw_text:
        raise HTTPException(status_code=404, detail='Prompt not found. Provide "originalText".')

    try:
        result = analyzer.analyze(raw_text, request.selections)

        if existing:
            version = PromptVersion(label=f"v{len(existing.versions)}_clarified", text=result.refined)
            versions = [*existing.versions, version]
        else:
            versions = [
                PromptVersion(label="v0_raw", text=raw_text),
                PromptVersion(label="v2_clarified", text=result.refined),
            ]

        update = dict(
            updated_at=datetime.now(),
            versions=versions,
            constraints=request.selections,
            gaps=result.gaps,
            suggestions=result.suggestions,
            scores=result.scores,
            warnings=result.warnings,
        )
        if existing:
            record = existing.model_copy(update=update)
        else:
            record = PromptRecord(prompt_id=request.prompt_id, intent=result.intent, **update)
        background_tasks.add_task(persist, record)

        logger.info(
            "prompt_clarified",
            prompt_id=request.prompt_id,
            selections=sorted(request.selections),
            gap_count=len(result.gaps),
            total=result.scores.total
        )

        return ClarifyResponse(
            prompt_id=request.prompt_id,
            refined=result.refined,
            constraints=request.selections,
            gaps=result.gaps,
            suggestions=result.suggestions,
            scores=result.scores,
            warnings=result.warnings,
            versions=versions,
        )

    except Exception as e:
        logger.error("clarify_failed", prompt_id=request.prompt_id, error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error.")


@app.post("/api/refine", response_model=RefineResponse)
def refine_prompt(request: RefineRequest, background_tasks: BackgroundTasks):
    """Refine a prompt further and check it for drift against the original."""
    text = request.text.strip()
    if not text:
        raise HTTPException(status_code=400, detail='Missing "text" field.')

    existing = load_prompt(request.prompt_id)
    original = original_text_of(existing) or (request.original_text or "").strip() or text

    try:
        prompt_id = request.prompt_id or generate_prompt_id()
        result = analyzer.refine(
            text,
            original,
            request.constraints,
            existing.intent if existing else None
        )

        if existing:
            version = PromptVersion(label=f"v{len(existing.versions)}_refined", text=result.refined)
            versions = [*existing.versions, version]
        else:
            versions = [
                PromptVersion(label="v0_raw", text=original),
                PromptVersion(label="v2_refined", text=result.refined),
            ]

        update = dict(
            updated_at=datetime.now(),
            versions=versions,
            gaps=result.gaps,
            suggestions=result.suggestions,
            scores=result.scores,
            warnings=result.warnings,
            drift_warning=result.drift_warning,
        )
        if existing:
            record = existing.model_copy(update=update)
        else:
            record = PromptRecord(prompt_id=prompt_id, constraints=request.constraints, **update)
        background_tasks.add_task(persist, record)

        logger.info(
            "prompt_refined",
            prompt_id=prompt_id,
            drift_detected=result.drift_detected,
            total=result.scores.total
        )

        return RefineResponse(
            prompt_id=prompt_id,
            refined=result.refined,
            gaps=result.gaps,
            scores=result.scores,
            warnings=result.warnings,
            drift_warning=result.drift_warning,
            drift_detected=result.drift_detected,
            versions=versions,
        )

    except Exception as e:
        logger.error("refine_failed", prompt_id=request.prompt_id, error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error.")


@app.get("/api/prompt/{prompt_id}", response_model=PromptRecord)
def get_prompt(prompt_id: str):
    """Retrieve the latest stored snapshot of a prompt."""
    record = load_prompt(prompt_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Prompt not found.")
    return record


@app.get("/health")
def health():
    """Health check endpoint."""
    try:
        if not storage.data_dir.exists():
            raise Exception("Data directory not found")

        return {
            "status": "healthy",
            "service": "analyzer",
            "mode": analyzer.mode,
            "model": config.MODEL if analyzer.mode == "ai" else None,
            "prompts": len(storage.list_prompts())
        }

    except Exception as e:
        logger.error("health_check_failed", error=str(e))
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "error": str(e)}
        )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
