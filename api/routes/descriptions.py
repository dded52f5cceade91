from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from portfolio.parsing import DescriptionParseError, LocalWorkStorage, MarkdownParsingEngine

from api.dependencies import get_engine, get_storage

router = APIRouter(tags=["descriptions"])


class DescriptionIn(BaseModel):
    markdown: str


@router.post("/descriptions/parse")
def parse_posted_description(
    payload: DescriptionIn,
    engine: MarkdownParsingEngine = Depends(get_engine),
):
    return engine.parse(payload.markdown).to_dict()


@router.get("/works")
def list_works(storage: LocalWorkStorage = Depends(get_storage)):
    return {"works": storage.list_works()}


@router.get("/works/{work_id}/description")
def get_work_description(
    work_id: str,
    storage: LocalWorkStorage = Depends(get_storage),
    engine: MarkdownParsingEngine = Depends(get_engine),
):
    path = storage.find_description(work_id)
    if path is None:
        raise HTTPException(status_code=404, detail=f"Work not found: {work_id}")
    try:
        parsed = engine.parse_file(path)
    except DescriptionParseError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return parsed.to_dict()


@router.post("/works/{work_id}/description/parse")
def parse_work_description(
    work_id: str,
    storage: LocalWorkStorage = Depends(get_storage),
    engine: MarkdownParsingEngine = Depends(get_engine),
):
    path = storage.find_description(work_id)
    if path is None:
        raise HTTPException(status_code=404, detail=f"Work not found: {work_id}")
    try:
        parsed = engine.parse_file(path)
    except DescriptionParseError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    output_path = storage.write_parsed_output(work_id, parsed)
    return {"work_id": work_id, "output_path": str(output_path), "description": parsed.to_dict()}
