from __future__ import annotations

import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from modelgraph.builder import scan_project
from modelgraph.config import get_settings
from modelgraph.errors import FileUnreadable, ScanRootNotFound
from modelgraph.fs_scan import read_source
from modelgraph.model import AnalyzeResult
from modelgraph.summarize import summarize_graph


app = FastAPI(title="Eloquent Model Graph")


class AnalyzeRequest(BaseModel):
	root_path: str


class SourceResponse(BaseModel):
	path: str
	content: str
	total_lines: int


@app.post("/analyze", response_model=AnalyzeResult)
def analyze(req: AnalyzeRequest) -> AnalyzeResult:
	root = os.path.abspath(req.root_path)
	try:
		graph = scan_project(root, get_settings())
	except ScanRootNotFound:
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")

	return AnalyzeResult(graph=graph.to_payload(), summary=summarize_graph(graph, root))


@app.get("/source", response_model=SourceResponse)
def get_source(path: str) -> SourceResponse:
	"""Return a model file's text so a viewer can open the clicked node."""
	if not os.path.isfile(path):
		raise HTTPException(status_code=404, detail="File not found")
	if not path.endswith(".php"):
		raise HTTPException(status_code=400, detail="Only PHP sources can be opened")
	try:
		content = read_source(path, get_settings().encoding)
	except FileUnreadable as e:
		raise HTTPException(status_code=400, detail=str(e))

	return SourceResponse(path=path, content=content, total_lines=len(content.splitlines()))


def create_app() -> FastAPI:
	return app
