from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from godeps.config import Settings
from godeps.errors import EntryNotFoundError, GodepsError
from godeps.model import AnalyzeResult, CategoryFilter
from godeps.traverse import run_analysis


logger = logging.getLogger(__name__)

app = FastAPI(title="Go Dependency Analyzer")


class AnalyzeRequest(BaseModel):
	entry_file: str
	project_root: Optional[str] = None
	deep: bool = False
	category: str = CategoryFilter.ALL.value
	skip_unparsable: Optional[bool] = None


@app.post("/analyze", response_model=AnalyzeResult)
def analyze(req: AnalyzeRequest) -> AnalyzeResult:
	settings = Settings()
	if req.skip_unparsable is not None:
		settings = settings.model_copy(update={"skip_unparsable": req.skip_unparsable})

	try:
		category = CategoryFilter.parse(req.category)
		return run_analysis(
			req.entry_file,
			req.project_root,
			deep=req.deep,
			category=category,
			settings=settings,
		)
	except EntryNotFoundError as e:
		raise HTTPException(status_code=404, detail=str(e)) from e
	except GodepsError as e:
		logger.warning("analysis of %s failed: %s", req.entry_file, e)
		raise HTTPException(status_code=400, detail=str(e)) from e
