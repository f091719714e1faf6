"""Taxonomy API router: canonical catalog and batch normalization."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from caseintel.api.auth import require_api_key
from caseintel.classification.industry import INDUSTRY_HIERARCHY
from caseintel.normalization.reference_data import SERVICE_SILOS, TECH_CATEGORIES
from caseintel.normalization.service import CaseStudyTransformer, get_transformer

router = APIRouter(prefix="/taxonomy", tags=["taxonomy"], dependencies=[Depends(require_api_key)])
LOGGER = logging.getLogger(__name__)


class CaseStudyBatch(BaseModel):
    """Raw case studies as returned by the external record store."""

    case_studies: List[Dict[str, Any]] = Field(default_factory=list)


class TransformResponse(BaseModel):
    """Enriched case studies plus normalization counters."""

    enriched: List[Dict[str, Any]]
    stats: Dict[str, int]


class CatalogResponse(BaseModel):
    """Every category a consumer may need to enumerate."""

    service_silos: List[str]
    technology_categories: Dict[str, List[str]]
    industry_hierarchy: Dict[str, Dict[str, List[str]]]


def get_case_study_transformer() -> CaseStudyTransformer:
    """Dependency provider returning the shared transformer."""

    return get_transformer()


@router.get("/catalog", response_model=CatalogResponse, summary="List canonical taxonomy categories")
def get_catalog() -> CatalogResponse:
    return CatalogResponse(
        service_silos=list(SERVICE_SILOS),
        technology_categories={name: list(keywords) for name, keywords in TECH_CATEGORIES.items()},
        industry_hierarchy=INDUSTRY_HIERARCHY,
    )


@router.post("/transform", response_model=TransformResponse, summary="Normalize a batch of case studies")
def transform(
    payload: CaseStudyBatch,
    transformer: CaseStudyTransformer = Depends(get_case_study_transformer),
) -> TransformResponse:
    result = transformer.transform(payload.case_studies)
    LOGGER.info("Transformed %s case studies", result.stats.total)
    return TransformResponse(**result.to_dict())
