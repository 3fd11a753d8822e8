"""Shared test configuration and synthetic catalogs."""

import pytest

from models.schemas.catalog import EducationProgram, JobPosting, Occupation
from services.catalog import Catalog


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "gemini: exercises the Gemini client (always mocked in this suite)"
    )


@pytest.fixture
def backend_occupation():
    return Occupation(
        id="occ-it-01",
        sector="정보통신",
        title="백엔드 개발자",
        min_years=2,
        req_edu="무관",
        skills=("Node", "DB", "API", "클라우드"),
    )


@pytest.fixture
def small_catalog():
    """Two occupations, three jobs and three programs across two sectors."""
    return Catalog(
        occupations=(
            Occupation(id="o1", sector="정보통신", title="백엔드", min_years=2, skills=("Node", "API")),
            Occupation(id="o2", sector="제조업", title="품질", min_years=3, req_edu="학사", skills=("품질",)),
        ),
        jobs=(
            JobPosting(id="j1", sector="정보통신", title="백엔드 주니어", company="테크B", min_years=2,
                       skills=("Node", "DB", "API")),
            JobPosting(id="j2", sector="제조업", title="품질관리", company="제조C", min_years=3,
                       req_edu="학사", skills=("품질", "MES")),
            JobPosting(id="j3", sector="의료", title="EMR 운영", company="병원G", min_years=1,
                       skills=("EMR",)),
        ),
        programs=(
            EducationProgram(id="p1", title="PLC 자동화", skills=("PLC", "자동화")),
            EducationProgram(id="p2", title="Node.js 백엔드", skills=("Node", "API", "DB")),
            EducationProgram(id="p3", title="EMR 운영", skills=("EMR",)),
        ),
    )
