"""Read-only reference catalogs: occupations, job postings and training programs.

A ``Catalog`` is an immutable value passed explicitly into the recommendation
engine. ``default_catalog()`` returns the seeded reference data; job postings
exported from job boards as per-sector CSV files can be merged in with
``build_catalog``.
"""

import csv
import logging
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from models.schemas.catalog import (
    EducationProgram,
    JobPosting,
    Occupation,
    education_from_requirement,
)
from services.vocabulary import SECTORS

logger = logging.getLogger(__name__)


class Catalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    occupations: tuple[Occupation, ...] = ()
    jobs: tuple[JobPosting, ...] = ()
    programs: tuple[EducationProgram, ...] = ()


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_OCCUPATIONS = [
    ("occ-cs-01", "건설업", "현장 시공관리자", 3, "학사", ("도면", "공정", "안전")),
    ("occ-cs-02", "건설업", "BIM 모델러", 2, "무관", ("BIM", "도면")),
    ("occ-sup-01", "공급업", "변전 설비 엔지니어", 4, "학사", ("전기", "설비")),
    ("occ-sup-02", "공급업", "에너지 계량 운영", 1, "무관", ("계량", "데이터")),
    ("occ-st-01", "과학 기술 서비스업", "R&D 연구원", 3, "석사", ("연구", "실험", "분석")),
    ("occ-st-02", "과학 기술 서비스업", "시뮬레이션 엔지니어", 2, "학사", ("시뮬레이션", "모델링")),
    ("occ-mkt-01", "마케팅", "디지털 마케터", 2, "무관", ("디지털", "광고", "성과지표")),
    ("occ-mkt-02", "마케팅", "CRM 매니저", 3, "학사", ("CRM", "데이터")),
    ("occ-art-01", "예술", "문화행사 기획자", 1, "무관", ("기획", "문화")),
    ("occ-art-02", "예술", "콘텐츠 에디터", 1, "무관", ("콘텐츠", "에디팅")),
    ("occ-log-01", "운수 및 창고업", "물류 운영 매니저", 2, "무관", ("물류", "WMS", "SCM")),
    ("occ-log-02", "운수 및 창고업", "배차/운송 코디네이터", 1, "무관", ("배차", "운송")),
    ("occ-med-01", "의료", "의료기기 영업/교육", 2, "학사", ("의료기기", "교육")),
    ("occ-med-02", "의료", "병원 EMR 운영", 1, "무관", ("EMR", "데이터")),
    ("occ-it-01", "정보통신", "백엔드 개발자", 2, "무관", ("Node", "DB", "API", "클라우드")),
    ("occ-it-02", "정보통신", "프론트엔드 개발자", 2, "무관", ("React", "웹", "모바일")),
    ("occ-mfg-01", "제조업", "생산 품질 엔지니어", 3, "학사", ("품질", "FMEA", "MES")),
    ("occ-mfg-02", "제조업", "설비 자동화(PLC)", 2, "무관", ("PLC", "자동화")),
]

_JOBS = [
    ("job1", "건설업", "중견건설 시공관리", "A건설", 3, "학사", ("도면", "공정", "안전"), "서울", "3500만원"),
    ("job2", "정보통신", "백엔드 주니어", "테크B", 2, "무관", ("Node", "DB", "API"), "판교", "4000만원"),
    ("job3", "제조업", "품질관리", "제조C", 3, "학사", ("품질", "MES"), "부산", "3200만원"),
    ("job4", "운수 및 창고업", "물류 운영", "물류D", 2, "무관", ("WMS", "SCM"), "인천", "3000만원"),
    ("job5", "마케팅", "디지털 마케터", "마케팅E", 2, "무관", ("광고", "성과지표"), "강남", "3800만원"),
    ("job6", "과학 기술 서비스업", "시뮬레이션 엔지니어", "랩F", 2, "학사", ("시뮬레이션",), "대전", "4200만원"),
    ("job7", "의료", "EMR 운영", "병원G", 1, "무관", ("EMR",), "서울", "2800만원"),
    ("job8", "예술", "문화행사 기획", "문화H", 1, "무관", ("기획",), "홍대", "2500만원"),
    ("job9", "공급업", "변전 설비", "에너지I", 4, "학사", ("전기", "설비"), "울산", "4500만원"),
    ("job10", "정보통신", "프론트엔드", "테크J", 2, "무관", ("React",), "분당", "3700만원"),
    ("job11", "제조업", "PLC 자동화", "팩토리K", 2, "무관", ("PLC", "자동화"), "창원", "3600만원"),
    ("job12", "마케팅", "CRM 매니저", "리테일L", 3, "학사", ("CRM", "데이터"), "송파", "4100만원"),
]

_PROGRAMS = [
    ("pg1", "PLC 자동화 실무과정", ("PLC", "자동화"), "제조업", "3개월", "폴리텍대학", "offline"),
    ("pg2", "품질/공정 FMEA 교육", ("품질", "FMEA"), "제조업", "2개월", "품질관리협회", "offline"),
    ("pg3", "React 프론트엔드 개발", ("React", "웹"), "정보통신", "4개월", "코드스테이츠", "online"),
    ("pg4", "Node.js 백엔드 API 개발", ("Node", "API", "DB"), "정보통신", "3개월", "엘리스", "online"),
    ("pg5", "물류 WMS/SCM 운영", ("WMS", "SCM"), "운수 및 창고업", "2개월", "한국물류협회", "offline"),
    ("pg6", "시뮬레이션 모델링 입문", ("시뮬레이션", "모델링"), "과학 기술 서비스업", "3개월", "한국과학기술원", "online"),
    ("pg7", "BIM 모델링 실무", ("BIM", "도면"), "건설업", "2개월", "건설기술교육원", "offline"),
    ("pg8", "EMR 병원정보시스템 운영", ("EMR",), "의료", "1개월", "의료정보학회", "offline"),
    ("pg9", "디지털 마케팅 전문가", ("광고", "성과지표"), "마케팅", "3개월", "구글", "online"),
    ("pg10", "전기설비 기초과정", ("전기", "설비"), "공급업", "2개월", "전기안전공사", "offline"),
    ("pg11", "데이터/CRM 분석과정", ("데이터", "CRM"), "마케팅", "2개월", "빅데이터아카데미", "online"),
    ("pg12", "건설안전관리 실무", ("안전",), "건설업", "1개월", "안전보건공단", "offline"),
]


def default_catalog() -> Catalog:
    """The seeded reference catalog."""
    return Catalog(
        occupations=tuple(
            Occupation(id=i, sector=s, title=t, min_years=y, req_edu=e, skills=sk)
            for i, s, t, y, e, sk in _OCCUPATIONS
        ),
        jobs=tuple(
            JobPosting(
                id=i, sector=s, title=t, company=c, min_years=y, req_edu=e,
                skills=sk, location=loc, salary=pay,
            )
            for i, s, t, c, y, e, sk, loc, pay in _JOBS
        ),
        programs=tuple(
            EducationProgram(
                id=i, title=t, skills=sk, sector=s, duration=d, provider=p, type=ty,
            )
            for i, t, sk, s, d, p, ty in _PROGRAMS
        ),
    )


# ---------------------------------------------------------------------------
# Job-board CSV rows -> JobPosting
# ---------------------------------------------------------------------------

# Korean column headers used by the job-board exports
COLUMNS = {
    "company": "회사명",
    "title": "공고명",
    "location": "지역",
    "education": "학력",
    "experience": "경력",
    "field": "분야",
    "deadline": "마감일",
    "employment_type": "고용형태",
    "company_size": "기업규모",
    "salary": "급여(만원)",
}

_FIRST_INT_RE = re.compile(r"\d+")
_TITLE_SPLIT_RE = re.compile(r"[^가-힣a-z0-9]")
_FIELD_SPLIT_RE = re.compile(r"[,·\s]+")


def parse_required_years(experience: str) -> int:
    match = _FIRST_INT_RE.search(experience or "")
    return int(match.group()) if match else 0


def extract_posting_keywords(title: str, field: str) -> tuple[str, ...]:
    """Skill tokens for an imported posting: title words plus field terms (length > 1)."""
    words = [w for w in _TITLE_SPLIT_RE.split(title.lower()) if len(w) > 1]
    if field:
        words += [w for w in _FIELD_SPLIT_RE.split(field) if len(w) > 1]
    return tuple(dict.fromkeys(words))


def job_posting_from_record(record: dict[str, str], sector: str, posting_id: str) -> JobPosting | None:
    """Convert one CSV row. Rows without a company or title are skipped (None)."""
    row = {key: (record.get(header) or "").strip() for key, header in COLUMNS.items()}
    if not row["company"] or not row["title"]:
        return None

    salary = row["salary"]
    if salary and "만원" not in salary:
        salary += "만원"

    return JobPosting(
        id=posting_id,
        sector=sector,
        title=row["title"],
        company=row["company"],
        min_years=parse_required_years(row["experience"]),
        req_edu=education_from_requirement(row["education"]),
        skills=extract_posting_keywords(row["title"], row["field"]),
        location=row["location"],
        salary=salary,
        field=row["field"],
        experience=row["experience"],
        deadline=row["deadline"],
        employment_type=row["employment_type"],
        company_size=row["company_size"],
    )


def _read_rows(path: Path) -> list[dict[str, str]]:
    # Exports come as UTF-8 (with or without BOM) or legacy CP949
    for encoding in ("utf-8-sig", "cp949"):
        try:
            with path.open(encoding=encoding, newline="") as f:
                return list(csv.DictReader(f))
        except UnicodeDecodeError:
            logger.info("%s is not %s, retrying", path.name, encoding)
    raise ValueError(f"Unsupported encoding: {path}")


def load_job_postings_csv(path: str | Path, sector: str) -> list[JobPosting]:
    path = Path(path)
    rows = _read_rows(path)
    jobs = []
    for index, record in enumerate(rows, start=1):
        job = job_posting_from_record(record, sector, f"job-{sector}-{path.stem}-{index}")
        if job is not None:
            jobs.append(job)
    logger.info("Loaded %d/%d postings for %s from %s", len(jobs), len(rows), sector, path.name)
    return jobs


def build_catalog(job_csv_dir: str = "") -> Catalog:
    """Seeded catalog plus any ``<sector>*.csv`` job exports found in ``job_csv_dir``."""
    catalog = default_catalog()
    if not job_csv_dir:
        return catalog

    directory = Path(job_csv_dir)
    if not directory.is_dir():
        logger.warning("Job CSV directory not found: %s", directory)
        return catalog

    imported: list[JobPosting] = []
    for sector in SECTORS:
        for path in sorted(directory.glob(f"{sector}*.csv")):
            try:
                imported.extend(load_job_postings_csv(path, sector))
            except (OSError, ValueError, csv.Error) as e:
                logger.error("Failed to load %s: %s", path, e)

    logger.info("Catalog: %d seeded + %d imported postings", len(catalog.jobs), len(imported))
    return catalog.model_copy(update={"jobs": catalog.jobs + tuple(imported)})
