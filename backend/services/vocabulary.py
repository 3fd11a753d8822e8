"""Lexical vocabulary tables shared by the extractor, classifier and scorers.

Everything here is plain data: sector names, per-sector keyword lists, the flat
skill vocabulary used for profile extraction, the semantic keyword lists used
by the company matcher, and the recognized IT certifications.
"""

# ---------------------------------------------------------------------------
# Industry sectors (declaration order is the tie-break order for ranking)
# ---------------------------------------------------------------------------
SECTORS: tuple[str, ...] = (
    "건설업",
    "공급업",
    "과학 기술 서비스업",
    "마케팅",
    "예술",
    "운수 및 창고업",
    "의료",
    "정보통신",
    "제조업",
)

# Keyword vocabulary per sector. Also serves as the "needed skills" list when
# computing a user's skill gap for training programs.
SECTOR_VOCAB: dict[str, tuple[str, ...]] = {
    "건설업": (
        "건설", "건축", "토목", "시공", "현장", "도면", "공정", "안전",
        "BIM", "AutoCAD", "견적", "감리",
    ),
    "공급업": (
        "전기", "가스", "에너지", "설비", "변전", "배전", "계량", "공조",
        "난방", "발전",
    ),
    "과학 기술 서비스업": (
        "연구", "R&D", "실험", "분석", "시뮬레이션", "모델링", "특허",
        "컨설팅", "측정",
    ),
    "마케팅": (
        "마케팅", "광고", "홍보", "브랜딩", "디지털", "성과지표", "CRM",
        "데이터", "영업", "캠페인",
    ),
    "예술": (
        "예술", "문화", "기획", "콘텐츠", "에디팅", "디자인", "공연", "전시",
        "영상", "사진",
    ),
    "운수 및 창고업": (
        "물류", "창고", "운송", "배송", "배차", "WMS", "SCM", "유통",
        "택배", "재고",
    ),
    "의료": (
        "의료", "병원", "간호", "EMR", "의료기기", "임상", "원무", "제약",
        "의료정보", "교육",
    ),
    "정보통신": (
        "정보통신", "개발", "소프트웨어", "Node", "React", "DB", "API",
        "클라우드", "웹", "모바일", "서버", "네트워크", "보안", "데이터",
    ),
    "제조업": (
        "제조", "생산", "품질", "FMEA", "MES", "PLC", "자동화", "CNC",
        "설비", "공장", "정비",
    ),
}

# Flat skill vocabulary for profile extraction (canonical casing preserved)
SKILL_VOCAB: tuple[str, ...] = (
    # Management / office
    "프로젝트", "리더", "관리", "엑셀", "파워포인트", "기획", "회계", "영업",
    # Languages / dev
    "파이썬", "자바", "SQL", "AI", "AWS", "Docker", "React", "Node", "개발",
    # Engineering / field
    "AutoCAD", "PLC", "CNC", "품질", "안전", "도면", "R&D",
    # Logistics
    "물류", "SCM", "WMS",
    # Domain terms
    "EMR", "마케팅", "디자인", "문화", "의료", "병원", "건설", "제조",
    "정보통신",
)

# ---------------------------------------------------------------------------
# Company matcher: semantic keywords per internal job-category name.
# Broader than SECTOR_VOCAB; matched against a company's category string.
# ---------------------------------------------------------------------------
INFORMATION_TECHNOLOGY = "information_technology"

CATEGORY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "manufacturing": ("제조업", "생산", "공장", "제품", "품질"),
    INFORMATION_TECHNOLOGY: ("정보통신", "IT", "소프트웨어", "개발", "시스템", "데이터"),
    "logistics": ("운수", "창고", "물류", "배송", "운송", "유통"),
    "construction": ("건설", "건축", "토목", "시설", "공사"),
    "marketing": ("마케팅", "광고", "홍보", "브랜딩", "영업"),
    "healthcare": ("의료", "제약", "병원", "간호", "바이오"),
    "science_technology": ("연구", "개발", "기술", "과학", "R&D"),
    "arts": ("예술", "문화", "콘텐츠", "디자인", "편집"),
    "supply": ("공급", "유통", "서비스", "호텔", "요리"),
}

# Recognized certifications (substring match against user skills)
IT_CERTIFICATIONS: tuple[str, ...] = (
    "ADSP", "ADP", "SQLD", "SQLP", "OCP", "AWS", "Azure", "GCP",
    "PMP", "CISSP", "CISA", "CISM", "CEH", "CCNA", "CCNP",
    "정보처리기사", "정보보안기사", "컴활", "MOS", "ITQ",
)
