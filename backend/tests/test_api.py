from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

IT_RESUME = "저는 정보통신 분야에서 10년간 백엔드 개발을 했습니다. React와 Node 경험이 있습니다"


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"


def test_sectors():
    response = client.get("/sectors")
    assert response.status_code == 200
    assert len(response.json()) == 9
    assert "정보통신" in response.json()


def test_resume_analysis():
    response = client.post("/resume-analysis", json={"resumeText": IT_RESUME})
    assert response.status_code == 200
    data = response.json()
    assert data["profile"]["yearsOfExperience"] == 10
    assert data["profile"]["skills"] == ["React", "Node", "개발", "정보통신"]
    assert len(data["sectorGuess"]) == 2
    assert data["sectorGuess"][0]["sector"] == "정보통신"
    assert len(data["sectors"]) == 9


def test_resume_analysis_rejects_blank_text():
    response = client.post("/resume-analysis", json={"resumeText": "   "})
    assert response.status_code == 400


def test_unified_recommendations():
    response = client.post(
        "/unified-recommendations",
        json={"resumeText": IT_RESUME, "chosenSectors": ["정보통신"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert len(data["occupations"]) == 10
    assert len(data["jobs"]) == 10
    assert data["jobs"][0]["id"] == "job10"
    assert [p["id"] for p in data["programs"]] == ["pg4", "pg3", "pg11"]
    assert data["programsFallback"] is False


def test_unified_recommendations_validates_sectors():
    for sectors in ([], ["정보통신", "제조업", "의료"], ["우주항공"]):
        response = client.post(
            "/unified-recommendations",
            json={"resumeText": IT_RESUME, "chosenSectors": sectors},
        )
        assert response.status_code == 400


def test_company_recommendations():
    companies = [
        {"id": f"c{i}", "name": f"회사{i}", "category": "요식업",
         "experience": "경력 5년 이상", "education": "박사", "employmentType": "프리랜서"}
        for i in range(5)
    ]
    response = client.post(
        "/company-recommendations",
        json={
            "profile": {"id": "u1", "education": "고졸"},
            "categories": [{"name": "information_technology"}],
            "companies": companies,
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["totalCompanies"] == 5
    assert len(data["recommendations"]) == 4
    assert data["recommendations"][0]["matchingScore"] == 19
    assert "matchingDetails" in data["recommendations"][0]


def test_company_recommendations_requires_categories():
    response = client.post(
        "/company-recommendations",
        json={"profile": {"id": "u1"}, "categories": [], "companies": []},
    )
    assert response.status_code == 400


def test_career_analysis_fallback():
    with patch("services.gemini_client.generate_json", new_callable=AsyncMock, return_value=None):
        response = client.post("/ai/career-analysis", json={"careerText": "생산관리 20년"})
    assert response.status_code == 200
    data = response.json()
    assert data["experienceLevel"] == "senior"
    assert data["keyStrengths"] == ["풍부한 경험", "안정성", "책임감"]


def test_talent_recommendations():
    responses = [{"matchingScore": 40}, {"matchingScore": 80}]
    with patch("services.gemini_client.generate_json", new_callable=AsyncMock, side_effect=responses):
        response = client.post(
            "/ai/talent-recommendations",
            json={
                "jobPosting": {"title": "경비원"},
                "candidates": [{"id": "a"}, {"id": "b"}],
            },
        )
    assert response.status_code == 200
    assert [m["candidateId"] for m in response.json()] == ["b", "a"]
