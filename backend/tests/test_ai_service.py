"""Tests for the AI analysis service. Gemini is always mocked."""

from unittest.mock import AsyncMock, patch

import pytest

from models.schemas.ai_analysis import CandidateProfile, JobRequirements, TalentJobPosting
from services import gemini_client
from services.ai_service import FALLBACK_PROFILE_ANALYSIS, AIService, _clamp_score
from services.throttle import NoThrottle

pytestmark = pytest.mark.gemini

ANALYSIS_PAYLOAD = {
    "summary": "20년 경력의 생산관리 전문가입니다.",
    "keyStrengths": ["공정 관리", "품질 개선", "리더십"],
    "recommendedJobTypes": ["생산관리", "품질관리"],
    "skillsExtracted": ["MES", "FMEA"],
    "experienceLevel": "expert",
    "careerHighlights": ["불량률 30% 개선"],
}

JOB = TalentJobPosting(id="job-1", title="경비원", description="야간 경비", prefers_seniors=True)


def _candidates(n):
    return [CandidateProfile(id=f"c{i}", summary="경력자") for i in range(1, n + 1)]


@pytest.fixture
def service():
    return AIService(throttle=NoThrottle())


def _mock_json(**kwargs):
    return patch("services.gemini_client.generate_json", new_callable=AsyncMock, **kwargs)


def _mock_text(**kwargs):
    return patch("services.gemini_client.generate_text", new_callable=AsyncMock, **kwargs)


class TestCareerAnalysis:
    @pytest.mark.asyncio
    async def test_parses_payload(self, service):
        with _mock_json(return_value=ANALYSIS_PAYLOAD) as mock:
            result = await service.analyze_career_profile("생산관리 20년", "이력서")
        assert result.experience_level == "expert"
        assert result.key_strengths[0] == "공정 관리"
        prompt = mock.await_args.args[0]
        assert "생산관리 20년" in prompt and "이력서" in prompt

    @pytest.mark.asyncio
    async def test_fallback_when_unavailable(self, service):
        with _mock_json(return_value=None):
            result = await service.analyze_career_profile("경력")
        assert result == FALLBACK_PROFILE_ANALYSIS

    @pytest.mark.asyncio
    async def test_fallback_is_a_private_copy(self, service):
        original = FALLBACK_PROFILE_ANALYSIS.key_strengths.copy()
        with _mock_json(return_value=None):
            first = await service.analyze_career_profile("경력")
            first.key_strengths.append("추가")
            second = await service.analyze_career_profile("경력")
        assert FALLBACK_PROFILE_ANALYSIS.key_strengths == original
        assert second.key_strengths == original

    @pytest.mark.asyncio
    async def test_fallback_on_invalid_payload(self, service):
        with _mock_json(return_value={**ANALYSIS_PAYLOAD, "experienceLevel": "guru"}):
            result = await service.analyze_career_profile("경력")
        assert result == FALLBACK_PROFILE_ANALYSIS

    @pytest.mark.asyncio
    async def test_resume_text(self, service):
        with _mock_json(return_value=ANALYSIS_PAYLOAD) as mock:
            result = await service.analyze_resume_text("품질관리 15년")
        assert "품질관리 15년" in mock.await_args.args[0]
        assert result.skills_extracted == ["MES", "FMEA"]

    @pytest.mark.asyncio
    async def test_resume_image_extracts_then_analyzes(self, service):
        with _mock_text(return_value="경력: 생산관리 20년") as text, _mock_json(
            return_value=ANALYSIS_PAYLOAD
        ) as json_mock:
            result = await service.analyze_resume_image(b"\xff\xd8", "image/jpeg")
        assert text.await_args.kwargs["image_bytes"] == b"\xff\xd8"
        assert "생산관리 20년" in json_mock.await_args.args[0]
        assert result.summary == ANALYSIS_PAYLOAD["summary"]

    @pytest.mark.asyncio
    async def test_resume_image_fallback(self, service):
        with _mock_text(return_value=None):
            result = await service.analyze_resume_image(b"img")
        assert result == FALLBACK_PROFILE_ANALYSIS


class TestJobMatch:
    @pytest.mark.parametrize("raw,expected", [(72, 72), (150, 100), (-5, 0), ("88", 88), ("높음", 50), (None, 50)])
    def test_clamp_score(self, raw, expected):
        assert _clamp_score(raw) == expected

    @pytest.mark.parametrize("raw", ["1e999", float("inf"), float("-inf"), float("nan")])
    def test_clamp_score_rejects_non_finite(self, raw):
        with pytest.raises(ValueError):
            _clamp_score(raw)

    @pytest.mark.asyncio
    async def test_single_match_non_finite_score_falls_back(self, service):
        with _mock_json(return_value={"matchingScore": "1e999"}):
            result = await service.calculate_job_match(_candidates(1)[0], JOB)
        assert result.matching_score == 50
        assert result.reasoning == "매칭 분석 중 오류가 발생했습니다."

    @pytest.mark.asyncio
    async def test_single_match(self, service):
        payload = {"matchingScore": 120, "reasoning": "경험 풍부", "keyStrengths": ["성실"]}
        with _mock_json(return_value=payload):
            result = await service.calculate_job_match(_candidates(1)[0], JOB)
        assert result.candidate_id == "c1"
        assert result.matching_score == 100
        assert result.improvement_suggestions == []

    @pytest.mark.asyncio
    async def test_single_match_fallback(self, service):
        with _mock_json(return_value=None):
            result = await service.calculate_job_match(_candidates(1)[0], JOB)
        assert result.candidate_id == "c1"
        assert result.matching_score == 50


class TestTalentRecommendations:
    @pytest.mark.asyncio
    async def test_failures_skipped_and_sorted(self, service):
        responses = [{"matchingScore": 70}, None, {"matchingScore": 90}]
        with _mock_json(side_effect=responses):
            result = await service.generate_talent_recommendations(JOB, _candidates(3))
        assert [m.candidate_id for m in result] == ["c3", "c1"]
        assert [m.matching_score for m in result] == [90, 70]

    @pytest.mark.asyncio
    async def test_non_finite_score_skips_only_that_candidate(self, service):
        responses = [{"matchingScore": 70}, {"matchingScore": "1e999"}, {"matchingScore": 80}]
        with _mock_json(side_effect=responses):
            result = await service.generate_talent_recommendations(JOB, _candidates(3))
        assert [m.candidate_id for m in result] == ["c3", "c1"]
        assert [m.matching_score for m in result] == [80, 70]

    @pytest.mark.asyncio
    async def test_throttle_awaited_per_candidate(self, service):
        throttle = AsyncMock()
        with _mock_json(return_value={"matchingScore": 60}):
            await service.generate_talent_recommendations(JOB, _candidates(4), throttle=throttle)
        assert throttle.wait.await_count == 4

    @pytest.mark.asyncio
    async def test_all_fail(self, service):
        with _mock_json(return_value=None):
            assert await service.generate_talent_recommendations(JOB, _candidates(2)) == []

    @pytest.mark.asyncio
    async def test_no_candidates(self, service):
        with _mock_json() as mock:
            assert await service.generate_talent_recommendations(JOB, []) == []
        mock.assert_not_awaited()


class TestTextHelpers:
    @pytest.mark.asyncio
    async def test_job_requirements(self, service):
        payload = {"requirements": ["야간 근무"], "skills": ["CCTV"], "benefits": ["4대보험"]}
        with _mock_json(return_value=payload):
            result = await service.extract_job_requirements("경비원 모집")
        assert result.skills == ["CCTV"]

    @pytest.mark.asyncio
    async def test_job_requirements_fallback(self, service):
        with _mock_json(return_value=None):
            assert await service.extract_job_requirements("경비원 모집") == JobRequirements()

    @pytest.mark.asyncio
    async def test_voice_transcript_cleanup(self, service):
        with _mock_text(return_value="생산관리 20년 경력입니다."):
            assert await service.process_voice_transcript("어 생산 관리 이십년") == "생산관리 20년 경력입니다."

    @pytest.mark.asyncio
    async def test_voice_transcript_fallback_returns_input(self, service):
        with _mock_text(return_value=None):
            assert await service.process_voice_transcript("원문") == "원문"


class TestGeminiClient:
    def test_strip_code_fences(self):
        assert gemini_client._strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
        assert gemini_client._strip_code_fences('  {"a": 1} ') == '{"a": 1}'

    @pytest.mark.asyncio
    async def test_no_api_key_returns_none(self, monkeypatch):
        monkeypatch.setattr(gemini_client.settings, "gemini_api_key", "")
        assert await gemini_client.generate_json("prompt") is None
        assert await gemini_client.generate_text("prompt") is None
