"""AI text-analysis collaborator: career analysis and candidate/job matching via Gemini.

Every public call is best-effort. Single-item calls substitute a fixed
fallback when the model is unavailable or returns something unusable; the
batch talent ranking skips candidates whose call failed and returns whatever
succeeded.
"""

import logging
import math

from pydantic import ValidationError

from config import settings
from models.schemas.ai_analysis import (
    AIJobMatch,
    AIProfileAnalysis,
    CandidateProfile,
    JobRequirements,
    TalentJobPosting,
)
from services import gemini_client, prompt_builder
from services.throttle import Throttle, build_throttle

logger = logging.getLogger(__name__)

FALLBACK_PROFILE_ANALYSIS = AIProfileAnalysis(
    summary="경력 분석 중 오류가 발생했습니다. 다시 시도해주세요.",
    key_strengths=["풍부한 경험", "안정성", "책임감"],
    recommended_job_types=["고객서비스", "상담", "관리업무"],
    skills_extracted=["커뮤니케이션", "문제해결", "리더십"],
    experience_level="senior",
    career_highlights=["다양한 업무 경험", "인적 네트워크"],
)

DEFAULT_MATCH_SCORE = 50


class AIServiceError(Exception):
    """A single AI call produced no usable result."""


def _fallback_job_match(candidate_id: str) -> AIJobMatch:
    return AIJobMatch(
        candidate_id=candidate_id,
        matching_score=DEFAULT_MATCH_SCORE,
        reasoning="매칭 분석 중 오류가 발생했습니다.",
        key_strengths=["풍부한 경험", "높은 책임감"],
    )


def _clamp_score(raw) -> int:
    """Integer score in [0, 100]; unparseable values give the default.

    Raises ValueError for a non-finite number (inf, nan).
    """
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return DEFAULT_MATCH_SCORE
    if not math.isfinite(value):
        raise ValueError(f"Non-finite matching score: {raw!r}")
    return max(0, min(100, int(round(value))))


class AIService:
    """Gemini-backed analysis with fixed fallbacks."""

    def __init__(self, throttle: Throttle | None = None) -> None:
        self._throttle = throttle

    # ------------------------------------------------------------------
    # Profile analysis
    # ------------------------------------------------------------------

    async def analyze_career_profile(
        self, career_text: str, resume_text: str | None = None
    ) -> AIProfileAnalysis:
        combined = "\n\n".join(t for t in (career_text, resume_text) if t)
        data = await gemini_client.generate_json(
            prompt_builder.build_career_analysis_prompt(combined),
            system_instruction=prompt_builder.CAREER_CONSULTANT_SYSTEM,
            temperature=0.7,
        )
        if data is None:
            logger.warning("Career analysis unavailable, using fallback analysis")
            return FALLBACK_PROFILE_ANALYSIS.model_copy(deep=True)

        try:
            return AIProfileAnalysis.model_validate(data)
        except ValidationError as e:
            logger.error("Career analysis payload invalid: %s", e)
            return FALLBACK_PROFILE_ANALYSIS.model_copy(deep=True)

    async def analyze_resume_text(self, resume_text: str) -> AIProfileAnalysis:
        return await self.analyze_career_profile(resume_text)

    async def analyze_resume_image(
        self, image_bytes: bytes, mime_type: str = "image/jpeg"
    ) -> AIProfileAnalysis:
        """Extract career text from a resume image, then analyze it."""
        text = await gemini_client.generate_text(
            prompt_builder.RESUME_IMAGE_PROMPT,
            image_bytes=image_bytes,
            mime_type=mime_type,
        )
        if not text:
            logger.warning("Resume image text extraction failed, using fallback analysis")
            return FALLBACK_PROFILE_ANALYSIS.model_copy(deep=True)
        return await self.analyze_career_profile(text)

    # ------------------------------------------------------------------
    # Candidate / job matching
    # ------------------------------------------------------------------

    async def _request_job_match(
        self, candidate: CandidateProfile, job: TalentJobPosting
    ) -> AIJobMatch:
        """One upstream call. Raises AIServiceError when no result came back."""
        data = await gemini_client.generate_json(
            prompt_builder.build_job_match_prompt(candidate, job),
            system_instruction=prompt_builder.MATCHING_EXPERT_SYSTEM,
            temperature=0.5,
        )
        if data is None:
            raise AIServiceError(f"No match result for candidate {candidate.id}")

        try:
            return AIJobMatch(
                candidate_id=candidate.id,
                matching_score=_clamp_score(data.get("matchingScore", DEFAULT_MATCH_SCORE)),
                reasoning=data.get("reasoning") or "매칭 분석을 완료했습니다.",
                key_strengths=data.get("keyStrengths") or ["경험", "안정성", "신뢰성"],
                improvement_suggestions=data.get("improvementSuggestions") or [],
            )
        except ValueError as e:  # includes pydantic ValidationError
            raise AIServiceError(f"Invalid match result for candidate {candidate.id}: {e}") from e

    async def calculate_job_match(
        self, candidate: CandidateProfile, job: TalentJobPosting
    ) -> AIJobMatch:
        try:
            return await self._request_job_match(candidate, job)
        except AIServiceError as e:
            logger.warning("%s, using fallback match", e)
            return _fallback_job_match(candidate.id)

    async def generate_talent_recommendations(
        self,
        job: TalentJobPosting,
        candidates: list[CandidateProfile],
        throttle: Throttle | None = None,
    ) -> list[AIJobMatch]:
        """Score candidates one by one, throttled; failures are skipped."""
        throttle = throttle or self._throttle or build_throttle(settings)
        recommendations: list[AIJobMatch] = []

        for candidate in candidates:
            await throttle.wait()
            try:
                recommendations.append(await self._request_job_match(candidate, job))
            except AIServiceError as e:
                logger.error("Failed to analyze candidate %s: %s", candidate.id, e)

        logger.info(
            "Talent recommendations for %r: %d/%d candidates scored",
            job.title, len(recommendations), len(candidates),
        )
        return sorted(recommendations, key=lambda m: m.matching_score, reverse=True)

    # ------------------------------------------------------------------
    # Misc text helpers
    # ------------------------------------------------------------------

    async def extract_job_requirements(self, job_description: str) -> JobRequirements:
        data = await gemini_client.generate_json(
            prompt_builder.build_job_requirements_prompt(job_description)
        )
        if data is None:
            return JobRequirements()
        try:
            return JobRequirements.model_validate(data)
        except ValidationError as e:
            logger.error("Job requirements payload invalid: %s", e)
            return JobRequirements()

    async def process_voice_transcript(self, transcript: str) -> str:
        text = await gemini_client.generate_text(
            prompt_builder.build_voice_cleanup_prompt(transcript)
        )
        return text or transcript


ai_service = AIService()
