"""All prompt templates for Gemini API calls."""

import json

from models.schemas.ai_analysis import CandidateProfile, TalentJobPosting

CAREER_CONSULTANT_SYSTEM = (
    "당신은 한국의 시니어 구직자 전문 커리어 컨설턴트입니다. "
    "50-60세 구직자들의 경험과 가치를 긍정적으로 분석하고 적합한 일자리를 추천하는 전문가입니다."
)

MATCHING_EXPERT_SYSTEM = (
    "당신은 시니어 구직자와 기업을 매칭하는 전문가입니다. "
    "50-60세 구직자들의 풍부한 경험과 안정성을 높이 평가합니다."
)

RESUME_IMAGE_PROMPT = (
    "이 이력서 이미지에서 텍스트를 추출해서 한국어로 정리해주세요. "
    "개인정보는 제외하고 경력, 학력, 자격증, 기술/역량 정보만 추출해주세요."
)


def build_career_analysis_prompt(career_text: str) -> str:
    """Structured career analysis for a senior job seeker."""
    return f"""한국의 50-60세 시니어 구직자의 경력 정보를 분석해주세요.
다음 정보를 바탕으로 구조화된 분석 결과를 JSON 형태로 제공해주세요:

경력 정보:
---
{career_text}
---

다음 JSON 형식으로만 응답해주세요 (마크다운, 코드 블록 없이):
{{
  "summary": "2-3문장으로 경력 요약 (한국어)",
  "keyStrengths": ["주요 강점 1", "주요 강점 2", "주요 강점 3"],
  "recommendedJobTypes": ["추천 직종 1", "추천 직종 2", "추천 직종 3"],
  "skillsExtracted": ["추출된 스킬/역량 1", "추출된 스킬/역량 2", "추출된 스킬/역량 3"],
  "experienceLevel": "entry | mid | senior | expert 중 하나",
  "careerHighlights": ["경력 하이라이트 1", "경력 하이라이트 2"]
}}

시니어 구직자의 풍부한 경험과 노하우를 긍정적으로 평가해주세요."""


def build_job_match_prompt(candidate: CandidateProfile, job: TalentJobPosting) -> str:
    """Score one candidate against one job posting (0-100)."""
    experience = json.dumps(
        [e.model_dump() for e in candidate.experience], ensure_ascii=False
    )
    skills = json.dumps(candidate.skills, ensure_ascii=False)
    schedule = "시간 협의 가능" if candidate.work_time_flexibility else "정규직 선호"

    return f"""시니어 구직자와 채용공고의 매칭도를 분석해주세요.

구직자 정보:
- 요약: {candidate.summary or '정보 없음'}
- 경험: {experience}
- 스킬: {skills}
- 희망 근무 조건: {schedule}

채용공고 정보:
- 제목: {job.title}
- 설명: {job.description}
- 위치: {job.location}
- 근무 조건: {job.work_schedule}
- 시니어 우대: {'Yes' if job.prefers_seniors else 'No'}

다음 JSON 형식으로만 응답해주세요:
{{
  "matchingScore": <0-100 사이의 정수>,
  "reasoning": "매칭 근거를 2-3문장으로 설명",
  "keyStrengths": ["매칭되는 강점 1", "매칭되는 강점 2", "매칭되는 강점 3"],
  "improvementSuggestions": ["개선 제안 1", "개선 제안 2"]
}}

시니어의 경험가치를 높이 평가해주세요."""


def build_job_requirements_prompt(job_description: str) -> str:
    return f"""다음 채용공고에서 요구사항, 필요 스킬, 복리혜택을 추출해주세요:

---
{job_description}
---

다음 JSON 형식으로만 응답해주세요:
{{
  "requirements": ["요구사항 1", "요구사항 2"],
  "skills": ["필요 스킬 1", "필요 스킬 2"],
  "benefits": ["혜택 1", "혜택 2"]
}}"""


def build_voice_cleanup_prompt(transcript: str) -> str:
    return f"""다음 음성 인식 텍스트를 정리하고 구조화해주세요:

"{transcript}"

경력 설명으로 정리해서 한국어로 반환해주세요. 문법을 교정하고 이해하기 쉽게 정리해주세요.
정리된 텍스트만 응답해주세요."""
