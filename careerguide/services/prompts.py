# =============================================================================
# careerguide/services/prompts.py — Prompt templates for the guidance helpers
# =============================================================================

import json
from typing import Any

CAREER_ADVISOR_SYSTEM = (
    "You are an expert career advisor and counselor. Provide helpful, actionable advice about "
    "careers, education, job searching, and professional development. Be encouraging, specific, "
    "and practical in your guidance."
)
CAREER_COUNSELOR_SYSTEM = (
    "You are an expert career counselor with deep knowledge of industry requirements and career paths."
)
ADMISSIONS_COUNSELOR_SYSTEM = (
    "You are an expert college admissions counselor with comprehensive knowledge of universities worldwide."
)
LEARNING_ANALYST_SYSTEM = (
    "You are an expert learning analyst who understands skill development patterns and "
    "effective learning strategies."
)


def _join(items: list[str] | None, default: str) -> str:
    return ", ".join(items) if items else default


def build_enhanced_prompt(prompt: str, system_prompt: str | None = None) -> str:
    parts = []
    if system_prompt:
        parts.append(f"System: {system_prompt}")
    parts.append(f"User: {prompt}")
    return "\n\n".join(parts)


def resume_prompt(resume_text: str) -> str:
    return f"""Analyze this resume and extract structured information. Return a comprehensive analysis in JSON format:

Resume Text:
{resume_text}

Please provide analysis in this exact JSON structure:
{{
  "personalInfo": {{"name": "", "email": "", "phone": "", "linkedin": "", "location": ""}},
  "experience": [{{"title": "", "company": "", "duration": "", "description": "", "achievements": [], "technologies": []}}],
  "education": [{{"degree": "", "institution": "", "year": "", "gpa": "", "details": ""}}],
  "skills": {{"technical": [], "soft": [], "tools": [], "languages": []}},
  "projects": [{{"name": "", "description": "", "technologies": [], "year": ""}}],
  "summary": {{"totalExperience": "", "seniorityLevel": "junior/mid/senior", "primaryRole": "", "keyStrengths": [], "careerFocus": "", "salaryRange": ""}},
  "recommendations": {{"improvementAreas": [], "missingSkills": [], "careerAdvice": [], "jobSearchTips": []}}
}}

Provide detailed, accurate analysis. Return ONLY valid JSON, no additional text."""


def quiz_prompt(questions: list[Any], answers: list[Any]) -> str:
    qa = json.dumps({"questions": questions, "answers": answers}, indent=2)
    return f"""Analyze these career quiz answers and provide detailed career recommendations.

Questions and Answers:
{qa}

Provide a comprehensive analysis in the following JSON format:
{{
  "careerPath": "Primary career recommendation",
  "score": number (0-100 confidence score),
  "interests": ["interest1", "interest2", "interest3"],
  "skills": ["skill1", "skill2", "skill3"],
  "description": "2-3 sentence description of the recommended career path",
  "relatedCareers": ["career1", "career2", "career3"],
  "averageSalary": "Salary range in appropriate currency",
  "growthProspect": "High/Medium/Low with brief explanation",
  "personalityMatch": "Brief personality assessment",
  "recommendedSkills": ["skill1", "skill2", "skill3"],
  "industryInsights": "Brief industry overview and trends",
  "nextSteps": ["step1", "step2", "step3"]
}}

Base recommendations on actual market trends, salary data, and career prospects.
Be specific and actionable. Return ONLY valid JSON, no additional text or markdown."""


def roadmap_prompt(career_goal: str, profile: dict[str, Any]) -> str:
    timeframe = profile.get("timeframe", 12)
    return f"""Create a detailed career roadmap for someone wanting to achieve this goal: "{career_goal}"

Profile:
- Current Level: {profile.get("current_level", "beginner")}
- Timeframe: {timeframe} months
- Interests: {_join(profile.get("interests"), "Not specified")}
- Current Skills: {_join(profile.get("skills"), "Not specified")}
- Learning Style: {profile.get("learning_style") or "Not specified"}
- Budget: {profile.get("budget") or "Not specified"}

Generate a comprehensive roadmap with the following JSON structure:
{{
  "title": "Catchy roadmap title",
  "description": "Brief description of the career path",
  "phases": [
    {{
      "id": "phase-1", "title": "", "duration": "", "description": "", "completed": false, "progress": 0,
      "milestones": [
        {{
          "id": "milestone-1", "title": "", "description": "", "completed": false, "progress": 0,
          "skills": [], "resources": [{{"type": "", "name": "", "url": "", "cost": "", "duration": ""}}],
          "deliverables": []
        }}
      ]
    }}
  ],
  "recommendations": {{
    "colleges": [{{"name": "", "location": "", "program": "", "why": "", "type": "Public/Private/Community"}}],
    "certifications": [], "networking": [], "portfolio": []
  }},
  "timeline": {{"short_term": "", "medium_term": "", "long_term": ""}}
}}

IMPORTANT: Make it specific, actionable, and realistic for {timeframe} months.
Include 4-6 phases with 3-5 milestones each.
Return ONLY valid JSON, no additional text or markdown."""


def job_match_prompt(resume_text: str, job_description: str) -> str:
    return f"""Compare this resume against the job description and provide a detailed match analysis:

RESUME:
{resume_text}

JOB DESCRIPTION:
{job_description}

Analyze the match and return JSON in this format:
{{
  "matchScore": number (0-100),
  "matchingSkills": ["skills from resume that match job"],
  "missingSkills": ["required skills not found in resume"],
  "recommendations": ["specific recommendations to improve match"],
  "improvementAreas": ["areas to focus development on"],
  "coverLetterSuggestions": ["suggestions for cover letter content"]
}}

Return ONLY valid JSON, no additional text."""


def career_fit_prompt(profile: dict[str, Any], career_path: str) -> str:
    return f"""Analyze the career fit for this user profile and career path:

USER PROFILE:
- Skills: {_join(profile.get("skills"), "Not specified")}
- Interests: {_join(profile.get("interests"), "Not specified")}
- Experience Level: {profile.get("experience") or "Beginner"}
- Education: {profile.get("education") or "Not specified"}
- Goals: {_join(profile.get("goals"), "Not specified")}

TARGET CAREER: {career_path}

Provide a detailed analysis in the following JSON format:
{{
  "matchScore": 85,
  "strengths": ["List of user strengths that align with this career"],
  "gaps": ["List of skills/experience gaps to address"],
  "recommendations": ["Specific actionable recommendations"],
  "reasoning": "Detailed explanation of the match score and analysis"
}}

Be specific and actionable. Consider current industry trends and requirements."""


def college_prompt(profile: dict[str, Any], preferences: dict[str, Any]) -> str:
    return f"""Recommend colleges for this student profile:

STUDENT PROFILE:
- Academic Interests: {_join(profile.get("interests"), "General")}
- Career Goals: {_join(profile.get("goals"), "Undecided")}
- Skills: {_join(profile.get("skills"), "Basic")}
- Academic Level: {profile.get("education") or "High School"}

PREFERENCES:
- Preferred Locations: {_join(preferences.get("location"), "Any")}
- Budget Range: {preferences.get("budget") or "Any"}
- Program Type: {preferences.get("program_type") or "Any"}
- School Size: {preferences.get("size") or "Any"}
- Specializations: {_join(preferences.get("specializations"), "None")}

Provide recommendations in JSON format:
{{
  "recommendations": [
    {{"name": "University Name", "match": 95, "reasons": [], "programs": [], "pros": [], "cons": []}}
  ],
  "insights": ["General insights about college selection"]
}}"""


def skill_progress_prompt(skills: list[dict[str, Any]], learning_goals: list[str]) -> str:
    lines = "\n".join(
        f"- {s.get('name')}: {s.get('level')}% (Last updated: {s.get('last_updated') or 'Unknown'})"
        for s in skills
    )
    return f"""Analyze this skill progress data and learning goals:

SKILL DATA:
{lines}

LEARNING GOALS:
{", ".join(learning_goals)}

Provide analysis in JSON format:
{{
  "overallProgress": 78,
  "insights": ["Key insights about learning progress"],
  "recommendations": ["Specific recommendations for improvement"],
  "nextMilestones": [
    {{"skill": "JavaScript", "target": "Advanced level (90%)", "timeline": "2-3 months", "actions": []}}
  ],
  "strengths": ["Areas where student excels"],
  "focusAreas": ["Areas needing attention"]
}}"""
