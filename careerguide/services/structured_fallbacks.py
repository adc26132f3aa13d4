# =============================================================================
# careerguide/services/structured_fallbacks.py — Canned structured answers
# =============================================================================
# Used by the guidance helpers when the model output is not a JSON object.
# Independent of the router's text fallback.
# =============================================================================

import datetime
from typing import Any


def _now_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


def resume_fallback() -> dict[str, Any]:
    return {
        "personalInfo": {
            "name": "Resume Owner",
            "email": "Not specified",
            "phone": "Not specified",
            "linkedin": "Not specified",
            "location": "Not specified",
        },
        "experience": [
            {
                "title": "Software Engineer",
                "company": "Previous Company",
                "duration": "2+ years",
                "description": "Software development experience",
                "achievements": ["Developed applications", "Worked in team environment"],
                "technologies": ["JavaScript", "React", "Node.js"],
            }
        ],
        "education": [
            {
                "degree": "Bachelor's Degree",
                "institution": "University",
                "year": "Recent graduate",
                "details": "Computer Science or related field",
            }
        ],
        "skills": {
            "technical": ["JavaScript", "React", "Node.js", "Python"],
            "soft": ["Problem Solving", "Team Collaboration", "Communication"],
            "tools": ["Git", "VS Code", "Docker"],
            "languages": ["JavaScript", "Python"],
        },
        "projects": [],
        "summary": {
            "totalExperience": "2-3 years",
            "seniorityLevel": "mid",
            "primaryRole": "Software Engineer",
            "keyStrengths": ["Full Stack Development", "Problem Solving", "Team Collaboration"],
            "careerFocus": "Software Development",
            "salaryRange": "$60,000 - $90,000",
        },
        "recommendations": {
            "improvementAreas": ["Cloud technologies", "System design"],
            "missingSkills": ["DevOps", "Microservices"],
            "careerAdvice": ["Build portfolio projects", "Contribute to open source"],
            "jobSearchTips": ["Highlight impact in previous roles", "Showcase technical projects"],
        },
    }


def quiz_fallback() -> dict[str, Any]:
    return {
        "careerPath": "Technology",
        "score": 75,
        "interests": ["Technology", "Problem Solving"],
        "skills": ["Analytical Thinking", "Communication"],
        "description": "Based on your responses, you show strong analytical and problem-solving abilities.",
        "relatedCareers": ["Software Developer", "Data Analyst", "Product Manager"],
        "averageSalary": "$50,000 - $100,000",
        "growthProspect": "High growth potential in technology sector",
        "personalityMatch": "Good match for technical roles requiring analytical thinking",
        "recommendedSkills": ["Programming", "Data Analysis", "Project Management"],
        "industryInsights": "Technology sector continues to grow with high demand for skilled professionals",
        "nextSteps": ["Learn programming basics", "Build portfolio projects", "Network with professionals"],
        "analyzed_at": _now_iso(),
        "ai_generated": True,
    }


def _milestone(
    milestone_id: str,
    title: str,
    description: str,
    skills: list[str],
    resources: list[tuple[str, str, str, str, str]],
    deliverables: list[str],
) -> dict[str, Any]:
    return {
        "id": milestone_id,
        "title": title,
        "description": description,
        "completed": False,
        "progress": 0,
        "skills": skills,
        "resources": [
            {"type": t, "name": n, "url": u, "cost": c, "duration": d} for t, n, u, c, d in resources
        ],
        "deliverables": deliverables,
    }


def _phase(phase_id: str, title: str, duration: str, description: str, milestones: list[dict]) -> dict[str, Any]:
    return {
        "id": phase_id,
        "title": title,
        "duration": duration,
        "description": description,
        "completed": False,
        "progress": 0,
        "milestones": milestones,
    }


def roadmap_fallback(career_goal: str, timeframe: int) -> dict[str, Any]:
    phases = [
        _phase(
            "phase-1",
            "Foundation Building",
            "3 months",
            "Build fundamental skills and knowledge base",
            [
                _milestone(
                    "milestone-1-1",
                    "Core Fundamentals",
                    "Master basic concepts and terminology in the field",
                    ["Critical Thinking", "Problem Solving", "Research Skills", "Basic Communication", "Time Management"],
                    [
                        ("course", "Introduction to the Field - Online Course", "https://coursera.org", "Free", "4 weeks"),
                        ("book", "Fundamentals of the Industry", "https://amazon.com", "$25", "2 weeks"),
                        ("tutorial", "Getting Started Video Series", "https://youtube.com", "Free", "1 week"),
                    ],
                    ["Complete foundation course", "Build basic glossary", "Create learning journal"],
                ),
                _milestone(
                    "milestone-1-2",
                    "Essential Tools & Technologies",
                    "Learn and practice with industry-standard tools",
                    ["Tool Proficiency", "Technical Setup", "Workflow Management", "Digital Literacy"],
                    [
                        ("tutorial", "Tool Mastery Workshop", "Self-study", "Free", "3 weeks"),
                        ("project", "Hands-on Practice Project", "Self-initiated", "Free", "2 weeks"),
                    ],
                    ["Tool proficiency portfolio", "Practice project completion"],
                ),
            ],
        ),
        _phase(
            "phase-2",
            "Skill Development",
            f"{max(4, int(timeframe * 0.4))} months",
            "Develop intermediate skills and gain practical experience",
            [
                _milestone(
                    "milestone-2-1",
                    "Intermediate Skills",
                    "Build more advanced capabilities and knowledge",
                    ["Advanced Technical Skills", "Project Management", "Quality Assurance", "Collaboration", "Documentation"],
                    [
                        ("course", "Intermediate Skills Course", "https://udemy.com", "$49", "6 weeks"),
                        ("workshop", "Hands-on Workshop", "Local training center", "$150", "2 days"),
                        ("certification", "Industry Certification Prep", "Professional body", "$200", "4 weeks"),
                    ],
                    ["Intermediate project portfolio", "Certification earned", "Skill demonstration video"],
                ),
                _milestone(
                    "milestone-2-2",
                    "Real-world Application",
                    "Apply skills in realistic scenarios and projects",
                    ["Practical Application", "Problem Solving", "Client Communication", "Deadline Management"],
                    [
                        ("project", "Capstone Project", "Self-designed", "Free", "8 weeks"),
                        ("mentorship", "Industry Mentor Program", "Professional network", "Free", "ongoing"),
                    ],
                    ["Complete capstone project", "Case study documentation", "Professional references"],
                ),
            ],
        ),
        _phase(
            "phase-3",
            "Professional Development",
            f"{max(3, int(timeframe * 0.3))} months",
            "Build professional network and advanced expertise",
            [
                _milestone(
                    "milestone-3-1",
                    "Advanced Specialization",
                    "Develop expertise in specific area of interest",
                    ["Specialized Knowledge", "Industry Trends", "Innovation", "Leadership", "Strategic Thinking"],
                    [
                        ("course", "Advanced Specialization Course", "https://edx.org", "$99", "8 weeks"),
                        ("conference", "Industry Conference", "Professional association", "$300", "3 days"),
                    ],
                    ["Specialization portfolio", "Conference networking", "Thought leadership article"],
                ),
            ],
        ),
        _phase(
            "phase-4",
            "Career Transition",
            "3 months",
            "Transition into professional role and establish career",
            [
                _milestone(
                    "milestone-4-1",
                    "Job Search Preparation",
                    "Prepare all materials and strategies for job search",
                    ["Interview Skills", "Resume Writing", "Professional Networking", "Salary Negotiation", "Personal Branding"],
                    [
                        ("workshop", "Job Search Bootcamp", "Career services", "$100", "1 week"),
                        ("service", "Resume Review Service", "Professional service", "$75", "3 days"),
                    ],
                    ["Polished resume", "Interview practice portfolio", "LinkedIn optimization"],
                ),
                _milestone(
                    "milestone-4-2",
                    "Active Job Search",
                    "Execute job search strategy and secure position",
                    ["Application Strategy", "Interview Performance", "Follow-up Communication", "Decision Making"],
                    [("platform", "Job Search Platforms", "https://linkedin.com", "Free", "ongoing")],
                    ["Job applications submitted", "Interview completions", "Job offer received"],
                ),
            ],
        ),
    ]
    return {
        "title": f"Complete {career_goal} Career Roadmap",
        "description": f"Comprehensive step-by-step path to become a professional {career_goal}",
        "phases": phases,
        "recommendations": {
            "colleges": [
                {
                    "name": "University of California, Berkeley",
                    "location": "Berkeley, CA",
                    "program": f"{career_goal} Bachelor's Program",
                    "why": "Top-ranked program with excellent industry connections and career services",
                    "type": "Public",
                },
                {
                    "name": "Stanford University",
                    "location": "Stanford, CA",
                    "program": f"{career_goal} Master's Program",
                    "why": "Prestigious program with cutting-edge research and Silicon Valley connections",
                    "type": "Private",
                },
                {
                    "name": "Community College of Denver",
                    "location": "Denver, CO",
                    "program": f"{career_goal} Certificate Program",
                    "why": "Affordable, practical program with strong local employer partnerships",
                    "type": "Community",
                },
                {
                    "name": "Arizona State University Online",
                    "location": "Tempe, AZ (Online)",
                    "program": f"Online {career_goal} Degree",
                    "why": "Flexible online program perfect for working professionals",
                    "type": "Public",
                },
            ],
            "certifications": [
                f"{career_goal} Professional Certification",
                "Industry Standard Certification",
                "Advanced Specialization Certificate",
            ],
            "networking": [
                "Professional Association Membership",
                "LinkedIn Groups",
                "Industry Meetups",
                "Alumni Networks",
                "Mentorship Programs",
            ],
            "portfolio": [
                "Showcase Portfolio Website",
                "Case Study Collection",
                "Project Documentation",
                "Client Testimonials",
                "Technical Blog",
            ],
        },
        "timeline": {
            "short_term": "Complete foundation phase and master basic tools and concepts",
            "medium_term": "Develop intermediate skills, earn certifications, and build professional portfolio",
            "long_term": "Secure professional role, establish career trajectory, and continue advanced development",
        },
    }


def job_match_fallback() -> dict[str, Any]:
    return {
        "matchScore": 75,
        "matchingSkills": ["General experience", "Communication skills"],
        "missingSkills": ["Specific technical requirements"],
        "recommendations": ["Highlight relevant experience", "Learn missing technical skills"],
        "improvementAreas": ["Technical skills", "Industry experience"],
        "coverLetterSuggestions": [
            "Emphasize your relevant experience",
            "Show enthusiasm for the role",
            "Address any skill gaps with learning plans",
        ],
    }


def career_fit_fallback(profile: dict[str, Any], career_path: str) -> dict[str, Any]:
    skills = profile.get("skills") or []
    interests = profile.get("interests") or []
    return {
        "matchScore": 75,
        "strengths": [
            skills[0] if skills else "Willingness to learn",
            f"Interest in {career_path.lower()}",
            interests[0] if interests else "General aptitude",
        ],
        "gaps": [
            f"Specific technical skills for {career_path}",
            "Industry experience",
            "Professional network",
        ],
        "recommendations": [
            f"Take courses related to {career_path}",
            "Build projects to demonstrate skills",
            "Network with professionals in the field",
            "Consider internships or entry-level positions",
        ],
        "reasoning": (
            f"Based on your profile, you show good potential for {career_path}. "
            "Focus on developing relevant skills and gaining practical experience."
        ),
    }


def college_fallback() -> dict[str, Any]:
    return {
        "recommendations": [
            {
                "name": "Local State University",
                "match": 80,
                "reasons": ["Good general programs", "Affordable tuition", "Strong alumni network"],
                "programs": ["Business", "Engineering", "Computer Science", "Liberal Arts"],
                "pros": ["Lower cost", "Local connections", "Diverse programs"],
                "cons": ["May lack specialized programs", "Limited prestige"],
            },
            {
                "name": "Community College",
                "match": 75,
                "reasons": ["Affordable starting point", "Transfer opportunities", "Flexible scheduling"],
                "programs": ["Associate degrees", "Transfer programs", "Career training"],
                "pros": ["Very affordable", "Small class sizes", "Transfer pathways"],
                "cons": ["Limited research opportunities", "2-year programs only"],
            },
        ],
        "insights": [
            "Consider your career goals when selecting programs",
            "Balance cost with program quality and fit",
            "Look into financial aid and scholarship opportunities",
            "Visit campuses and talk to current students",
        ],
    }


def skill_progress_fallback(skills: list[dict[str, Any]], learning_goals: list[str]) -> dict[str, Any]:
    levels = [float(s.get("level") or 0) for s in skills]
    avg_progress = sum(levels) / len(levels) if levels else 50
    return {
        "overallProgress": round(avg_progress),
        "insights": [
            "Consistent practice leads to steady improvement",
            "Focus on one skill at a time for better results",
            "Apply skills in real projects to reinforce learning",
        ],
        "recommendations": [
            "Set specific, measurable learning goals",
            "Practice regularly with hands-on projects",
            "Seek feedback from peers or mentors",
            "Document your progress to stay motivated",
        ],
        "nextMilestones": [
            {
                "skill": goal,
                "target": "Proficiency level (80%+)",
                "timeline": f"{2 + i} months",
                "actions": [
                    "Complete relevant courses or tutorials",
                    "Build projects using this skill",
                    "Practice regularly with real-world scenarios",
                ],
            }
            for i, goal in enumerate(learning_goals[:3])
        ],
        "strengths": [s.get("name") for s in skills if float(s.get("level") or 0) >= 70][:3],
        "focusAreas": [s.get("name") for s in skills if float(s.get("level") or 0) < 50][:3],
    }
