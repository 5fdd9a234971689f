"""
Prompt templates for question generation and feedback scoring.
"""
from typing import Iterable, Sequence

FEEDBACK_SYSTEM_PROMPT = (
    "You are an experienced interviewer providing constructive feedback "
    "to help candidates improve their interview performance."
)


def build_question_prompt(role: str, level: str, techstack: Sequence[str], interview_type: str, amount: int) -> str:
    stack = ", ".join(techstack)
    return f"""Generate realistic interview questions that will help candidates practice and prepare effectively.

Interview Parameters:
- Role: {role}
- Level: {level}
- Tech Stack: {stack}
- Interview Type: {interview_type}
- Number of Questions: {amount}

Question Guidelines:
1. Level-Specific Focus:
   - Junior: Core concepts and basic implementations
   - Mid-Level: Architecture and optimization
   - Senior: System design and leadership

2. Question Types:
   - Technical: Real coding scenarios and practical problems
   - Behavioral: Real workplace situations
   - Mixed: Combined technical and soft skills

3. Tech Stack Coverage:
   - Include questions about {stack}
   - Focus on practical usage
   - Cover common challenges

Format Requirements:
- Return as JSON array: ["Question 1", "Question 2", "Question 3"]
- Keep questions clear and concise
- Avoid special characters that affect voice synthesis

Note: These questions will be used in a practice interview to help candidates prepare."""


def format_transcript(transcript: Iterable) -> str:
    """Renders transcript turns as ``- role: content`` lines, in order."""
    return "".join(f"- {turn.role}: {turn.content}\n" for turn in transcript)


def build_feedback_prompt(formatted_transcript: str) -> str:
    return f"""As an experienced interviewer, provide constructive feedback on this practice interview to help the candidate improve.

Interview Transcript:
{formatted_transcript}

Evaluation Areas (score each from 0 to 100):

1. Communication Skills: clarity and articulation, response structure, active listening, professional communication.

2. Technical Knowledge: core concepts, practical application, technical depth, industry awareness.

3. Problem-Solving: analytical approach, solution design, code quality, optimization and trade-off analysis.

4. Cultural Fit: collaboration, work approach, growth mindset, values alignment.

5. Interview Presence: professional demeanor, engagement, question handling, overall impact.

Feedback Structure:
1. Strengths: highlight 3-5 key strengths with specific examples from the interview.
2. Areas for Improvement: identify 3-5 specific areas with actionable suggestions.
3. Final Assessment: overall evaluation, readiness for similar interviews, key focus areas.

Guidelines:
- Use specific examples from the interview
- Provide actionable, constructive feedback
- Balance positive and improvement areas
- Keep feedback professional and encouraging

Remember: This is practice feedback to help them improve for real interviews. Be thorough but supportive in your assessment."""
