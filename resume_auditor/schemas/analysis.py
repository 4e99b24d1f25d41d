"""Pydantic schemas for the resume audit request and result.

``AnalysisResult`` doubles as the response schema handed to the model, so
every field is required.
"""

from pydantic import BaseModel, Field, StrictStr


class AnalyzeResumeRequest(BaseModel):
    """Inbound payload for ``POST /api/analyze-resume``.

    Only the camelCase wire name is accepted.
    """

    resume_text: StrictStr = Field(
        ...,
        alias="resumeText",
        min_length=1,
        description="Raw resume text as pasted or extracted by the browser.",
    )


class AuditFinding(BaseModel):
    """One problem found in the original resume and how it was fixed."""

    issue: str = Field(..., description="Short name of the problem.")
    why_it_is_a_problem: str = Field(..., description="Why a recruiter or ATS would penalize it.")
    ats_real_world_impact: str = Field(..., description="Concrete effect on ATS parsing or ranking.")
    correction_applied: str = Field(..., description="What the rewrite changed to address it.")


class ScoreBreakdown(BaseModel):
    ats_structure: float
    keyword_match: float
    experience_impact: float
    formatting_readability: float
    seniority_alignment: float


class ATSAssessment(BaseModel):
    """Scores for one version (original or optimized) of the resume."""

    scores: ScoreBreakdown
    final_ats_score: float
    ats_confidence_level: float
    ats_rejection_risk: str = Field(
        ...,
        description="Qualitative risk label, e.g. Low, Medium, Medium-High, High.",
    )


class ResumeSections(BaseModel):
    summary: str
    experience: str
    skills: str
    education: str


class OptimizedResume(BaseModel):
    """The rewritten resume, as one plain-text document and split by section."""

    plain_text: str = Field(
        ...,
        description="Full ATS-safe plain-text resume; must match the sections content.",
    )
    sections: ResumeSections


class CredibilityVerdict(BaseModel):
    score_change_rationale: str
    trust_level: str
    enterprise_readiness: str


class AnalysisResult(BaseModel):
    """Complete audit produced for a single resume.

    Created fresh per request and never cached; a payload missing any field
    is rejected as a whole.
    """

    audit_findings: list[AuditFinding]
    corrected_before_optimization: ATSAssessment
    corrected_optimized_resume: OptimizedResume
    corrected_after_optimization: ATSAssessment
    credibility_verdict: CredibilityVerdict
