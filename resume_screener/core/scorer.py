"""
Scoring Engine - Combines extracted candidate signals into a composite score.

Calculates four sub-scores, each 0-100:
- Skills match: number of taxonomy skills detected
- Experience match: stepped lookup on estimated years
- Education match: fixed lookup on highest credential
- Keyword match: job description keyword overlap

The overall score is their weighted sum under the supplied CriteriaWeights.
"""

from typing import Optional
import logging
import math

from .errors import MissingJobDescriptionError
from .extractors import EducationClassifier, ExperienceEstimator, SkillExtractor
from .keywords import KeywordMatcher
from .models import CriteriaWeights, EducationLevel, ScoreBreakdown


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, unlike banker's rounding."""
    return int(math.floor(value + 0.5))


class ScoringEngine:
    """Scores resume text against a job description."""

    POINTS_PER_SKILL = 8

    # (minimum years, score), checked top-down
    EXPERIENCE_STEPS = [
        (10, 100),
        (7, 90),
        (5, 80),
        (3, 70),
        (1, 50),
    ]
    EXPERIENCE_FLOOR = 20

    EDUCATION_SCORES = {
        EducationLevel.PHD: 100,
        EducationLevel.MASTERS: 85,
        EducationLevel.BACHELORS: 70,
        EducationLevel.ASSOCIATES: 50,
        EducationLevel.CERTIFICATE: 40,
        EducationLevel.NONE: 20,
    }

    RECOMMENDATIONS = [
        (85, "Excellent candidate - highly recommended"),
        (75, "Strong candidate - recommend interview"),
        (65, "Good candidate - worth considering"),
        (50, "Average candidate - may need additional screening"),
    ]
    BELOW_REQUIREMENTS = "Below requirements - consider only if desperate"

    def __init__(
        self,
        skill_extractor: Optional[SkillExtractor] = None,
        experience_estimator: Optional[ExperienceEstimator] = None,
        education_classifier: Optional[EducationClassifier] = None,
        keyword_matcher: Optional[KeywordMatcher] = None,
    ):
        self.skill_extractor = skill_extractor or SkillExtractor()
        self.experience_estimator = experience_estimator or ExperienceEstimator()
        self.education_classifier = education_classifier or EducationClassifier()
        self.keyword_matcher = keyword_matcher or KeywordMatcher()
        self.logger = logging.getLogger(self.__class__.__name__)

    def score(
        self,
        text: str,
        job_description: str,
        weights: Optional[CriteriaWeights] = None,
    ) -> ScoreBreakdown:
        """
        Score a document.

        Args:
            text: Plain text of the candidate document
            job_description: Free-text job description
            weights: Weight vector (defaults to CriteriaWeights())

        Returns:
            ScoreBreakdown with sub-scores, narrative and raw signals

        Raises:
            MissingJobDescriptionError: if the job description is blank
        """
        if not job_description or not job_description.strip():
            raise MissingJobDescriptionError()

        weights = weights or CriteriaWeights()

        skills = self.skill_extractor.extract(text)
        experience_years = self.experience_estimator.estimate(text)
        education_level = self.education_classifier.classify(text)
        keyword_match = self.keyword_matcher.match(text, job_description)

        skills_score = self._calculate_skills_score(skills)
        experience_score = self._calculate_experience_score(experience_years)
        education_score = self.EDUCATION_SCORES.get(education_level, self.EDUCATION_SCORES[EducationLevel.NONE])
        keyword_score = min(keyword_match, 100)

        overall_score = self._calculate_overall_score(
            skills_score, experience_score, education_score, keyword_score, weights
        )

        strengths, weaknesses = self._generate_insights(
            skills_score, experience_score, education_score, keyword_score, education_level
        )

        return ScoreBreakdown(
            skills_match=round_half_up(skills_score),
            experience_match=round_half_up(experience_score),
            education_match=round_half_up(education_score),
            keyword_match=round_half_up(keyword_score),
            overall_score=overall_score,
            strengths=strengths,
            weaknesses=weaknesses,
            recommendation=self.recommend(overall_score),
            detected_skills=skills,
            experience_years=experience_years,
            education_level=education_level,
        )

    def _calculate_skills_score(self, skills: list[str]) -> int:
        return min(len(skills) * self.POINTS_PER_SKILL, 100)

    def _calculate_experience_score(self, years: int) -> int:
        for minimum, score in self.EXPERIENCE_STEPS:
            if years >= minimum:
                return score
        return self.EXPERIENCE_FLOOR

    def _calculate_overall_score(
        self,
        skills_score: float,
        experience_score: float,
        education_score: float,
        keyword_score: float,
        weights: CriteriaWeights,
    ) -> int:
        """Weighted sum, rounded and clamped to 0-100 since weights need not sum to 1."""
        weighted = (
            skills_score * weights.skills +
            experience_score * weights.experience +
            education_score * weights.education +
            keyword_score * weights.keywords
        )
        return max(0, min(100, round_half_up(weighted)))

    def _generate_insights(
        self,
        skills_score: float,
        experience_score: float,
        education_score: float,
        keyword_score: float,
        education_level: EducationLevel,
    ) -> tuple[list[str], list[str]]:
        strengths = []
        weaknesses = []

        if skills_score >= 70:
            strengths.append("Strong technical skills portfolio")
        if experience_score >= 80:
            strengths.append("Excellent experience level")
        if education_level.has_advanced:
            strengths.append("Advanced educational background")
        if keyword_score >= 60:
            strengths.append("Good alignment with job requirements")

        if skills_score < 40:
            weaknesses.append("Limited technical skills mentioned")
        if experience_score < 50:
            weaknesses.append("Could benefit from more experience")
        if education_score < 50:
            weaknesses.append("Educational background could be stronger")
        if keyword_score < 40:
            weaknesses.append("Limited alignment with job description")

        return strengths, weaknesses

    def recommend(self, overall_score: int) -> str:
        """Map an overall score to its recommendation tier."""
        for threshold, recommendation in self.RECOMMENDATIONS:
            if overall_score >= threshold:
                return recommendation
        return self.BELOW_REQUIREMENTS
