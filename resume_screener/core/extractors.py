"""
Extractors - Recover structured candidate facts from plain resume text.

Each extractor is stateless: the same text always yields the same result,
and extractors can run in any order.
"""

from datetime import datetime
from typing import Optional
import logging
import re

from .models import Contact, EducationLevel


class ContactExtractor:
    """Extracts candidate name, email and phone number."""

    EMAIL_PATTERN = re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b')

    # North-American numbers with optional country code and loose separators
    PHONE_PATTERN = re.compile(
        r'(?:\+?1[-.\s]?)?\(?([0-9]{3})\)?[-.\s]?([0-9]{3})[-.\s]?([0-9]{4})'
    )

    NAME_WORD_PATTERN = re.compile(r"^[A-Za-z][A-Za-z.,'-]*$")

    # A period after a lowercase word ends a sentence; "A." or "Jr." do not
    SENTENCE_BREAK = re.compile(r'(?<=[a-z]{2})\.\s+')

    HEADER_WORDS = ("resume", "curriculum", "cv")
    MAX_NAME_LINES = 10
    MAX_NAME_WORD_LENGTH = 20

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def extract(self, text: str) -> Contact:
        """Extract all contact fields from raw text."""
        return Contact(
            name=self._extract_name(text),
            email=self._extract_email(text),
            phone=self._extract_phone(text),
        )

    def _extract_email(self, text: str) -> str:
        match = self.EMAIL_PATTERN.search(text)
        return match.group(0) if match else ""

    def _extract_phone(self, text: str) -> str:
        match = self.PHONE_PATTERN.search(text)
        return match.group(0) if match else ""

    def _extract_name(self, text: str) -> str:
        """
        Find the first early line that looks like a person's name.

        Lines are split further at sentence ends, since text recovered from
        paginated documents often arrives as one long line per page.
        """
        for line in self._candidate_lines(text):
            lowered = line.lower()
            if any(word in lowered for word in self.HEADER_WORDS):
                continue

            words = [w for w in line.split() if len(w) > 1]
            if 2 <= len(words) <= 4 and all(self._looks_like_name_word(w) for w in words):
                name = " ".join(words)
                self.logger.debug(f"Name candidate accepted: {name}")
                return name

        return ""

    def _candidate_lines(self, text: str) -> list[str]:
        lines = []
        for raw_line in text.split('\n'):
            for segment in self.SENTENCE_BREAK.split(raw_line):
                segment = segment.strip()
                if segment:
                    lines.append(segment)
                if len(lines) >= self.MAX_NAME_LINES:
                    return lines
        return lines

    def _looks_like_name_word(self, word: str) -> bool:
        return len(word) <= self.MAX_NAME_WORD_LENGTH and bool(self.NAME_WORD_PATTERN.match(word))


class SkillExtractor:
    """Matches text against a fixed taxonomy of canonical skill names."""

    SKILL_CATEGORIES = {
        "programming": [
            "JavaScript", "Python", "Java", "C++", "C#", "PHP", "Ruby", "Go",
            "Rust", "Swift", "Kotlin", "Scala", "TypeScript", "R", "MATLAB",
            "SQL", "HTML", "CSS", "Perl",
        ],
        "frameworks": [
            "React", "Angular", "Vue.js", "Node.js", "Express", "Django",
            "Flask", "Spring", "Laravel", "Rails", "Bootstrap", "jQuery",
            "Svelte", "Next.js", "Nuxt.js",
        ],
        "databases": [
            "MySQL", "PostgreSQL", "MongoDB", "Redis", "Elasticsearch",
            "Oracle", "SQLite", "Cassandra", "DynamoDB", "Neo4j", "MariaDB",
        ],
        "cloud": [
            "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Jenkins",
            "GitLab CI", "CircleCI", "Terraform", "Ansible", "Heroku",
            "Vercel", "Netlify",
        ],
        "tools": [
            "Git", "GitHub", "GitLab", "Jira", "Confluence", "Slack",
            "VS Code", "IntelliJ", "Eclipse", "Postman", "Figma",
            "Adobe Creative Suite",
        ],
        "methodologies": [
            "Agile", "Scrum", "Kanban", "DevOps", "CI/CD", "TDD",
            "Microservices", "REST", "GraphQL", "Machine Learning", "AI",
            "Data Science", "Blockchain",
        ],
    }

    def __init__(self, categories: Optional[dict[str, list[str]]] = None):
        self.categories = categories or self.SKILL_CATEGORIES
        self.logger = logging.getLogger(self.__class__.__name__)
        self._variants = [
            (skill, self.skill_variants(skill)) for skill in self.all_skills()
        ]

    def all_skills(self) -> list[str]:
        """Flattened taxonomy in declaration order."""
        return [skill for skills in self.categories.values() for skill in skills]

    @staticmethod
    def skill_variants(skill: str) -> tuple[str, ...]:
        """Lowercase spellings accepted for a canonical skill."""
        lowered = skill.lower()
        return (
            lowered,
            lowered.replace('.', ''),
            re.sub(r'\s', '', lowered),
            lowered.replace('-', ' '),
            lowered.replace('.', ' '),
        )

    def extract(self, text: str) -> list[str]:
        """
        Detect skills by substring match on any variant.

        No word boundaries are enforced, so short names ("R", "Go") match
        inside longer words.
        """
        text_lower = text.lower()
        # dict keeps taxonomy order and drops duplicates
        found = dict.fromkeys(
            skill for skill, variants in self._variants
            if any(variant in text_lower for variant in variants)
        )
        self.logger.debug(f"Detected {len(found)} skills")
        return list(found)


class ExperienceEstimator:
    """Estimates total years of professional experience."""

    YEARS_PATTERNS = [
        re.compile(r'(\d+)\+?\s*years?\s+(?:of\s+)?experience', re.IGNORECASE),
        re.compile(r'(\d+)\+?\s*years?\s+(?:in|with)', re.IGNORECASE),
        re.compile(r'experience.*?(\d+)\+?\s*years?', re.IGNORECASE),
    ]

    DATE_PATTERN = re.compile(r'\b(20\d{2}|19\d{2})\b')

    EARLIEST_YEAR = 1990
    MAX_YEARS = 50

    def __init__(self, current_year: Optional[int] = None):
        self.current_year = current_year
        self.logger = logging.getLogger(self.__class__.__name__)

    def estimate(self, text: str) -> int:
        """Return the largest plausible experience figure, or 0 if none."""
        candidates = self._stated_years(text)

        span = self._date_span(text)
        if span:
            candidates.append(span)

        return max(candidates) if candidates else 0

    def _stated_years(self, text: str) -> list[int]:
        years = []
        for pattern in self.YEARS_PATTERNS:
            for match in pattern.finditer(text):
                value = int(match.group(1))
                if 0 < value <= self.MAX_YEARS:
                    years.append(value)
        return years

    def _date_span(self, text: str) -> int:
        """Span between the earliest and latest calendar years mentioned."""
        latest_allowed = self.current_year or datetime.now().year
        dates = [
            int(match.group(1)) for match in self.DATE_PATTERN.finditer(text)
            if self.EARLIEST_YEAR <= int(match.group(1)) <= latest_allowed
        ]
        if len(dates) < 2:
            return 0

        span = max(dates) - min(dates)
        return span if 0 < span <= self.MAX_YEARS else 0


class EducationClassifier:
    """Determines the highest education credential mentioned."""

    # Declared highest first; the first matching group wins
    EDUCATION_KEYWORDS = {
        EducationLevel.PHD: ["ph.d", "phd", "doctorate", "doctoral", "doctor of philosophy"],
        EducationLevel.MASTERS: [
            "master", "mba", "ms", "m.s.", "ma", "m.a.", "msc", "m.sc.", "med", "m.ed.",
        ],
        EducationLevel.BACHELORS: [
            "bachelor", "bs", "b.s.", "ba", "b.a.", "bsc", "b.sc.", "undergraduate",
            "beng", "b.eng.",
        ],
        EducationLevel.ASSOCIATES: ["associate", "aa", "as", "a.s.", "aas"],
        EducationLevel.CERTIFICATE: ["certificate", "certification", "diploma", "cert."],
    }

    def classify(self, text: str) -> EducationLevel:
        text_lower = text.lower()
        for level, keywords in self.EDUCATION_KEYWORDS.items():
            if any(keyword in text_lower for keyword in keywords):
                return level
        return EducationLevel.NONE
