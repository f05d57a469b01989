"""
Results Exporter - Writes ranked screening results for reporting.

Rows follow a fixed column order and cover completed documents only,
ranked by overall score with ties kept in upload order.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional
import csv
import io
import json
import logging

from resume_screener.core.errors import ScreenerError
from resume_screener.core.models import BatchJob, Document


class ResultsExporter:
    """Exports completed analyses of a batch job as CSV or JSON."""

    HEADERS = [
        "Rank",
        "Name",
        "Email",
        "Phone",
        "Overall Score",
        "Skills Score",
        "Experience Score",
        "Education Score",
        "Keyword Score",
        "Skills Found",
        "Experience Years",
        "Education Level",
        "Recommendation",
        "Strengths",
        "Weaknesses",
    ]

    NOT_FOUND = "Not found"
    LIST_SEPARATOR = "; "

    def __init__(self, output_dir: str = "."):
        self.output_dir = Path(output_dir)
        self.logger = logging.getLogger(self.__class__.__name__)

    def ranked_documents(self, job: BatchJob) -> list[Document]:
        """Completed documents, highest score first, ties by upload order."""
        return sorted(job.completed(), key=lambda d: (-d.score, d.order))

    def build_rows(self, job: BatchJob) -> list[list]:
        """
        Build export rows in HEADERS order.

        Raises:
            ScreenerError: if no document has completed
        """
        documents = self.ranked_documents(job)
        if not documents:
            raise ScreenerError("No completed analyses to export.")

        return [self._row(rank, doc) for rank, doc in enumerate(documents, 1)]

    def _row(self, rank: int, document: Document) -> list:
        analysis = document.analysis
        contact = document.contact
        return [
            rank,
            contact.name or self.NOT_FOUND,
            contact.email or self.NOT_FOUND,
            contact.phone or self.NOT_FOUND,
            analysis.overall_score,
            analysis.skills_match,
            analysis.experience_match,
            analysis.education_match,
            analysis.keyword_match,
            self.LIST_SEPARATOR.join(analysis.detected_skills),
            analysis.experience_years,
            analysis.education_level.value,
            analysis.recommendation,
            self.LIST_SEPARATOR.join(analysis.strengths),
            self.LIST_SEPARATOR.join(analysis.weaknesses),
        ]

    def to_csv(self, job: BatchJob) -> str:
        """Render the export as CSV text, every field quoted."""
        output = io.StringIO()
        writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(self.HEADERS)
        writer.writerows(self.build_rows(job))
        return output.getvalue()

    def to_json(self, job: BatchJob) -> str:
        """Render the export rows as a JSON list of objects keyed by header."""
        records = [dict(zip(self.HEADERS, row)) for row in self.build_rows(job)]
        return json.dumps(records, indent=2)

    def default_filename(self, format: str = "csv") -> str:
        return f"resume_analysis_{datetime.now().strftime('%Y-%m-%d')}.{format}"

    def export(
        self,
        job: BatchJob,
        filepath: Optional[str] = None,
        format: str = "csv",
    ) -> str:
        """
        Write the export to disk.

        Args:
            job: Batch job with completed documents
            filepath: Destination (default: output_dir/resume_analysis_<date>.<format>)
            format: "csv" or "json"

        Returns:
            Path to the written file
        """
        if format == "csv":
            content = self.to_csv(job)
        elif format == "json":
            content = self.to_json(job)
        else:
            raise ValueError(f"Unsupported export format: {format}")

        if filepath is None:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            filepath = str(self.output_dir / self.default_filename(format))

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            f.write(content)

        self.logger.info(f"Exported {len(job.completed())} analyses to {filepath}")
        return filepath
