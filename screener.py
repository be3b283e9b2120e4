"""
Batch resume screening.
Ranks plain-text resumes against a job description (or jobs against a
resume) and exports the ranked results as a table, CSV or JSON.
"""
import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

import pandas as pd

from scoring.scorer import MatchScorer
from utils.config import Config
from utils.file_helpers import load_skill_vocabulary, read_text_file
from utils.logging_config import setup_logging
from utils.sanitizers import parse_skill_list

logger = logging.getLogger(__name__)


class ResumeScreener:
    """Score and rank documents with the TF-IDF + skill overlap engine."""

    def __init__(self, config: Optional[Config] = None, skill_vocabulary: Optional[Iterable[str]] = None):
        """
        Args:
            config: Configuration object
            skill_vocabulary: Overrides the configured vocabulary
        """
        self.config = config or Config()
        self.scorer = MatchScorer(self.config)

        if skill_vocabulary is None:
            skill_vocabulary = self.config.vocabulary
        self.skill_vocabulary = list(skill_vocabulary)

    def _score_one(
        self,
        name: str,
        resume_text: str,
        job_text: str,
        required_skills: Optional[List[str]]
    ) -> Dict[str, Any]:
        try:
            result = self.scorer.score(
                resume_text,
                job_text,
                self.skill_vocabulary,
                required_skills=required_skills
            )
        except (ValueError, TypeError) as e:
            logger.error(f"Error scoring {name}: {str(e)}")
            return {
                'name': name,
                'score': 0.0,
                'similarity': 0.0,
                'skill_match_score': 0.0,
                'matching_skills': [],
                'missing_skills': [],
                'keywords': [],
                'status': 'error',
                'error': str(e)
            }

        return {
            'name': name,
            'score': result.match_percentage,
            'similarity': result.similarity,
            'skill_match_score': result.skill_match_score,
            'matching_skills': result.matching_skills,
            'missing_skills': result.missing_skills,
            'keywords': self.scorer.extract_top_keywords(resume_text, self.config.top_keywords),
            'status': 'success',
            'error': None
        }

    @staticmethod
    def _rank(results: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        # Failed rows sink below every successful one
        results.sort(key=lambda r: (r['status'] == 'success', r['score']), reverse=True)
        for idx, result in enumerate(results, 1):
            result['rank'] = idx
        return results

    def rank_resumes(
        self,
        job_text: str,
        resumes: Mapping[str, str],
        required_skills: Optional[Iterable[str]] = None
    ) -> List[Dict[str, Any]]:
        """
        Score every resume against one job description.

        Args:
            job_text: Job description plain text
            resumes: Resume name to resume plain text
            required_skills: Explicit job requirements

        Returns:
            Result rows sorted by score, best first, with 1-based ranks
        """
        start_time = time.time()
        required = list(required_skills) if required_skills is not None else None

        results = [
            self._score_one(name, text, job_text, required)
            for name, text in resumes.items()
        ]

        logger.info(f"Ranked {len(results)} resumes in {time.time() - start_time:.2f}s")
        return self._rank(results)

    def rank_jobs(
        self,
        resume_text: str,
        jobs: Mapping[str, str],
        required_skills: Optional[Mapping[str, Iterable[str]]] = None
    ) -> List[Dict[str, Any]]:
        """
        Score one resume against every job description.

        Args:
            resume_text: Resume plain text
            jobs: Job name to job description plain text
            required_skills: Optional job name to required skills

        Returns:
            Result rows sorted by score, best first, with 1-based ranks
        """
        required_skills = required_skills or {}
        results = []

        for name, job_text in jobs.items():
            required = required_skills.get(name)
            results.append(self._score_one(
                name,
                resume_text,
                job_text,
                list(required) if required is not None else None
            ))

        logger.info(f"Ranked {len(results)} jobs for one resume")
        return self._rank(results)

    @staticmethod
    def _export_rows(results: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [
            {
                'Rank': r['rank'],
                'Name': r['name'],
                'Match %': r['score'],
                'Similarity': round(r['similarity'], 4),
                'Skill Match %': r['skill_match_score'],
                'Matching Skills': ', '.join(r['matching_skills']),
                'Missing Skills': ', '.join(r['missing_skills']),
                'Keywords': ', '.join(r['keywords']),
                'Status': r['status']
            }
            for r in results
        ]

    def to_dataframe(self, results: List[Dict[str, Any]]) -> pd.DataFrame:
        """Ranked results as a DataFrame."""
        return pd.DataFrame(self._export_rows(results))

    def prepare_csv_export(self, results: List[Dict[str, Any]]) -> str:
        """Prepare CSV export."""
        return self.to_dataframe(results).to_csv(index=False)

    def prepare_json_export(self, results: List[Dict[str, Any]]) -> str:
        """Prepare JSON export."""
        export_data = {
            'timestamp': time.time(),
            'total': len(results),
            'successful': len([r for r in results if r['status'] == 'success']),
            'results': []
        }

        for r in results:
            export_data['results'].append({
                'rank': r['rank'],
                'name': r['name'],
                'match_percentage': r['score'],
                'similarity': r['similarity'],
                'skill_match_score': r['skill_match_score'],
                'matching_skills': r['matching_skills'],
                'missing_skills': r['missing_skills'],
                'keywords': r['keywords'],
                'status': r['status'],
                'error': r['error']
            })

        return json.dumps(export_data, indent=2)


def build_parser() -> argparse.ArgumentParser:
    """Command-line parser for the batch screener."""
    parser = argparse.ArgumentParser(
        prog='resume-screener',
        description='Rank plain-text resumes against a job description.'
    )
    parser.add_argument('--job', required=True, help='Job description text file')
    parser.add_argument('--resumes', required=True, nargs='+', help='Resume text files')
    parser.add_argument('--skills', help='Skill vocabulary file (one per line or comma separated)')
    parser.add_argument('--required-skills', help='Required skills, comma or semicolon separated')
    parser.add_argument('--format', choices=['table', 'csv', 'json'], default='table')
    parser.add_argument('--config', default='config.yaml', help='Path to config YAML file')
    parser.add_argument('--log-level', help='Overrides the configured log level')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point."""
    args = build_parser().parse_args(argv)

    try:
        setup_logging(args.log_level or 'INFO', stream=sys.stderr)
        config = Config(args.config)
        setup_logging(args.log_level or config.log_level, stream=sys.stderr)
    except ValueError as e:
        logger.error(f"Invalid configuration: {str(e)}")
        return 1

    try:
        job_text = read_text_file(args.job, config.max_file_size_mb)
        resumes = {
            Path(path).name: read_text_file(path, config.max_file_size_mb)
            for path in args.resumes
        }
        vocabulary = load_skill_vocabulary(args.skills) if args.skills else None
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read input: {str(e)}")
        return 1

    required = parse_skill_list(args.required_skills) if args.required_skills else None

    screener = ResumeScreener(config, skill_vocabulary=vocabulary)
    results = screener.rank_resumes(job_text, resumes, required_skills=required)

    if args.format == 'csv':
        output = screener.prepare_csv_export(results)
    elif args.format == 'json':
        output = screener.prepare_json_export(results)
    else:
        output = screener.to_dataframe(results).to_string(index=False)

    sys.stdout.write(output.rstrip('\n') + '\n')
    return 0


if __name__ == "__main__":
    sys.exit(main())
