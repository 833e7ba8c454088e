import random
import unittest
from datetime import datetime, timezone

from resumegen.schemas.generation import (
    Achievement,
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeData,
    Skills,
)
from resumegen.services import local_ats


def _complete_resume(summary: str = "Frontend engineer") -> ResumeData:
    return ResumeData(
        personal_info=PersonalInfo(email="dev@example.com", phone="+1 555 0100", summary=summary),
        education=[Education(degree="BSc", field="Computer Science")],
        experience=[Experience(company="Acme", position="Frontend Developer", description=["Built UI"])],
        skills=Skills(technical=["React", "CSS", "Redux"]),
        projects=[Project(name="Portfolio", description="Personal site")],
        achievements=[Achievement(title="Hackathon winner")],
    )


class CompletenessTests(unittest.TestCase):
    def test_full_resume_scores_one(self):
        self.assertAlmostEqual(local_ats.calculate_completeness(_complete_resume()), 1.0)

    def test_personal_info_only(self):
        resume = ResumeData(personal_info=PersonalInfo(email="a@b.c", phone="1", summary="Hi"))
        self.assertAlmostEqual(local_ats.calculate_completeness(resume), 0.2)

    def test_resume_length_counts_free_text(self):
        resume = ResumeData(
            personal_info=PersonalInfo(summary="abcde"),
            projects=[Project(name="x", description="12345", outcomes=["ab", "cd"])],
        )
        self.assertEqual(local_ats.calculate_resume_length(resume), 5 + 5 + len("ab cd"))


class ScoreBandTests(unittest.TestCase):
    def test_incomplete_band(self):
        for seed in range(50):
            score = local_ats.score_from_completeness(0.39, 5000, random.Random(seed))
            self.assertGreaterEqual(score, 35)
            self.assertLess(score, 50)

    def test_complete_band_never_exceeds_cap(self):
        for seed in range(50):
            score = local_ats.score_from_completeness(1.0, 100000, random.Random(seed))
            self.assertGreaterEqual(score, 70)
            self.assertLessEqual(score, 80)

    def test_monotone_in_length(self):
        previous = 0
        for length in (0, 500, 1000, 2500, 4000, 8000):
            score = local_ats.score_from_completeness(0.8, length, random.Random(3))
            self.assertGreaterEqual(score, previous)
            previous = score


class KeywordTests(unittest.TestCase):
    def test_extract_keywords_preserves_order_and_dedupes(self):
        resume = ResumeData(
            personal_info=PersonalInfo(summary="Building react apps with React"),
            skills=Skills(technical=["React", "CSS", " "]),
        )
        self.assertEqual(local_ats.extract_keywords(resume), ["building", "react", "apps", "with", "css"])

    def test_missing_keywords_default_role(self):
        missing = local_ats.missing_keywords(None, ["react", "git"])
        self.assertNotIn("react", missing)
        self.assertIn("javascript", missing)

    def test_missing_keywords_for_known_role(self):
        missing = local_ats.missing_keywords("Data Scientist", ["python"])
        self.assertEqual(missing[0], "pandas")


class ComputeLocallyTests(unittest.TestCase):
    def test_personal_info_only_resume(self):
        resume = ResumeData(personal_info=PersonalInfo(email="a@b.c", phone="1", summary="Seasoned analyst"))
        now = datetime(2026, 3, 1, tzinfo=timezone.utc)
        result = local_ats.compute_ats_score_locally(resume, "Software Engineer", rng=random.Random(1), now=now)

        self.assertGreaterEqual(result.score, 35)
        self.assertLess(result.score, 50)
        self.assertEqual(result.computation_method, "local")
        self.assertEqual(result.last_computed_at, now)
        self.assertIn("incomplete", result.summary)
        self.assertTrue(result.summary.startswith(f"ATS Score: {result.score}/100"))
        self.assertLessEqual(len(result.keywords_missing), 5)
        self.assertLessEqual(len(result.suggestions), 3)

    def test_complete_resume_is_a_match(self):
        result = local_ats.compute_ats_score_locally(_complete_resume(), "Frontend Developer", rng=random.Random(2))
        self.assertGreaterEqual(result.score, 70)
        self.assertIn("match", result.summary)
        self.assertIn("react", result.keywords_matched)
        self.assertNotIn("react", result.keywords_missing)
        self.assertLessEqual(len(result.keywords_matched), 5)


if __name__ == "__main__":
    unittest.main()
