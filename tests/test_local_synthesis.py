import unittest

from resumegen.schemas.generation import Achievement, Education, Experience, Project, Skills
from resumegen.services import local_synthesis as synth


class ClassificationTests(unittest.TestCase):
    def test_project_categories(self):
        self.assertEqual(synth.classify_project("Online Shop Backend"), "E-commerce")
        self.assertEqual(synth.classify_project("AI Resume Screener"), "AI/ML")
        self.assertEqual(synth.classify_project("Android Habit Tracker"), "Mobile App")
        self.assertEqual(synth.classify_project("Sales Dashboard"), "Dashboard")
        self.assertEqual(synth.classify_project("Compiler"), "General")

    def test_short_keywords_match_whole_words_only(self):
        self.assertEqual(synth.classify_project("Email Scheduler"), "General")
        self.assertEqual(synth.classify_position("Build Engineer"), "Software Engineer")

    def test_position_categories_prefer_specific_roles(self):
        self.assertEqual(synth.classify_position("Senior Frontend Developer"), "Frontend Developer")
        self.assertEqual(synth.classify_position("Backend Engineer"), "Backend Developer")
        self.assertEqual(synth.classify_position("Product Manager"), "Product Manager")
        self.assertEqual(synth.classify_position("Barista"), "General")


class SummaryTests(unittest.TestCase):
    def setUp(self):
        self.skills = Skills(technical=["React", "CSS", "TypeScript", "Jest"])

    def test_fresher_summary_uses_first_skills(self):
        summary = synth.generate_summary(None, self.skills, [], True, "Frontend Developer")
        self.assertIn("React, CSS, TypeScript", summary)
        self.assertIn("graduate", summary)
        self.assertNotIn("years", summary)

    def test_experienced_summary_has_no_fresher_language(self):
        experience = [Experience(position="Frontend Developer"), Experience(position="UI Engineer")]
        summary = synth.generate_summary(None, self.skills, experience, False, "Frontend Developer")
        self.assertIn("2+ years", summary)
        self.assertNotIn("graduate", summary.lower())

    def test_explicit_years_override_experience_count(self):
        summary = synth.generate_summary(None, self.skills, [], False, "Backend Developer", years_experience=7)
        self.assertIn("7+ years", summary)

    def test_unknown_role_uses_fallback_template(self):
        fresher = synth.generate_summary(None, self.skills, [], True, "Site Reliability Engineer")
        experienced = synth.generate_summary(None, self.skills, [], False, "Site Reliability Engineer")
        self.assertIn("Recent Site Reliability Engineer graduate", fresher)
        self.assertIn("Experienced Site Reliability Engineer", experienced)

    def test_missing_role_keeps_existing_summary(self):
        self.assertEqual(synth.generate_summary("Mine.", self.skills, [], True, None), "Mine.")
        self.assertEqual(synth.generate_summary(None, self.skills, [], True, ""), synth.tables.GENERIC_SUMMARY)

    def test_objective_mentions_field_and_two_skills(self):
        objective = synth.generate_objective(
            [Education(field="Information Technology")], self.skills, "Frontend Developer"
        )
        self.assertIn("Information Technology", objective)
        self.assertIn("React and CSS", objective)


class EnrichmentTests(unittest.TestCase):
    def test_existing_descriptions_are_never_overwritten(self):
        projects = [
            Project(name="Shop", description="My own words", outcomes=["Shipped"]),
            Project(name="Shop Admin", technologies=["Django"]),
        ]
        enriched = synth.enrich_projects(projects)
        self.assertEqual(enriched[0].description, "My own words")
        self.assertEqual(enriched[0].outcomes, ["Shipped"])
        self.assertIn("Django", enriched[1].description)
        self.assertEqual(len(enriched[1].outcomes), 3)

    def test_achievement_description_from_category(self):
        enriched = synth.enrich_achievements([Achievement(title="AWS Certified Developer")])
        self.assertIn("AWS Certified Developer", enriched[0].description)
        self.assertIn("certification", enriched[0].description)

    def test_education_achievements(self):
        achievements = synth.generate_education_achievements(
            Education(degree="BSc", field="Computer Science", gpa="3.8")
        )
        self.assertEqual(achievements[0], "Graduated with GPA: 3.8")
        self.assertEqual(len(achievements), 3)

    def test_course_summary_lookup_and_fallback(self):
        education = [Education(degree="BSc", field="Computer Science")]
        self.assertIn("web development", synth.generate_course_summary(education, "Frontend Developer"))
        fallback = synth.generate_course_summary([Education(degree="BA", field="History")], "Analyst")
        self.assertIn("BA in History", fallback)
        self.assertEqual(synth.generate_course_summary([], "Analyst"), "")


class ResumeContentTests(unittest.TestCase):
    def _build(self, **overrides):
        params = dict(
            role="Frontend Developer",
            is_fresher=True,
            summary=None,
            skills=Skills(technical=["React", "CSS"]),
            education=[Education(degree="BSc", field="Computer Science")],
            experience=[Experience(company="Acme", position="Intern")],
            projects=[Project(name="Portfolio Website")],
            achievements=[],
            years_experience=None,
        )
        params.update(overrides)
        return synth.enhance_resume_content(**params)

    def test_fresher_content_drops_experience_and_sets_objective(self):
        content, enhancements = self._build()
        self.assertEqual(content.experience, [])
        self.assertIsNotNone(content.objective)
        self.assertIn("React, CSS", content.summary)
        self.assertIn("Created career objective", enhancements)
        self.assertLessEqual(len(content.improvements), 3)

    def test_experienced_content_keeps_experience(self):
        content, _ = self._build(is_fresher=False, role="Backend Developer")
        self.assertEqual(len(content.experience), 1)
        self.assertEqual(len(content.experience[0].achievements), 3)
        self.assertIsNone(content.objective)

    def test_existing_summary_is_kept(self):
        content, enhancements = self._build(summary="Hand written.")
        self.assertEqual(content.summary, "Hand written.")
        self.assertNotIn("Generated professional summary", enhancements)


class SectionTextTests(unittest.TestCase):
    def test_project_outcomes_are_bulleted(self):
        result = synth.enhance_section_text(
            section="project", field="outcomes", content="", project_name="Online Store"
        )
        lines = result.enhanced_content.splitlines()
        self.assertEqual(len(lines), 3)
        self.assertTrue(all(line.startswith("• ") for line in lines))

    def test_existing_text_is_kept_first(self):
        result = synth.enhance_section_text(
            section="achievement", field="description", content="Won the regional hackathon."
        )
        self.assertTrue(result.enhanced_content.startswith("• Won the regional hackathon"))

    def test_project_technologies_string_is_split(self):
        result = synth.enhance_section_text(
            section="project",
            field="description",
            content="",
            project_name="Online Store",
            technologies="React, Flask , PostgreSQL,",
        )
        self.assertIn("React, Flask, PostgreSQL", result.enhanced_content)

    def test_format_bullets_does_not_double_bullet(self):
        self.assertEqual(synth.format_bullets(["• one", "two", "  "]), "• one\n• two")


if __name__ == "__main__":
    unittest.main()
