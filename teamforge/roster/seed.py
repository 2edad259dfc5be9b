"""Demo roster loaded at startup when ``SEED_DEMO_DATA`` is enabled."""

from __future__ import annotations

import logging
from datetime import date
from typing import List

from teamforge.models.person import Availability, Person, ScrumRole, SkillKind, SkillLevel, SkillRecord
from teamforge.models.skill import Skill
from teamforge.models.team import Team, TeamStatus
from teamforge.roster.store import RosterStore

logger = logging.getLogger(__name__)


def _scrum(name: str, level: SkillLevel, kind: SkillKind, role: ScrumRole) -> SkillRecord:
    return SkillRecord(name=name, level=level, kind=kind, scrum_role=role)


def demo_employees() -> List[Person]:
    return [
        Person(
            id=1,
            name="Ana Carolina Silva",
            role="Frontend Developer",
            department="Development",
            location="São Paulo, SP",
            email="ana.silva@example.com",
            start_date=date(2022, 3, 12),
            skills=["React", "TypeScript", "Tailwind CSS"],
            primary_skill="React",
        ),
        Person(
            id=2,
            name="Rafael Mendes",
            role="UX/UI Designer",
            department="Design",
            location="Rio de Janeiro, RJ",
            email="rafael.mendes@example.com",
            start_date=date(2023, 1, 5),
            skills=["Figma", "Adobe XD", "User Research"],
            primary_skill="Figma",
        ),
        Person(
            id=3,
            name="Juliana Costa",
            role="Product Manager",
            department="Product",
            location="Belo Horizonte, MG",
            email="juliana.costa@example.com",
            start_date=date(2022, 5, 18),
            skills=["Scrum", "Product Strategy", "Data Analysis"],
        ),
        Person(
            id=4,
            name="Lucas Oliveira",
            role="Senior Backend Developer",
            department="Development",
            location="Curitiba, PR",
            email="lucas.oliveira@example.com",
            start_date=date(2023, 7, 22),
            skills=["Node.js", "Python", "AWS"],
            primary_skill="Node.js",
        ),
        Person(
            id=5,
            name="Mariana Santos",
            role="Marketing Analyst",
            department="Marketing",
            location="Brasília, DF",
            email="mariana.santos@example.com",
            start_date=date(2023, 2, 10),
            skills=["SEO", "Social Media", "Content Strategy"],
        ),
        Person(
            id=6,
            name="Pedro Almeida",
            role="DevOps Engineer",
            department="Development",
            location="Porto Alegre, RS",
            email="pedro.almeida@example.com",
            start_date=date(2022, 4, 3),
            skills=["Docker", "Kubernetes", "CI/CD"],
        ),
        Person(
            id=7,
            name="João Silva",
            role="Scrum Master",
            department="Agile Office",
            skills=[
                _scrum("Clear communication", SkillLevel.EXPERT, SkillKind.SOFT, ScrumRole.SCRUM_MASTER),
                _scrum("Facilitation", SkillLevel.ADVANCED, SkillKind.SOFT, ScrumRole.SCRUM_MASTER),
                _scrum("Advanced Scrum framework knowledge", SkillLevel.EXPERT, SkillKind.HARD, ScrumRole.SCRUM_MASTER),
            ],
        ),
        Person(
            id=8,
            name="Maria Santos",
            role="Product Owner",
            department="Product",
            skills=[
                _scrum("Strategic business vision", SkillLevel.EXPERT, SkillKind.SOFT, ScrumRole.PRODUCT_OWNER),
                _scrum("Prioritization", SkillLevel.ADVANCED, SkillKind.SOFT, ScrumRole.PRODUCT_OWNER),
                _scrum("Backlog management", SkillLevel.EXPERT, SkillKind.HARD, ScrumRole.PRODUCT_OWNER),
            ],
        ),
        Person(
            id=9,
            name="Carlos Oliveira",
            role="Junior Mobile Developer",
            department="Development",
            skills=[
                _scrum("Relevant technical stack", SkillLevel.EXPERT, SkillKind.HARD, ScrumRole.DEVELOPER),
                _scrum("Collaboration", SkillLevel.ADVANCED, SkillKind.SOFT, ScrumRole.DEVELOPER),
                _scrum("Code versioning", SkillLevel.ADVANCED, SkillKind.HARD, ScrumRole.DEVELOPER),
                SkillRecord(name="Flutter"),
            ],
        ),
        Person(
            id=10,
            name="Ana Costa",
            role="QA Analyst",
            department="Development",
            skills=[
                _scrum("Self-organization", SkillLevel.ADVANCED, SkillKind.SOFT, ScrumRole.DEVELOPER),
                _scrum("Automated testing", SkillLevel.INTERMEDIATE, SkillKind.HARD, ScrumRole.DEVELOPER),
                _scrum("Adaptability", SkillLevel.EXPERT, SkillKind.SOFT, ScrumRole.DEVELOPER),
            ],
        ),
        Person(
            id=11,
            name="Pedro Lima",
            role="Mid-level Fullstack Developer",
            department="Development",
            skills=[
                _scrum("Cross-functionality", SkillLevel.ADVANCED, SkillKind.SOFT, ScrumRole.DEVELOPER),
                _scrum("Relevant technical stack", SkillLevel.INTERMEDIATE, SkillKind.HARD, ScrumRole.DEVELOPER),
                _scrum("Continuous improvement", SkillLevel.ADVANCED, SkillKind.SOFT, ScrumRole.DEVELOPER),
                SkillRecord(name="React Native"),
                SkillRecord(name="JavaScript"),
            ],
        ),
        Person(
            id=12,
            name="Beatriz Rocha",
            role="Cloud Infrastructure Lead",
            department="Development",
            availability=Availability.ON_LEAVE,
            skills=["Terraform", "AWS", "Kubernetes"],
        ),
    ]


def demo_teams(employees: List[Person]) -> List[Team]:
    by_id = {employee.id: employee for employee in employees}
    return [
        Team(
            id=1,
            name="Team Alpha",
            project="Customer Portal",
            status=TeamStatus.ACTIVE,
            max_members=9,
            description="Builds the customer-facing web portal",
            members=[by_id[1], by_id[3], by_id[5]],
        ),
        Team(
            id=2,
            name="Team Beta",
            project="Mobile App",
            status=TeamStatus.ACTIVE,
            max_members=5,
            description="Delivers the mobile application",
            members=[by_id[6]],
        ),
        Team(
            id=3,
            name="Team Gamma",
            project="Internal System API",
            status=TeamStatus.PLANNED,
            max_members=4,
            description="New team for the internal back-office system",
        ),
    ]


def demo_skills() -> List[Skill]:
    rows = [
        ("Scrum Master", "Scrum", SkillLevel.EXPERT, "Facilitate Scrum events, remove impediments and coach the team", True),
        ("Product Owner", "Scrum", SkillLevel.ADVANCED, "Own the product backlog and set business priorities", True),
        ("Sprint Planning", "Scrum Events", SkillLevel.INTERMEDIATE, "Plan and estimate the work of a sprint", False),
        ("Daily Scrum", "Scrum Events", SkillLevel.BASIC, "Facilitate and take part in daily meetings", False),
        ("Sprint Review", "Scrum Events", SkillLevel.INTERMEDIATE, "Demonstrate the increment and gather feedback", False),
        ("Sprint Retrospective", "Scrum Events", SkillLevel.ADVANCED, "Drive continuous team improvement", False),
        ("Product Backlog Management", "Scrum Artifacts", SkillLevel.ADVANCED, "Create, prioritize and refine backlog items", False),
        ("User Stories", "Scrum Artifacts", SkillLevel.INTERMEDIATE, "Write and split user stories", False),
        ("Definition of Done", "Scrum Artifacts", SkillLevel.BASIC, "Define and apply done criteria", False),
        ("Velocity Tracking", "Agile Metrics", SkillLevel.INTERMEDIATE, "Measure and follow team velocity", False),
        ("Burndown Charts", "Agile Metrics", SkillLevel.BASIC, "Build and read burndown charts", False),
        ("Stakeholder Management", "Agile Soft Skills", SkillLevel.ADVANCED, "Manage stakeholder expectations and communication", False),
    ]
    return [
        Skill(id=index, name=name, category=category, level=level, description=description, is_core=is_core)
        for index, (name, category, level, description, is_core) in enumerate(rows, start=1)
    ]


def seed_demo_roster(store: RosterStore) -> None:
    employees = demo_employees()
    store.load(employees=employees, teams=demo_teams(employees), skills=demo_skills())
    logger.info("Seeded demo roster")
