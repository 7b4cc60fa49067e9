"""Developer profile database models.

A developer owns its skills, experiences and social media links
directly. Projects hang off skills through a many-to-many association,
so a project reaches its developer only through one of its skills.
"""

from datetime import UTC, datetime
from enum import Enum
from uuid import UUID

from sqlalchemy import Column, DateTime, Float, ForeignKey, String, Table, Text, Uuid
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resume_api.core.constants import (
    DEFAULT_DEVELOPER_EMAIL,
    DEFAULT_DEVELOPER_NAME,
    DEFAULT_GREETING_MESSAGE,
    DEFAULT_GREETING_TITLE,
    DEFAULT_IT_EXPERIENCE_YEARS,
    DEFAULT_MISSION_DESCRIPTION,
    DEFAULT_MISSION_TITLE,
    DEFAULT_PROJECT_IMAGE_URL,
    DEFAULT_WORK_EXPERIENCE_YEARS,
    MAX_EMAIL_LENGTH,
    MAX_EXTERNAL_ID_LENGTH,
    MAX_GREETING_LENGTH,
    MAX_LOCATION_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PROFICIENCY_LEVEL,
    MAX_TITLE_LENGTH,
    MAX_URL_LENGTH,
    MIN_PROFICIENCY_LEVEL,
)
from resume_api.core.database.base import Base, TimestampMixin, UUIDMixin
from resume_api.core.errors import ValidationError


# Junction table for DeveloperSkill <-> Project many-to-many relationship
developer_skill_projects = Table(
    "developer_skill_projects",
    Base.metadata,
    Column(
        "developer_skill_id",
        Uuid,
        ForeignKey("developer_skills.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "project_id",
        Uuid,
        ForeignKey("projects.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class ExperienceType(str, Enum):
    """Kind of entry on a developer's timeline."""

    WORK = "Work"
    EDUCATION = "Education"
    INTERNSHIP = "Internship"
    VOLUNTEERING = "Volunteering"


class SocialMediaNetwork(str, Enum):
    """Networks a developer can link to from their profile."""

    FACEBOOK = "Facebook"
    X = "X"
    INSTAGRAM = "Instagram"
    LINKEDIN = "LinkedIn"
    WHATSAPP = "WhatsApp"
    GITHUB = "Github"
    GITLAB = "GitLab"


class Developer(Base, UUIDMixin, TimestampMixin):
    """A developer resume profile.

    Attributes:
        name: Display name
        email: Contact email
        image_url: Profile image location
        greeting_title: Heading of the profile's greeting
        greeting_message: Body of the profile's greeting
        mission_title: Heading of the mission statement
        mission_description: Body of the mission statement
        it_experience_start_date: Start of the developer's IT experience
        work_experience_start_date: Start of the developer's working life
        created_by_id: External ID of the user who created the profile;
            set once and never changed. The creator always has access.
    """

    __tablename__ = "developers"

    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(MAX_EMAIL_LENGTH), nullable=False)
    image_url: Mapped[str] = mapped_column(String(MAX_URL_LENGTH), default="", nullable=False)
    greeting_title: Mapped[str] = mapped_column(String(MAX_TITLE_LENGTH), nullable=False)
    greeting_message: Mapped[str] = mapped_column(String(MAX_GREETING_LENGTH), nullable=False)
    mission_title: Mapped[str] = mapped_column(String(MAX_TITLE_LENGTH), nullable=False)
    mission_description: Mapped[str] = mapped_column(String(MAX_GREETING_LENGTH), nullable=False)
    it_experience_start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    work_experience_start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    created_by_id: Mapped[str] = mapped_column(
        String(MAX_EXTERNAL_ID_LENGTH),
        nullable=False,
        index=True,
    )

    # Relationships
    skills: Mapped[list["DeveloperSkill"]] = relationship(
        "DeveloperSkill",
        back_populates="developer",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=lambda: [DeveloperSkill.created_at, DeveloperSkill.id],
        lazy="raise",
    )
    experiences: Mapped[list["Experience"]] = relationship(
        "Experience",
        back_populates="developer",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=lambda: [Experience.start_date.desc(), Experience.id],
        lazy="raise",
    )
    social_media_links: Mapped[list["SocialMediaLink"]] = relationship(
        "SocialMediaLink",
        back_populates="developer",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=lambda: [SocialMediaLink.created_at, SocialMediaLink.id],
        lazy="raise",
    )

    @classmethod
    def create_empty(cls, created_by_id: str) -> "Developer":
        """Create a placeholder profile owned by ``created_by_id``.

        Raises:
            ValidationError: If the creator ID is blank
        """
        if not created_by_id or not created_by_id.strip():
            raise ValidationError("Creator ID cannot be empty")
        now = datetime.now(UTC)
        return cls(
            name=DEFAULT_DEVELOPER_NAME,
            email=DEFAULT_DEVELOPER_EMAIL,
            image_url="",
            greeting_title=DEFAULT_GREETING_TITLE,
            greeting_message=DEFAULT_GREETING_MESSAGE,
            mission_title=DEFAULT_MISSION_TITLE,
            mission_description=DEFAULT_MISSION_DESCRIPTION,
            it_experience_start_date=_years_before(now, DEFAULT_IT_EXPERIENCE_YEARS),
            work_experience_start_date=_years_before(now, DEFAULT_WORK_EXPERIENCE_YEARS),
            created_by_id=created_by_id,
        )

    def update_profile(
        self,
        name: str,
        email: str,
        greeting_title: str,
        greeting_message: str,
        mission_title: str,
        mission_description: str,
        it_experience_start_date: datetime,
        work_experience_start_date: datetime,
    ) -> None:
        """Replace the editable profile fields.

        ``created_by_id`` and the image are left as they are.

        Raises:
            ValidationError: If a text field is blank
        """
        _require_text(
            ("Name", name),
            ("Email", email),
            ("Greeting title", greeting_title),
            ("Greeting message", greeting_message),
            ("Mission title", mission_title),
            ("Mission description", mission_description),
        )
        self.name = name
        self.email = email
        self.greeting_title = greeting_title
        self.greeting_message = greeting_message
        self.mission_title = mission_title
        self.mission_description = mission_description
        self.it_experience_start_date = it_experience_start_date
        self.work_experience_start_date = work_experience_start_date

    def __repr__(self) -> str:
        return f"<Developer(id={self.id}, created_by_id={self.created_by_id})>"


class DeveloperSkill(Base, UUIDMixin, TimestampMixin):
    """A technology a developer knows, with a proficiency rating.

    Attributes:
        developer_id: The owning developer
        technology_name: Name of the technology
        proficiency_level: -1 (unrated) to 100
    """

    __tablename__ = "developer_skills"

    developer_id: Mapped[UUID] = mapped_column(
        ForeignKey("developers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    technology_name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    proficiency_level: Mapped[float] = mapped_column(Float, nullable=False)

    # Relationships
    developer: Mapped[Developer] = relationship(
        "Developer",
        back_populates="skills",
        lazy="raise",
    )
    projects: Mapped[list["Project"]] = relationship(
        "Project",
        secondary=developer_skill_projects,
        back_populates="developer_skills",
        order_by=lambda: [Project.created_at, Project.id],
        lazy="raise",
    )

    @classmethod
    def create(
        cls,
        technology_name: str,
        proficiency_level: float,
        developer: Developer,
    ) -> "DeveloperSkill":
        """Create a skill attached to ``developer``.

        Raises:
            ValidationError: If the name is blank or the level is out of range
        """
        skill = cls(developer=developer, projects=[])
        skill.update(technology_name, proficiency_level)
        return skill

    def update(self, technology_name: str, proficiency_level: float) -> None:
        """Rename the skill and set its level.

        Raises:
            ValidationError: If the name is blank or the level is out of range
        """
        _require_text(("Technology name", technology_name))
        if not MIN_PROFICIENCY_LEVEL <= proficiency_level <= MAX_PROFICIENCY_LEVEL:
            raise ValidationError(
                f"Proficiency must be between {MIN_PROFICIENCY_LEVEL} "
                f"and {MAX_PROFICIENCY_LEVEL}"
            )
        self.technology_name = technology_name
        self.proficiency_level = proficiency_level

    def __repr__(self) -> str:
        return f"<DeveloperSkill(id={self.id}, developer_id={self.developer_id})>"


class Experience(Base, UUIDMixin, TimestampMixin):
    """A work, education or other entry on a developer's timeline."""

    __tablename__ = "experiences"

    developer_id: Mapped[UUID] = mapped_column(
        ForeignKey("developers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    experience_type: Mapped[ExperienceType] = mapped_column(
        SAEnum(
            ExperienceType,
            native_enum=False,
            length=20,
            values_callable=lambda types: [t.value for t in types],
            name="experience_type",
        ),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(MAX_TITLE_LENGTH), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    location_name: Mapped[str] = mapped_column(String(MAX_LOCATION_LENGTH), nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Relationships
    developer: Mapped[Developer] = relationship(
        "Developer",
        back_populates="experiences",
        lazy="raise",
    )

    @classmethod
    def create(
        cls,
        experience_type: ExperienceType,
        title: str,
        description: str,
        location_name: str,
        start_date: datetime,
        end_date: datetime | None,
        developer: Developer,
    ) -> "Experience":
        """Create an experience attached to ``developer``.

        Raises:
            ValidationError: If a text field is blank or the dates are reversed
        """
        experience = cls(developer=developer)
        experience.update(
            experience_type, title, description, location_name, start_date, end_date
        )
        return experience

    def update(
        self,
        experience_type: ExperienceType,
        title: str,
        description: str,
        location_name: str,
        start_date: datetime,
        end_date: datetime | None,
    ) -> None:
        """Replace every field of the experience.

        Raises:
            ValidationError: If a text field is blank or the dates are reversed
        """
        _require_text(
            ("Title", title),
            ("Description", description),
            ("Location name", location_name),
        )
        if end_date is not None and _as_utc(start_date) >= _as_utc(end_date):
            raise ValidationError("Start date must be before end date")
        self.experience_type = experience_type
        self.title = title
        self.description = description
        self.location_name = location_name
        self.start_date = start_date
        self.end_date = end_date

    def __repr__(self) -> str:
        return f"<Experience(id={self.id}, developer_id={self.developer_id})>"


class Project(Base, UUIDMixin, TimestampMixin):
    """A project showcased under one or more of a developer's skills.

    ``developer_skills`` is ordered oldest skill first. Access to a
    project is decided through the first skill in that order.
    """

    __tablename__ = "projects"

    title: Mapped[str] = mapped_column(String(MAX_TITLE_LENGTH), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str] = mapped_column(String(MAX_URL_LENGTH), nullable=False)

    # Relationships
    developer_skills: Mapped[list[DeveloperSkill]] = relationship(
        "DeveloperSkill",
        secondary=developer_skill_projects,
        back_populates="projects",
        order_by=[DeveloperSkill.created_at, DeveloperSkill.id],
        lazy="raise",
    )

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        skill: DeveloperSkill,
        image_url: str = DEFAULT_PROJECT_IMAGE_URL,
    ) -> "Project":
        """Create a project showcased under ``skill``.

        Raises:
            ValidationError: If the title or description is blank
        """
        project = cls(image_url=image_url, developer_skills=[skill])
        project.update(title, description)
        return project

    def update(self, title: str, description: str) -> None:
        """Change the title and description.

        Raises:
            ValidationError: If the title or description is blank
        """
        _require_text(("Title", title), ("Description", description))
        self.title = title
        self.description = description

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, title={self.title})>"


class SocialMediaLink(Base, UUIDMixin, TimestampMixin):
    """A link from a developer's profile to one of their social accounts."""

    __tablename__ = "social_media_links"

    developer_id: Mapped[UUID] = mapped_column(
        ForeignKey("developers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    url: Mapped[str] = mapped_column(String(MAX_URL_LENGTH), nullable=False)
    network: Mapped[SocialMediaNetwork] = mapped_column(
        SAEnum(
            SocialMediaNetwork,
            native_enum=False,
            length=20,
            values_callable=lambda networks: [n.value for n in networks],
            name="social_media_network",
        ),
        nullable=False,
    )

    # Relationships
    developer: Mapped[Developer] = relationship(
        "Developer",
        back_populates="social_media_links",
        lazy="raise",
    )

    @classmethod
    def create(
        cls,
        url: str,
        network: SocialMediaNetwork,
        developer: Developer,
    ) -> "SocialMediaLink":
        """Create a link attached to ``developer``.

        Raises:
            ValidationError: If the URL is blank
        """
        _require_text(("URL", url))
        return cls(url=url, network=network, developer=developer)

    def __repr__(self) -> str:
        return f"<SocialMediaLink(id={self.id}, network={self.network})>"


def _require_text(*fields: tuple[str, str]) -> None:
    for label, value in fields:
        if not value or not value.strip():
            raise ValidationError(f"{label} cannot be empty")


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken to be UTC so they compare with aware ones
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def _years_before(moment: datetime, years: int) -> datetime:
    try:
        return moment.replace(year=moment.year - years)
    except ValueError:
        # 29 February in a non-leap target year
        return moment.replace(year=moment.year - years, day=28)
