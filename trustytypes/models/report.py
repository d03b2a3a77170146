"""Response models for the Trusty package report API."""
from enum import Enum
from typing import Any
from typing import get_args
from typing import get_origin

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

from trustytypes.models.time import TrustyTime

SUMMARY_KEY_ACTIVITY = 'activity'            # float
SUMMARY_KEY_ACTIVITY_REPO = 'activity_repo'  # float
SUMMARY_KEY_ACTIVITY_USER = 'activity_user'  # float
SUMMARY_KEY_FROM = 'from'                    # str
SUMMARY_KEY_MALICIOUS = 'malicious'          # bool
SUMMARY_KEY_PROVENANCE = 'provenance'        # float
SUMMARY_KEY_TRUST_SUMMARY = 'trust-summary'  # float
SUMMARY_KEY_TYPOSQUATTING = 'typosquatting'  # float

ORIGIN_OK = 'ok'
VISIBILITY_PUBLIC = 'public'
VISIBILITY_PRIVATE = 'private'


class ReportStatus(str, Enum):
    PENDING = 'pending'
    IN_PROGRESS = 'in_progress'
    COMPLETE = 'complete'

    def __str__(self) -> str:
        return self.value


class TrustyModel(BaseModel):
    """
    Base for all report models: a JSON null is the same as a missing key.

    A null inside a list of models decodes as an empty model.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra='ignore',
    )

    @classmethod
    def _model_list_keys(cls) -> set[str]:
        keys = set()
        for name, field in cls.model_fields.items():
            if get_origin(field.annotation) is not list:
                continue
            (item_type,) = get_args(field.annotation)
            if isinstance(item_type, type) and issubclass(item_type, BaseModel):
                keys.add(field.alias or name)
                keys.add(name)
        return keys

    @model_validator(mode='before')
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        model_lists = cls._model_list_keys()
        cleaned = {}
        for key, value in data.items():
            if value is None:
                continue
            if key in model_lists and isinstance(value, list):
                value = [{} if item is None else item for item in value]
            cleaned[key] = value
        return cleaned


class ActivityDescription(TrustyModel):
    repository: float = Field(alias='repo', default=0.0)
    user: float = 0.0


class Activity(TrustyModel):
    """A package's activity score."""
    score: float = 0.0
    description: ActivityDescription = Field(
        default_factory=ActivityDescription,
    )
    updated_at: TrustyTime | None = None


class TyposquattingDescription(TrustyModel):
    total_similar_names: int = 0


class Typosquatting(TrustyModel):
    """Typosquatting score for the package's name."""
    score: float = 0.0
    description: TyposquattingDescription = Field(
        default_factory=TyposquattingDescription,
    )
    updated_at: TrustyTime | None = None


class HistoricalProvenance(TrustyModel):
    tags: float = 0.0
    common: float = 0.0
    overlap: float = 0.0
    versions: float = 0.0
    over_time: dict[str, Any] = Field(default_factory=dict)


class SigstoreProvenance(TrustyModel):
    """Sigstore certificate data, present when the package was signed from a CI workflow."""
    issuer: str = ''
    workflow: str = ''
    source_repository: str = Field(alias='source_repo', default='')
    token_issuer: str = ''
    transparency: str = ''


class ProvenanceDescription(TrustyModel):
    historical: HistoricalProvenance = Field(
        alias='hp', default_factory=HistoricalProvenance,
    )
    sigstore: SigstoreProvenance = Field(default_factory=SigstoreProvenance)


class Provenance(TrustyModel):
    """Provenance score and its historical/sigstore components."""
    score: float = 0.0
    description: ProvenanceDescription = Field(
        default_factory=ProvenanceDescription,
    )
    updated_at: TrustyTime | None = None


class Alternative(TrustyModel):
    """An alternative package suggested alongside a report."""
    id: str = ''
    is_malicious: bool = False
    package_name: str = ''
    package_type: str = ''
    package_version: str = ''
    score: float = 0.0
    # Not sent by the API, filled in by clients
    package_name_url: str = Field(alias='PackageNameURL', default='')
    repo_description: str = ''
    provenance: Provenance | None = None


class AlternativesList(TrustyModel):
    status: str = ''
    packages: list[Alternative] = Field(default_factory=list)


class ScoreSummaryDescription(TrustyModel):
    activity: float = 0.0
    activity_repo: float = 0.0
    activity_user: float = 0.0
    from_: str = Field(alias='from', default='')
    malicious: bool = False
    provenance: float = 0.0
    trust_summary: float = Field(alias='trust-summary', default=0.0)
    typosquatting: float = 0.0


class ScoreSummary(TrustyModel):
    """The summary score of a package."""
    score: float | None = None
    description: dict[str, Any] = Field(default_factory=dict)
    updated_at: TrustyTime | None = None

    def parsed_description(self) -> ScoreSummaryDescription:
        return ScoreSummaryDescription.model_validate(self.description)


class User(TrustyModel):
    author: str = ''
    author_email: str = ''
    avatar_url: str = ''
    blog: str | None = None
    company: str | None = None
    email: str = ''
    followers: int = 0
    following: int = 0
    gravatar_id: str = ''
    hireable: bool = False
    html_url: str | None = None
    id: str = ''
    location: str | None = None
    login: str = ''
    public_gists: int | None = None
    public_repos: int = 0
    scores: dict[str, Any] = Field(default_factory=dict)
    twitter_username: str | None = None
    url: str = ''


class MaliciousData(TrustyModel):
    """Security details for a package flagged as malicious."""
    summary: str = ''
    details: str = ''
    published: TrustyTime | None = None  # RFC 3339, e.g. "2024-01-16T23:40:53Z"
    modified: TrustyTime | None = None
    source: str = ''


class PackageData(TrustyModel):
    """Metadata about the queried package and its repository."""
    archived: bool = False
    author: str = ''
    author_email: str = ''
    contributor_count: int = 0
    contributors: list[User] = Field(default_factory=list)

    default_branch: str = ''
    disabled: bool = False
    followers: int = 0
    following: int = 0
    forks_count: int = 0
    has_downloads: bool = False
    has_issues: bool = False
    has_projects: bool = False
    home_page: str | None = None
    id: str = ''
    deprecated: bool = Field(alias='is_deprecated', default=False)
    last_update: TrustyTime | None = None
    malicious: MaliciousData | None = None
    name: str = ''
    open_issues_count: int = 0
    origin: str = ''
    owner: User = Field(default_factory=User)

    package_description: str = ''
    public_gists: int = 0
    public_repos: int = 0
    repo_description: str = ''
    repository_id: str = ''
    repository_name: str = ''
    scores: dict[str, Any] = Field(default_factory=dict)
    stargazers_count: int = 0
    status: str = ''
    status_code: str | None = None
    type: str = ''
    version: str = ''
    version_date: TrustyTime | None = None
    visibility: str = ''
    watchers_count: int = 0


class Reply(TrustyModel):
    """Root of a package report response."""
    package_name: str = ''
    package_type: str = ''
    package_version: str = ''
    # Any string decodes, ReportStatus lists the values the API documents
    status: str = ''
    summary: ScoreSummary = Field(default_factory=ScoreSummary)
    provenance: Provenance | None = None
    activity: Activity | None = None
    typosquatting: Typosquatting | None = None
    alternatives: AlternativesList = Field(default_factory=AlternativesList)
    package_data: PackageData = Field(default_factory=PackageData)
    same_origin_packages_count: int = 0
    similar_package_names: list[Alternative] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return self.status == ReportStatus.COMPLETE

    @property
    def is_malicious(self) -> bool:
        return self.package_data.malicious is not None
