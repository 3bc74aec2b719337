"""Closed enumerations for issues, industries, and lead statuses."""

from __future__ import annotations

from enum import Enum

from leadscore.constants.scoring import CRITICAL_WEIGHT, OPTIMIZATION_WEIGHT, RECOMMENDED_WEIGHT


class IssueSeverity(str, Enum):
    """Severity of a detected issue. Each severity carries a fixed penalty."""

    CRITICAL = "critical"
    RECOMMENDED = "recommended"
    OPTIMIZATION = "optimization"

    @property
    def weight(self) -> int:
        """Fixed score penalty for one issue of this severity (always <= 0)."""
        return _SEVERITY_WEIGHTS[self]


class Industry(str, Enum):
    """Industry of a lead, used to pick industry-specific analyzers."""

    WEBDESIGN = "webdesign"
    REAL_ESTATE = "real_estate"
    AUTOMOBILE = "automobile"
    ESHOP = "eshop"
    RESTAURANT = "restaurant"
    MEDICAL = "medical"
    LEGAL = "legal"
    FINANCE = "finance"
    EDUCATION = "education"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _INDUSTRY_LABELS[self]


class IssueCategory(str, Enum):
    """Analyzer category an issue belongs to."""

    # Universal categories, analyzed for every lead.
    HTTP = "http"
    SECURITY = "security"
    SEO = "seo"
    LIBRARIES = "libraries"
    PERFORMANCE = "performance"
    RESPONSIVENESS = "responsiveness"
    VISUAL = "visual"
    ACCESSIBILITY = "accessibility"
    ESHOP_DETECTION = "eshop_detection"
    OUTDATED_CODE = "outdated_code"
    DESIGN_MODERNITY = "design_modernity"
    CMS_QUALITY = "cms_quality"
    CONTENT_QUALITY = "content_quality"
    BRANDING = "branding"
    NAVIGATION_UX = "navigation_ux"
    CONVERSION = "conversion"
    LEGAL_COMPLIANCE = "legal_compliance"
    TYPOGRAPHY = "typography"

    # Industry-specific categories.
    INDUSTRY_ESHOP = "industry_eshop"
    INDUSTRY_WEBDESIGN = "industry_webdesign"
    INDUSTRY_REAL_ESTATE = "industry_real_estate"
    INDUSTRY_AUTOMOBILE = "industry_automobile"
    INDUSTRY_RESTAURANT = "industry_restaurant"
    INDUSTRY_MEDICAL = "industry_medical"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def is_industry_specific(self) -> bool:
        return self.value.startswith("industry_")

    @property
    def is_universal(self) -> bool:
        return not self.is_industry_specific

    @property
    def industry(self) -> Industry | None:
        """Industry this category belongs to, or ``None`` for universal categories."""
        return _CATEGORY_INDUSTRIES.get(self)

    @classmethod
    def for_industry(cls, industry: Industry) -> IssueCategory | None:
        """Return the industry-specific category for *industry*, if it has one."""
        for category, owner in _CATEGORY_INDUSTRIES.items():
            if owner is industry:
                return category
        return None


def universal_categories() -> tuple[IssueCategory, ...]:
    """Return universal categories in declaration order."""
    return tuple(category for category in IssueCategory if category.is_universal)


class LeadStatus(str, Enum):
    """Status of a lead: a sales workflow state or an analysis quality tier."""

    # Workflow states
    NEW = "new"
    POTENTIAL = "potential"
    GOOD = "good"
    DONE = "done"
    DEAL = "deal"
    DISMISSED = "dismissed"

    # Quality tiers, worst first
    VERY_BAD = "very_bad"
    BAD = "bad"
    MIDDLE = "middle"
    QUALITY_GOOD = "quality_good"
    SUPER = "super"

    @property
    def is_quality_state(self) -> bool:
        return self in _QUALITY_RANK

    @property
    def is_workflow_state(self) -> bool:
        return not self.is_quality_state

    @property
    def is_final_state(self) -> bool:
        return self in (LeadStatus.DEAL, LeadStatus.DISMISSED)

    @property
    def quality_rank(self) -> int:
        """Position among quality tiers, ``0`` for VERY_BAD up to ``4`` for SUPER.

        Raises ``ValueError`` for workflow states, which have no quality order.
        """
        try:
            return _QUALITY_RANK[self]
        except KeyError:
            raise ValueError(f"{self.value!r} is a workflow state and has no quality rank") from None

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


def quality_statuses() -> tuple[LeadStatus, ...]:
    """Return quality tiers ordered from worst to best."""
    return tuple(sorted(_QUALITY_RANK, key=_QUALITY_RANK.__getitem__))


class AnalysisStatus(str, Enum):
    """Lifecycle state of an analysis or of a single analyzer result."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


_SEVERITY_WEIGHTS: dict[IssueSeverity, int] = {
    IssueSeverity.CRITICAL: CRITICAL_WEIGHT,
    IssueSeverity.RECOMMENDED: RECOMMENDED_WEIGHT,
    IssueSeverity.OPTIMIZATION: OPTIMIZATION_WEIGHT,
}

_QUALITY_RANK: dict[LeadStatus, int] = {
    LeadStatus.VERY_BAD: 0,
    LeadStatus.BAD: 1,
    LeadStatus.MIDDLE: 2,
    LeadStatus.QUALITY_GOOD: 3,
    LeadStatus.SUPER: 4,
}

_STATUS_LABELS: dict[LeadStatus, str] = {
    LeadStatus.NEW: "New",
    LeadStatus.POTENTIAL: "Potential",
    LeadStatus.GOOD: "Good",
    LeadStatus.DONE: "Done",
    LeadStatus.DEAL: "Deal",
    LeadStatus.DISMISSED: "Dismissed",
    LeadStatus.VERY_BAD: "Very bad",
    LeadStatus.BAD: "Bad",
    LeadStatus.MIDDLE: "Average",
    LeadStatus.QUALITY_GOOD: "Good quality",
    LeadStatus.SUPER: "Excellent",
}

_INDUSTRY_LABELS: dict[Industry, str] = {
    Industry.WEBDESIGN: "Web Design & Development",
    Industry.REAL_ESTATE: "Real Estate",
    Industry.AUTOMOBILE: "Automobile",
    Industry.ESHOP: "E-commerce / E-shop",
    Industry.RESTAURANT: "Restaurant & Food",
    Industry.MEDICAL: "Healthcare & Medical",
    Industry.LEGAL: "Legal Services",
    Industry.FINANCE: "Finance & Insurance",
    Industry.EDUCATION: "Education",
    Industry.OTHER: "Other",
}

_CATEGORY_LABELS: dict[IssueCategory, str] = {
    IssueCategory.HTTP: "HTTP & SSL",
    IssueCategory.SECURITY: "Security",
    IssueCategory.SEO: "SEO",
    IssueCategory.LIBRARIES: "Libraries",
    IssueCategory.PERFORMANCE: "Performance",
    IssueCategory.RESPONSIVENESS: "Responsiveness",
    IssueCategory.VISUAL: "Visual",
    IssueCategory.ACCESSIBILITY: "Accessibility",
    IssueCategory.ESHOP_DETECTION: "E-shop detection",
    IssueCategory.OUTDATED_CODE: "Outdated code",
    IssueCategory.DESIGN_MODERNITY: "Design modernity",
    IssueCategory.CMS_QUALITY: "CMS quality",
    IssueCategory.CONTENT_QUALITY: "Content quality",
    IssueCategory.BRANDING: "Branding",
    IssueCategory.NAVIGATION_UX: "Navigation & UX",
    IssueCategory.CONVERSION: "Conversion elements",
    IssueCategory.LEGAL_COMPLIANCE: "Legal compliance",
    IssueCategory.TYPOGRAPHY: "Typography",
    IssueCategory.INDUSTRY_ESHOP: "E-shop specific",
    IssueCategory.INDUSTRY_WEBDESIGN: "Web design specific",
    IssueCategory.INDUSTRY_REAL_ESTATE: "Real estate specific",
    IssueCategory.INDUSTRY_AUTOMOBILE: "Automobile specific",
    IssueCategory.INDUSTRY_RESTAURANT: "Restaurant specific",
    IssueCategory.INDUSTRY_MEDICAL: "Healthcare specific",
}

_CATEGORY_INDUSTRIES: dict[IssueCategory, Industry] = {
    IssueCategory.INDUSTRY_ESHOP: Industry.ESHOP,
    IssueCategory.INDUSTRY_WEBDESIGN: Industry.WEBDESIGN,
    IssueCategory.INDUSTRY_REAL_ESTATE: Industry.REAL_ESTATE,
    IssueCategory.INDUSTRY_AUTOMOBILE: Industry.AUTOMOBILE,
    IssueCategory.INDUSTRY_RESTAURANT: Industry.RESTAURANT,
    IssueCategory.INDUSTRY_MEDICAL: Industry.MEDICAL,
}
