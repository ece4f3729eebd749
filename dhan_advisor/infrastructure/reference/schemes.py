"""Read-only catalog of government support schemes"""

from typing import Iterable, Optional, Protocol, Tuple
from dhan_advisor.domain.models import GovernmentScheme


class SchemeRepository(Protocol):
    """Source of government scheme reference data"""

    def all(self) -> Tuple[GovernmentScheme, ...]:
        ...

    def find(self, name: str) -> Optional[GovernmentScheme]:
        ...


SCHEME_CATALOG: Tuple[GovernmentScheme, ...] = (
    GovernmentScheme(
        name="Prime Minister's Employment Generation Programme (PMEGP)",
        description="Credit-linked subsidy for setting up micro-enterprises",
        eligibility="18+ years, 8th pass, no other subsidy availed",
        loan_amount="₹10 lakhs (manufacturing) / ₹5 lakhs (service)",
        interest_rate="15-35% subsidy on project cost",
        website="https://www.kviconline.gov.in/pmegpeportal/",
        category="Business Startup",
    ),
    GovernmentScheme(
        name="Pradhan Mantri MUDRA Yojana (PMMY)",
        description="Collateral-free loans for micro/small enterprises",
        eligibility="Any citizen starting or running micro-enterprise",
        loan_amount="Up to ₹10 lakhs (Shishu: ₹50K, Kishore: ₹5L, Tarun: ₹10L)",
        interest_rate="Bank-dependent (typically 8-12%)",
        website="https://www.mudra.org.in/",
        category="Micro-credit",
    ),
    GovernmentScheme(
        name="Stand Up India Scheme",
        description="Loans for SC/ST/Women entrepreneurs",
        eligibility="Women, SC/ST, 18+ years, first-time entrepreneur",
        loan_amount="₹10 lakhs to ₹1 crore",
        interest_rate="Base rate + 3% + tenure premium",
        website="https://www.standupmitra.in/",
        category="Large Business",
    ),
    GovernmentScheme(
        name="Sukanya Samriddhi Yojana (SSY)",
        description="Savings scheme for girl child education/marriage",
        eligibility="Girl child below 10 years",
        loan_amount="Min: ₹250/year, Max: ₹1.5 lakhs/year",
        interest_rate="7.6% p.a. (quarterly compounded)",
        website="https://www.india.gov.in/sukanya-samriddhi-yojana",
        category="Savings",
    ),
    GovernmentScheme(
        name="Mahila Udyam Nidhi Scheme",
        description="Special scheme for women entrepreneurs",
        eligibility="Women entrepreneurs in small scale sector",
        loan_amount="Up to ₹10 lakhs",
        interest_rate="Concessional rates for women",
        website="Contact Small Industries Development Bank of India (SIDBI)",
        category="Women-specific",
    ),
    GovernmentScheme(
        name="Dena Shakti Scheme",
        description="Loans for women in agriculture, retail, small enterprises",
        eligibility="Women above 18 years",
        loan_amount="Up to ₹20 lakhs",
        interest_rate="0.25% concession in interest rate",
        website="Contact Bank of Baroda",
        category="Women-specific",
    ),
    GovernmentScheme(
        name="Bharatiya Mahila Bank Business Loan",
        description="Business loans for women entrepreneurs",
        eligibility="Women entrepreneurs",
        loan_amount="₹20 lakhs to ₹20 crores",
        interest_rate="Competitive rates",
        website="Merged with State Bank of India",
        category="Large Business",
    ),
    GovernmentScheme(
        name="Cent Kalyani Scheme",
        description="Loan for women's economic empowerment",
        eligibility="Women aged 18-65 years",
        loan_amount="Up to ₹100 lakhs",
        interest_rate="Concession of 0.25% to 0.50%",
        website="Contact Central Bank of India",
        category="Women-specific",
    ),
    GovernmentScheme(
        name="Mahila e-Haat",
        description="Online marketing platform for women entrepreneurs",
        eligibility="Women entrepreneurs, SHGs, NGOs",
        loan_amount="N/A (Marketing platform)",
        interest_rate="Free platform",
        website="https://www.maahilaehaat-rmk.gov.in/",
        category="Marketing",
    ),
    GovernmentScheme(
        name="Annapurna Scheme",
        description="Loan for food catering businesses",
        eligibility="Women food caterers",
        loan_amount="Up to ₹50,000",
        interest_rate="Concessional rates",
        website="Contact public sector banks",
        category="Food Business",
    ),
)


class StaticSchemeRepository:
    """In-memory scheme catalog, fixed at construction"""

    def __init__(self, schemes: Iterable[GovernmentScheme] = SCHEME_CATALOG):
        self._schemes = tuple(schemes)
        self._by_name = {scheme.name: scheme for scheme in self._schemes}

    def all(self) -> Tuple[GovernmentScheme, ...]:
        """All schemes in catalog order"""
        return self._schemes

    def find(self, name: str) -> Optional[GovernmentScheme]:
        return self._by_name.get(name)
