"""Domain models - pure Python dataclasses for quotes, offers and deals"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class SplitType(str, Enum):
    """How profit on a shared capital deal is split with the partner"""

    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass
class SitePolicy:
    """Site-wide finance defaults, passed explicitly into the engines"""

    default_interest_rate: float = 13.5
    max_balloon_percent: float = 40.0
    default_balloon_percent: float = 0.0
    catalog_deposit_percent: float = 10.0


@dataclass
class Vehicle:
    """Vehicle attributes the quoting flows depend on"""

    price: float
    year: Optional[int] = None
    body_type: Optional[str] = None


@dataclass
class LoanInputs:
    """Inputs to a single installment calculation"""

    principal: float
    annual_rate_percent: float
    term_months: int
    balloon_amount: float = 0.0


@dataclass
class RiskProfile:
    """Vehicle risk attributes that move the interest rate"""

    vehicle_year: Optional[int] = None
    body_type: Optional[str] = None
    deposit_percent: float = 0.0


@dataclass
class RateAdjustment:
    """Explained interest rate: base rate plus each adjustment"""

    base_rate: float
    age_penalty: float
    type_penalty: float
    deposit_bonus: float
    final_rate: float


@dataclass
class MarketingRateConfig:
    """Term and rate shown on catalog cards"""

    term: int
    rate: float


@dataclass
class BankOffer:
    """Finance offer from one bank for one application"""

    bank_name: str
    interest_rate_linked: Optional[float] = None
    interest_rate_fixed: Optional[float] = None
    balloon_amount: Optional[float] = None
    cash_price: float = 0.0
    principal_debt: float = 0.0
    license_fee: float = 0.0
    delivery_fee: float = 0.0
    admin_fee: float = 0.0
    initiation_fee: float = 0.0
    instalment_linked: Optional[float] = None
    instalment_fixed: Optional[float] = None


@dataclass
class OfferTerms:
    """Rate and balloon percentage derived from a bank offer"""

    rate: Optional[float]
    balloon_percent: int


@dataclass
class AddOn:
    """Value-added product sold with a vehicle"""

    name: str
    cost_price: float = 0.0
    selling_price: float = 0.0


@dataclass
class AftersalesExpense:
    """Expense incurred on a deal after it was closed"""

    type: str
    amount: float
    description: Optional[str] = None


@dataclass
class ExpenseEntry:
    """Line in a vehicle's expense ledger"""

    description: str
    amount: float
    category: str = "general"


@dataclass
class DealRecord:
    """Finalized vehicle sale with its cost, fee and partner data"""

    sold_price: float
    cost_price: float = 0.0
    recon_cost: float = 0.0
    dic_amount: float = 0.0
    discount_amount: float = 0.0
    dealer_deposit_contribution: float = 0.0
    sales_rep_name: Optional[str] = None
    sales_rep_commission: float = 0.0
    referral_person_name: Optional[str] = None
    referral_commission_amount: float = 0.0
    referral_income_amount: float = 0.0
    is_shared_capital: bool = False
    partner_split_type: SplitType = SplitType.PERCENTAGE
    partner_split_value: float = 0.0
    partner_capital_contribution: float = 0.0
    addons_data: List[AddOn] = field(default_factory=list)
    aftersales_expenses: List[AftersalesExpense] = field(default_factory=list)
    client_deposit: float = 0.0
    external_admin_fee: float = 0.0
    bank_initiation_fee: float = 0.0
    is_closed: bool = False


@dataclass
class ProfitSummary:
    """Profit breakdown of a deal"""

    gross_income: float
    total_costs: float
    gross_profit: float
    total_deductions: float
    net_profit: float
    aftersales_total: float
    current_profit: float
    profit_drift: float
    warnings: Tuple[str, ...] = ()


@dataclass
class PartnerDistribution:
    """Split of shared profit between partner and dealership"""

    partner_share: float
    lumina_share: float
    partner_payout_total: float


@dataclass
class FinanceStructure:
    """Deal figures presented to the bank at finalization"""

    adjusted_selling_price: float
    gross_deal: float
    total_deposits: float
    total_finance_amount: float


@dataclass
class VehicleCostSummary:
    """Pre-sale cost position of a vehicle in stock"""

    recon_total: float
    expense_total: float
    pre_sale_cost: float
    true_cost: float
    projected_profit: float


@dataclass
class CatalogQuote:
    """Installment shown on a catalog card"""

    term: int
    rate: float
    installment: float
    is_teaser: bool


@dataclass
class VehicleQuote:
    """Personalized quote for one vehicle"""

    rate: RateAdjustment
    term_months: int
    deposit_amount: float
    principal: float
    balloon_percent: float
    balloon_amount: float
    installment: float


@dataclass
class QuoteOption:
    """One scenario in a multi-option client quote"""

    title: str
    price: float
    rate: float
    term: int
    deposit: float
    balloon_percent: float
    installment: float


@dataclass
class PeriodMetrics:
    """Financial health metrics over a set of deals"""

    deal_count: int
    net_profit: float
    gross_revenue: float
    total_costs: float
    total_expenses: float
    commission_payouts: float
