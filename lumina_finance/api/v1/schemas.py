"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from lumina_finance.domain.models import (
    AddOn,
    AftersalesExpense,
    BankOffer,
    DealRecord,
    ExpenseEntry,
    SplitType,
    Vehicle,
)


class InstallmentRequest(BaseModel):
    """Request body for POST /v1/quotes/installment"""

    principal: float = Field(..., ge=0, description="Amount financed")
    annual_rate_percent: float = Field(..., ge=0, description="Annual interest rate, e.g. 13.25")
    term_months: int = Field(..., gt=0, description="Number of monthly payments")
    balloon_amount: float = Field(0.0, ge=0, description="Lump sum due at the end of the term")


class InstallmentResponse(BaseModel):
    """Response for POST /v1/quotes/installment"""

    installment: float


class RateRequest(BaseModel):
    """Request body for POST /v1/quotes/rate"""

    base_rate: float
    vehicle_year: Optional[int] = None
    body_type: Optional[str] = None
    deposit_percent: float = Field(0.0, ge=0, le=100)
    current_year: Optional[int] = None


class RateAdjustmentSchema(BaseModel):
    """Interest rate with each adjustment broken out"""

    base_rate: float
    age_penalty: float
    type_penalty: float
    deposit_bonus: float
    final_rate: float


class VehicleSchema(BaseModel):
    """Vehicle price and risk attributes"""

    price: float = Field(..., ge=0)
    year: Optional[int] = None
    body_type: Optional[str] = None

    def to_domain(self) -> Vehicle:
        return Vehicle(price=self.price, year=self.year, body_type=self.body_type)


class CatalogQuoteRequest(BaseModel):
    """Request body for POST /v1/quotes/catalog"""

    vehicle: VehicleSchema
    personalized_rate: Optional[float] = Field(None, ge=0, description="Best bank rate for the client, if any")


class CatalogQuoteResponse(BaseModel):
    """Response for POST /v1/quotes/catalog"""

    term: int
    rate: float
    installment: float
    is_teaser: bool


class VehicleQuoteRequest(BaseModel):
    """Request body for POST /v1/quotes/vehicle"""

    vehicle: VehicleSchema
    deposit_percent: float = Field(0.0, ge=0, le=100)
    balloon_percent: Optional[float] = Field(None, ge=0, le=100, description="Defaults to the site balloon")
    term_months: int = Field(72, gt=0)
    base_rate: Optional[float] = Field(None, description="Defaults to the site interest rate")
    current_year: Optional[int] = None


class VehicleQuoteResponse(BaseModel):
    """Response for POST /v1/quotes/vehicle"""

    rate: RateAdjustmentSchema
    term_months: int
    deposit_amount: float
    principal: float
    balloon_percent: float
    balloon_amount: float
    installment: float
    max_balloon_percent: float


class QuoteOptionInput(BaseModel):
    """One scenario; give either the deposit amount or percent, and either the balloon percent or amount"""

    title: str = Field(..., min_length=1)
    rate: float = Field(..., ge=0)
    term: int = Field(..., gt=0)
    deposit_amount: Optional[float] = Field(None, ge=0)
    deposit_percent: Optional[float] = Field(None, ge=0, le=100)
    balloon_percent: Optional[float] = Field(None, ge=0, le=100)
    balloon_amount: Optional[float] = Field(None, ge=0)


class QuoteOptionsRequest(BaseModel):
    """Request body for POST /v1/quotes/options"""

    price: float = Field(..., ge=0)
    options: List[QuoteOptionInput] = Field(..., min_length=1)


class QuoteOptionSchema(BaseModel):
    """Calculated quote scenario"""

    title: str
    price: float
    rate: float
    term: int
    deposit: float
    balloon_percent: float
    installment: float


class QuoteOptionsResponse(BaseModel):
    """Response for POST /v1/quotes/options"""

    options: List[QuoteOptionSchema]


class BankOfferSchema(BaseModel):
    """Finance offer from one bank"""

    bank_name: str = Field(..., min_length=1)
    interest_rate_linked: Optional[float] = Field(None, ge=0)
    interest_rate_fixed: Optional[float] = Field(None, ge=0)
    balloon_amount: Optional[float] = Field(None, ge=0)
    cash_price: float = Field(0.0, ge=0)
    principal_debt: float = Field(0.0, ge=0)
    license_fee: float = Field(0.0, ge=0)
    delivery_fee: float = Field(0.0, ge=0)
    admin_fee: float = Field(0.0, ge=0)
    initiation_fee: float = Field(0.0, ge=0)
    instalment_linked: Optional[float] = None
    instalment_fixed: Optional[float] = None

    def to_domain(self) -> BankOffer:
        return BankOffer(**self.model_dump())


class OfferTermsSchema(BaseModel):
    """Rate and balloon percentage of the chosen offer"""

    rate: Optional[float]
    balloon_percent: int


class BestOfferRequest(BaseModel):
    """Request body for POST /v1/offers/best"""

    vehicle_price: float = Field(..., ge=0)
    offers: List[BankOfferSchema]
    term_months: Optional[int] = Field(None, gt=0, description="Fill in instalments for this term")
    max_balloon_percent: Optional[float] = Field(None, ge=0, le=100)
    vehicle_year: Optional[int] = Field(None, description="Age-based balloon ceiling applies when given")
    current_year: Optional[int] = None


class BestOfferResponse(BaseModel):
    """Response for POST /v1/offers/best"""

    best: Optional[BankOfferSchema] = None
    terms: Optional[OfferTermsSchema] = None


class AddOnSchema(BaseModel):
    name: str = ""
    cost_price: float = Field(0.0, ge=0)
    selling_price: float = Field(0.0, ge=0)


class AftersalesExpenseSchema(BaseModel):
    type: str
    amount: float = Field(..., ge=0)
    description: Optional[str] = None


class DealSchema(BaseModel):
    """Finalized deal as stored by the dealership app"""

    sold_price: float = Field(..., ge=0)
    cost_price: float = Field(0.0, ge=0)
    recon_cost: float = Field(0.0, ge=0)
    dic_amount: float = Field(0.0, ge=0)
    discount_amount: float = Field(0.0, ge=0)
    dealer_deposit_contribution: float = Field(0.0, ge=0)
    sales_rep_name: Optional[str] = None
    sales_rep_commission: float = Field(0.0, ge=0)
    referral_person_name: Optional[str] = None
    referral_commission_amount: float = Field(0.0, ge=0)
    referral_income_amount: float = Field(0.0, ge=0)
    is_shared_capital: bool = False
    partner_split_type: SplitType = SplitType.PERCENTAGE
    partner_split_value: float = Field(0.0, ge=0)
    partner_capital_contribution: float = Field(0.0, ge=0)
    addons_data: List[AddOnSchema] = Field(default_factory=list)
    aftersales_expenses: List[AftersalesExpenseSchema] = Field(default_factory=list)
    client_deposit: float = Field(0.0, ge=0)
    external_admin_fee: Optional[float] = Field(None, ge=0)
    bank_initiation_fee: Optional[float] = Field(None, ge=0)
    is_closed: bool = False

    def to_domain(self, default_admin_fee: float = 0.0, default_initiation_fee: float = 0.0) -> DealRecord:
        data = self.model_dump(exclude={"addons_data", "aftersales_expenses"})
        if data["external_admin_fee"] is None:
            data["external_admin_fee"] = default_admin_fee
        if data["bank_initiation_fee"] is None:
            data["bank_initiation_fee"] = default_initiation_fee
        return DealRecord(
            **data,
            addons_data=[AddOn(**a.model_dump()) for a in self.addons_data],
            aftersales_expenses=[AftersalesExpense(**e.model_dump()) for e in self.aftersales_expenses],
        )


class DealProfitRequest(BaseModel):
    """Request body for POST /v1/deals/profit"""

    deal: DealSchema
    unlocked: bool = Field(False, description="Caller has passed the admin unlock for a closed deal")


class ProfitSummarySchema(BaseModel):
    gross_income: float
    total_costs: float
    gross_profit: float
    total_deductions: float
    net_profit: float
    aftersales_total: float
    current_profit: float
    profit_drift: float
    warnings: List[str]


class PartnerDistributionSchema(BaseModel):
    partner_share: float
    lumina_share: float
    partner_payout_total: float


class DealProfitResponse(BaseModel):
    """Response for POST /v1/deals/profit"""

    profit: ProfitSummarySchema
    distribution: PartnerDistributionSchema


class DistributionRequest(BaseModel):
    """Request body for POST /v1/deals/distribution"""

    net_shared_profit: float
    split_type: SplitType = SplitType.PERCENTAGE
    split_value: float = Field(..., ge=0)
    partner_capital: float = Field(0.0, ge=0)


class DealStructureRequest(BaseModel):
    """Request body for POST /v1/deals/structure"""

    deal: DealSchema
    commission_percent: float = Field(0.0, ge=0, le=100)
    unlocked: bool = Field(False, description="Caller has passed the admin unlock for a closed deal")


class DealStructureResponse(BaseModel):
    """Response for POST /v1/deals/structure"""

    adjusted_selling_price: float
    gross_deal: float
    total_deposits: float
    total_finance_amount: float
    retained_profit: float
    commission_amount: float


class ExpenseEntrySchema(BaseModel):
    description: str = ""
    amount: float = Field(..., ge=0)
    category: str = "general"

    def to_domain(self) -> ExpenseEntry:
        return ExpenseEntry(description=self.description, amount=self.amount, category=self.category)


class VehicleCostsRequest(BaseModel):
    """Request body for POST /v1/vehicles/costs"""

    purchase_price: float = Field(..., ge=0)
    selling_price: float = Field(..., ge=0)
    recon_costs: List[float] = Field(default_factory=list)
    expenses: List[ExpenseEntrySchema] = Field(default_factory=list)


class VehicleCostsResponse(BaseModel):
    """Response for POST /v1/vehicles/costs"""

    recon_total: float
    expense_total: float
    pre_sale_cost: float
    true_cost: float
    projected_profit: float
    by_category: Dict[str, float]


class ReportRequest(BaseModel):
    """Deals for a reporting period, already filtered by the caller"""

    deals: List[DealSchema]


class CommissionsResponse(BaseModel):
    """Response for POST /v1/reports/commissions"""

    sales_reps: Dict[str, float]
    referrals: Dict[str, float]


class PeriodSummaryResponse(BaseModel):
    """Response for POST /v1/reports/summary"""

    deal_count: int
    net_profit: float
    gross_revenue: float
    total_costs: float
    total_expenses: float
    commission_payouts: float
