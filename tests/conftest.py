"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from lumina_finance.api.main import create_app
from lumina_finance.api.dependencies import get_site_policy
from lumina_finance.domain.models import (
    AddOn,
    AftersalesExpense,
    DealRecord,
    SitePolicy,
    SplitType,
)


@pytest.fixture
def site_policy() -> SitePolicy:
    """Site finance policy used across tests"""
    return SitePolicy(
        default_interest_rate=13.5,
        max_balloon_percent=35.0,
        default_balloon_percent=0.0,
        catalog_deposit_percent=10.0,
    )


@pytest.fixture
def client(site_policy: SitePolicy) -> TestClient:
    """Create FastAPI test client with a fixed site policy"""
    app = create_app()
    app.dependency_overrides[get_site_policy] = lambda: site_policy
    return TestClient(app)


@pytest.fixture
def shared_capital_deal() -> DealRecord:
    """Financed deal split 30% with a capital partner"""
    return DealRecord(
        sold_price=350_000,
        cost_price=250_000,
        recon_cost=12_000,
        dic_amount=6_500,
        discount_amount=5_000,
        dealer_deposit_contribution=3_000,
        sales_rep_name="Thabo",
        sales_rep_commission=4_500,
        referral_person_name="Nadia",
        referral_commission_amount=2_000,
        referral_income_amount=1_500,
        is_shared_capital=True,
        partner_split_type=SplitType.PERCENTAGE,
        partner_split_value=30,
        partner_capital_contribution=200_000,
        addons_data=[
            AddOn(name="Tracker", cost_price=2_500, selling_price=4_000),
            AddOn(name="Tint", cost_price=800, selling_price=1_800),
        ],
        aftersales_expenses=[
            AftersalesExpense(type="service", amount=3_200, description="First service"),
            AftersalesExpense(type="parts", amount=1_100),
        ],
        client_deposit=20_000,
        external_admin_fee=7_000,
        bank_initiation_fee=1_207,
    )
